import os
from dataclasses import dataclass, field

from domain.errors import LocalValidationError


DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "merge-assistant"


@dataclass(frozen=True)
class Settings:
    token: str = field(repr=False)
    owner: str
    api_url: str = DEFAULT_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float | None = None


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if not value or not value.strip():
        raise LocalValidationError(f"Missing required environment variable: {name}")
    return value.strip()


def _optional_timeout(name: str) -> float | None:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return None
    try:
        timeout = float(raw_value)
    except ValueError:
        raise LocalValidationError(f"Invalid {name} '{raw_value}': expected a number of seconds") from None
    if timeout <= 0:
        raise LocalValidationError(f"Invalid {name} '{raw_value}': must be greater than zero")
    return timeout


def load_settings() -> Settings:
    return Settings(
        token=_required_env("GITHUB_TOKEN"),
        owner=_required_env("GH_OWNER"),
        api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/"),
        user_agent=os.getenv("MERGE_ASSISTANT_USER_AGENT", DEFAULT_USER_AGENT),
        timeout_seconds=_optional_timeout("GITHUB_TIMEOUT_SECONDS"),
    )
