from dataclasses import dataclass
from typing import Any, Callable

from domain.models import Repository


DEFAULT_BRANCH_PREFIX = "feat/"


def _noop_observe_step(_: str, __: str, ___: str | None = None) -> None:
    return None


@dataclass(frozen=True)
class AddFileFlowConfig:
    repository: Repository
    filename: str
    content: str
    base_branch: str
    branch_prefix: str = DEFAULT_BRANCH_PREFIX


@dataclass(frozen=True)
class AddFileFlowDependencies:
    get_branch_head_sha: Callable[[Repository, str], str]
    create_branch: Callable[[Repository, str, str], None]
    create_file: Callable[[Repository, str, str, str], None]
    create_pull_request: Callable[[Repository, str, str, str, str], Any]
    observe_step: Callable[[str, str, str | None], None] = _noop_observe_step


@dataclass(frozen=True)
class AddFileFlowResult:
    status: str
    message: str
    branch: str | None = None
    sha: str | None = None
    pr_title: str | None = None
    pr_url: str | None = None
    failed_step: str | None = None
    error: Exception | None = None
