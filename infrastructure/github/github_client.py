import base64
import logging
from typing import Any, Callable, TypeVar

import requests
from pydantic import ValidationError

from domain.errors import ApiError, ResponseFormatError
from domain.models import Branch, Repository
from infrastructure.config import DEFAULT_API_URL, DEFAULT_USER_AGENT, Settings
from infrastructure.github.schemas import (
    REPOSITORY_LIST,
    BranchPayload,
    ErrorBody,
    PullRequestPayload,
)
from infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)

_ParsedT = TypeVar("_ParsedT")


class GitHubClient:
    """Session-scoped client for the GitHub REST calls used by the merge assistant.

    Holds the bearer token, the account the repositories are addressed under
    and a single ``requests.Session``. Every call goes through :meth:`send`
    and :meth:`check_status`, so a non-2xx answer always surfaces as
    :class:`ApiError` before any result is used.
    """

    def __init__(
        self,
        *,
        token: str,
        owner: str,
        api_url: str = DEFAULT_API_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.token = token
        self.owner = owner
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {self.token}",
                "User-Agent": user_agent,
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        self._closed = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        session: requests.Session | None = None,
    ) -> "GitHubClient":
        return cls(
            token=settings.token,
            owner=settings.owner,
            api_url=settings.api_url,
            user_agent=settings.user_agent,
            timeout=settings.timeout_seconds,
            session=session,
        )

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.session.close()

    def send(self, method: str, path: str, payload: dict[str, Any] | None = None) -> requests.Response:
        log_event(logger, logging.INFO, "github.request", method=method, path=path)
        return self.session.request(
            method,
            f"{self.api_url}{path}",
            json=payload,
            timeout=self.timeout,
        )

    def check_status(self, response: requests.Response) -> None:
        if 200 <= response.status_code < 300:
            return

        try:
            error_body = ErrorBody.model_validate(response.json())
        except (ValueError, ValidationError) as error:
            log_event(
                logger,
                logging.ERROR,
                "github.response.unparseable",
                status_code=response.status_code,
            )
            raise ResponseFormatError(
                safe_message(
                    f"GitHub returned status {response.status_code} with an unreadable error body"
                )
            ) from error

        status = error_body.status if error_body.status is not None else response.status_code
        log_event(
            logger,
            logging.ERROR,
            "github.response.error",
            status_code=status,
            details=error_body.message,
        )
        raise ApiError(
            status=status,
            message=error_body.message,
            documentation_url=error_body.documentation_url,
        )

    def _parse_body(self, response: requests.Response, parse: Callable[[Any], _ParsedT]) -> _ParsedT:
        try:
            return parse(response.json())
        except (ValueError, ValidationError) as error:
            raise ResponseFormatError(
                f"GitHub returned status {response.status_code} with an unexpected response body"
            ) from error

    def check_login(self) -> None:
        # Valida apenas que o token e aceito; escopos nao sao verificados.
        response = self.send("GET", "/user")
        self.check_status(response)

    def list_repositories(self) -> list[Repository]:
        response = self.send("GET", "/user/repos")
        self.check_status(response)
        repository_payloads = self._parse_body(response, REPOSITORY_LIST.validate_python)
        return [
            Repository(name=payload.name, full_name=payload.full_name)
            for payload in repository_payloads
        ]

    def get_branch(self, repository: Repository, branch_name: str) -> Branch:
        response = self.send("GET", f"/repos/{self.owner}/{repository.name}/branches/{branch_name}")
        self.check_status(response)
        branch_payload = self._parse_body(response, BranchPayload.model_validate)
        return Branch(name=branch_payload.name, head_commit_sha=branch_payload.commit.sha)

    def get_branch_head_sha(self, repository: Repository, branch_name: str) -> str:
        return self.get_branch(repository, branch_name).head_commit_sha

    def create_branch(self, repository: Repository, sha: str, new_branch_name: str) -> None:
        payload = {"ref": f"refs/heads/{new_branch_name}", "sha": sha}
        response = self.send("POST", f"/repos/{self.owner}/{repository.name}/git/refs", payload)
        self.check_status(response)
        log_event(
            logger,
            logging.INFO,
            "github.branch.created",
            repository=repository.name,
            branch=new_branch_name,
            sha=sha,
        )

    def create_file(
        self,
        repository: Repository,
        content: str,
        filename: str,
        branch_name: str,
        *,
        message: str | None = None,
    ) -> None:
        payload = {
            "message": message or f"Add {filename}",
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
            "branch": branch_name,
        }
        response = self.send("PUT", f"/repos/{self.owner}/{repository.name}/contents/{filename}", payload)
        self.check_status(response)
        log_event(
            logger,
            logging.INFO,
            "github.file.created",
            repository=repository.name,
            path=filename,
            branch=branch_name,
        )

    def create_pull_request(
        self,
        repository: Repository,
        base_branch: str,
        head_branch: str,
        title: str,
        body: str,
    ) -> PullRequestPayload:
        payload = {"title": title, "head": head_branch, "base": base_branch, "body": body}
        response = self.send("POST", f"/repos/{self.owner}/{repository.name}/pulls", payload)
        self.check_status(response)
        pull_request = self._parse_body(response, PullRequestPayload.model_validate)
        log_event(
            logger,
            logging.INFO,
            "github.pull_request.created",
            repository=repository.name,
            head=head_branch,
            base=base_branch,
            title=title,
            url=pull_request.html_url,
        )
        return pull_request
