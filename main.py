import logging
import sys
from typing import Callable

import requests
from dotenv import load_dotenv

from application.add_file_flow import (
    AddFileFlowConfig,
    AddFileFlowDependencies,
    AddFileFlowResult,
    run_add_file_flow,
)
from application.add_file_flow.steps import build_pull_request_title, derive_branch_name
from application.repository_selection import format_repository_menu, select_repository
from domain.errors import ApiError, LocalValidationError, MergeAssistantError
from infrastructure.config import load_settings
from infrastructure.github.github_client import GitHubClient
from infrastructure.observability.context import run_scope
from infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    register_sensitive_values,
    safe_message,
)
from infrastructure.observability.workflow_observer import log_api_error, observe_workflow_step


logger = logging.getLogger(__name__)

FILENAME = "hello.txt"
FILE_CONTENT = "Hello, World!"
BASE_BRANCH = "master"

StepObserver = Callable[[str, str, str | None], None]


def _report_failure(error: BaseException) -> None:
    if isinstance(error, ApiError):
        log_api_error(error)
        print(f"Merge Assistant Error {error.status}: {error.message}")
    else:
        print(f"Merge Assistant Error: {safe_message(str(error))}")
    log_event(logger, logging.ERROR, "cli.workflow.failed", error=str(error))


def _confirmation_observer(config: AddFileFlowConfig) -> StepObserver:
    branch = derive_branch_name(config)
    confirmations = {
        "create_branch": f"New branch '{branch}' created.",
        "create_file": f"File '{config.filename}' created in branch '{branch}'.",
        "create_pull_request": (
            f"Pull request from '{branch}' to '{config.base_branch}' "
            f"with title '{build_pull_request_title(config.filename)}' created"
        ),
    }

    def observe(step: str, status: str, detail: str | None = None) -> None:
        observe_workflow_step(step, status, detail)
        if status != "success" or step not in confirmations:
            return
        print(confirmations[step])
        if step == "create_pull_request" and detail:
            print(f"PR URL: {detail}")

    return observe


def _build_dependencies(client: GitHubClient, config: AddFileFlowConfig) -> AddFileFlowDependencies:
    return AddFileFlowDependencies(
        get_branch_head_sha=client.get_branch_head_sha,
        create_branch=client.create_branch,
        create_file=client.create_file,
        create_pull_request=client.create_pull_request,
        observe_step=_confirmation_observer(config),
    )


def _read_selection() -> str | None:
    try:
        return input("Select repository to make change(input a number): ")
    except EOFError:
        return None


def _run(client: GitHubClient) -> int:
    try:
        client.check_login()
        repositories = client.list_repositories()
    except (MergeAssistantError, requests.RequestException) as error:
        _report_failure(error)
        return 1

    for line in format_repository_menu(repositories):
        print(line)

    try:
        repository = select_repository(repositories, _read_selection())
    except LocalValidationError as error:
        print(error)
        return 0

    config = AddFileFlowConfig(
        repository=repository,
        filename=FILENAME,
        content=FILE_CONTENT,
        base_branch=BASE_BRANCH,
    )
    result: AddFileFlowResult = run_add_file_flow(
        config,
        _build_dependencies(client, config),
        raise_on_error=False,
    )
    if result.status == "error":
        _report_failure(result.error or RuntimeError(result.message))
        return 1

    print("Merge Assistant finished execution")
    log_event(logger, logging.INFO, "cli.workflow.end", status=result.status, pr_url=result.pr_url)
    return 0


def main() -> int:
    load_dotenv()
    configure_logging()
    with run_scope():
        log_event(logger, logging.INFO, "cli.workflow.start")
        try:
            settings = load_settings()
        except LocalValidationError as error:
            print(error)
            return 0
        register_sensitive_values(settings.token)
        print(f"Loaded credentials for {settings.owner}")

        with GitHubClient.from_settings(settings) as client:
            return _run(client)


if __name__ == "__main__":
    sys.exit(main())
