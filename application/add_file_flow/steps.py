from typing import Any

from application.add_file_flow.contracts import (
    AddFileFlowConfig,
    AddFileFlowDependencies,
    AddFileFlowResult,
)


def derive_branch_name(config: AddFileFlowConfig) -> str:
    return f"{config.branch_prefix}{config.filename}"


def build_pull_request_title(filename: str) -> str:
    return f"Added {filename}"


def build_pull_request_body(filename: str) -> str:
    return f"This pull request adds {filename} to root folder"


def resolve_base_sha(config: AddFileFlowConfig, dependencies: AddFileFlowDependencies) -> str:
    return dependencies.get_branch_head_sha(config.repository, config.base_branch)


def create_feature_branch(
    config: AddFileFlowConfig,
    dependencies: AddFileFlowDependencies,
    *,
    sha: str,
    branch: str,
) -> None:
    # A branch nova parte exatamente do commit resolvido no passo anterior.
    dependencies.create_branch(config.repository, sha, branch)


def commit_file(
    config: AddFileFlowConfig,
    dependencies: AddFileFlowDependencies,
    *,
    branch: str,
) -> None:
    dependencies.create_file(config.repository, config.content, config.filename, branch)


def open_pull_request(
    config: AddFileFlowConfig,
    dependencies: AddFileFlowDependencies,
    *,
    branch: str,
) -> Any:
    return dependencies.create_pull_request(
        config.repository,
        config.base_branch,
        branch,
        build_pull_request_title(config.filename),
        build_pull_request_body(config.filename),
    )


def _pull_request_url(pull_request: Any) -> str | None:
    if isinstance(pull_request, dict):
        return pull_request.get("html_url")
    return getattr(pull_request, "html_url", None)


def build_success_result(
    config: AddFileFlowConfig,
    *,
    branch: str,
    sha: str,
    pull_request: Any,
) -> AddFileFlowResult:
    return AddFileFlowResult(
        status="success",
        message=f"Pull request from '{branch}' to '{config.base_branch}' created",
        branch=branch,
        sha=sha,
        pr_title=build_pull_request_title(config.filename),
        pr_url=_pull_request_url(pull_request),
    )


def build_error_result(
    *,
    branch: str,
    sha: str | None,
    failed_step: str,
    error: Exception,
) -> AddFileFlowResult:
    return AddFileFlowResult(
        status="error",
        message=f"Add file flow failed at step '{failed_step}'",
        branch=branch,
        sha=sha,
        failed_step=failed_step,
        error=error,
    )
