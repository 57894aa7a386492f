from application.add_file_flow.contracts import (
    AddFileFlowConfig,
    AddFileFlowDependencies,
    AddFileFlowResult,
)
from application.add_file_flow.steps import (
    build_error_result,
    build_success_result,
    commit_file,
    create_feature_branch,
    derive_branch_name,
    open_pull_request,
    resolve_base_sha,
)


def run_add_file_flow(
    config: AddFileFlowConfig,
    dependencies: AddFileFlowDependencies,
    *,
    raise_on_error: bool = True,
) -> AddFileFlowResult:
    """Add ``config.filename`` to a new branch and open a pull request for it.

    Steps run strictly in order and the first failure stops the sequence.
    Nothing already created remotely is rolled back.
    """
    branch = derive_branch_name(config)
    sha: str | None = None
    step = "resolve_base_sha"
    try:
        dependencies.observe_step(step, "start", config.base_branch)
        sha = resolve_base_sha(config, dependencies)
        dependencies.observe_step(step, "success", sha)

        step = "create_branch"
        dependencies.observe_step(step, "start", branch)
        create_feature_branch(config, dependencies, sha=sha, branch=branch)
        dependencies.observe_step(step, "success", branch)

        step = "create_file"
        dependencies.observe_step(step, "start", config.filename)
        commit_file(config, dependencies, branch=branch)
        dependencies.observe_step(step, "success", config.filename)

        step = "create_pull_request"
        dependencies.observe_step(step, "start", f"{branch} -> {config.base_branch}")
        pull_request = open_pull_request(config, dependencies, branch=branch)
        result = build_success_result(config, branch=branch, sha=sha, pull_request=pull_request)
        dependencies.observe_step(step, "success", result.pr_url)
        return result
    except Exception as error:
        dependencies.observe_step(step, "error", str(error))
        if raise_on_error:
            raise
        return build_error_result(branch=branch, sha=sha, failed_step=step, error=error)
