from application.add_file_flow.contracts import (
    DEFAULT_BRANCH_PREFIX,
    AddFileFlowConfig,
    AddFileFlowDependencies,
    AddFileFlowResult,
)
from application.add_file_flow.use_case import run_add_file_flow

__all__ = [
    "DEFAULT_BRANCH_PREFIX",
    "AddFileFlowConfig",
    "AddFileFlowDependencies",
    "AddFileFlowResult",
    "run_add_file_flow",
]
