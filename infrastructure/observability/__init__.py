from infrastructure.observability.context import current_run_id, run_scope
from infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    register_sensitive_values,
    safe_message,
)
from infrastructure.observability.workflow_observer import (
    log_api_error,
    observe_workflow_step,
)

__all__ = [
    "configure_logging",
    "current_run_id",
    "log_api_error",
    "log_event",
    "observe_workflow_step",
    "register_sensitive_values",
    "run_scope",
    "safe_message",
]
