import logging

from domain.errors import ApiError
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


def observe_workflow_step(step: str, status: str, detail: str | None = None) -> None:
    level = logging.ERROR if status == "error" else logging.INFO
    log_event(
        logger,
        level,
        "workflow.step",
        step=step,
        status=status,
        detail=detail,
    )


def log_api_error(error: ApiError) -> None:
    log_event(
        logger,
        logging.ERROR,
        "workflow.api_error",
        status=error.status,
        message=error.message,
        documentation_url=error.documentation_url or None,
    )
