"""State machine behind the request page.

Every user action maps onto a pure function taking the current
``WorkflowState`` and returning the next one, so transitions can be tested
without rendering anything. Only ``run_attempt`` touches the network.
"""
import enum
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable

from errors import UnknownError, ValidationError, WorkflowError
from form_state import FormState, default_form_state
from payload import build_payload
from validation import validate_form
from webhook_client import SubmissionResult, WebhookClient

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


class Phase(enum.Enum):
    FORM = "form"
    LOADING = "loading"
    SUCCESS = "success"


@dataclass(frozen=True)
class WorkflowState:
    form: FormState = field(default_factory=default_form_state)
    phase: Phase = Phase.FORM
    result: SubmissionResult | None = None
    error: str | None = None
    # Advanced by every submit and reset; outcomes tagged with an older
    # attempt are discarded.
    attempt: int = 0
    pending_payload: dict | None = None


def edit(state: WorkflowState, update: Callable[..., FormState], *args) -> WorkflowState:
    """Apply a form_state update function; ignored unless the form is editable."""
    if state.phase is not Phase.FORM:
        return state
    return replace(state, form=update(state.form, *args))


def submit(state: WorkflowState, now: datetime | None = None) -> WorkflowState:
    if state.phase is not Phase.FORM:
        return state
    state = replace(state, result=None, error=None, attempt=state.attempt + 1)
    try:
        recipients = validate_form(state.form)
    except ValidationError as exc:
        logger.info("Submission rejected by validation: %s", exc.message)
        return replace(state, error=exc.message)

    payload = build_payload(state.form, recipients, now=now)
    logger.info(
        "Submitting question request for %r (%s) to %d recipient(s)",
        payload["jobRole"],
        payload["difficultyLevel"],
        len(recipients),
    )
    return replace(state, phase=Phase.LOADING, pending_payload=payload)


def complete(state: WorkflowState, attempt: int, result: SubmissionResult) -> WorkflowState:
    if state.phase is not Phase.LOADING or attempt != state.attempt:
        logger.info("Discarding result of stale attempt %d", attempt)
        return state
    return replace(state, phase=Phase.SUCCESS, result=result, error=None, pending_payload=None)


def fail(state: WorkflowState, attempt: int, error: WorkflowError) -> WorkflowState:
    if state.phase is not Phase.LOADING or attempt != state.attempt:
        logger.info("Discarding failure of stale attempt %d", attempt)
        return state
    return replace(state, phase=Phase.FORM, result=None, error=error.message, pending_payload=None)


def reset(state: WorkflowState) -> WorkflowState:
    return WorkflowState(attempt=state.attempt + 1)


def run_attempt(
    state: WorkflowState, client: WebhookClient
) -> tuple[int, SubmissionResult | WorkflowError]:
    """Send the pending payload and return the attempt number with its outcome."""
    if state.phase is not Phase.LOADING or state.pending_payload is None:
        raise RuntimeError("No submission is pending")
    try:
        result = client.send(state.pending_payload)
    except WorkflowError as exc:
        logger.warning("Submission failed (%s): %s", type(exc).__name__, exc.message)
        return state.attempt, exc
    except Exception:
        logger.exception("Submission failed unexpectedly")
        return state.attempt, UnknownError(UNKNOWN_ERROR_MESSAGE)
    logger.info("Submission succeeded: %s", result.message)
    return state.attempt, result


def settle(
    state: WorkflowState, attempt: int, outcome: SubmissionResult | WorkflowError
) -> WorkflowState:
    if isinstance(outcome, WorkflowError):
        return fail(state, attempt, outcome)
    return complete(state, attempt, outcome)


def dispatch_pending(state: WorkflowState, client: WebhookClient) -> WorkflowState:
    if state.phase is not Phase.LOADING:
        return state
    return settle(state, *run_attempt(state, client))
