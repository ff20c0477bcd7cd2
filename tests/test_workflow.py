from datetime import datetime, timezone

import requests

from errors import ConfigurationError, TransportError
from form_state import FormState, add_recipient, default_form_state, update_field, update_recipient
from webhook_client import SubmissionResult
from workflow import (
    UNKNOWN_ERROR_MESSAGE,
    Phase,
    WorkflowState,
    complete,
    dispatch_pending,
    edit,
    fail,
    reset,
    run_attempt,
    submit,
)

NOW = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)


class FakeClient:
    def __init__(self, outcome) -> None:
        self.outcome = outcome
        self.payloads: list[dict] = []

    def send(self, payload: dict) -> SubmissionResult:
        self.payloads.append(payload)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def filled_state(**overrides) -> WorkflowState:
    values = dict(
        job_role="Frontend Developer",
        difficulty_level="easy",
        objective_question_count="10",
        programming_question_count="5",
        submitter_email="me@x.com",
        recipient_emails=("a@x.com",),
    )
    values.update(overrides)
    return WorkflowState(form=FormState(**values))


def test_edit_applies_form_updates() -> None:
    state = edit(WorkflowState(), update_field, "job_role", "SRE")
    state = edit(state, add_recipient)
    state = edit(state, update_recipient, 1, "b@x.com")
    assert state.form.job_role == "SRE"
    assert state.form.recipient_emails == ("", "b@x.com")


def test_form_is_frozen_while_loading() -> None:
    loading = submit(filled_state(), now=NOW)
    assert loading.phase is Phase.LOADING
    assert edit(loading, update_field, "job_role", "changed") is loading


def test_invalid_submit_stays_on_form_with_error() -> None:
    state = submit(filled_state(submitter_email="  "), now=NOW)
    assert state.phase is Phase.FORM
    assert state.error == "Please enter your email address"
    assert state.pending_payload is None


def test_blank_recipients_never_reach_the_client() -> None:
    client = FakeClient(SubmissionResult(True, "unused"))
    state = submit(filled_state(recipient_emails=("", " ")), now=NOW)
    state = dispatch_pending(state, client)
    assert state.error == "Please provide at least one recipient email address"
    assert client.payloads == []


def test_submit_builds_payload_from_usable_recipients() -> None:
    state = submit(filled_state(recipient_emails=("a@x.com", "")), now=NOW)
    assert state.pending_payload["recipientEmails"] == ["a@x.com"]
    assert state.pending_payload["submittedAt"] == "2024-05-06T07:08:09.000Z"


def test_submit_clears_previous_error() -> None:
    state = submit(filled_state(job_role=""), now=NOW)
    assert state.error
    state = edit(state, update_field, "job_role", "Analyst")
    state = submit(state, now=NOW)
    assert state.error is None
    assert state.phase is Phase.LOADING


def test_success_round_trip() -> None:
    client = FakeClient(SubmissionResult(True, "Sent 15 questions"))
    state = dispatch_pending(submit(filled_state(), now=NOW), client)

    assert state.phase is Phase.SUCCESS
    assert state.result.message == "Sent 15 questions"
    assert state.error is None
    assert len(client.payloads) == 1


def test_transport_failure_keeps_inputs() -> None:
    before = filled_state()
    client = FakeClient(TransportError("Failed to generate questions"))
    state = dispatch_pending(submit(before, now=NOW), client)

    assert state.phase is Phase.FORM
    assert state.error == "Failed to generate questions"
    assert state.result is None
    assert state.form == before.form


def test_configuration_error_is_shown() -> None:
    client = FakeClient(ConfigurationError("N8N webhook URL not configured"))
    state = dispatch_pending(submit(filled_state(), now=NOW), client)
    assert state.error == "N8N webhook URL not configured"


def test_unexpected_exception_becomes_generic_error() -> None:
    client = FakeClient(requests.ConnectionError("boom"))
    state = dispatch_pending(submit(filled_state(), now=NOW), client)
    assert state.phase is Phase.FORM
    assert state.error == UNKNOWN_ERROR_MESSAGE


def test_reset_restores_defaults() -> None:
    client = FakeClient(SubmissionResult(True, "done"))
    state = dispatch_pending(submit(filled_state(), now=NOW), client)
    state = reset(state)

    assert state.phase is Phase.FORM
    assert state.form == default_form_state()
    assert state.form.recipient_emails == ("",)
    assert state.result is None
    assert state.error is None


def test_reset_after_failure_clears_error() -> None:
    state = submit(filled_state(submitter_email=""), now=NOW)
    state = reset(state)
    assert state.error is None
    assert state.form == default_form_state()


def test_late_outcome_after_reset_is_ignored() -> None:
    loading = submit(filled_state(), now=NOW)
    attempt, outcome = run_attempt(loading, FakeClient(SubmissionResult(True, "late")))
    after_reset = reset(loading)

    assert complete(after_reset, attempt, outcome) is after_reset
    assert fail(after_reset, attempt, TransportError("late")) is after_reset


def test_submit_ignored_while_loading() -> None:
    loading = submit(filled_state(), now=NOW)
    assert submit(loading, now=NOW) is loading
