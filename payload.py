from datetime import datetime, timezone

from form_state import FormState


def parse_count(raw: str) -> int:
    """Parse a question count typed by the user as a base-10 integer."""
    text = raw.strip()
    if not text.isdigit() or not text.isascii():
        raise ValueError(f"Not a whole number: {raw!r}")
    return int(text, 10)


def iso_timestamp(moment: datetime | None = None) -> str:
    moment = moment or datetime.now(timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_payload(form: FormState, recipients: list[str], now: datetime | None = None) -> dict:
    return {
        "jobRole": form.job_role,
        "difficultyLevel": form.difficulty_level,
        "objectiveQuestions": parse_count(form.objective_question_count),
        "programmingQuestions": parse_count(form.programming_question_count),
        "submitterEmail": form.submitter_email,
        "recipientEmails": list(recipients),
        "submittedAt": iso_timestamp(now),
    }
