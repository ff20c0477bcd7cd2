"""Checks run on the form before anything is sent to the webhook."""
from errors import ValidationError
from form_state import DIFFICULTY_LEVELS, FormState
from payload import parse_count


def usable_recipients(form: FormState) -> list[str]:
    """Recipient slots that hold something other than whitespace, in order."""
    return [email for email in form.recipient_emails if email.strip()]


def validate_form(form: FormState) -> list[str]:
    """Validate ``form`` and return the recipients to send to.

    Blank recipient slots are ignored as long as one usable address is left.
    The first failing check raises ``ValidationError``.
    """
    recipients = usable_recipients(form)

    if not form.submitter_email.strip():
        raise ValidationError("Please enter your email address")
    if not recipients:
        raise ValidationError("Please provide at least one recipient email address")
    if not form.job_role.strip():
        raise ValidationError("Please enter a job role")
    if form.difficulty_level not in DIFFICULTY_LEVELS:
        raise ValidationError("Please select a difficulty level")

    for raw, label in (
        (form.objective_question_count, "objective"),
        (form.programming_question_count, "programming"),
    ):
        try:
            parse_count(raw)
        except ValueError:
            raise ValidationError(f"Please enter a whole number of {label} questions") from None

    return recipients
