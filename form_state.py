from dataclasses import dataclass, field, replace

DIFFICULTY_LEVELS = ("easy", "medium", "hard")

# Fields editable through update_field(); recipients have their own helpers.
EDITABLE_FIELDS = (
    "job_role",
    "difficulty_level",
    "objective_question_count",
    "programming_question_count",
    "submitter_email",
)


@dataclass(frozen=True)
class FormState:
    """Current values of the request form.

    Instances are never mutated; each edit returns a copy with one field
    replaced. ``recipient_emails`` always holds at least one slot, and
    slots may be blank while the user is still typing.
    """

    job_role: str = ""
    difficulty_level: str = ""
    objective_question_count: str = ""
    programming_question_count: str = ""
    submitter_email: str = ""
    recipient_emails: tuple[str, ...] = field(default_factory=lambda: ("",))


def default_form_state() -> FormState:
    return FormState()


def update_field(state: FormState, name: str, value: str) -> FormState:
    if name not in EDITABLE_FIELDS:
        raise KeyError(f"Unknown form field: {name}")
    return replace(state, **{name: value})


def update_recipient(state: FormState, index: int, value: str) -> FormState:
    if index < 0:
        raise IndexError(f"Recipient index out of range: {index}")
    emails = list(state.recipient_emails)
    emails[index] = value
    return replace(state, recipient_emails=tuple(emails))


def add_recipient(state: FormState) -> FormState:
    return replace(state, recipient_emails=state.recipient_emails + ("",))


def remove_recipient(state: FormState, index: int) -> FormState:
    """Drop one recipient slot; the last remaining slot is never removed."""
    if len(state.recipient_emails) <= 1:
        return state
    emails = tuple(e for i, e in enumerate(state.recipient_emails) if i != index)
    return replace(state, recipient_emails=emails)
