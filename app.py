import html

import streamlit as st

from form_state import (
    DIFFICULTY_LEVELS,
    add_recipient,
    remove_recipient,
    update_field,
    update_recipient,
)
from settings import configure_logging, get_webhook_timeout, get_webhook_url
from webhook_client import WebhookClient
from workflow import Phase, WorkflowState, edit, reset, run_attempt, settle, submit

configure_logging()

# ─────────────────────────────────────────────
# Page Config
# ─────────────────────────────────────────────
st.set_page_config(
    page_title="Interview Question Generator",
    page_icon="💼",
    layout="centered",
)

# ─────────────────────────────────────────────
# Custom CSS
# ─────────────────────────────────────────────
st.markdown("""
<style>
    /* Main background */
    .stApp { background-color: #0f1117; }

    /* Header */
    .page-header { text-align:center; padding: 24px 0 12px 0; }
    .page-header .logo {
        display:inline-flex;
        align-items:center;
        justify-content:center;
        width:64px;
        height:64px;
        border-radius:14px;
        background: linear-gradient(135deg,#4f46e5,#7c3aed);
        font-size:32px;
        margin-bottom:14px;
    }
    .page-header h1 { color:#e2e8f0; font-size:34px; margin-bottom:4px; }
    .page-header p  { color:#94a3b8; font-size:15px; }

    /* Section headers */
    .section-header {
        padding: 12px 0 6px 0;
        border-bottom: 1px solid #3a3f5c;
        margin: 10px 0 14px 0;
        font-size:14px;
        font-weight:600;
        color:#e2e8f0;
    }
    .section-hint { font-size:12px; color:#94a3b8; margin:-8px 0 10px 0; }

    /* Success card */
    .success-card {
        background: linear-gradient(135deg, #1e2235 0%, #252840 100%);
        border: 1px solid #059669;
        border-radius: 12px;
        padding: 28px 22px;
        text-align:center;
        margin-bottom: 18px;
    }
    .success-card .icon { font-size:48px; margin-bottom:10px; }
    .success-card h2 { color:#e2e8f0; margin-bottom:8px; }
    .success-card .message { color:#cbd5e1; font-size:17px; }
    .success-card .note { color:#64748b; font-size:13px; margin-top:14px; }

    /* Generate btn */
    .stButton > button[kind="primary"] {
        background: linear-gradient(135deg,#4f46e5,#7c3aed);
        color: white;
        border: none;
        border-radius: 10px;
        font-weight: 700;
        font-size: 15px;
        padding: 0.6em 2em;
        width: 100%;
    }

    .footer-note { text-align:center; color:#64748b; font-size:13px; margin-top:28px; }

    /* Hide streamlit branding */
    #MainMenu, footer { visibility: hidden; }
    header[data-testid="stHeader"] { background:rgba(0,0,0,0); }
</style>
""", unsafe_allow_html=True)

# ─────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────
DIFFICULTY_LABELS = {"": "Select difficulty", "easy": "Easy", "medium": "Medium", "hard": "Hard"}

TEXT_FIELDS = [
    ("job_role", "Job Role", "e.g., Frontend Developer, Data Scientist"),
    ("objective_question_count", "No. of Objective Questions", "e.g., 10"),
    ("programming_question_count", "No. of Programming Questions", "e.g., 5"),
    ("submitter_email", "📧 Your Email Address", "your@example.com"),
]


def widget_key(name: str) -> str:
    # Keys change with the epoch so that reset and list edits rebuild the inputs.
    return f"{name}_{st.session_state.widget_epoch}"


def dispatch(transition, *args, rebuild: bool = False) -> None:
    st.session_state.workflow = transition(st.session_state.workflow, *args)
    if rebuild:
        st.session_state.widget_epoch += 1


def on_field_change(name: str, key: str) -> None:
    dispatch(edit, update_field, name, st.session_state[key])


def on_recipient_change(index: int, key: str) -> None:
    dispatch(edit, update_recipient, index, st.session_state[key])


def on_add_recipient() -> None:
    dispatch(edit, add_recipient, rebuild=True)


def on_remove_recipient(index: int) -> None:
    dispatch(edit, remove_recipient, index, rebuild=True)


def on_submit() -> None:
    dispatch(submit)


def on_reset() -> None:
    dispatch(reset, rebuild=True)


def text_field(workflow: WorkflowState, name: str, label: str, placeholder: str) -> None:
    key = widget_key(name)
    st.text_input(
        label,
        value=getattr(workflow.form, name),
        key=key,
        placeholder=placeholder,
        disabled=workflow.phase is Phase.LOADING,
        on_change=on_field_change,
        args=(name, key),
    )


def render_form(workflow: WorkflowState) -> None:
    loading = workflow.phase is Phase.LOADING
    job_role, objective, programming, submitter = TEXT_FIELDS

    text_field(workflow, *job_role)

    options = ("",) + DIFFICULTY_LEVELS
    difficulty_key = widget_key("difficulty_level")
    st.selectbox(
        "Difficulty Level",
        options,
        index=options.index(workflow.form.difficulty_level),
        format_func=DIFFICULTY_LABELS.get,
        key=difficulty_key,
        disabled=loading,
        on_change=on_field_change,
        args=("difficulty_level", difficulty_key),
    )

    c1, c2 = st.columns(2)
    with c1:
        text_field(workflow, *objective)
    with c2:
        text_field(workflow, *programming)

    st.markdown("---")
    text_field(workflow, *submitter)

    st.markdown('<div class="section-header">Send Questions To</div>', unsafe_allow_html=True)
    st.markdown(
        '<div class="section-hint">Recipients who will receive the generated questions via email</div>',
        unsafe_allow_html=True,
    )
    recipients = workflow.form.recipient_emails
    for idx, email in enumerate(recipients):
        key = widget_key(f"recipient_{idx}")
        col_input, col_remove = st.columns([8, 1])
        with col_input:
            st.text_input(
                f"Recipient {idx + 1}",
                value=email,
                key=key,
                placeholder="recipient@example.com",
                label_visibility="collapsed",
                disabled=loading,
                on_change=on_recipient_change,
                args=(idx, key),
            )
        with col_remove:
            if len(recipients) > 1:
                st.button(
                    "✕",
                    key=widget_key(f"remove_recipient_{idx}"),
                    help="Remove this recipient",
                    disabled=loading,
                    on_click=on_remove_recipient,
                    args=(idx,),
                )
    st.button(
        "➕ Add Another Recipient",
        key=widget_key("add_recipient"),
        disabled=loading,
        on_click=on_add_recipient,
    )

    if workflow.error:
        st.error(f"⚠️ {workflow.error}")

    st.button(
        "Generating Questions..." if loading else "Generate Questions",
        key="submit",
        type="primary",
        disabled=loading,
        on_click=on_submit,
    )


def render_success(workflow: WorkflowState) -> None:
    st.markdown(f"""<div class="success-card">
        <div class="icon">📄</div>
        <h2>Success!</h2>
        <div class="message">{html.escape(workflow.result.message)}</div>
        <div class="note">Interview questions have been generated and sent to all provided email addresses.</div>
    </div>""", unsafe_allow_html=True)
    st.button("Generate Another Set", key="reset", type="primary", on_click=on_reset)


# ─────────────────────────────────────────────
# Session State Init
# ─────────────────────────────────────────────
if "workflow" not in st.session_state:
    st.session_state.workflow = WorkflowState()
if "widget_epoch" not in st.session_state:
    st.session_state.widget_epoch = 0

# ─────────────────────────────────────────────
# Header
# ─────────────────────────────────────────────
st.markdown("""<div class="page-header">
    <div class="logo">💼</div>
    <h1>Interview Question Generator</h1>
    <p>Generate customized interview questions powered by AI</p>
</div>""", unsafe_allow_html=True)

# ─────────────────────────────────────────────
# Main Output
# ─────────────────────────────────────────────
workflow = st.session_state.workflow

if workflow.phase is Phase.SUCCESS:
    render_success(workflow)
else:
    render_form(workflow)

    # ── Pending Submission ───────────────────
    if workflow.phase is Phase.LOADING:
        with st.spinner("Generating questions and sending emails…"):
            client = WebhookClient(get_webhook_url(), timeout=get_webhook_timeout())
            attempt, outcome = run_attempt(workflow, client)
        # Settle against the live state; a reset in the meantime makes this a no-op.
        st.session_state.workflow = settle(st.session_state.workflow, attempt, outcome)
        st.rerun()

st.markdown(
    '<div class="footer-note">Questions will be sent to the provided email addresses</div>',
    unsafe_allow_html=True,
)
