# Role: Streamlit chat page.
# - Backend is authoritative for replies (POST /chat).
# - Page owns the message list, the copied-indicators and the submit lifecycle (ChatViewState).

from __future__ import annotations

import html

import requests
import streamlit as st

import chatbot.config
chatbot.config.load_env()

from chatbot.models.message import Message
from chatbot_ui.api_client import ChatReplyError, send_message
from chatbot_ui.session import ChatViewState

CHAT_HEIGHT_PX = 560

# While any copied-indicator is on, the message list redraws this often so the icon reverts by itself.
COPY_POLL_SECONDS = 0.25


# ----------------------------
# UI polish
# ----------------------------
def inject_css() -> None:
    st.markdown(
        """
<style>
.block-container { max-width: 960px; padding-top: 1.5rem; padding-bottom: 1.5rem; }

/* Bubble rows */
.cb-row { display: flex; margin: 6px 0; }
.cb-row.user { justify-content: flex-end; }
.cb-row.assistant { justify-content: flex-start; }

.cb-inner {
  display: flex;
  align-items: flex-start;
  gap: 8px;
  max-width: 70%;
}
.cb-row.user .cb-inner { flex-direction: row-reverse; }

.cb-avatar {
  width: 32px;
  height: 32px;
  flex: 0 0 32px;
  border-radius: 50%;
  display: flex;
  align-items: center;
  justify-content: center;
}
.cb-row.user .cb-avatar { background: #3b82f6; }
.cb-row.assistant .cb-avatar { background: #22c55e; }

.cb-bubble {
  border-radius: 10px;
  padding: 12px 14px;
  font-size: 0.9rem;
  white-space: pre-wrap;
}
.cb-row.user .cb-bubble { background: #dbeafe; color: #1e40af; }
.cb-row.assistant .cb-bubble { background: #ffffff; color: #1f2937; border: 1px solid rgba(49, 51, 63, 0.10); }

/* Copy button sits under the assistant bubble */
div[class*="st-key-copy_"] button {
  border: none !important;
  background: transparent !important;
  padding: 0 0 0 44px !important;
  min-height: 0 !important;
}
</style>
""",
        unsafe_allow_html=True,
    )


def scroll_to_bottom() -> None:
    # Key line: force every scrollable chat container to its maximum scroll position.
    st.html(
        """
<script>
document.querySelectorAll('[data-testid="stVerticalBlockBorderWrapper"]').forEach((el) => {
  el.scrollTop = el.scrollHeight;
  el.querySelectorAll('div').forEach((inner) => {
    if (inner.scrollHeight > inner.clientHeight) { inner.scrollTop = inner.scrollHeight; }
  });
});
</script>
""",
        unsafe_allow_javascript=True,
    )


# ----------------------------
# Formatting helpers
# ----------------------------
def _bubble(message: Message) -> str:
    side = "user" if message.is_user else "assistant"
    avatar = "👤" if message.is_user else "🤖"
    return f"""
<div class="cb-row {side}">
  <div class="cb-inner">
    <div class="cb-avatar">{avatar}</div>
    <div class="cb-bubble">{html.escape(message.text)}</div>
  </div>
</div>
"""


# ----------------------------
# Chat
# ----------------------------
def render_chat(view: ChatViewState) -> None:
    # Poll only while an indicator is on; the fragment redraws just the list on that timer.
    polling = view.copy_tracker.next_expiry_in() is not None
    st.fragment(_message_list, run_every=COPY_POLL_SECONDS if polling else None)(view, polling)


def _message_list(view: ChatViewState, polling: bool) -> None:
    view.copy_tracker.expire()

    with st.container(height=CHAT_HEIGHT_PX):
        if not view.messages:
            st.caption("Say something to start the conversation.")

        for message in view.messages:
            st.markdown(_bubble(message), unsafe_allow_html=True)
            if message.is_user:
                continue

            icon = "✅" if view.is_copied(message.id) else "📋"
            st.button(
                icon,
                key=f"copy_{message.id}",
                help="Copy to clipboard",
                on_click=view.copy_message,
                args=(message.text, message.id),
            )

    # A copy just started or the last indicator ran out: rerun the page so the poll timer follows.
    if (view.copy_tracker.next_expiry_in() is not None) != polling:
        st.rerun()


def render_form(view: ChatViewState) -> None:
    with st.form("chat_form", border=False):
        col_input, col_send = st.columns([6, 1])
        with col_input:
            text = st.text_input(
                "Message",
                key=view.input_key,
                placeholder="Type your message...",
                label_visibility="collapsed",
                disabled=view.is_submitting,
            )
        with col_send:
            submitted = st.form_submit_button(
                view.submit_label,
                key="send",
                type="primary",
                width="stretch",
                disabled=view.is_submitting,
            )

    if not submitted:
        return

    # Key line: the input is required; blank submissions never leave the page.
    if not text or not text.strip():
        st.warning("Please type a message first.")
        return

    if view.begin_submit(text):
        st.rerun()


def run_pending_submission(view: ChatViewState) -> None:
    # 1) POST the pending text
    # 2) Append the pair (or record the error) and go back to idle
    # 3) Rerun so the form re-enables and the list re-renders
    try:
        with st.spinner("Thinking..."):
            turn = send_message(view.pending_message)
    except requests.RequestException:
        view.fail_submit(
            f"I couldn't reach the backend. Make sure the API is running on {chatbot.config.BACKEND_URL}."
        )
    except ChatReplyError:
        view.fail_submit("The backend sent a reply the page could not read. Please try again.")
    except Exception:
        # Key line: never leave the form stuck on "Sending..."; the error itself still surfaces.
        view.fail_submit("Something went wrong while sending your message.")
        raise
    else:
        view.complete_submit(turn.user_message, turn.ai_response)
    st.rerun()


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title=chatbot.config.PAGE_TITLE, page_icon="🤖", layout="centered")
    inject_css()

    st.title(chatbot.config.PAGE_TITLE)
    st.caption(chatbot.config.PAGE_DESCRIPTION)

    view = ChatViewState(st.session_state)

    render_chat(view)
    if view.consume_scroll_request():
        scroll_to_bottom()

    if view.error:
        st.error(view.error)

    render_form(view)

    if view.is_submitting:
        run_pending_submission(view)


if __name__ == "__main__":
    main()
