# Role: Local developer CLI to chat with ChatService without the web UI.
# Useful for trying reply generators and seeing debug output in the terminal.

from __future__ import annotations

import chatbot.config
chatbot.config.load_env()

from chatbot.core.chat_service import ChatService
from chatbot.core.history import ChatHistory
from chatbot.tools.clipboard import ClipboardWriter


def main() -> None:
    # 1) Create ChatService + an in-memory history for this run
    # 2) Route user input -> ChatService -> print assistant output
    # 3) Handle the few slash commands
    print("AI Chatbot CLI")
    print("Commands: /copy (copy last reply), /history, /exit")
    print("-" * 50)

    service = ChatService()
    history = ChatHistory()
    clipboard = ClipboardWriter()

    while True:
        try:
            user_message = input("\nYou: ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_message.strip():
            continue

        cmd = user_message.strip().lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd == "/copy":
            last = history.last_assistant()
            if last is None:
                print("Nothing to copy yet.")
            elif clipboard.write_text(last.text):
                print("Copied!")
            continue

        if cmd == "/history":
            for m in history:
                who = "You" if m.is_user else "Assistant"
                print(f"[{m.id}] {who}: {m.text}")
            continue

        turn = service.handle_message(user_message)
        history.append_turn(turn.user_message, turn.ai_response)
        print(f"\nAssistant: {turn.ai_response}")


if __name__ == "__main__":
    main()
