"""
Interactive CLI adapter for ModeChat.

Architectural role:
- Exposes terminal interaction, including runtime mode switching.
- Owns the session history through `conversation_manager`.
- Delegates all response synthesis to `modechat.core.engine`.

Request lifecycle (per user turn, CLI):
1. Read stdin.
2. Handle local control commands (`exit`/`quit`, `empty chat`/`clear chat`,
   `/mode`, `/trace`).
3. Pass normal text to the engine with the session history and active mode.
4. Record the user and assistant turns and print the response.

Input validation behavior:
- Empty input is ignored.
- `/mode <id>` validates the id against the mode registry.

Error handling strategy:
- Pipeline faults are logged and answered with `FALLBACK_APOLOGY`.
- EOF and keyboard interrupts terminate the loop without traceback output.
"""

import logging
import sys

import modechat.memory.conversation_manager as conversation_manager
from modechat.core.config import DEFAULT_MODE, configure_logging
from modechat.core.engine import respond_with_trace
from modechat.core.modes import get_mode, list_modes, resolve_mode
from modechat.prompting.templates import FALLBACK_APOLOGY, WELCOME_MESSAGE


logger = logging.getLogger(__name__)

show_trace = False


# =========================================================
# UTF-8 SAFE OUTPUT
# Best-effort stdout encoding normalization for interactive terminals.
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except (OSError, ValueError):
        pass


# =========================================================
# MODE MANAGEMENT
# =========================================================

def current_mode():
    """Return the session mode, initializing it from config on first use."""
    mode = conversation_manager.get_mode()
    if mode is None:
        mode = resolve_mode(DEFAULT_MODE)
        conversation_manager.set_mode(mode)
    return mode


def format_mode_help() -> str:
    """Render the `/mode` listing."""
    lines = ["", "Available modes:"]
    for mode in list_modes():
        lines.append(f" - {mode.id}: {mode.title} ({mode.description})")
    lines.extend([
        "",
        "Usage:",
        " /mode <mode_id>",
        " /mode help",
        "",
        f"Current mode: {current_mode()}",
        "",
    ])
    return "\n".join(lines)


def handle_mode_command(line: str) -> str:
    """Process a `/mode` command and return the text to print."""
    parts = line.split()

    if len(parts) == 1 or parts[1].lower() == "help":
        return format_mode_help()

    requested = parts[1].lower()
    try:
        mode = get_mode(requested)
    except KeyError:
        return f"\nMode '{parts[1]}' not found.\n"

    conversation_manager.set_mode(mode.id)
    examples = ", ".join(mode.examples)
    return f"\nSwitched to mode: {mode.title} ({mode.id})\nTry: {examples}\n"


def format_trace(trace) -> str:
    lines = ["[TRACE]"]
    lines.extend(f"  {line}" for line in trace.reasoning)
    lines.append(f"  Topics: {', '.join(trace.topics) or '-'}")
    lines.append(f"  Rhetorical approach: {trace.rhetorical_approach}")
    return "\n".join(lines)


# =========================================================
# TURN HANDLING
# =========================================================

def run_turn(question: str):
    """Run one pipeline turn against the session and record both turns.

    Returns:
        `(response_text, trace_or_None)`.
    """
    history = conversation_manager.get_history()
    mode = current_mode()

    try:
        response, trace = respond_with_trace(question, history, mode)
    except Exception:
        logger.exception("Response pipeline failed for mode=%s", mode)
        response, trace = FALLBACK_APOLOGY, None

    conversation_manager.add_message("user", question)
    conversation_manager.add_message("assistant", response)
    return response, trace


# =========================================================
# MAIN
# =========================================================

def main():
    """
    Run the interactive loop with mode controls and session commands.

    Error handling strategy:
    - EOF discards the session; keyboard interrupt exits immediately.
    """
    global show_trace

    configure_logging()

    print("ModeChat started. (Type 'exit' to quit, '/mode' to list modes)")
    print(f"Active mode: {current_mode()}\n")
    print("-" * 60)
    print(WELCOME_MESSAGE)
    print("-" * 60)

    while True:

        try:
            question = input("You: ").strip()

        except EOFError:
            print("\nSession discarded (EOF received).")
            conversation_manager.discard_current_session()
            break

        except KeyboardInterrupt:
            print("\nOperation cancelled by user.")
            break

        if not question:
            continue

        # EXIT
        if question.lower() in ("exit", "quit"):
            print("Shutting down.")
            break

        # CLEAR CHAT
        if question.lower() in ("empty chat", "clear chat"):
            conversation_manager.discard_current_session()
            print("Chat cleared.")
            continue

        # MODE COMMAND (local hard trigger for mode management)
        if question.lower().startswith("/mode"):
            print(handle_mode_command(question))
            continue

        # TRACE TOGGLE
        if question.lower() == "/trace":
            show_trace = not show_trace
            print(f"Trace output {'enabled' if show_trace else 'disabled'}.")
            continue

        response, trace = run_turn(question)

        print("\nAssistant:\n")
        print(response)

        if show_trace and trace is not None:
            print()
            print(format_trace(trace))

        print("\n" + "-" * 60 + "\n")


if __name__ == "__main__":
    main()
