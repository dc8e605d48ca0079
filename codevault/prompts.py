"""Terminal implementations of the operator-interaction callbacks."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence, TextIO

CYAN = "\x1b[1;36m"
YELLOW = "\x1b[1;33m"
RESET = "\x1b[0m"

InputFn = Callable[[str], str]


def confirm(prompt: str, *, input_fn: Optional[InputFn] = None) -> bool:
    """Ask a yes/no question; only an explicit ``y``/``yes`` counts as yes."""
    input_fn = input_fn or input
    try:
        answer = input_fn(f"{CYAN}{prompt} ({YELLOW}y/N{CYAN}): {RESET}")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def assume_yes(_prompt: str) -> bool:
    """Approve without asking; backs the ``--yes`` flag."""
    return True


def choose_id(candidates: Sequence[int], *, input_fn: Optional[InputFn] = None, out: Optional[TextIO] = None) -> str:
    """List the candidate IDs and return the operator's raw answer."""
    input_fn = input_fn or input
    stream = out or sys.stdout
    stream.write(f"\n{CYAN}Multiple matching tags found, choose an {YELLOW}ID{CYAN} to edit from list:{RESET}\n\n")
    for candidate in candidates:
        stream.write(f"{CYAN}  »{RESET} {YELLOW}ID {candidate}{RESET}\n")
    stream.flush()
    try:
        return input_fn(f"\n{CYAN}Type the {YELLOW}ID{CYAN} of the snippet you want to modify: {RESET}")
    except EOFError:
        return ""


def ask(prompt: str, *, input_fn: Optional[InputFn] = None) -> str:
    """Read one line; blank means keep the current value."""
    input_fn = input_fn or input
    try:
        return input_fn(f"{CYAN}  {prompt} ({YELLOW}leave blank to keep current{CYAN}): {RESET}").strip()
    except EOFError:
        return ""


def read_block(stream: Optional[TextIO] = None) -> str:
    """Read a code body until end of input, byte for byte."""
    return (stream or sys.stdin).read()


__all__ = ["ask", "assume_yes", "choose_id", "confirm", "read_block"]
