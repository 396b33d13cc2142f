from __future__ import annotations

import sys
from typing import TextIO

PROMPT = "Do you want to proceed with renaming? (y/N): "


def is_confirmation(answer: str) -> bool:
    if answer.endswith("\n"):
        answer = answer[:-1]
    return answer in ("y", "Y")


def ask_confirmation(stdin: TextIO | None = None) -> bool:
    """Prompt once on stdout and read a single line. End of input counts as "no"."""
    stream = stdin if stdin is not None else sys.stdin
    print(PROMPT, end="", flush=True)
    # sys.stdin is None when the interpreter starts without a stdin descriptor.
    if stream is None or stream.closed:
        return False
    try:
        answer = stream.readline()
    except (UnicodeDecodeError, OSError):
        return False
    return is_confirmation(answer)
