#!/usr/bin/env python3
"""Yes/no console prompt shown before anything is written to GitHub."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable, Optional, TextIO

from errors import PromptError

PROMPT_HEADER = "Are you sure you wish to copy the following repositories?"
PROMPT_CHOICES = "[yes/No]"
AFFIRMATIVE_ANSWER = "yes"


class Confirmation(Enum):
    ACCEPTED = "accepted"
    DECLINED = "declined"
    CANCELLED = "cancelled"

    @property
    def proceed(self) -> bool:
        return self is Confirmation.ACCEPTED


def confirm(
    names: Iterable[str],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Confirmation:
    """Print the project names and read a single answer line.

    End of input counts as cancellation, which is reported separately from
    a negative answer. Only 'yes' (any case) accepts.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    stdout.write(PROMPT_HEADER + "\n")
    for name in names:
        stdout.write(f"{name}\n")
    stdout.write(PROMPT_CHOICES + "\n")
    stdout.flush()

    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise PromptError(f"error reading confirmation prompt: {e}") from e

    if line == "":
        return Confirmation.CANCELLED

    if line.strip().casefold() == AFFIRMATIVE_ANSWER:
        return Confirmation.ACCEPTED
    return Confirmation.DECLINED
