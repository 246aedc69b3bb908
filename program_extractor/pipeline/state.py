"""Accumulator state shared by the agenda and speaker reducers.

Each accumulator is either Idle (no draft in progress) or Open (exactly one
draft in progress). Transitions never mutate a state in place; they return
a new state plus the record sealed on that line, if any.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

DraftT = TypeVar("DraftT")


@dataclass(frozen=True)
class Idle:
    """No draft is open."""


@dataclass(frozen=True)
class Open(Generic[DraftT]):
    """A draft is being filled from subsequent lines."""

    draft: DraftT


Phase = Idle | Open


IDLE = Idle()
