"""Enumeration types for the extraction models."""

from enum import Enum


class AgendaItemType(str, Enum):
    """Kind of agenda entry on a conference program."""

    SESSION = "session"
    BREAK = "break"
    MEAL = "meal"
    WELCOME = "welcome"
    CLOSING = "closing"
    WORKSHOP = "workshop"
    QNA = "qna"


class ExtractionStrategy(str, Enum):
    """Which pass produced the extracted records."""

    PRIMARY = "primary"
    FALLBACK = "fallback"
    NONE = "none"
