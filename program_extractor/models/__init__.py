"""Pydantic data models for the extraction engine."""

from .enums import AgendaItemType, ExtractionStrategy
from .extraction import KnownSpeaker, RawLine
from .program import DraftAgendaItem, DraftSpeakerProfile
from .report import AgendaExtractionReport, ExtractionTrace, SpeakerExtractionReport

__all__ = [
    # Enums
    "AgendaItemType",
    "ExtractionStrategy",
    # Inputs
    "RawLine",
    "KnownSpeaker",
    # Drafts
    "DraftAgendaItem",
    "DraftSpeakerProfile",
    # Reports
    "ExtractionTrace",
    "AgendaExtractionReport",
    "SpeakerExtractionReport",
]
