"""Models describing a finished extraction run."""

from pydantic import BaseModel, Field

from .enums import ExtractionStrategy
from .program import DraftAgendaItem, DraftSpeakerProfile


class ExtractionTrace(BaseModel):
    """Inspectable summary of how records were (or were not) found."""

    strategy: ExtractionStrategy = Field(..., description="Pass that produced the records")
    lines_total: int = Field(default=0, ge=0, description="Non-empty lines after segmentation")
    drafts_sealed: int = Field(default=0, ge=0, description="Drafts emitted by the primary pass")
    drafts_dropped: int = Field(
        default=0, ge=0, description="Drafts discarded for lacking a title or name"
    )
    excerpt: str | None = Field(
        None, description="Leading slice of the raw text, kept only when nothing was extracted"
    )


class AgendaExtractionReport(BaseModel):
    """Agenda records plus their trace."""

    items: list[DraftAgendaItem] = Field(default_factory=list)
    trace: ExtractionTrace


class SpeakerExtractionReport(BaseModel):
    """Speaker profiles plus their trace."""

    speakers: list[DraftSpeakerProfile] = Field(default_factory=list)
    trace: ExtractionTrace
