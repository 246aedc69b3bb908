"""Models for segmented source text and caller-supplied catalogs."""

from pydantic import BaseModel, ConfigDict, Field


class RawLine(BaseModel):
    """One trimmed, non-empty line of the source text."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Trimmed line content")
    index: int = Field(..., ge=0, description="0-indexed position among retained lines")


class KnownSpeaker(BaseModel):
    """Speaker already registered for the event, used only for name matching."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Caller-side speaker identifier")
    name: str = Field(..., description="Display name as registered")
