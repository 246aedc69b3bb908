"""Draft records extracted from a conference program."""

from pydantic import BaseModel, Field

from .enums import AgendaItemType


class DraftAgendaItem(BaseModel):
    """An agenda entry recovered from program text.

    Drafts are never sealed without a title; see the agenda accumulator.
    """

    title: str = Field(default="", description="Session title")
    description: str = Field(default="", description="Follow-up lines, space-joined")
    date: str = Field(..., description="Session date, YYYY-MM-DD")
    start_time: str = Field(..., description="Start time, HH:MM")
    end_time: str = Field(..., description="End time, HH:MM (defaults to start_time)")
    speaker_ids: list[str] = Field(
        default_factory=list, description="Catalog ids of speakers named on the title line"
    )
    type: AgendaItemType = Field(default=AgendaItemType.SESSION, description="Entry kind")
    moderator: str | None = Field(None, description="Moderator, when labelled")
    location: str | None = Field(None, description="Room or venue, when labelled")
    section: str | None = Field(None, description="Last all-caps heading seen before the entry")


class DraftSpeakerProfile(BaseModel):
    """A speaker profile recovered from program text."""

    name: str = Field(..., description="Speaker name without honorific")
    specialty: str = Field(..., description="Stated specialty or the configured placeholder")
    bio: str = Field(default="", description="Biographical lines, space-joined")
    image_hint: str = Field(default="", description="Hint for locating a portrait")
    qualifications: list[str] = Field(default_factory=list, description="Listed credentials")
