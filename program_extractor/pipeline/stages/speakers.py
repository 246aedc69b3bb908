"""Speaker accumulator - turns program lines into speaker profile drafts.

ENTITY START (either pattern opens a new draft and seals the previous one):
- Title-prefixed: "Dr. Ana Gómez, Cardiología" (honorific, name, optional
  comma + specialty)
- Bare name: "Ana Gómez" (two or more capitalized words, accents included),
  tried only when the title-prefixed pattern fails

WHILE OPEN (first applicable rule):
- Specialty marker ("especialidad: X") overrides the specialty
- First long line becomes the bio
- Further medium-length lines extend the bio
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from program_extractor.extraction.honorifics import strip_honorific
from program_extractor.models import DraftSpeakerProfile, RawLine
from program_extractor.pipeline.state import IDLE, Open, Phase

TITLED_NAME_PATTERN = re.compile(
    r"^(?:Dr\.?|Dra\.?|Doctor|Doctora)\s+(?P<name>.+?)(?:\s*,\s*(?P<specialty>.+))?$",
    re.IGNORECASE,
)

BARE_NAME_PATTERN = re.compile(
    r"^(?:[A-ZÁÉÍÓÚÑÜ][a-záéíóúñü]+\s+)+[A-ZÁÉÍÓÚÑÜ][a-záéíóúñü]+$"
)

SPECIALTY_MARKER_PATTERN = re.compile(
    r"(?:especialidad|especializaci[oó]n|specialty)(?P<rest>.*)$",
    re.IGNORECASE,
)

# A line must be longer than this to start a bio
BIO_START_MIN_LENGTH = 20
# ... and longer than this to extend one
BIO_APPEND_MIN_LENGTH = 10


@dataclass(frozen=True)
class SpeakerState:
    """Speaker accumulator state."""

    phase: Phase = IDLE
    drafts_opened: int = 0

    @property
    def draft(self) -> DraftSpeakerProfile | None:
        return self.phase.draft if isinstance(self.phase, Open) else None


@dataclass
class SpeakerAccumulation:
    """Profiles sealed by a full pass plus the state it ended in."""

    speakers: list[DraftSpeakerProfile] = field(default_factory=list)
    final_state: SpeakerState = field(default_factory=SpeakerState)

    @property
    def drafts_dropped(self) -> int:
        return self.final_state.drafts_opened - len(self.speakers)


def match_speaker_start(text: str, default_specialty: str) -> DraftSpeakerProfile | None:
    """Open a profile draft if the line introduces a speaker.

    Args:
        text: Program line.
        default_specialty: Placeholder used when no specialty is stated.

    Returns:
        A fresh DraftSpeakerProfile, or None if the line is not an entity start.
    """
    titled = TITLED_NAME_PATTERN.match(text)
    if titled:
        name = titled.group("name").strip().rstrip(",;").strip()
        specialty = (titled.group("specialty") or "").strip() or default_specialty
    elif BARE_NAME_PATTERN.match(text):
        name = strip_honorific(text)
        specialty = default_specialty
    else:
        return None

    return DraftSpeakerProfile(
        name=name,
        specialty=specialty,
        bio="",
        image_hint=name,
        qualifications=[],
    )


def _extract_specialty(text: str) -> str | None:
    """Text following a specialty marker, or None if the line has no marker.

    An empty string means the marker was present without a usable value.
    """
    match = SPECIALTY_MARKER_PATTERN.search(text)
    if not match:
        return None
    return match.group("rest").lstrip(" \t:-–—").strip()


def seal_speaker_draft(draft: DraftSpeakerProfile | None) -> DraftSpeakerProfile | None:
    """Return the draft if it may be emitted, None if it must be dropped."""
    if draft is None or not draft.name.strip():
        return None
    return draft


def speaker_step(
    state: SpeakerState,
    line: RawLine,
    default_specialty: str,
) -> tuple[SpeakerState, DraftSpeakerProfile | None]:
    """Apply one line to the speaker accumulator.

    Returns:
        Tuple of (new_state, sealed_profile_or_None).
    """
    text = line.text

    started = match_speaker_start(text, default_specialty)
    if started is not None:
        sealed = seal_speaker_draft(state.draft)
        return (
            replace(state, phase=Open(started), drafts_opened=state.drafts_opened + 1),
            sealed,
        )

    draft = state.draft
    if draft is None:
        return state, None

    specialty = _extract_specialty(text)
    if specialty is not None:
        if specialty:
            draft = draft.model_copy(update={"specialty": specialty})
    elif not draft.bio and len(text) > BIO_START_MIN_LENGTH:
        draft = draft.model_copy(update={"bio": text})
    elif draft.bio and len(text) > BIO_APPEND_MIN_LENGTH:
        draft = draft.model_copy(update={"bio": f"{draft.bio} {text}"})

    return replace(state, phase=Open(draft)), None


def finish_speakers(state: SpeakerState) -> DraftSpeakerProfile | None:
    """Seal whatever draft is still open at end of input."""
    return seal_speaker_draft(state.draft)


def accumulate_speakers(
    lines: Sequence[RawLine],
    default_specialty: str,
) -> SpeakerAccumulation:
    """Run the speaker accumulator over every line.

    Args:
        lines: Segmented program lines.
        default_specialty: Placeholder specialty for profiles that state none.

    Returns:
        SpeakerAccumulation with profiles in source order.
    """
    state = SpeakerState()
    speakers: list[DraftSpeakerProfile] = []

    for line in lines:
        state, sealed = speaker_step(state, line, default_specialty)
        if sealed is not None:
            speakers.append(sealed)

    last = finish_speakers(state)
    if last is not None:
        speakers.append(last)

    return SpeakerAccumulation(speakers=speakers, final_state=state)
