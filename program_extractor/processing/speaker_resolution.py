"""Speaker name resolution against a caller-supplied catalog."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from program_extractor.models import KnownSpeaker
from program_extractor.extraction.honorifics import clean_title_tail


@dataclass(frozen=True)
class SpeakerMatch:
    """Catalog entries named in a line.

    ``speaker_ids`` follows catalog order. ``first_offset`` and
    ``first_name`` describe the first matching catalog entry, not the
    leftmost occurrence in the line.
    """

    speaker_ids: list[str] = field(default_factory=list)
    first_offset: int | None = None
    first_name: str | None = None

    @property
    def matched(self) -> bool:
        return bool(self.speaker_ids)


def resolve_speakers(text: str, catalog: Sequence[KnownSpeaker]) -> SpeakerMatch:
    """Find which known speakers appear in a line.

    Matching is a substring test of the lower-cased name against the
    lower-cased line, and the offset is read from the lower-cased line. The
    catalog is walked in the order given, so overlapping names ("Ana Gómez" /
    "Ana Gómez Ruiz") resolve the same way on every run.

    Args:
        text: Line to search.
        catalog: Known speakers in a stable order.

    Returns:
        SpeakerMatch (empty when nothing matched).
    """
    speaker_ids: list[str] = []
    first_offset: int | None = None
    first_name: str | None = None

    lowered = text.lower()

    for speaker in catalog:
        if not speaker.name.strip():
            continue

        offset = lowered.find(speaker.name.lower())
        if offset < 0:
            continue

        speaker_ids.append(speaker.id)
        if first_offset is None:
            first_offset = offset
            first_name = speaker.name

    return SpeakerMatch(
        speaker_ids=speaker_ids,
        first_offset=first_offset,
        first_name=first_name,
    )


def split_title(text: str, match: SpeakerMatch) -> str:
    """Derive a session title from a line that may end with a speaker name.

    The title is everything before the first matched name, without a
    dangling honorific or separator. Falls back to the whole line.
    """
    if not match.matched or not match.first_offset:
        return text

    title = clean_title_tail(text[: match.first_offset].strip())
    return title or text
