"""Fallback pass - cruder, stateless extraction for unusual layouts.

Only invoked when the primary accumulator produced nothing. Each line is
judged on its own (plus, for agenda, the line after it); there is no
open draft and nothing is ever raised.
"""

import re
from collections.abc import Sequence

from program_extractor.extraction.honorifics import strip_honorific
from program_extractor.models import DraftAgendaItem, DraftSpeakerProfile, RawLine
from program_extractor.pipeline.stages.classifiers import match_time, normalize_time

# Agenda: the line after a time must be longer than this to be a title
FALLBACK_TITLE_MIN_LENGTH = 5

# Speakers: candidate name lines
FALLBACK_NAME_MIN_WORDS = 2
FALLBACK_NAME_MAX_WORDS = 5
FALLBACK_NAME_MAX_LENGTH = 100
FALLBACK_NAME_MIN_LENGTH = 5

UPPERCASE_START_PATTERN = re.compile(r"^[A-ZÁÉÍÓÚÑÜ]")
DIGIT_START_PATTERN = re.compile(r"^\d+")


def fallback_agenda(lines: Sequence[RawLine], date: str) -> list[DraftAgendaItem]:
    """Pair every time line with the line that follows it.

    Args:
        lines: Segmented program lines.
        date: Last date observed by the primary pass, or the caller's
            fallback date.

    Returns:
        Minimal session items in source order.
    """
    items: list[DraftAgendaItem] = []

    for position, line in enumerate(lines[:-1]):
        time_token = match_time(line.text)
        if not time_token:
            continue

        title = lines[position + 1].text
        if len(title) <= FALLBACK_TITLE_MIN_LENGTH:
            continue

        start = normalize_time(time_token)
        items.append(
            DraftAgendaItem(
                title=title,
                description=title,
                date=date,
                start_time=start,
                end_time=start,
            )
        )

    return items


def _looks_like_name(text: str) -> bool:
    words = text.split()
    return (
        FALLBACK_NAME_MIN_WORDS <= len(words) <= FALLBACK_NAME_MAX_WORDS
        and bool(UPPERCASE_START_PATTERN.match(text))
        and not DIGIT_START_PATTERN.match(text)
        and len(text) < FALLBACK_NAME_MAX_LENGTH
    )


def fallback_speakers(
    lines: Sequence[RawLine],
    default_specialty: str,
    placeholder_bio: str,
) -> list[DraftSpeakerProfile]:
    """Treat every short capitalized line as a speaker name.

    Args:
        lines: Segmented program lines.
        default_specialty: Placeholder specialty.
        placeholder_bio: Placeholder bio.

    Returns:
        Minimal profiles in source order.
    """
    speakers: list[DraftSpeakerProfile] = []

    for line in lines:
        if not _looks_like_name(line.text):
            continue

        name = strip_honorific(line.text)
        if len(name) <= FALLBACK_NAME_MIN_LENGTH:
            continue

        speakers.append(
            DraftSpeakerProfile(
                name=name,
                specialty=default_specialty,
                bio=placeholder_bio,
                image_hint=name,
                qualifications=[],
            )
        )

    return speakers
