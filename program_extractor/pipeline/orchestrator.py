"""Extraction orchestrator - public entry points for agenda and speakers.

Both pipelines share the same shape:
    raw text -> segmenter -> accumulator -> (fallback if empty) -> records

Neither pipeline raises for irregular content. An empty result is the only
failure signal; the report's trace then carries a leading excerpt of the
raw text for diagnosis.
"""

from collections.abc import Sequence
from datetime import date

import structlog
from pydantic import TypeAdapter, ValidationError

from program_extractor.config.settings import get_settings
from program_extractor.extraction.segmenter import diagnostic_excerpt, segment_lines
from program_extractor.models import (
    AgendaExtractionReport,
    DraftAgendaItem,
    DraftSpeakerProfile,
    ExtractionStrategy,
    ExtractionTrace,
    KnownSpeaker,
    SpeakerExtractionReport,
)
from program_extractor.pipeline.stages import (
    accumulate_agenda,
    accumulate_speakers,
    fallback_agenda,
    fallback_speakers,
)

logger = structlog.get_logger(__name__)

_CATALOG_ADAPTER = TypeAdapter(list[KnownSpeaker])


class ExtractionInputError(TypeError):
    """Caller passed arguments that violate the extraction contract."""

    pass


def _require_text(raw_text: object) -> str:
    if not isinstance(raw_text, str):
        raise ExtractionInputError(
            f"raw_text must be str, got {type(raw_text).__name__}"
        )
    return raw_text


def _require_catalog(known_speakers: Sequence[KnownSpeaker | dict]) -> list[KnownSpeaker]:
    if isinstance(known_speakers, (str, dict)):
        raise ExtractionInputError("known_speakers must be an ordered sequence of speakers")

    try:
        return _CATALOG_ADAPTER.validate_python(list(known_speakers))
    except (TypeError, ValidationError) as e:
        raise ExtractionInputError(f"Invalid known_speakers: {e}") from e


def run_agenda_extraction(
    raw_text: str,
    known_speakers: Sequence[KnownSpeaker | dict] = (),
    current_date_fallback: str | None = None,
) -> AgendaExtractionReport:
    """Extract agenda items and report how they were found.

    Args:
        raw_text: Plain text recovered from the program document.
        known_speakers: Speaker catalog in a stable order, as KnownSpeaker
            instances or {"id", "name"} dicts.
        current_date_fallback: ISO date used by the fallback pass when the
            text never states a date. Defaults to today.

    Returns:
        AgendaExtractionReport with items in source order.

    Raises:
        ExtractionInputError: If raw_text is not a string or the catalog is
            not a sequence of valid speaker entries.
    """
    raw_text = _require_text(raw_text)
    catalog = _require_catalog(known_speakers)
    settings = get_settings()

    lines = segment_lines(raw_text)
    logger.info(
        "agenda_extraction_start",
        text_length=len(raw_text),
        lines=len(lines),
        known_speakers=len(catalog),
    )

    accumulation = accumulate_agenda(lines, catalog)
    items = accumulation.items
    strategy = ExtractionStrategy.PRIMARY

    if accumulation.drafts_dropped:
        logger.debug("agenda_drafts_dropped", count=accumulation.drafts_dropped)

    if not items:
        fallback_date = (
            accumulation.final_state.current_date
            or current_date_fallback
            or date.today().isoformat()
        )
        items = fallback_agenda(lines, fallback_date)
        strategy = ExtractionStrategy.FALLBACK
        logger.info("agenda_fallback_used", items=len(items), date=fallback_date)

    excerpt = None
    if not items:
        strategy = ExtractionStrategy.NONE
        excerpt = diagnostic_excerpt(raw_text, settings.diagnostic_excerpt_chars)
        logger.warning("no_entities_recognized", kind="agenda", excerpt=excerpt)

    trace = ExtractionTrace(
        strategy=strategy,
        lines_total=len(lines),
        drafts_sealed=len(accumulation.items),
        drafts_dropped=accumulation.drafts_dropped,
        excerpt=excerpt,
    )

    logger.info(
        "agenda_extraction_complete",
        items=len(items),
        strategy=strategy.value,
    )

    return AgendaExtractionReport(items=items, trace=trace)


def run_speaker_extraction(raw_text: str) -> SpeakerExtractionReport:
    """Extract speaker profiles and report how they were found.

    Args:
        raw_text: Plain text recovered from the program document.

    Returns:
        SpeakerExtractionReport with profiles in source order.

    Raises:
        ExtractionInputError: If raw_text is not a string.
    """
    raw_text = _require_text(raw_text)
    settings = get_settings()

    lines = segment_lines(raw_text)
    logger.info("speaker_extraction_start", text_length=len(raw_text), lines=len(lines))

    accumulation = accumulate_speakers(lines, settings.default_specialty)
    speakers = accumulation.speakers
    strategy = ExtractionStrategy.PRIMARY

    if accumulation.drafts_dropped:
        logger.debug("speaker_drafts_dropped", count=accumulation.drafts_dropped)

    if not speakers:
        speakers = fallback_speakers(
            lines,
            default_specialty=settings.default_specialty,
            placeholder_bio=settings.fallback_speaker_bio,
        )
        strategy = ExtractionStrategy.FALLBACK
        logger.info("speaker_fallback_used", speakers=len(speakers))

    excerpt = None
    if not speakers:
        strategy = ExtractionStrategy.NONE
        excerpt = diagnostic_excerpt(raw_text, settings.diagnostic_excerpt_chars)
        logger.warning("no_entities_recognized", kind="speakers", excerpt=excerpt)

    trace = ExtractionTrace(
        strategy=strategy,
        lines_total=len(lines),
        drafts_sealed=len(accumulation.speakers),
        drafts_dropped=accumulation.drafts_dropped,
        excerpt=excerpt,
    )

    logger.info(
        "speaker_extraction_complete",
        speakers=len(speakers),
        strategy=strategy.value,
    )

    return SpeakerExtractionReport(speakers=speakers, trace=trace)


def extract_agenda(
    raw_text: str,
    known_speakers: Sequence[KnownSpeaker | dict] = (),
    current_date_fallback: str | None = None,
) -> list[DraftAgendaItem]:
    """Extract agenda items from program text (possibly empty)."""
    return run_agenda_extraction(raw_text, known_speakers, current_date_fallback).items


def extract_speakers(raw_text: str) -> list[DraftSpeakerProfile]:
    """Extract speaker profiles from program text (possibly empty)."""
    return run_speaker_extraction(raw_text).speakers
