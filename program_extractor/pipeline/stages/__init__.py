"""Extraction stages - each stage has one focused responsibility.

KEY PRINCIPLES:
- Classifiers are pure functions over a single line
- Accumulators are reducers over (state, line) with immutable state
- The fallback pass only runs when an accumulator yields nothing
"""

from program_extractor.pipeline.stages.agenda import (
    AgendaAccumulation,
    AgendaState,
    accumulate_agenda,
    agenda_step,
)
from program_extractor.pipeline.stages.classifiers import (
    classify_category,
    is_section_header,
    match_date,
    match_field_label,
    match_time,
    normalize_date,
    normalize_time,
)
from program_extractor.pipeline.stages.fallback import fallback_agenda, fallback_speakers
from program_extractor.pipeline.stages.speakers import (
    SpeakerAccumulation,
    SpeakerState,
    accumulate_speakers,
    speaker_step,
)

__all__ = [
    # Classifiers
    "match_date",
    "match_time",
    "normalize_date",
    "normalize_time",
    "is_section_header",
    "classify_category",
    "match_field_label",
    # Accumulators
    "AgendaState",
    "AgendaAccumulation",
    "agenda_step",
    "accumulate_agenda",
    "SpeakerState",
    "SpeakerAccumulation",
    "speaker_step",
    "accumulate_speakers",
    # Fallback
    "fallback_agenda",
    "fallback_speakers",
]
