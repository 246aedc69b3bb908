"""Program extraction pipeline.

Usage:
    from program_extractor.pipeline import extract_agenda, extract_speakers

    items = extract_agenda(text, known_speakers=catalog)
    print(f"Found {len(items)} agenda items")
"""

from program_extractor.pipeline.orchestrator import (
    ExtractionInputError,
    extract_agenda,
    extract_speakers,
    run_agenda_extraction,
    run_speaker_extraction,
)

__all__ = [
    "extract_agenda",
    "extract_speakers",
    "run_agenda_extraction",
    "run_speaker_extraction",
    "ExtractionInputError",
]
