"""Line segmentation of recovered program text."""

from program_extractor.models import RawLine


def segment_lines(raw_text: str) -> list[RawLine]:
    """Split raw text into trimmed, non-empty lines.

    Order is preserved and indices are assigned after empty lines are
    discarded, so ``index`` is the position among retained lines.

    Args:
        raw_text: Plain text recovered from the source document.

    Returns:
        Ordered list of RawLine (possibly empty).
    """
    lines: list[RawLine] = []
    for chunk in raw_text.splitlines():
        text = chunk.strip()
        if not text:
            continue
        lines.append(RawLine(text=text, index=len(lines)))
    return lines


def diagnostic_excerpt(raw_text: str, limit: int = 500) -> str:
    """Leading slice of the raw text for diagnosing empty extractions."""
    return raw_text[:limit]
