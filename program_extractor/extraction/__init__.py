"""Text segmentation."""

from .segmenter import diagnostic_excerpt, segment_lines

__all__ = ["segment_lines", "diagnostic_excerpt"]
