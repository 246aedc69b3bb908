"""Post-processing utilities."""

from .speaker_resolution import SpeakerMatch, resolve_speakers, split_title

__all__ = ["SpeakerMatch", "resolve_speakers", "split_title"]
