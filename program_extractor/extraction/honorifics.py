"""Honorific handling shared by title splitting and speaker detection."""

import re

HONORIFIC = r"(?:Dra\.?|Dr\.?|Doctora|Doctor)"
HONORIFIC_PREFIX_PATTERN = re.compile(rf"^{HONORIFIC}\s+", re.IGNORECASE)
HONORIFIC_SUFFIX_PATTERN = re.compile(rf"(?:^|\s){HONORIFIC}$", re.IGNORECASE)

TITLE_TRAILING_SEPARATORS = " \t-–—,:;|/"


def strip_honorific(text: str) -> str:
    """Remove a leading Dr./Dra./Doctor/Doctora."""
    return HONORIFIC_PREFIX_PATTERN.sub("", text.strip(), count=1).strip()


def clean_title_tail(text: str) -> str:
    """Drop a dangling honorific and separators from the end of a title.

    "Manejo de riesgo cardiovascular - Dr." -> "Manejo de riesgo cardiovascular"
    """
    title = text.rstrip(TITLE_TRAILING_SEPARATORS)
    title = HONORIFIC_SUFFIX_PATTERN.sub("", title)
    return title.rstrip(TITLE_TRAILING_SEPARATORS)
