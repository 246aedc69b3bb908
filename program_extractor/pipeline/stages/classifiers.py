"""Token classifiers - pure line-level detectors and normalizers.

Each classifier inspects a single line of program text and either returns
None or a normalized token. A line may carry other content around the
token; no classifier requires the whole line to match.

PRECISION LIMITS (kept as observed in real programs):
- Section headers are detected by case alone, so all-caps acronym lines,
  date lines and time ranges also qualify.
- Category keywords are applied as an ordered list where the last matching
  set wins.
- Day-first is assumed for every date whose first group is not 4 digits.
"""

import re

from program_extractor.models import AgendaItemType


# =============================================================================
# Date / Time Patterns
# =============================================================================

# Year-first is listed first so "2025-11-14" is not read as "25-11-14".
DATE_PATTERN = re.compile(
    r"(?P<ymd>\d{4}[/\-]\d{1,2}[/\-]\d{1,2})"
    r"|(?P<dmy>\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4})"
)
DATE_SEPARATOR_PATTERN = re.compile(r"[/\-]")

TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}")
TIME_TOKEN_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")

# Section headers: exclusive length bounds
SECTION_HEADER_MIN_LENGTH = 5
SECTION_HEADER_MAX_LENGTH = 100


# =============================================================================
# Keyword Sets (ordered; a later match overrides an earlier one)
# =============================================================================

CATEGORY_KEYWORDS: list[tuple[AgendaItemType, tuple[str, ...]]] = [
    (AgendaItemType.BREAK, ("coffee", "café", "break")),
    (AgendaItemType.MEAL, ("almuerzo", "lunch", "comida")),
    (AgendaItemType.WELCOME, ("bienvenida", "welcome")),
    (AgendaItemType.CLOSING, ("cierre", "closing")),
    (AgendaItemType.WORKSHOP, ("workshop", "taller")),
    (AgendaItemType.QNA, ("preguntas", "q&a", "qna")),
]


# =============================================================================
# Field Labels
# =============================================================================

FIELD_LABELS = {
    "moderador": "moderator",
    "moderadora": "moderator",
    "moderator": "moderator",
    "lugar": "location",
    "sede": "location",
    "sala": "location",
    "salón": "location",
    "salon": "location",
    "location": "location",
    "venue": "location",
}

FIELD_LABEL_PATTERN = re.compile(
    r"^(?P<label>moderadora?|moderator|lugar|sede|sala|sal[oó]n|location|venue)"
    r"\s*:\s*(?P<value>.+)$",
    re.IGNORECASE,
)


# =============================================================================
# Date / Time
# =============================================================================

def normalize_date(token: str) -> str:
    """Normalize a date token to YYYY-MM-DD.

    Accepts DD/MM/YYYY, DD-MM-YYYY, YYYY/MM/DD and YYYY-MM-DD, with 2-digit
    years expanded as 20YY.

    Raises:
        ValueError: If the token is not a date in one of those shapes.
    """
    token = token.strip()
    if not DATE_PATTERN.fullmatch(token):
        raise ValueError(f"Not a date token: {token!r}")

    first, second, third = DATE_SEPARATOR_PATTERN.split(token)
    if len(first) == 4:
        year, month, day = first, second, third
    else:
        day, month, year = first, second, third
        if len(year) == 2:
            year = f"20{year}"

    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def match_date(text: str) -> str | None:
    """Return the first date in the line, normalized, or None."""
    match = DATE_PATTERN.search(text)
    if not match:
        return None
    return normalize_date(match.group())


def normalize_time(token: str) -> str:
    """Pad an H:MM / HH:MM token to HH:MM.

    Raises:
        ValueError: If the token is not a time.
    """
    match = TIME_TOKEN_PATTERN.match(token.strip())
    if not match:
        raise ValueError(f"Not a time token: {token!r}")
    hours, minutes = match.groups()
    return f"{hours.zfill(2)}:{minutes}"


def match_time(text: str) -> str | None:
    """Return the first H:MM / HH:MM substring exactly as written, or None."""
    match = TIME_PATTERN.search(text)
    return match.group() if match else None


# =============================================================================
# Structure / Category
# =============================================================================

def is_section_header(text: str) -> bool:
    """Whether the line looks like an all-caps section heading."""
    stripped = text.strip()
    if not SECTION_HEADER_MIN_LENGTH < len(stripped) < SECTION_HEADER_MAX_LENGTH:
        return False
    return stripped == stripped.upper()


def classify_category(text: str) -> AgendaItemType | None:
    """Map a line to an agenda item type via keyword sets.

    Every set in CATEGORY_KEYWORDS is tested in order and each match
    overwrites the previous one, so "Preguntas y cierre" resolves to QNA.
    """
    lowered = text.lower()
    matched: AgendaItemType | None = None
    for item_type, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            matched = item_type
    return matched


def match_field_label(text: str) -> tuple[str, str] | None:
    """Detect 'Moderador: ...' / 'Lugar: ...' style lines.

    Returns:
        Tuple of (field_name, value) where field_name is "moderator" or
        "location", or None.
    """
    match = FIELD_LABEL_PATTERN.match(text.strip())
    if not match:
        return None
    value = match.group("value").strip()
    if not value:
        return None
    return FIELD_LABELS[match.group("label").lower()], value


