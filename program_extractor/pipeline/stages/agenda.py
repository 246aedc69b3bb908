"""Agenda accumulator - turns classified program lines into agenda drafts.

STATE MACHINE (one pass, source order, no backtracking):
- Idle: no draft. Date lines update the running date; all-caps lines update
  the running section.
- Open: a time line (seen after any date) seals the current draft and opens
  a new one. Later lines fill the title, then the description, and may
  override the type via category keywords. Moderator and location label
  lines also fill those fields.

The time on the line right after an opening time line is read as the end
time and that line is consumed, so "08:00" / "08:10" describes one slot
rather than two.

Drafts sealed without a title are dropped.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from program_extractor.models import DraftAgendaItem, KnownSpeaker, RawLine
from program_extractor.pipeline.stages.classifiers import (
    classify_category,
    is_section_header,
    match_date,
    match_field_label,
    match_time,
    normalize_time,
)
from program_extractor.pipeline.state import IDLE, Open, Phase
from program_extractor.processing.speaker_resolution import resolve_speakers, split_title

# A line must be longer than this to become a title
TITLE_MIN_LENGTH = 5
# ... and longer than this to be appended to a description
DESCRIPTION_MIN_LENGTH = 10


@dataclass(frozen=True)
class AgendaState:
    """Full agenda accumulator state.

    ``consumed_index`` is the index of the line whose time was taken as the
    open draft's end time; that line never opens a draft of its own.
    """

    phase: Phase = IDLE
    current_date: str | None = None
    current_section: str | None = None
    consumed_index: int | None = None
    drafts_opened: int = 0

    @property
    def draft(self) -> DraftAgendaItem | None:
        return self.phase.draft if isinstance(self.phase, Open) else None


@dataclass
class AgendaAccumulation:
    """Records sealed by a full pass plus the state it ended in."""

    items: list[DraftAgendaItem] = field(default_factory=list)
    final_state: AgendaState = field(default_factory=AgendaState)

    @property
    def drafts_dropped(self) -> int:
        return self.final_state.drafts_opened - len(self.items)


def seal_agenda_draft(draft: DraftAgendaItem | None) -> DraftAgendaItem | None:
    """Return the draft if it may be emitted, None if it must be dropped."""
    if draft is None or not draft.title:
        return None
    return draft


def _fill_title(
    draft: DraftAgendaItem,
    text: str,
    catalog: Sequence[KnownSpeaker],
) -> DraftAgendaItem:
    match = resolve_speakers(text, catalog)
    if match.matched:
        return draft.model_copy(
            update={
                "speaker_ids": list(match.speaker_ids),
                "title": split_title(text, match),
            }
        )
    return draft.model_copy(update={"title": text})


def agenda_step(
    state: AgendaState,
    line: RawLine,
    next_line: RawLine | None,
    catalog: Sequence[KnownSpeaker],
) -> tuple[AgendaState, DraftAgendaItem | None]:
    """Apply one line to the agenda accumulator.

    Args:
        state: State before this line.
        line: Current line.
        next_line: Following line (for end-time lookahead), or None at end.
        catalog: Known speakers, in a stable order.

    Returns:
        Tuple of (new_state, sealed_item_or_None).
    """
    text = line.text
    draft = state.draft
    sealed: DraftAgendaItem | None = None
    current_date = state.current_date
    current_section = state.current_section
    consumed_index = state.consumed_index
    drafts_opened = state.drafts_opened

    date_token = match_date(text)
    if date_token:
        current_date = date_token

    time_token = match_time(text)

    if time_token and current_date and line.index != state.consumed_index:
        sealed = seal_agenda_draft(draft)

        end_token = match_time(next_line.text) if next_line else None
        draft = DraftAgendaItem(
            date=current_date,
            start_time=normalize_time(time_token),
            end_time=normalize_time(end_token or time_token),
            section=current_section,
        )
        consumed_index = next_line.index if end_token else None
        drafts_opened += 1

    elif draft is not None:
        label = match_field_label(text)
        if label:
            field_name, value = label
            draft = draft.model_copy(update={field_name: value})

        # Labelled lines still feed the title and description
        if (
            not draft.title
            and not date_token
            and not time_token
            and len(text) > TITLE_MIN_LENGTH
        ):
            draft = _fill_title(draft, text, catalog)
        elif draft.title and text != draft.title and len(text) > DESCRIPTION_MIN_LENGTH:
            description = f"{draft.description} {text}" if draft.description else text
            draft = draft.model_copy(update={"description": description})

    # Applies to drafts opened after this line only
    if is_section_header(text):
        current_section = text

    if draft is not None:
        category = classify_category(text)
        if category is not None:
            draft = draft.model_copy(update={"type": category})

    new_state = replace(
        state,
        phase=Open(draft) if draft is not None else state.phase,
        current_date=current_date,
        current_section=current_section,
        consumed_index=consumed_index,
        drafts_opened=drafts_opened,
    )
    return new_state, sealed


def finish_agenda(state: AgendaState) -> DraftAgendaItem | None:
    """Seal whatever draft is still open at end of input."""
    return seal_agenda_draft(state.draft)


def accumulate_agenda(
    lines: Sequence[RawLine],
    catalog: Sequence[KnownSpeaker] = (),
) -> AgendaAccumulation:
    """Run the agenda accumulator over every line.

    Args:
        lines: Segmented program lines.
        catalog: Known speakers, in a stable order.

    Returns:
        AgendaAccumulation with items in sealing (source) order.
    """
    state = AgendaState()
    items: list[DraftAgendaItem] = []

    for position, line in enumerate(lines):
        next_line = lines[position + 1] if position + 1 < len(lines) else None
        state, sealed = agenda_step(state, line, next_line, catalog)
        if sealed is not None:
            items.append(sealed)

    last = finish_agenda(state)
    if last is not None:
        items.append(last)

    return AgendaAccumulation(items=items, final_state=state)
