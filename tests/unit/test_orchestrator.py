"""Tests for the public extraction entry points."""

from datetime import date

import pytest

from program_extractor.config.settings import get_settings
from program_extractor.models import AgendaItemType, ExtractionStrategy, KnownSpeaker
from program_extractor.pipeline import (
    ExtractionInputError,
    extract_agenda,
    extract_speakers,
    run_agenda_extraction,
    run_speaker_extraction,
)

UNSTRUCTURED_TEXT = "Sin horario definido\nTexto libre"


@pytest.fixture
def fresh_settings():
    """Clear cached settings before and after the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestExtractAgenda:
    """Tests for agenda extraction."""

    def test_primary_pass(self, scenario_a_text, known_speakers):
        report = run_agenda_extraction(scenario_a_text, known_speakers)

        assert [item.title for item in report.items] == ["Bienvenida", "Manejo de Dislipidemia"]
        assert report.trace.strategy == ExtractionStrategy.PRIMARY
        assert report.trace.lines_total == 7
        assert report.trace.drafts_sealed == 2
        assert report.trace.excerpt is None

    def test_accepts_tuple_catalog(self, scenario_a_text, known_speakers):
        items = extract_agenda(scenario_a_text, tuple(known_speakers))

        assert items[1].speaker_ids == ["s1"]

    def test_unstructured_text_yields_empty_list(self):
        """Test that text without times produces nothing and raises nothing."""
        assert extract_agenda(UNSTRUCTURED_TEXT, []) == []

    def test_empty_result_carries_excerpt(self):
        report = run_agenda_extraction(UNSTRUCTURED_TEXT)

        assert report.items == []
        assert report.trace.strategy == ExtractionStrategy.NONE
        assert report.trace.excerpt == UNSTRUCTURED_TEXT

    def test_empty_text(self):
        report = run_agenda_extraction("")

        assert report.items == []
        assert report.trace.lines_total == 0

    def test_fallback_uses_caller_date_when_none_stated(self):
        text = "Programa\n08:00\nRegistro de asistentes\n9:30\nConferencia inaugural"

        report = run_agenda_extraction(text, [], current_date_fallback="2025-03-01")

        assert report.trace.strategy == ExtractionStrategy.FALLBACK
        assert [(i.date, i.start_time, i.title) for i in report.items] == [
            ("2025-03-01", "08:00", "Registro de asistentes"),
            ("2025-03-01", "09:30", "Conferencia inaugural"),
        ]

    def test_fallback_defaults_to_today(self):
        items = extract_agenda("08:00\nRegistro de asistentes")

        assert items[0].date == date.today().isoformat()

    def test_fallback_prefers_last_stated_date(self):
        """Test that a date seen by the primary pass wins over the caller's."""
        text = "14/11/2025\n08:00 Registro\n09:00 Conferencia"

        report = run_agenda_extraction(text, [], current_date_fallback="2025-03-01")

        assert report.trace.strategy == ExtractionStrategy.FALLBACK
        assert report.trace.drafts_dropped == 1
        assert len(report.items) == 1
        assert report.items[0].date == "2025-11-14"
        assert report.items[0].title == "09:00 Conferencia"

    def test_program_types(self, sample_program_text, known_speakers):
        items = extract_agenda(sample_program_text, known_speakers)

        assert AgendaItemType.BREAK in {item.type for item in items}
        assert items[-1].type == AgendaItemType.QNA

    def test_rejects_non_string_text(self):
        with pytest.raises(ExtractionInputError):
            extract_agenda(None, [])
        with pytest.raises(TypeError):
            extract_agenda(b"14/11/2025", [])

    def test_accepts_dict_catalog(self, scenario_a_text):
        """Test that plain {"id", "name"} entries resolve like KnownSpeaker."""
        items = extract_agenda(scenario_a_text, [{"id": "s1", "name": "Juan Pérez"}])

        assert items[1].title == "Manejo de Dislipidemia"
        assert items[1].speaker_ids == ["s1"]

    def test_accepts_mixed_catalog(self, scenario_a_text):
        catalog = [{"id": "s2", "name": "Ana Gómez"}, KnownSpeaker(id="s1", name="Juan Pérez")]

        items = extract_agenda(scenario_a_text, catalog)

        assert items[1].speaker_ids == ["s1"]

    def test_rejects_malformed_catalog(self):
        with pytest.raises(ExtractionInputError):
            extract_agenda("14/11/2025", [{"id": "s1"}])
        with pytest.raises(ExtractionInputError):
            extract_agenda("14/11/2025", ["Juan Pérez"])
        with pytest.raises(ExtractionInputError):
            extract_agenda("14/11/2025", "Juan Pérez")
        with pytest.raises(ExtractionInputError):
            extract_agenda("14/11/2025", None)

    def test_repeatable(self, sample_program_text, known_speakers):
        first = extract_agenda(sample_program_text, known_speakers)
        second = extract_agenda(sample_program_text, list(known_speakers))

        assert first == second


class TestExtractSpeakers:
    """Tests for speaker extraction."""

    def test_primary_pass(self, sample_speakers_text):
        report = run_speaker_extraction(sample_speakers_text)

        assert report.trace.strategy == ExtractionStrategy.PRIMARY
        assert [s.name for s in report.speakers][:2] == ["Ana Gómez", "Luis Ruiz"]

    def test_fallback_pass(self):
        text = "ANA GÓMEZ\nLUIS RUIZ\n123 Main Street"

        report = run_speaker_extraction(text)

        assert report.trace.strategy == ExtractionStrategy.FALLBACK
        assert [s.name for s in report.speakers] == ["ANA GÓMEZ", "LUIS RUIZ"]
        assert {s.bio for s in report.speakers} == {"Ponente en el evento"}
        assert {s.specialty for s in report.speakers} == {"Medicina"}

    def test_nothing_found(self):
        report = run_speaker_extraction("123\n456")

        assert report.speakers == []
        assert report.trace.strategy == ExtractionStrategy.NONE
        assert report.trace.excerpt == "123\n456"

    def test_rejects_non_string_text(self):
        with pytest.raises(ExtractionInputError):
            extract_speakers(42)

    def test_placeholders_come_from_settings(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("DEFAULT_SPECIALTY", "Cardiología")
        monkeypatch.setenv("FALLBACK_SPEAKER_BIO", "Invitado")
        get_settings.cache_clear()

        primary = extract_speakers("Dr. Luis Ruiz")
        fallback = extract_speakers("LUIS RUIZ")

        assert primary[0].specialty == "Cardiología"
        assert fallback[0].bio == "Invitado"

    def test_excerpt_length_from_settings(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("DIAGNOSTIC_EXCERPT_CHARS", "5")
        get_settings.cache_clear()

        report = run_speaker_extraction("12345678")

        assert report.trace.excerpt == "12345"


class TestCatalogOrder:
    """Tests for deterministic speaker resolution through the pipeline."""

    def test_overlapping_names(self):
        text = "14/11/2025\n10:00\nTaller práctico Ana Gómez Ruiz"
        catalog = [
            KnownSpeaker(id="short", name="Ana Gómez"),
            KnownSpeaker(id="long", name="Ana Gómez Ruiz"),
        ]

        items = extract_agenda(text, catalog)

        assert items[0].speaker_ids == ["short", "long"]
        assert items[0].title == "Taller práctico"
        assert items[0].type == AgendaItemType.WORKSHOP
