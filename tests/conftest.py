"""Pytest configuration and fixtures."""

import pytest

from program_extractor.models import KnownSpeaker


@pytest.fixture
def known_speakers() -> list[KnownSpeaker]:
    """Speaker catalog in registration order."""
    return [
        KnownSpeaker(id="s1", name="Juan Pérez"),
        KnownSpeaker(id="s2", name="Ana Gómez"),
    ]


@pytest.fixture
def sample_program_text() -> str:
    """Two-day program as recovered from a PDF (extra blank lines and padding kept)."""
    return """
CONGRESO NACIONAL DE CARDIOLOGÍA 2025
Programa académico

14/11/2025
RIESGO CARDIOVASCULAR
   08:00
08:30
Registro y bienvenida

09:00
Manejo de riesgo cardiovascular Dr. Juan Pérez
Revisión de guías actuales y casos clínicos.
Moderador: Dr. Pedro Díaz
10:30
Coffee break
LÍPIDOS
11:00
Nuevas terapias en dislipidemia - Dra. Ana Gómez
Lugar: Salón Principal
13:00
Almuerzo
15/11/2025
17:00
Preguntas y cierre
"""


@pytest.fixture
def scenario_a_text() -> str:
    """Minimal agenda with a start/end pair and a speaker-tagged session."""
    return "\n".join(
        [
            "14/11/2025",
            "08:00",
            "08:10",
            "Bienvenida",
            "09:00",
            "Manejo de Dislipidemia Dr. Juan Pérez",
            "Discusión de casos clínicos.",
        ]
    )


@pytest.fixture
def sample_speakers_text() -> str:
    """Speaker section of a program."""
    return """
PONENTES
Dr. Ana Gómez, Cardiología
Especialista en insuficiencia cardiaca.
Jefa del servicio de cardiología del Hospital Central.
Dr. Luis Ruiz
especialidad: Endocrinología
Dra. María López
Investigadora en lípidos y aterosclerosis con 20 años de experiencia.
Carlos Méndez Soto
"""
