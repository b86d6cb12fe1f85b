"""Pytest configuration and fixtures."""

import pytest

from responder_analysis.models.outcome import PatientOutcome


def _make_outcome(
    patient_id: str = "p1",
    baseline: float = 10,
    latest: float = 5,
    zinc: bool = False,
    zinc_level: float | None = None,
) -> PatientOutcome:
    return PatientOutcome(
        patient_id=patient_id,
        baseline_seizure_per_month=baseline,
        latest_seizure_per_month=latest,
        zinc_supplementation=zinc,
        baseline_zinc_level=zinc_level,
    )


@pytest.fixture
def three_patients() -> list[PatientOutcome]:
    """Two supplemented responders and one unchanged control."""
    return [
        _make_outcome("p1", baseline=10, latest=4, zinc=True),
        _make_outcome("p2", baseline=8, latest=8, zinc=False),
        _make_outcome("p3", baseline=20, latest=5, zinc=True),
    ]


@pytest.fixture
def zinc_cohort() -> list[PatientOutcome]:
    """Six patients split across supplementation and zinc status."""
    return [
        _make_outcome("z1", baseline=12, latest=3, zinc=True, zinc_level=62),
        _make_outcome("z2", baseline=6, latest=2, zinc=True, zinc_level=71),
        _make_outcome("z3", baseline=9, latest=6, zinc=True, zinc_level=95),
        _make_outcome("c1", baseline=10, latest=9, zinc=False, zinc_level=88),
        _make_outcome("c2", baseline=4, latest=5, zinc=False, zinc_level=102),
        _make_outcome("c3", baseline=7, latest=7, zinc=False),
    ]


@pytest.fixture
def three_patients_json() -> list[dict]:
    """Outcomes as exported by the document store (camelCase keys)."""
    return [
        {
            "patientId": "p1",
            "baselineSeizurePerMonth": 10,
            "latestSeizurePerMonth": 4,
            "zincSupplementation": True,
        },
        {
            "patientId": "p2",
            "baselineSeizurePerMonth": 8,
            "latestSeizurePerMonth": 8,
            "zincSupplementation": False,
        },
        {
            "patientId": "p3",
            "baselineSeizurePerMonth": 20,
            "latestSeizurePerMonth": 5,
            "zincSupplementation": True,
        },
    ]


@pytest.fixture
def make_outcome():
    """Factory for PatientOutcome with readable keyword names."""
    return _make_outcome
