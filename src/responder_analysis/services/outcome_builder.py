"""
Assemble PatientOutcome inputs from longitudinal patient records.

Baseline and latest seizure counts come from the first and last monthly
diary entries in chronological order. Supplementation is flagged if any lab
result records it; the baseline zinc level is the earliest non-null serum
zinc reading.
"""

import logging
from collections.abc import Iterable

from responder_analysis.constants import MIN_SEIZURE_LOGS, ZINC_DEFICIENCY_CUTOFF
from responder_analysis.models.outcome import PatientOutcome
from responder_analysis.models.records import LabResult, PatientRecord

logger = logging.getLogger(__name__)


def baseline_zinc_level(lab_results: Iterable[LabResult]) -> float | None:
    """Earliest non-null serum zinc, or None if never measured."""
    for lab in sorted(lab_results, key=lambda lab: lab.date):
        if lab.serum_zinc is not None:
            return lab.serum_zinc
    return None


def build_outcome(record: PatientRecord) -> PatientOutcome | None:
    """Baseline-vs-latest outcome for one patient, or None with too few logs."""
    if len(record.seizure_logs) < MIN_SEIZURE_LOGS:
        return None

    # (year, month) ordering; year/month compared numerically, never as text
    logs = sorted(record.seizure_logs, key=lambda log: log.period)
    zinc_level = baseline_zinc_level(record.lab_results)

    return PatientOutcome(
        patient_id=record.patient_id,
        baseline_seizure_per_month=logs[0].seizure_count,
        latest_seizure_per_month=logs[-1].seizure_count,
        zinc_supplementation=any(lab.zinc_supplementation for lab in record.lab_results),
        baseline_zinc_level=zinc_level,
        has_zinc_deficiency=(
            zinc_level < ZINC_DEFICIENCY_CUTOFF if zinc_level is not None else None
        ),
    )


def build_outcomes(records: Iterable[PatientRecord]) -> list[PatientOutcome]:
    """Outcomes for every patient with enough diary entries, in record order."""
    outcomes: list[PatientOutcome] = []
    skipped = 0
    for record in records:
        outcome = build_outcome(record)
        if outcome is None:
            skipped += 1
            continue
        outcomes.append(outcome)

    if skipped:
        logger.info(
            "Skipped %d patient(s) with fewer than %d seizure logs",
            skipped,
            MIN_SEIZURE_LOGS,
        )
    return outcomes
