"""
50% responder classification and cohort aggregation.

A responder is a patient whose monthly seizure count fell by at least half
between the baseline and the latest diary entry. Patients are stratified into
five cohorts:

    overall          every analysable patient
    zinc             zinc supplementation recorded
    control          no supplementation
    zinc_deficient   baseline serum zinc < 80 µg/dL
    zinc_normal      baseline serum zinc >= 80 µg/dL

Patients without a baseline zinc reading fall in neither deficiency cohort.
"""

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from responder_analysis.constants import RESPONDER_THRESHOLD
from responder_analysis.helpers.change_helpers import mean, median, seizure_change_rate
from responder_analysis.models.outcome import PatientOutcome, ResponderResult
from responder_analysis.models.stats import GroupStats, ResponderRateResult

logger = logging.getLogger(__name__)


class Cohort(str, Enum):
    OVERALL = "overall"
    ZINC = "zinc"
    CONTROL = "control"
    ZINC_DEFICIENT = "zinc_deficient"
    ZINC_NORMAL = "zinc_normal"


COHORT_FILTERS: dict[Cohort, Callable[[ResponderResult], bool]] = {
    Cohort.OVERALL: lambda r: True,
    Cohort.ZINC: lambda r: r.zinc_supplementation,
    Cohort.CONTROL: lambda r: not r.zinc_supplementation,
    Cohort.ZINC_DEFICIENT: lambda r: r.has_zinc_deficiency is True,
    Cohort.ZINC_NORMAL: lambda r: r.has_zinc_deficiency is False,
}


def classify_patient(patient: PatientOutcome) -> ResponderResult:
    change_rate = seizure_change_rate(
        patient.baseline_seizure_per_month, patient.latest_seizure_per_month
    )
    return ResponderResult(
        **patient.model_dump(include=set(PatientOutcome.model_fields)),
        change_rate=change_rate,
        is_responder=change_rate >= RESPONDER_THRESHOLD,
    )


def classify(patients: Sequence[PatientOutcome]) -> list[ResponderResult]:
    """Label each patient as responder / non-responder, preserving order.

    Inputs are not modified; each result is a new model carrying the
    input fields plus ``change_rate`` and ``is_responder``.
    """
    return [classify_patient(p) for p in patients]


def select_cohort(
    results: Sequence[ResponderResult], cohort: Cohort
) -> list[ResponderResult]:
    keep = COHORT_FILTERS[cohort]
    return [r for r in results if keep(r)]


def cohort_changes(result: ResponderRateResult, cohort: Cohort) -> list[float]:
    """Percent-change values of one cohort, in patient order."""
    return [r.percent_change for r in select_cohort(result.patient_details, cohort)]


def group_stats(results: Sequence[ResponderResult]) -> GroupStats:
    """Responder count, rate and percent-change mean/median for a cohort."""
    if not results:
        return GroupStats.empty()

    responders = sum(1 for r in results if r.is_responder)
    changes = [r.percent_change for r in results]
    return GroupStats(
        total=len(results),
        responders=responders,
        rate=responders / len(results),
        mean_seizure_change=mean(changes),
        median_seizure_change=median(changes),
    )


def aggregate(patients: Sequence[PatientOutcome]) -> ResponderRateResult:
    """Run the 50% responder analysis across all five cohorts."""
    results = classify(patients)
    cohorts = {cohort: select_cohort(results, cohort) for cohort in Cohort}
    logger.debug(
        "Cohort sizes: %s",
        ", ".join(f"{c.value}={len(members)}" for c, members in cohorts.items()),
    )

    return ResponderRateResult(
        overall=group_stats(cohorts[Cohort.OVERALL]),
        zinc_group=group_stats(cohorts[Cohort.ZINC]),
        control_group=group_stats(cohorts[Cohort.CONTROL]),
        zinc_deficient_group=group_stats(cohorts[Cohort.ZINC_DEFICIENT]),
        zinc_normal_group=group_stats(cohorts[Cohort.ZINC_NORMAL]),
        patient_details=results,
    )
