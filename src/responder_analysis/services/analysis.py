"""End-to-end responder analysis: cohorts, descriptive stats and comparisons."""

import logging
from collections.abc import Sequence

from responder_analysis.models.outcome import PatientOutcome
from responder_analysis.models.report import AnalysisReport
from responder_analysis.services.descriptive import describe
from responder_analysis.services.rank_sum import mann_whitney_u
from responder_analysis.services.responder import Cohort, aggregate, cohort_changes

logger = logging.getLogger(__name__)


def run_analysis(outcomes: Sequence[PatientOutcome]) -> AnalysisReport:
    """Aggregate cohorts and compare zinc vs. control, deficient vs. normal.

    Both comparisons run the rank-sum test on percent-change values; either
    is None when one side has fewer than two patients.
    """
    logger.info("Running responder analysis on %d patients", len(outcomes))
    responder_rate = aggregate(outcomes)

    supplementation_test = mann_whitney_u(
        cohort_changes(responder_rate, Cohort.ZINC),
        cohort_changes(responder_rate, Cohort.CONTROL),
    )
    deficiency_test = mann_whitney_u(
        cohort_changes(responder_rate, Cohort.ZINC_DEFICIENT),
        cohort_changes(responder_rate, Cohort.ZINC_NORMAL),
    )

    return AnalysisReport(
        analysed_patients=len(outcomes),
        responder_rate=responder_rate,
        seizure_change=describe(outcomes),
        supplementation_test=supplementation_test,
        deficiency_test=deficiency_test,
    )
