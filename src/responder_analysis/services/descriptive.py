"""Descriptive statistics of percent change in seizure frequency."""

import logging
from collections.abc import Sequence

import numpy as np

from responder_analysis.helpers.change_helpers import median, seizure_change_rate
from responder_analysis.models.outcome import PatientOutcome
from responder_analysis.models.stats import SeizureChangeStats

logger = logging.getLogger(__name__)


def describe(patients: Sequence[PatientOutcome]) -> SeizureChangeStats | None:
    """Mean, median, range and population SD of percent change.

    Returns None for an empty patient list.
    """
    if not patients:
        return None

    changes = np.array(
        [
            seizure_change_rate(p.baseline_seizure_per_month, p.latest_seizure_per_month)
            * 100
            for p in patients
        ],
        dtype=float,
    )
    logger.debug("Describing percent change for %d patients", len(changes))

    return SeizureChangeStats(
        mean=float(changes.mean()),
        median=median(changes.tolist()),
        min=float(changes.min()),
        max=float(changes.max()),
        # ddof=0: population standard deviation
        standard_deviation=float(changes.std(ddof=0)),
    )
