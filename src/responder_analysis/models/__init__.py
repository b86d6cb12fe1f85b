"""Data models for responder analysis."""

from responder_analysis.models.outcome import PatientOutcome, ResponderResult, ZincStatus
from responder_analysis.models.records import LabResult, PatientRecord, SeizureLog
from responder_analysis.models.report import AnalysisReport
from responder_analysis.models.stats import (
    GroupStats,
    MannWhitneyResult,
    ResponderRateResult,
    SeizureChangeStats,
)

__all__ = [
    "AnalysisReport",
    "GroupStats",
    "LabResult",
    "MannWhitneyResult",
    "PatientOutcome",
    "PatientRecord",
    "ResponderRateResult",
    "ResponderResult",
    "SeizureChangeStats",
    "SeizureLog",
    "ZincStatus",
]
