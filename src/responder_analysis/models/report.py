"""Analysis report model."""

from responder_analysis.models.base import FrozenModel
from responder_analysis.models.stats import (
    MannWhitneyResult,
    ResponderRateResult,
    SeizureChangeStats,
)


class AnalysisReport(FrozenModel):
    """Everything the analysis screen shows for one set of patients."""

    analysed_patients: int
    responder_rate: ResponderRateResult
    seizure_change: SeizureChangeStats | None = None
    supplementation_test: MannWhitneyResult | None = None  # zinc vs. control
    deficiency_test: MannWhitneyResult | None = None  # deficient vs. normal
