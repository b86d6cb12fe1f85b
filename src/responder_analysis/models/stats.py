"""Statistical result models."""

from pydantic import Field

from responder_analysis.models.base import FrozenModel
from responder_analysis.models.outcome import ResponderResult


class GroupStats(FrozenModel):
    """Responder counts and percent-change summary for one cohort.

    ``rate`` and the change summaries are ``None`` exactly when the cohort
    is empty.
    """

    total: int = Field(ge=0)
    responders: int = Field(ge=0)
    rate: float | None = None
    mean_seizure_change: float | None = None
    median_seizure_change: float | None = None

    @classmethod
    def empty(cls) -> "GroupStats":
        return cls(total=0, responders=0)


class ResponderRateResult(FrozenModel):
    """Five-cohort 50% responder analysis."""

    overall: GroupStats
    zinc_group: GroupStats  # zinc supplementation
    control_group: GroupStats  # no supplementation
    zinc_deficient_group: GroupStats  # baseline zinc < 80
    zinc_normal_group: GroupStats  # baseline zinc >= 80
    patient_details: list[ResponderResult] = []


class MannWhitneyResult(FrozenModel):
    """Mann-Whitney U test output (normal approximation, two-sided)."""

    u: float  # smaller of U1 and U2
    z: float
    p: float


class SeizureChangeStats(FrozenModel):
    """Distribution of percent change in seizure frequency."""

    mean: float
    median: float
    min: float
    max: float
    standard_deviation: float  # population SD (divide by N)
