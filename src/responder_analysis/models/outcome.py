"""Per-patient outcome models."""

from enum import Enum
from typing import Any

from pydantic import Field, model_validator

from responder_analysis.constants import ZINC_DEFICIENCY_CUTOFF
from responder_analysis.models.base import FrozenModel


class ZincStatus(str, Enum):
    DEFICIENT = "deficient"  # baseline serum zinc < 80
    NORMAL = "normal"  # baseline serum zinc >= 80
    UNKNOWN = "unknown"  # no baseline measurement


class PatientOutcome(FrozenModel):
    """Baseline vs. latest seizure frequency for one patient.

    Assembled upstream from a patient's seizure logs and lab results (see
    ``services.outcome_builder``). Counts must be finite and non-negative;
    anything else is rejected at construction instead of producing NaN
    downstream.

    ``has_zinc_deficiency`` is tri-state: ``None`` means no baseline zinc
    reading exists. When omitted but ``baseline_zinc_level`` is given, it is
    derived from the 80 µg/dL cutoff.
    """

    patient_id: str
    baseline_seizure_per_month: float = Field(ge=0, allow_inf_nan=False)
    latest_seizure_per_month: float = Field(ge=0, allow_inf_nan=False)
    zinc_supplementation: bool = False
    baseline_zinc_level: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    has_zinc_deficiency: bool | None = None

    @model_validator(mode="before")
    @classmethod
    def derive_zinc_deficiency(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        flag_keys = ("has_zinc_deficiency", "hasZincDeficiency")
        if any(values.get(key) is not None for key in flag_keys):
            return values
        level = next(
            (
                values[key]
                for key in ("baseline_zinc_level", "baselineZincLevel")
                if values.get(key) is not None
            ),
            None,
        )
        if not isinstance(level, (int, float)) or isinstance(level, bool):
            return values
        # null flag means unset under either spelling
        values = {k: v for k, v in values.items() if k not in flag_keys}
        values["has_zinc_deficiency"] = level < ZINC_DEFICIENCY_CUTOFF
        return values

    @property
    def zinc_status(self) -> ZincStatus:
        if self.has_zinc_deficiency is True:
            return ZincStatus.DEFICIENT
        if self.has_zinc_deficiency is False:
            return ZincStatus.NORMAL
        return ZincStatus.UNKNOWN


class ResponderResult(PatientOutcome):
    """A PatientOutcome with its computed change rate and responder label."""

    change_rate: float  # fractional reduction; negative means seizures increased
    is_responder: bool

    @property
    def percent_change(self) -> float:
        return self.change_rate * 100
