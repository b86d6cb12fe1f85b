"""Source records used to assemble patient outcomes."""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field, model_validator

from responder_analysis.models.base import FrozenModel

Timepoint = Literal["baseline", "1month", "3months", "6months", "12months", "other"]


class _StoredRecord(FrozenModel):
    """Record exported from the document store, where unset fields arrive as null."""

    @model_validator(mode="before")
    @classmethod
    def coerce_nones(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        values = dict(values)
        for field_name, field_info in cls.model_fields.items():
            if field_info.is_required() or field_info.default is None:
                continue
            for key in (field_name, field_info.alias):
                if key in values and values[key] is None:
                    values[key] = field_info.default
        return values


class SeizureLog(_StoredRecord):
    """Monthly seizure diary entry."""

    year: int
    month: int = Field(ge=1, le=12)
    seizure_count: float = Field(ge=0, allow_inf_nan=False)
    severe_seizure_count: int = 0
    rescue_medication_count: int = 0
    hospitalization: bool = False
    seizure_free_days: int = 0
    aed_change: bool = False
    zinc_supplementation: bool = False
    latest_zinc_level: float | None = None
    notes: str = ""

    @property
    def period(self) -> tuple[int, int]:
        return (self.year, self.month)


class LabResult(_StoredRecord):
    """Blood test record.

    Only ``serum_zinc`` and ``zinc_supplementation`` feed the responder
    analysis; the remaining fields are carried so that records exported from
    the document store validate without trimming.
    """

    date: datetime
    timepoint: Timepoint = "other"
    fasting_morning: bool = False
    serum_zinc: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    serum_copper: float | None = None
    serum_iron: float | None = None
    zinc_supplementation: bool = False
    zinc_supplementation_start_date: datetime | None = None
    zinc_supplementation_dose: float | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    bmi: float | None = None
    zinc_copper_ratio: float | None = None
    notes: str = ""


class PatientRecord(FrozenModel):
    """A patient's longitudinal records as fetched from storage."""

    patient_id: str
    seizure_logs: list[SeizureLog] = []
    lab_results: list[LabResult] = []
