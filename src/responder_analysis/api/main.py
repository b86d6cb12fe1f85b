"""FastAPI application."""

from fastapi import FastAPI

from responder_analysis import __version__
from responder_analysis.models.outcome import PatientOutcome
from responder_analysis.models.records import PatientRecord
from responder_analysis.models.report import AnalysisReport
from responder_analysis.services.analysis import run_analysis
from responder_analysis.services.outcome_builder import build_outcomes

app = FastAPI(
    title="Responder Analysis API",
    description="50% responder rates and rank-sum comparisons for seizure outcomes",
    version=__version__,
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/analysis/responder-rate", response_model=AnalysisReport)
def analyse_outcomes(outcomes: list[PatientOutcome]) -> AnalysisReport:
    """Analyse pre-assembled baseline/latest outcomes."""
    return run_analysis(outcomes)


@app.post("/analysis/records", response_model=AnalysisReport)
def analyse_records(records: list[PatientRecord]) -> AnalysisReport:
    """Assemble outcomes from seizure logs and lab results, then analyse."""
    return run_analysis(build_outcomes(records))
