"""Command-line interface for responder analysis."""

import json
import logging
import math
from pathlib import Path

import click
from pydantic import TypeAdapter, ValidationError

from responder_analysis.config import get_settings
from responder_analysis.models.outcome import PatientOutcome
from responder_analysis.models.records import PatientRecord
from responder_analysis.services.analysis import run_analysis
from responder_analysis.services.outcome_builder import build_outcomes
from responder_analysis.services.rank_sum import mann_whitney_u

logger = logging.getLogger(__name__)

_outcomes_adapter = TypeAdapter(list[PatientOutcome])
_records_adapter = TypeAdapter(list[PatientRecord])


def _parse_values(raw: str) -> list[float]:
    try:
        values = [float(v) for v in raw.split(",") if v.strip()]
    except ValueError as e:
        raise click.BadParameter(f"expected comma-separated numbers: {e}") from e
    if not all(math.isfinite(v) for v in values):
        raise click.BadParameter(f"values must be finite numbers, got {raw!r}")
    return values


@click.group()
@click.version_option(package_name="responder-analysis")
def main():
    """Responder analysis: 50% responder rates and rank-sum comparisons."""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--records",
    is_flag=True,
    help="Input holds patient records (seizure logs and lab results) instead of outcomes",
)
@click.option("-o", "--output", type=click.Path(), help="Output file path (JSON)")
def analyze(input_path: str, records: bool, output: str | None):
    """Run the responder analysis on a JSON list of patients."""
    raw = Path(input_path).read_text()
    try:
        if records:
            outcomes = build_outcomes(_records_adapter.validate_json(raw))
        else:
            outcomes = _outcomes_adapter.validate_json(raw)
    except ValidationError as e:
        raise click.ClickException(f"Invalid input in {input_path}:\n{e}") from e

    logger.debug("Loaded %d outcomes from %s", len(outcomes), input_path)
    report = run_analysis(outcomes)
    overall = report.responder_rate.overall
    click.echo(f"Analysed patients: {report.analysed_patients}")
    if overall.rate is not None:
        click.echo(
            f"50% responders: {overall.responders}/{overall.total} ({overall.rate:.1%})"
        )
    for label, test in (
        ("Zinc vs. control", report.supplementation_test),
        ("Deficient vs. normal", report.deficiency_test),
    ):
        if test is None:
            click.echo(f"{label}: not enough patients")
        else:
            click.echo(f"{label}: U={test.u:.1f} z={test.z:.3f} p={test.p:.4f}")

    if output:
        Path(output).write_text(
            json.dumps(
                report.model_dump(mode="json", by_alias=True),
                indent=get_settings().json_indent,
                ensure_ascii=False,
            )
        )
        click.echo(f"\nResults saved to: {output}")


@main.command()
@click.argument("group1")
@click.argument("group2")
def compare(group1: str, group2: str):
    """Mann-Whitney U test of two comma-separated value lists."""
    result = mann_whitney_u(_parse_values(group1), _parse_values(group2))
    if result is None:
        raise click.ClickException("Each group needs at least 2 values")
    click.echo(f"U={result.u:.1f} z={result.z:.4f} p={result.p:.4f}")


if __name__ == "__main__":
    main()
