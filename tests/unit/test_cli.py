"""Unit tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from responder_analysis.cli.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_analyze_prints_summary(runner, tmp_path: Path, three_patients_json):
    input_path = tmp_path / "patients.json"
    input_path.write_text(json.dumps(three_patients_json))

    result = runner.invoke(main, ["analyze", str(input_path)])

    assert result.exit_code == 0, result.output
    assert "Analysed patients: 3" in result.output
    assert "50% responders: 2/3 (66.7%)" in result.output
    assert "Zinc vs. control: not enough patients" in result.output


def test_analyze_writes_camel_case_json(runner, tmp_path: Path, three_patients_json):
    input_path = tmp_path / "patients.json"
    output_path = tmp_path / "report.json"
    input_path.write_text(json.dumps(three_patients_json))

    result = runner.invoke(main, ["analyze", str(input_path), "-o", str(output_path)])

    assert result.exit_code == 0, result.output
    report = json.loads(output_path.read_text())
    assert report["analysedPatients"] == 3
    assert report["responderRate"]["overall"]["rate"] == pytest.approx(2 / 3)
    assert report["responderRate"]["zincDeficientGroup"]["rate"] is None
    assert report["supplementationTest"] is None
    assert len(report["responderRate"]["patientDetails"]) == 3


def test_analyze_from_records(runner, tmp_path: Path):
    records = [
        {
            "patientId": "p1",
            "seizureLogs": [
                {"year": 2024, "month": 1, "seizureCount": 10},
                {"year": 2024, "month": 6, "seizureCount": 2},
            ],
            "labResults": [
                {"date": "2024-01-05T00:00:00", "serumZinc": 65, "zincSupplementation": True}
            ],
        },
        {"patientId": "p2", "seizureLogs": [{"year": 2024, "month": 1, "seizureCount": 3}]},
    ]
    input_path = tmp_path / "records.json"
    input_path.write_text(json.dumps(records))

    result = runner.invoke(main, ["analyze", "--records", str(input_path)])

    assert result.exit_code == 0, result.output
    assert "Analysed patients: 1" in result.output
    assert "50% responders: 1/1 (100.0%)" in result.output


def test_analyze_rejects_invalid_counts(runner, tmp_path: Path, three_patients_json):
    three_patients_json[0]["latestSeizurePerMonth"] = -3
    input_path = tmp_path / "patients.json"
    input_path.write_text(json.dumps(three_patients_json))

    result = runner.invoke(main, ["analyze", str(input_path)])

    assert result.exit_code != 0
    assert "Invalid input" in result.output


def test_compare_prints_statistics(runner):
    result = runner.invoke(main, ["compare", "1,2,3", "4,5,6"])

    assert result.exit_code == 0, result.output
    assert "U=0.0" in result.output
    assert "z=-1.9640" in result.output


def test_compare_requires_two_values_per_group(runner):
    result = runner.invoke(main, ["compare", "1", "4,5,6"])

    assert result.exit_code != 0
    assert "at least 2 values" in result.output


def test_compare_rejects_non_numeric(runner):
    result = runner.invoke(main, ["compare", "1,x", "4,5"])
    assert result.exit_code != 0


@pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
def test_compare_rejects_non_finite(runner, value):
    result = runner.invoke(main, ["compare", f"1,{value}", "2,3"])

    assert result.exit_code == 2
    assert "finite" in result.output
