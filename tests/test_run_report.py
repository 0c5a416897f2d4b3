"""Tests for the RunReport logic."""

import json
from pathlib import Path

from lit_docs.run_report import ERROR, NOT_A_COMPONENT, WRITTEN, FileResult, RunReport, config_hash


def test_run_report_generation(tmp_path: Path) -> None:
    """Verify that the run report is generated correctly."""
    report = RunReport("hash123")
    report.add_result(
        FileResult(
            source="a.lit.ts",
            status=WRITTEN,
            output="component-docs.json",
            tag_name="a-el",
            counts={"properties": 2, "events": 1},
        )
    )
    report.add_result(
        FileResult(
            source="b.lit.ts",
            status=WRITTEN,
            output="component-docs.json",
            tag_name="b-el",
            counts={"properties": 3, "events": 0},
        )
    )
    report.add_result(FileResult(source="c.lit.ts", status=NOT_A_COMPONENT))
    report.add_result(FileResult(source="d.lit.ts", status=ERROR, error="boom"))

    report_path = tmp_path / "report.json"
    report.generate_report(str(report_path))

    content = json.loads(report_path.read_text(encoding="utf-8"))
    assert content["meta"]["config_hash"] == "hash123"
    assert content["meta"]["total_files"] == 4  # noqa: PLR2004
    assert content["results"][3] == {
        "source": "d.lit.ts",
        "status": "error",
        "output": None,
        "tag_name": None,
        "counts": None,
        "error": "boom",
    }

    stats = content["stats"]
    assert stats["by_status"] == {"written": 2, "not_a_component": 1, "error": 1}
    assert stats["components"] == 2  # noqa: PLR2004
    assert stats["totals"] == {"properties": 5, "events": 1}


def test_config_hash_stability() -> None:
    """Verify that the hash ignores key order and logging settings."""
    config1 = {"b": 2, "a": 1, "output": {"y": 2, "x": 1}, "log_level": "DEBUG"}
    config2 = {"a": 1, "b": 2, "output": {"x": 1, "y": 2}, "log_level": "WARNING"}
    assert config_hash(config1) == config_hash(config2)
    assert config_hash(config1) != config_hash({"a": 1})
    assert len(config_hash(config1)) == 64  # noqa: PLR2004
