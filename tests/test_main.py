from pathlib import Path

import pytest

import rotation_report.__main__ as report_main

EXPORT = Path(__file__).with_name("data") / "rotation_export.json"


@pytest.fixture
def offline_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.delenv("PAGERDUTY_API_TOKEN", raising=False)
    monkeypatch.delenv("ROTATION_REPORT_CONFIG", raising=False)
    monkeypatch.setenv("ROTATION_REPORT_SOURCE", "FILE")
    monkeypatch.setenv("ROTATION_REPORT_DATA", str(EXPORT))
    return monkeypatch


def test_main_prints_report(
    offline_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert report_main.main() == 0
    out = capsys.readouterr().out
    assert out.startswith("Rotation report for March 04 - March 11:\n")
    assert "  7 incidents, 2 unresolved (+40.0%)\n" in out


def test_main_reads_config(
    offline_env: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config = tmp_path / "report.yaml"
    config.write_text("top_triggers: 1\n")
    offline_env.setenv("ROTATION_REPORT_CONFIG", str(config))
    assert report_main.main() == 0
    out = capsys.readouterr().out
    assert out.endswith("Top triggers:\n  1 'Replica lag' (+0.0%)\n")


@pytest.mark.parametrize("level,status", [(4, 1), (2, 2)])
def test_main_exit_status_without_schedule(
    offline_env: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    level: int,
    status: int,
) -> None:
    config = tmp_path / "report.yaml"
    config.write_text(f"target_level: {level}\n")
    offline_env.setenv("ROTATION_REPORT_CONFIG", str(config))
    assert report_main.main() == status
    assert capsys.readouterr().out.startswith("Couldn't find")
