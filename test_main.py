import pytest
import main
from recovery.examples import EXAMPLE_TEST_CASE_1


@pytest.fixture
def quiet_settings(monkeypatch):
    settings = {"tolerance": 1e-10, "showValidation": "yes", "copySecret": "no", "secretCopyTime": 0}
    monkeypatch.setattr(main, "settings", settings)
    return settings


def test_report_prints_secret(quiet_settings, capsys):
    main.report([EXAMPLE_TEST_CASE_1])
    out = capsys.readouterr().out
    assert "Secret: 3" in out
    assert "Validation: PASSED" in out


@pytest.mark.parametrize("tolerance", [-1, "abc", None])
def test_report_with_bad_tolerance_setting(quiet_settings, capsys, tolerance):
    quiet_settings["tolerance"] = tolerance
    main.report([EXAMPLE_TEST_CASE_1])
    out = capsys.readouterr().out
    assert "Invalid tolerance setting" in out
    assert "Secret" not in out


def test_report_shows_failures(quiet_settings, capsys):
    main.report([{"keys": {"n": 4}}])
    out = capsys.readouterr().out
    assert "Error (malformed_test_case)" in out


def test_solve_file_with_bad_contents(quiet_settings, monkeypatch, capsys, tmp_path):
    path = tmp_path / "cases.json"
    path.write_text(r'{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "\q"}}')
    monkeypatch.setattr("builtins.input", lambda prompt: str(path))
    main.solve_file()
    out = capsys.readouterr().out
    assert f"Could not read {path}" in out


def test_solve_file_missing(quiet_settings, monkeypatch, capsys, tmp_path):
    monkeypatch.setattr("builtins.input", lambda prompt: str(tmp_path / "nope.json"))
    main.solve_file()
    assert "File not found" in capsys.readouterr().out
