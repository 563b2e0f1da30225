"""Unit tests for the run_tests.py suite selector."""

import importlib.util
from argparse import Namespace
from pathlib import Path

import pytest

_SCRIPT = Path(__file__).resolve().parents[2] / "run_tests.py"
_spec = importlib.util.spec_from_file_location("run_tests", _SCRIPT)
run_tests = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(run_tests)


def _args(**overrides):
    values = dict(suite=None, all=False, taichi=False, no_taichi=False,
                  fast=False, verbose=False, coverage=False)
    values.update(overrides)
    return Namespace(**values)


@pytest.mark.unit
def test_default_options_are_quiet():
    assert run_tests.build_options(_args()) == ["-q"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "flag, expression",
    [("taichi", "gpu"), ("no_taichi", "not gpu"), ("fast", "not slow")],
)
def test_marker_selection(flag, expression):
    opts = run_tests.build_options(_args(**{flag: True}))
    assert opts[-2:] == ["-m", expression]


@pytest.mark.unit
def test_coverage_targets_package():
    opts = run_tests.build_options(_args(coverage=True, verbose=True))
    assert opts[0] == "-v"
    assert "--cov=pyfastnoise" in opts


@pytest.mark.unit
def test_main_runs_selected_suites(monkeypatch):
    calls = []
    monkeypatch.setattr(run_tests, "run_pytest", lambda a, d: calls.append(a) or True)
    monkeypatch.setattr("sys.argv", ["run_tests.py", "--taichi"])
    assert run_tests.main() == 0
    assert [c[-1] for c in calls] == ["tests/test_imports.py", "tests/unit/"]
    assert all(c[1:3] == ["-m", "gpu"] for c in calls)


@pytest.mark.unit
def test_main_reports_failure(monkeypatch):
    monkeypatch.setattr(run_tests, "run_pytest", lambda a, d: "integration" not in a[-1])
    monkeypatch.setattr("sys.argv", ["run_tests.py", "--all"])
    assert run_tests.main() == 1


@pytest.mark.unit
def test_no_tests_collected_counts_as_success(monkeypatch):
    class Done:
        returncode = run_tests.NO_TESTS_COLLECTED

    monkeypatch.setattr(run_tests.subprocess, "run", lambda cmd: Done())
    assert run_tests.run_pytest(["-m", "gpu", "tests/test_imports.py"], "Import tests")
