"""
test_run_tests.py
-----------------
Tests for the auto-test runner's exit status.
"""

import argparse
import subprocess

import pytest

import run_tests


@pytest.fixture
def runner():
    args = argparse.Namespace(keyword=None, coverage=False, fast=False, run_once=True)
    return run_tests.TestRunner(args)


@pytest.mark.parametrize("returncode, expected", [(0, True), (1, False), (5, False)])
def test_run_reports_pytest_result(monkeypatch, runner, returncode, expected):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, returncode)

    monkeypatch.setattr(run_tests.subprocess, "run", fake_run)

    assert runner.run_tests() is expected
    assert calls[0][1:4] == ["-m", "pytest", "-v"]


def test_fast_skips_integration(monkeypatch, runner):
    calls = []
    monkeypatch.setattr(run_tests.subprocess, "run",
                        lambda cmd, **kwargs: calls.append(cmd) or subprocess.CompletedProcess(cmd, 0))
    runner.args.fast = True

    runner.run_tests()

    assert calls[0][-2:] == ["-m", "not integration"]
