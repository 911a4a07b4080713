"""
Tests for the scripts/run_tests.py command builder.
"""

import importlib.util
from argparse import Namespace
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "run_tests.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("run_tests", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _args(**overrides):
    values = {"keywords": [], "verbose": False, "exitfirst": False, "coverage": False, "html": False}
    values.update(overrides)
    return Namespace(**values)


class TestBuildCommand:
    """Tests for build_command."""

    def test_quiet_by_default(self):
        cmd = _load_script().build_command(_args())

        assert cmd == ["uv", "run", "--extra", "test", "pytest", "-q"]

    def test_keywords_and_verbose(self):
        cmd = _load_script().build_command(_args(keywords=["token", "routers_users"], verbose=True))

        assert "-v" in cmd
        assert cmd[-2:] == ["-k", "token or routers_users"]

    def test_coverage_targets_package(self):
        cmd = _load_script().build_command(_args(coverage=True, html=True, exitfirst=True))

        assert "-x" in cmd
        assert "--cov=fusionauth_mcp" in cmd
        assert "--cov-report=html" in cmd

    def test_html_needs_coverage(self):
        assert "--cov-report=html" not in _load_script().build_command(_args(html=True))
