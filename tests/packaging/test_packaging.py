"""Packaging correctness verification for json-flex-diff.

Tests validate:
- Base install imports cleanly and the public API works
- py.typed marker is present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the base install exposes a working API."""

    def test_import_json_flex_diff(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import json_flex_diff

        assert hasattr(json_flex_diff, "diff")
        assert hasattr(json_flex_diff, "parse_flexible")
        assert hasattr(json_flex_diff, "summary_message")

    def test_diff_basic(self):  # type: ignore[no-untyped-def]
        """diff() works with the default config."""
        from json_flex_diff import diff

        result = diff({"a": 1}, {"a": 1})
        assert result is not None
        assert not result.summary.has_changes

    def test_parse_flexible_basic(self):  # type: ignore[no-untyped-def]
        """parse_flexible() accepts a Python repr."""
        from json_flex_diff import parse_flexible

        assert parse_flexible("{'a': None}") == {"a": None}

    def test_subpackages_import(self):  # type: ignore[no-untyped-def]
        """Subpackages import successfully."""
        from json_flex_diff.algorithm import greedy_match
        from json_flex_diff.layout import render
        from json_flex_diff.parser import FlexibleParser

        assert callable(greedy_match)
        assert callable(render)
        assert FlexibleParser().parse("[]") == []


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        try:
            result = subprocess.run(
                ["poetry", "build", "-f", "wheel"],
                cwd=str(PROJECT_ROOT),
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            pytest.skip("poetry is not installed")
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """py.typed marker must be included in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            py_typed_files = [n for n in names if n.endswith("py.typed")]
            assert py_typed_files, f"py.typed not found in wheel. Contents: {names}"

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """__pycache__ directories must not be in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """All source modules must be present in the wheel."""
        expected_modules = [
            "json_flex_diff/__init__.py",
            "json_flex_diff/api.py",
            "json_flex_diff/canonical.py",
            "json_flex_diff/engine.py",
            "json_flex_diff/errors.py",
            "json_flex_diff/result.py",
            "json_flex_diff/algorithm/__init__.py",
            "json_flex_diff/algorithm/config.py",
            "json_flex_diff/algorithm/fields.py",
            "json_flex_diff/algorithm/matcher.py",
            "json_flex_diff/algorithm/similarity.py",
            "json_flex_diff/layout/__init__.py",
            "json_flex_diff/layout/printer.py",
            "json_flex_diff/layout/spans.py",
            "json_flex_diff/parser/__init__.py",
            "json_flex_diff/parser/flexible.py",
            "json_flex_diff/parser/rewrites.py",
            "json_flex_diff/integrations/__init__.py",
            "json_flex_diff/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """Wheel metadata must include correct package info."""
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "json-flex-diff" in metadata.lower() or "json_flex_diff" in metadata.lower()
            assert "0.1.0" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for json-flex-diff."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        eps = [ep for ep in pytest11_eps if "json_flex_diff" in str(ep.value)]
        assert eps, (
            f"No pytest11 entry point found for json-flex-diff. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_json_no_diff fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("json_flex_diff.integrations._pytest_plugin")
        assert hasattr(mod, "assert_json_no_diff")
        assert callable(mod.assert_json_no_diff)

    def test_plugin_discovery_via_pytest(self):  # type: ignore[no-untyped-def]
        """pytest --fixtures should list assert_json_no_diff."""
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "--fixtures", "-q"],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert "assert_json_no_diff" in result.stdout, (
            f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
        )


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import json_flex_diff

        assert json_flex_diff.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import json_flex_diff

        expected = {
            "MATCH_THRESHOLD",
            "ArrayDiffResult",
            "ChangeEntry",
            "ChangeType",
            "DiffConfig",
            "DiffKind",
            "DiffResult",
            "DiffSummary",
            "FieldDiff",
            "FlexibleParser",
            "LineChange",
            "LineRange",
            "MatchStrategy",
            "ModifiedValue",
            "ObjectDiffResult",
            "ParseError",
            "SemanticDiffEngine",
            "canonicalize",
            "diff",
            "is_match",
            "parse_and_format",
            "parse_flexible",
            "similarity_score",
            "summary_message",
        }
        actual = set(json_flex_diff.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
