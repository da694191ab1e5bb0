"""
Smoke tests to verify all critical dependencies are installed correctly.

These tests confirm that:
1. Python 3.11+ is installed
2. All core dependencies are importable
3. Project version is accessible

Run with: pytest tests/unit/test_smoke.py -v
"""

import sys


class TestPythonVersion:
    """Verify Python version requirements."""

    def test_python_311_or_higher(self) -> None:
        """Python 3.11+ is required."""
        assert sys.version_info >= (3, 11), (
            f"Python 3.11+ required, "
            f"got {sys.version_info.major}.{sys.version_info.minor}"
        )


class TestCoreDependencies:
    """Verify core dependencies."""

    def test_libcst_import(self) -> None:
        """libcst must parse type parameter syntax."""
        import libcst as cst

        node = cst.parse_statement("class Box[T](Protocol): ...\n")
        assert isinstance(node, cst.ClassDef)
        assert node.type_parameters is not None

    def test_pydantic_v2(self) -> None:
        """Pydantic v2 must be installed."""
        import pydantic

        major_version = int(pydantic.VERSION.split(".")[0])
        assert major_version >= 2, f"Pydantic v2 required, got {pydantic.VERSION}"

    def test_structlog_import(self) -> None:
        """structlog must be importable."""
        import structlog

        assert structlog.get_logger() is not None


class TestProjectSetup:
    """Verify project is set up correctly."""

    def test_version(self, project_version: str) -> None:
        """Project version must be defined."""
        assert project_version == "0.1.0"

    def test_public_api(self) -> None:
        """The package root exposes the generator entry points."""
        import mockgen

        for name in mockgen.__all__:
            assert hasattr(mockgen, name), f"mockgen.{name} missing"
