#!/usr/bin/env python3
"""Check layer import boundaries of the mockgen package.

Layering rules:
- domain/: Pure generation logic, imports no other mockgen layer and
  never the syntax-tree or settings libraries
- config/: Generation configuration, may import domain/
- application/: Synthesis and orchestration, may import domain/ and config/
- infrastructure/: Adapters, may import domain/, config/ and application/
- bootstrap/: Composition root, may import every layer

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import sys
from pathlib import Path

import libcst as cst
from libcst.helpers import get_full_name_for_node
from libcst.metadata import MetadataWrapper, PositionProvider

PACKAGE = "mockgen"

# What each layer CAN import from, besides itself
ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "config": {"domain"},
    "application": {"domain", "config"},
    "infrastructure": {"domain", "config", "application"},
    "bootstrap": {"domain", "config", "application", "infrastructure"},
}

# Third-party distributions a layer must not depend on
FORBIDDEN_LIBRARIES: dict[str, set[str]] = {
    "domain": {"libcst", "pydantic"},
}

Violation = tuple[str, int, str]


def get_layer(py_file: Path, package_dir: Path) -> str | None:
    """Determine the layer a file belongs to, None outside any layer."""
    try:
        parts = py_file.relative_to(package_dir).parts
    except ValueError:
        return None
    if len(parts) < 2:
        return None
    return parts[0] if parts[0] in ALLOWED_IMPORTS else None


def check_import(module: str, layer: str) -> str | None:
    """Check one imported module against the rules of a layer.

    Args:
        module: Dotted module name (e.g. "mockgen.config.generation_config")
        layer: The layer the importing file belongs to

    Returns:
        Error message if the import is a violation, None otherwise
    """
    root = module.split(".")[0]
    if root in FORBIDDEN_LIBRARIES.get(layer, set()):
        return f"{layer} layer cannot depend on {root}"

    parts = module.split(".")
    if parts[0] != PACKAGE or len(parts) < 2:
        return None
    target = parts[1]
    if target not in ALLOWED_IMPORTS or target == layer:
        return None
    if target not in ALLOWED_IMPORTS[layer]:
        return f"{layer} layer cannot import from {target}"
    return None


class _ImportCollector(cst.CSTVisitor):
    METADATA_DEPENDENCIES = (PositionProvider,)

    def __init__(self) -> None:
        self.imports: list[tuple[str, int]] = []

    def visit_Import(self, node: cst.Import) -> None:
        line = self.get_metadata(PositionProvider, node).start.line
        for alias in node.names:
            name = get_full_name_for_node(alias.name)
            if name:
                self.imports.append((name, line))

    def visit_ImportFrom(self, node: cst.ImportFrom) -> None:
        if node.relative or node.module is None:
            return
        name = get_full_name_for_node(node.module)
        if name:
            line = self.get_metadata(PositionProvider, node).start.line
            self.imports.append((name, line))


def collect_imports(source: str) -> list[tuple[str, int]]:
    """Absolute imports of a module as (module, line) pairs, in source order."""
    collector = _ImportCollector()
    MetadataWrapper(cst.parse_module(source)).visit(collector)
    return collector.imports


def check_file_imports(py_file: Path, package_dir: Path) -> list[Violation]:
    """Check a single file for import boundary violations.

    Returns:
        List of (file_path, line_number, violation_message) tuples
    """
    layer = get_layer(py_file, package_dir)
    if layer is None:
        return []
    try:
        imports = collect_imports(py_file.read_text(encoding="utf-8"))
    except (cst.ParserSyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for module, line in imports:
        message = check_import(module, layer)
        if message:
            violations.append((str(py_file), line, message))
    return violations


def check_import_boundaries(package_dir: Path) -> list[Violation]:
    """Check every Python file under the package directory."""
    if not package_dir.exists():
        print(f"Error: Package directory '{package_dir}' does not exist", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def format_violations(violations: list[Violation]) -> str:
    """Format violations for human-readable output."""
    if not violations:
        return ""

    lines = ["Import boundary violations found:", ""]
    for file_path, line_no, message in sorted(violations):
        lines.append(f"  {file_path}:{line_no}: {message}")
    lines.append("")
    lines.append(f"Total: {len(violations)} violation(s)")
    return "\n".join(lines)


def main() -> int:
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).parent.parent / PACKAGE

    violations = check_import_boundaries(package_dir)
    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
