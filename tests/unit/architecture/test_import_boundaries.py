"""Tests for architecture import boundaries.

These tests ensure that the layering of the package is maintained:
- The domain layer imports neither application, infrastructure nor CLI code
- The application layer does not import infrastructure or CLI code
- Only the infrastructure layer touches XML
"""

from __future__ import annotations

import ast
import re
from pathlib import Path

import pytest

# Root of the cpn_builder package
PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent / "cpn_builder"


def get_python_files(directory: Path) -> list[Path]:
    return list(directory.rglob("*.py"))


def extract_imports_from_file(file_path: Path) -> list[str]:
    """Extract all import statements from a Python file.

    Args:
        file_path: Path to Python file

    Returns:
        List of imported module names; relative imports keep only the module
        part after the leading dots
    """
    imports = []
    tree = ast.parse(file_path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                imports.append(node.module)
    return imports


def has_forbidden_import(imports: list[str], forbidden_pattern: str) -> list[str]:
    pattern = re.compile(forbidden_pattern)
    return [imp for imp in imports if pattern.search(imp)]


def find_violations(layer: str, forbidden_pattern: str) -> list[str]:
    layer_dir = PACKAGE_ROOT / layer
    if not layer_dir.exists():
        pytest.skip(f"{layer} directory not found")

    violations = []
    for py_file in get_python_files(layer_dir):
        forbidden = has_forbidden_import(
            extract_imports_from_file(py_file), forbidden_pattern
        )
        if forbidden:
            rel_path = py_file.relative_to(PACKAGE_ROOT.parent)
            violations.append(f"{rel_path}: {forbidden}")
    return violations


class TestCLIImportBoundary:
    """The CLI is the outermost layer; nothing else may import it."""

    @pytest.mark.parametrize("layer", ["domain", "application", "infrastructure"])
    def test_layer_does_not_import_cli(self, layer):
        violations = find_violations(layer, r"(^|\.)cli(\.|$)")

        assert not violations, f"{layer} layer imports CLI modules:\n" + "\n".join(
            violations
        )


class TestInnerLayers:
    def test_domain_is_self_contained(self):
        violations = find_violations(
            "domain", r"(^|\.)(application|infrastructure)(\.|$)"
        )

        assert not violations, "Domain layer imports outer layers:\n" + "\n".join(
            violations
        )

    def test_application_does_not_import_infrastructure(self):
        violations = find_violations("application", r"(^|\.)infrastructure(\.|$)")

        assert not violations, (
            "Application layer imports infrastructure:\n" + "\n".join(violations)
        )


class TestSerializationBoundary:
    @pytest.mark.parametrize("layer", ["domain", "application"])
    def test_layer_does_not_touch_xml(self, layer):
        violations = find_violations(layer, r"^xml(\.|$)")

        assert not violations, f"{layer} layer imports XML modules:\n" + "\n".join(
            violations
        )

    def test_no_third_party_imports_in_domain(self):
        violations = find_violations("domain", r"^(click|rich)(\.|$)")

        assert not violations, "Domain layer imports UI libraries:\n" + "\n".join(
            violations
        )
