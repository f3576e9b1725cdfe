"""
Structure lint tests
Verify that the component skeleton exists and follows conventions.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

COMPONENTS = ["calendar", "flow", "invite", "links", "trips"]


class TestProjectStructure:
    """Verify project structure follows conventions."""

    def test_core_directories_exist(self) -> None:
        assert (PROJECT_ROOT / "src" / "domain").is_dir()
        assert (PROJECT_ROOT / "src" / "components").is_dir()
        assert (PROJECT_ROOT / "src" / "rules").is_dir()

    def test_shell_directories_exist(self) -> None:
        assert (PROJECT_ROOT / "src" / "shell").is_dir()
        assert (PROJECT_ROOT / "src" / "app_shell").is_dir()
        assert (PROJECT_ROOT / "src" / "adapters").is_dir()

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "integration").is_dir()
        assert (PROJECT_ROOT / "tests" / "regression").is_dir()

    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    def test_components_follow_layout(self) -> None:
        """Each component has models, core, shell, and unit tests."""
        for name in COMPONENTS:
            component = PROJECT_ROOT / "src" / "components" / name
            for module in ["__init__.py", "models.py", "_impl.py", "component.py"]:
                assert (component / module).is_file(), f"Missing {module} in {name}"
            assert (component / "tests" / "test_unit.py").is_file(), f"Missing tests in {name}"

    def test_functional_core_has_no_io(self) -> None:
        """_impl modules stay pure: no logging, files, or ports."""
        for name in COMPONENTS:
            source = (PROJECT_ROOT / "src" / "components" / name / "_impl.py").read_text()
            assert "import logging" not in source, name
            assert "open(" not in source, name
            assert ".ports import" not in source, name
