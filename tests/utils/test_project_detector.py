"""Tests for project_detector.py module."""

import pytest

from cwctl.models.project import BuildType, Language, ProjectInfo
from cwctl.utils.project_detector import determine_project_info, determine_project_language


class TestDetermineProjectInfo:
    """Test suite for project type detection."""

    @pytest.mark.parametrize("kind, language, build_type", [
        ("liberty", "java", "liberty"),
        ("spring", "java", "spring"),
        ("node", "javascript", "nodejs"),
        ("swift", "swift", "swift"),
        ("python", "python", "docker"),
        ("go", "go", "docker"),
    ])
    def test_sample_projects(self, project_factory, kind, language, build_type):
        """Each sample project is detected as its language and build type."""
        info = determine_project_info(project_factory(kind))
        assert info.language == language
        assert info.build_type == build_type

    def test_accepts_string_path(self, project_factory):
        """Test detection with a plain string path."""
        info = determine_project_info(str(project_factory("node")))
        assert info == ProjectInfo(Language.JAVASCRIPT, BuildType.NODEJS)

    def test_rule_order_breaks_ties(self, tmp_path):
        """A Liberty descriptor wins over a Node manifest in the same project."""
        (tmp_path / "package.json").write_text("{}")
        server_dir = tmp_path / "src" / "main" / "liberty" / "config"
        server_dir.mkdir(parents=True)
        (server_dir / "server.xml").write_text("<server/>")

        assert determine_project_info(tmp_path) == ProjectInfo(Language.JAVA, BuildType.LIBERTY)

    def test_plain_pom_is_java_docker(self, tmp_path):
        """A Maven project that is neither Liberty nor Spring builds with Docker."""
        (tmp_path / "pom.xml").write_text("<project/>")
        assert determine_project_info(tmp_path) == ProjectInfo(Language.JAVA, BuildType.DOCKER)

    def test_empty_directory(self, tmp_path):
        """Test detecting an empty project."""
        assert determine_project_info(tmp_path) == ProjectInfo(Language.UNKNOWN, BuildType.DOCKER)


class TestDetermineProjectLanguage:
    """Test suite for the language fallback."""

    def test_marker_file_beats_extensions(self, tmp_path):
        """Test that marker files are checked before counting extensions."""
        (tmp_path / "go.mod").write_text("module example")
        (tmp_path / "a.py").write_text("")
        (tmp_path / "b.py").write_text("")
        assert determine_project_language(tmp_path) == Language.GO

    def test_most_common_extension_wins(self, tmp_path):
        """Test counting source files below the project."""
        (tmp_path / "lib").mkdir()
        (tmp_path / "lib" / "a.go").write_text("")
        (tmp_path / "lib" / "b.go").write_text("")
        (tmp_path / "script.py").write_text("")
        assert determine_project_language(tmp_path) == Language.GO

    def test_skips_node_modules_and_hidden_dirs(self, tmp_path):
        """Test that vendored and hidden directories are not counted."""
        (tmp_path / "node_modules").mkdir()
        (tmp_path / "node_modules" / "a.js").write_text("")
        (tmp_path / ".git").mkdir()
        (tmp_path / ".git" / "hook.py").write_text("")
        (tmp_path / "main.swift").write_text("")
        assert determine_project_language(tmp_path) == Language.SWIFT

    def test_ties_follow_table_order(self, tmp_path):
        """Test that equal counts resolve to the first listed language."""
        (tmp_path / "a.py").write_text("")
        (tmp_path / "A.java").write_text("")
        assert determine_project_language(tmp_path) == Language.JAVA
