"""Tests for migration scope analysis."""

import json

import pytest

from .lib import (
    FileScan,
    analyze_migration_scope,
    grade_complexity,
    recommend,
    scan_source,
)

LEGACY_SOURCE = """\
let stack = UIStackView()
NSLayoutConstraint.activate([
    title.topAnchor.constraint(equalTo: view.topAnchor, constant: 8),
    title.leadingAnchor.constraint(equalTo: view.leadingAnchor)
])
"""


@pytest.fixture
def swift_project(tmp_path):
    """A small project with one controller and one plain view."""
    (tmp_path / "Screens").mkdir()
    (tmp_path / "Screens" / "LoginViewController.swift").write_text(LEGACY_SOURCE)
    (tmp_path / "Card.swift").write_text("let label = UILabel()\n")
    (tmp_path / "README.md").write_text("not swift")
    return tmp_path


class TestScanning:
    """Tests for per-file scanning."""

    @pytest.mark.unit
    def test_scan_source_counts(self):
        scan = scan_source("Login.swift", LEGACY_SOURCE)

        assert scan.activation_blocks == 1
        assert scan.anchor_constraints == 2
        assert scan.stack_views == 1
        assert scan.legacy_constructs == 4

    @pytest.mark.unit
    def test_project_scan(self, swift_project):
        """Project scans collect *.swift recursively, in sorted order."""
        analysis = analyze_migration_scope(project_path=swift_project)

        assert analysis.file_count == 2
        assert [f.path for f in analysis.files] == [
            "Card.swift",
            "Screens/LoginViewController.swift",
        ]

    @pytest.mark.unit
    def test_missing_project_path(self, tmp_path):
        with pytest.raises(ValueError, match="not a directory"):
            analyze_migration_scope(project_path=tmp_path / "missing")

    @pytest.mark.unit
    def test_file_list_mixes_real_and_named(self, swift_project):
        """Existing files are scanned; others are judged by name."""
        real = str(swift_project / "Card.swift")
        analysis = analyze_migration_scope(swift_files=[real, "ProfileViewController.swift"])

        assert analysis.file_count == 2
        assert analysis.files[0].scanned is True
        assert analysis.files[1].scanned is False
        assert "ProfileViewController.swift: Good candidate for migration" in analysis.recommendations


class TestGrading:
    """Tests for complexity grading."""

    @pytest.mark.unit
    def test_default_when_nothing_scanned(self):
        scans = [FileScan(path="A.swift", scanned=False)]
        assert grade_complexity(scans) == ("medium", "2-3 weeks")

    @pytest.mark.unit
    def test_empty_input_uses_default(self):
        analysis = analyze_migration_scope()
        assert (analysis.complexity, analysis.estimated_effort) == ("medium", "2-3 weeks")
        assert analysis.file_count == 0

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("constructs", "expected"),
        [
            (0, ("low", "1 week")),
            (9, ("low", "1 week")),
            (10, ("medium", "2-3 weeks")),
            (49, ("medium", "2-3 weeks")),
            (50, ("high", "4-6 weeks")),
        ],
    )
    def test_thresholds(self, constructs, expected):
        assert grade_complexity([FileScan(path="A.swift", stack_views=constructs)]) == expected


class TestRecommendations:
    """Tests for recommendation rules."""

    @pytest.mark.unit
    def test_stack_views_first(self):
        recs = recommend([FileScan(path="A.swift", stack_views=1)])
        assert recs[0].startswith("Migrate UIStackView usage first")

    @pytest.mark.unit
    def test_heavy_constraint_file(self):
        recs = recommend([FileScan(path="Dense.swift", anchor_constraints=12)])
        assert recs == [
            "Dense.swift: Heavy constraint usage (12 constructs). "
            "Convert with the conservative strategy and review manually"
        ]

    @pytest.mark.unit
    def test_project_opening_advice(self):
        recs = recommend([], whole_project=True)
        assert recs == ["Start with view controllers that use simple layouts"]


class TestRendering:
    """Tests for guide rendering."""

    @pytest.mark.unit
    def test_markdown_guide(self, swift_project):
        guide = analyze_migration_scope(project_path=swift_project).rendered

        assert guide.startswith("# FrameLayoutKit Migration Guide\n\n## Project Overview")
        assert "- **Files to migrate:** 2\n" in guide
        assert "### Phase 1: Preparation" in guide
        assert "### Phase 2: Migration\n1. Start with view controllers" in guide
        assert "### Phase 3: Testing" in guide

    @pytest.mark.unit
    def test_html_is_escaped(self):
        analysis = analyze_migration_scope(
            swift_files=["<Main>ViewController.swift"], output_format="html"
        )

        assert analysis.rendered.startswith("<!DOCTYPE html>")
        assert "<Main>" not in analysis.rendered
        assert "&lt;Main&gt;ViewController.swift: Good candidate" in analysis.rendered

    @pytest.mark.unit
    def test_json(self, swift_project):
        analysis = analyze_migration_scope(project_path=swift_project, output_format="json")
        data = json.loads(analysis.rendered)

        assert data["fileCount"] == 2
        assert data["complexity"] == "low"
        assert data["files"][1]["activationBlocks"] == 1

    @pytest.mark.unit
    def test_unknown_format(self):
        with pytest.raises(ValueError):
            analyze_migration_scope(output_format="pdf")
