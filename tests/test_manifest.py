"""Tests for theme manifest parsing and loading."""

from pathlib import Path

import pytest

from hyprcursor.errors import ManifestError, UnsupportedFormatError
from hyprcursor.manifest import Manifest, load_manifest, parse_manifest


class TestParseManifest:
    """Test parse_manifest function."""

    def test_all_fields(self):
        """Test every recognized field is read."""
        text = """
name = Bibata-Modern-Classic
description = Open source, compact, and material designed cursor set
version = 2.0.6
author = Abdulkaiz Khatri
cursors_directory = hyprcursors
"""
        manifest = parse_manifest(text, Path("/themes/bibata"))

        assert manifest == Manifest(
            name="Bibata-Modern-Classic",
            description="Open source, compact, and material designed cursor set",
            version="2.0.6",
            author="Abdulkaiz Khatri",
            cursors_directory="hyprcursors",
        )

    def test_explicit_name_wins_over_directory(self):
        """Test an explicit name line is used regardless of directory name."""
        manifest = parse_manifest("name = rose-pine", Path("/themes/other-dir"))
        assert manifest.name == "rose-pine"

    def test_name_falls_back_to_directory_name(self):
        """Test the directory's base name is used without a name line."""
        manifest = parse_manifest("cursors_directory = c", Path("/themes/my-theme"))
        assert manifest.name == "my-theme"

    def test_fallback_keeps_full_directory_name(self):
        """Test dots in the directory name are kept."""
        manifest = parse_manifest("", Path("/themes/theme.v2"))
        assert manifest.name == "theme.v2"

    def test_missing_optional_fields_are_none(self):
        """Test absent fields default to None."""
        manifest = parse_manifest("name = x", Path("/t/x"))
        assert manifest.description is None
        assert manifest.version is None
        assert manifest.author is None
        assert manifest.cursors_directory is None

    def test_last_occurrence_wins(self):
        """Test repeated identifiers overwrite each other."""
        text = "version = 1\nversion = 2\nname = a\nname = b"
        manifest = parse_manifest(text, Path("/t/x"))
        assert manifest.version == "2"
        assert manifest.name == "b"

    def test_unknown_identifiers_ignored(self):
        """Test unknown identifiers and non-assignment lines are skipped."""
        text = "license = MIT\nrandom text\nname = x\nfuture_field = 1"
        manifest = parse_manifest(text, Path("/t/y"))
        assert manifest == Manifest(name="x")

    def test_no_name_and_no_base_name_fails(self):
        """Test a fallback-less manifest without a name line is rejected."""
        with pytest.raises(ManifestError):
            parse_manifest("cursors_directory = c", Path("/"))

    def test_no_base_name_with_explicit_name(self):
        """Test an explicit name makes the fallback unnecessary."""
        manifest = parse_manifest("name = root-theme", Path("/"))
        assert manifest.name == "root-theme"


class TestLoadManifest:
    """Test load_manifest function."""

    def test_load_hyprlang_manifest(self, tmp_path):
        """Test manifest.hl is read and parsed."""
        theme_dir = tmp_path / "theme"
        theme_dir.mkdir()
        (theme_dir / "manifest.hl").write_text("name = loaded\ncursors_directory = c\n")

        manifest = load_manifest(theme_dir)

        assert manifest.name == "loaded"
        assert manifest.cursors_directory == "c"

    def test_toml_manifest_unsupported(self, tmp_path):
        """Test a manifest.toml-only theme reports an unsupported format."""
        theme_dir = tmp_path / "theme"
        theme_dir.mkdir()
        (theme_dir / "manifest.toml").write_text('[General]\nname = "x"\n')

        with pytest.raises(UnsupportedFormatError) as exc_info:
            load_manifest(theme_dir)

        assert exc_info.value.path == theme_dir / "manifest.toml"

    def test_hyprlang_preferred_over_toml(self, tmp_path):
        """Test manifest.hl is used when both dialects are present."""
        theme_dir = tmp_path / "theme"
        theme_dir.mkdir()
        (theme_dir / "manifest.hl").write_text("name = hl")
        (theme_dir / "manifest.toml").write_text("")

        assert load_manifest(theme_dir).name == "hl"

    def test_missing_manifest(self, tmp_path):
        """Test FileNotFoundError when there is no manifest at all."""
        with pytest.raises(FileNotFoundError, match="manifest.hl not found"):
            load_manifest(tmp_path)
