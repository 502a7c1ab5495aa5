"""Tests for package.json rewriting."""

import json
from pathlib import Path

import pytest

from create_stylish.errors import ManifestError
from create_stylish.project import INITIAL_VERSION, build_manifest, rewrite_manifest


class TestBuildManifest:
    """Tests for the pure manifest transformation."""

    def test_drops_template_fields(self) -> None:
        """Test that description and author never survive."""
        manifest = build_manifest(
            {"name": "t", "description": "d", "author": "a", "license": "MIT"},
            "demo-app",
        )
        assert "description" not in manifest
        assert "author" not in manifest
        assert manifest["license"] == "MIT"

    def test_sets_name_and_version(self) -> None:
        """Test that name and version are always overwritten."""
        manifest = build_manifest({"name": "t", "version": "9.9.9"}, "demo-app")
        assert manifest["name"] == "demo-app"
        assert manifest["version"] == INITIAL_VERSION == "0.1.0"

    def test_adds_missing_name_and_version(self) -> None:
        """Test that name and version are added when the template lacks them."""
        manifest = build_manifest({"private": True}, "demo-app")
        assert manifest == {"private": True, "name": "demo-app", "version": "0.1.0"}

    def test_preserves_key_order(self) -> None:
        """Test that surviving keys keep their original position."""
        manifest = build_manifest(
            {"name": "t", "version": "1.0.0", "author": "a", "scripts": {}, "type": "module"},
            "demo-app",
        )
        assert list(manifest) == ["name", "version", "scripts", "type"]

    def test_does_not_mutate_input(self) -> None:
        """Test that the input mapping is left untouched."""
        data = {"name": "t", "author": "a"}
        build_manifest(data, "demo-app")
        assert data == {"name": "t", "author": "a"}


class TestRewriteManifest:
    """Tests for rewriting package.json on disk."""

    def test_rewrites_file_in_place(self, tmp_path: Path) -> None:
        """Test the written file's contents and formatting."""
        path = tmp_path / "package.json"
        path.write_text(
            json.dumps(
                {
                    "name": "stylish-next-app",
                    "version": "2.0.0",
                    "description": "starter",
                    "author": "someone",
                    "dependencies": {"next": "^14.0.0"},
                }
            )
        )

        result = rewrite_manifest(path, "demo-app")

        text = path.read_text()
        assert text.endswith("}\n")
        assert '\n  "name": "demo-app",\n' in text
        assert json.loads(text) == result == {
            "name": "demo-app",
            "version": "0.1.0",
            "dependencies": {"next": "^14.0.0"},
        }

    def test_keeps_non_ascii_text(self, tmp_path: Path) -> None:
        """Test that unicode values are written as-is."""
        path = tmp_path / "package.json"
        path.write_text('{"keywords": ["스타일"]}', encoding="utf-8")
        rewrite_manifest(path, "demo-app")
        assert "스타일" in path.read_text(encoding="utf-8")

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a template without package.json is fatal."""
        with pytest.raises(ManifestError, match="not found"):
            rewrite_manifest(tmp_path / "package.json", "demo-app")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test that a malformed manifest is fatal and left untouched."""
        path = tmp_path / "package.json"
        path.write_text("{not json")
        with pytest.raises(ManifestError, match="Failed to read"):
            rewrite_manifest(path, "demo-app")
        assert path.read_text() == "{not json"

    def test_non_object_json(self, tmp_path: Path) -> None:
        """Test that a manifest must be a JSON object."""
        path = tmp_path / "package.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ManifestError, match="JSON object"):
            rewrite_manifest(path, "demo-app")
