"""Tests for the manifest loader."""

from __future__ import annotations

import pytest

from pkgreport.exceptions import ManifestError, PkgReportError
from pkgreport.manifest import load_manifest


class TestLoadManifest:
    def test_both_groups(self, write_manifest):
        path = write_manifest(
            {
                "name": "app",
                "dependencies": {"react": "^18.2.0", "left-pad": "^1.0.0"},
                "devDependencies": {"jest": "~29.0.0"},
            }
        )
        manifest = load_manifest(path)
        assert manifest.dependencies.packages == {"react": "^18.2.0", "left-pad": "^1.0.0"}
        assert manifest.dev_dependencies.packages == {"jest": "~29.0.0"}
        assert manifest.path == path.resolve()

    def test_declaration_order_kept(self, write_manifest):
        path = write_manifest('{"dependencies": {"zeta": "1", "alpha": "2", "mid": "3"}}')
        manifest = load_manifest(path)
        assert list(manifest.dependencies.packages) == ["zeta", "alpha", "mid"]

    def test_missing_groups_are_empty(self, write_manifest):
        manifest = load_manifest(write_manifest({"name": "bare"}))
        assert len(manifest.dependencies) == 0
        assert len(manifest.dev_dependencies) == 0

    def test_group_names_and_titles(self, write_manifest):
        manifest = load_manifest(write_manifest({}))
        assert [g.name for g in manifest.groups] == ["dependencies", "devDependencies"]
        assert [g.title for g in manifest.groups] == ["Dependencies", "Dev Dependencies"]

    def test_declared_spans_both_groups(self, write_manifest):
        path = write_manifest(
            {"dependencies": {"a": "1"}, "devDependencies": {"b": "2", "a": "3"}}
        )
        assert list(load_manifest(path).declared()) == [("a", "1"), ("b", "2"), ("a", "3")]

    def test_non_string_version_stringified(self, write_manifest):
        manifest = load_manifest(write_manifest({"dependencies": {"odd": 1}}))
        assert manifest.dependencies.packages == {"odd": "1"}

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ManifestError) as exc_info:
            load_manifest(tmp_path / "package.json")
        assert "package.json" in str(exc_info.value)

    def test_invalid_json_raises(self, write_manifest):
        with pytest.raises(ManifestError, match="invalid JSON"):
            load_manifest(write_manifest("{not json"))

    def test_top_level_array_raises(self, write_manifest):
        with pytest.raises(ManifestError, match="not an object"):
            load_manifest(write_manifest([]))

    def test_group_not_object_raises(self, write_manifest):
        with pytest.raises(ManifestError, match="'devDependencies'"):
            load_manifest(write_manifest({"devDependencies": ["jest"]}))

    def test_manifest_error_is_pkgreport_error(self, tmp_path):
        with pytest.raises(PkgReportError):
            load_manifest(tmp_path / "missing.json")

    def test_utf8_bom_accepted(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_bytes(b"\xef\xbb\xbf" + b'{"dependencies": {"a": "1"}}')
        assert load_manifest(path).dependencies.packages == {"a": "1"}

    def test_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_bytes(b'{"dependencies": {"\xff": "1"}}')
        with pytest.raises(ManifestError):
            load_manifest(path)

    def test_null_range_is_empty(self, write_manifest):
        manifest = load_manifest(write_manifest({"dependencies": {"a": None}}))
        assert manifest.dependencies.packages == {"a": ""}

    def test_non_string_range_keeps_json_spelling(self, write_manifest):
        manifest = load_manifest(write_manifest({"dependencies": {"a": True, "b": 1.5}}))
        assert manifest.dependencies.packages == {"a": "true", "b": "1.5"}
