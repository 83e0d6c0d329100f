"""Tests for version parsing, ordering and the package manifest."""

import json
from pathlib import Path

import pytest

from republish_utils.errors import ManifestError, MalformedVersionError
from republish_utils.node_ecosys import (
    PackageManifest,
    VersionTag,
    list_newer_versions,
    parse_version_set,
)


def tags(*version_strs: str) -> list[VersionTag]:
    return [VersionTag.make(v) for v in version_strs]


class TestVersionTag:
    def test_make_numeric_triple(self) -> None:
        assert VersionTag.make("10.1.0") == VersionTag(10, 1, 0)
        assert str(VersionTag.make("10.1.0")) == "10.1.0"

    @pytest.mark.parametrize(
        "version_str",
        ["10.1", "10.x.0", "", "latest", "11.0.0-beta.1", "1.2.3+build.5"],
    )
    def test_make_rejects_malformed(self, version_str: str) -> None:
        with pytest.raises(MalformedVersionError):
            VersionTag.make(version_str)

    def test_malformed_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            VersionTag.make("not-a-version")

    def test_ordering_is_numeric_not_lexicographic(self) -> None:
        assert VersionTag.make("10.0.0") > VersionTag.make("9.9.9")
        assert VersionTag.make("1.10.0") > VersionTag.make("1.9.0")
        assert VersionTag.make("1.0.10") > VersionTag.make("1.0.2")


class TestParseVersionSet:
    def test_drops_prereleases_and_malformed(self) -> None:
        parsed = parse_version_set(["10.0.0", "11.0.0-alpha.1", "garbage", "11.0.0"])
        assert parsed == tags("10.0.0", "11.0.0")

    def test_empty(self) -> None:
        assert parse_version_set([]) == []


class TestListNewerVersions:
    def test_registry_scenario(self) -> None:
        baseline = VersionTag.make("10.0.0")
        all_versions = tags("10.0.0", "10.1.0", "9.9.9", "11.0.0")

        assert list_newer_versions(baseline, all_versions) == tags("10.1.0", "11.0.0")

    def test_empty_set(self) -> None:
        assert list_newer_versions(VersionTag.make("1.0.0"), []) == []

    def test_nothing_newer(self) -> None:
        baseline = VersionTag.make("12.0.0")
        assert list_newer_versions(baseline, tags("1.0.0", "11.9.9", "12.0.0")) == []

    def test_exactly_the_newer_ones_in_ascending_order(self) -> None:
        baseline = VersionTag.make("2.3.4")
        all_versions = tags(
            "3.0.0", "2.3.5", "2.3.4", "2.4.0", "1.99.99", "2.3.10", "10.0.0", "2.3.3"
        )

        result = list_newer_versions(baseline, all_versions)

        assert set(result) == {v for v in all_versions if v > baseline}
        assert all(a < b for a, b in zip(result, result[1:]))
        assert result[0] == VersionTag(2, 3, 5)
        assert result[-1] == VersionTag(10, 0, 0)

    def test_duplicates_collapse(self) -> None:
        baseline = VersionTag.make("1.0.0")
        assert list_newer_versions(baseline, tags("1.0.1", "1.0.1")) == tags("1.0.1")


class TestPackageManifest:
    def test_update_pins_dependency_and_version(self, package_dir: Path) -> None:
        manifest = PackageManifest(package_dir / "package.json")

        manifest.update("electron", "11.0.0")

        package_json = json.loads((package_dir / "package.json").read_text())
        assert package_json["dependencies"]["electron"] == "11.0.0"
        assert package_json["version"] == "11.0.0"
        assert package_json["name"] == "electron-typings"

    def test_update_strips_range_operator_from_version(self, package_dir: Path) -> None:
        manifest = PackageManifest(package_dir / "package.json")

        manifest.update("electron", "^11.0.0")

        package_json = manifest.load()
        assert package_json["dependencies"]["electron"] == "^11.0.0"
        assert package_json["version"] == "11.0.0"

    def test_update_adds_missing_dependencies(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "x", "version": "0.0.1"}))

        PackageManifest(path).update("electron", "1.2.3")

        assert PackageManifest(path).load()["dependencies"] == {"electron": "1.2.3"}

    @pytest.mark.parametrize(
        "content",
        ["{not json", "[]", '{"name": "x", "dependencies": ["electron"]}'],
    )
    def test_update_rejects_unusable_manifest(
        self, tmp_path: Path, content: str
    ) -> None:
        path = tmp_path / "package.json"
        path.write_text(content)

        with pytest.raises(ManifestError):
            PackageManifest(path).update("electron", "11.0.0")

        assert path.read_text() == content
