# 2026-10-19  republish_utils/node_ecosys.py

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypedDict

import nodesemver

from republish_utils.errors import ManifestError, MalformedVersionError
from republish_utils.general import strip_range_operator


logger = logging.getLogger(__name__)


# A type describing the registry json file, for type hinting.
# Written this way because `dist-tags` is not a valid Python identifier.
# Only the keys of `versions` are read.
ValidRegistryJson = TypedDict('ValidRegistryJson', {
    'dist-tags': dict[str, str],
    'versions':  dict[str, Any],
})


@dataclass(frozen=True, order=True)
class VersionTag(object):
    major: int
    minor: int
    patch: int

    @staticmethod
    def make(version_str: str) -> 'VersionTag':
        """
        example:
        '10.1.0'        -> VersionTag(10, 1, 0)
        '11.0.0-beta.1' -> MalformedVersionError (pre-release)
        '10.x'          -> MalformedVersionError
        """
        try:
            parsed = nodesemver.parse(version_str, False)
        except (ValueError, TypeError):
            parsed = None
        if parsed is None:
            raise MalformedVersionError(version_str)
        if parsed.prerelease:
            raise MalformedVersionError(version_str, "pre-release tag")
        if parsed.build:
            raise MalformedVersionError(version_str, "build metadata")
        return VersionTag(parsed.major, parsed.minor, parsed.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version_set(version_strs: Iterable[str]) -> list[VersionTag]:
    """
    Parse the version keys of a registry json.
    Pre-releases and malformed keys never take part in the comparison,
    they are dropped here.
    """
    tags = []
    for version_str in version_strs:
        try:
            tags.append(VersionTag.make(version_str))
        except MalformedVersionError as e:
            logger.debug("Ignoring registry version: %s", e)
    return tags


def list_newer_versions(
        baseline: VersionTag,
        all_versions: Iterable[VersionTag]
        ) -> list[VersionTag]:
    """
    Versions strictly newer than `baseline`, oldest first, without duplicates.
    """
    return sorted({ver for ver in all_versions if ver > baseline})


class PackageManifest(object):
    """The `package.json` of the package being republished."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> dict[str, Any]:
        with open(self.path, 'r', encoding='utf-8') as f:
            try:
                package_json = json.load(f)
            except json.JSONDecodeError as e:
                raise ManifestError(
                    f"{self.path} is not valid json: {e}"
                ) from e
        if not isinstance(package_json, dict):
            raise ManifestError(f"{self.path} does not hold a json object")
        return package_json

    def save(self, package_json: dict[str, Any]) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(json.dumps(package_json, indent=2) + '\n')

    def update(self, dependency: str, version_str: str) -> None:
        """
        Pin `dependency` to `version_str` and make the package's own version
        follow it.
        """
        package_json = self.load()
        dependencies = package_json.setdefault('dependencies', {})
        if not isinstance(dependencies, dict):
            raise ManifestError(
                f"{self.path}: 'dependencies' is not a json object"
            )
        dependencies[dependency] = version_str
        package_json['version'] = strip_range_operator(version_str)
        self.save(package_json)
