# 2026-10-19  republish_utils/errors.py

from collections.abc import Sequence
from pathlib import Path


class RepublishError(Exception):
    """
    Base class of errors raised while discovering or republishing versions.
    Anything else escaping a step is a bug, not an expected failure.
    """


class MalformedVersionError(RepublishError, ValueError):
    """A version tag is not a plain `major.minor.patch` triple."""
    def __init__(self, version_str: str, why: str = "not a numeric triple"):
        super().__init__(f"malformed version '{version_str}': {why}")
        self.version_str = version_str


class PackageNotFoundError(RepublishError):
    def __init__(self, package_name: str):
        super().__init__(f"package {package_name} not found in registry")
        self.package_name = package_name


class CommandFailedError(RepublishError):
    def __init__(self, command: Sequence[str], returncode: int):
        super().__init__(
            "command failed ({:d}): {:s}".format(returncode, ' '.join(command))
        )
        self.command = list(command)
        self.returncode = returncode


class TypingsNotFoundError(RepublishError):
    def __init__(self, path: Path):
        super().__init__(f"typings file not found: {path}")
        self.path = path


class CheckpointError(RepublishError):
    """The checkpoint file is missing or does not hold a valid version."""


class ManifestError(RepublishError):
    """`package.json` is not a json object, or a field has the wrong shape."""
