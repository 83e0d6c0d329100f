# 2026-10-19  republish_utils/checkpoint.py

import json
from pathlib import Path
from typing import Protocol

from republish_utils.errors import CheckpointError, MalformedVersionError
from republish_utils.node_ecosys import VersionTag


class CheckpointStore(Protocol):
    """Where the last published version is kept between runs."""

    def read(self) -> VersionTag: ...

    def write(self, version: VersionTag) -> None: ...


class JsonCheckpointStore(object):
    """
    Checkpoint kept in a json file:
    {
      "lastVersion": "11.0.0"
    }
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> VersionTag:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                last_version = json.load(f)['lastVersion']
        except FileNotFoundError as e:
            raise CheckpointError(
                f"checkpoint file {self.path} not found"
            ) from e
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            raise CheckpointError(
                f"checkpoint file {self.path} has no 'lastVersion'"
            ) from e

        try:
            return VersionTag.make(last_version)
        except MalformedVersionError as e:
            raise CheckpointError(f"checkpoint file {self.path}: {e}") from e

    def write(self, version: VersionTag) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(json.dumps({'lastVersion': str(version)}, indent=2))
