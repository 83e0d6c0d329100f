# 2026-10-19  republish_utils/npm_actions.py

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from republish_utils.errors import CommandFailedError, TypingsNotFoundError
from republish_utils.node_ecosys import VersionTag


logger = logging.getLogger(__name__)


class InstallAndPublish(Protocol):
    """
    The package-manager side effects of republishing one version.
    Each step either completes or raises.
    """

    def install(self, version: VersionTag) -> None: ...

    def extract_typings(self) -> Path: ...

    def publish(self) -> None: ...


class NpmInstallAndPublish(object):
    def __init__(
            self,
            package_dir: Path,
            tracked_package: str,
            typings_file: str,
            npm: str = 'npm'
            ) -> None:
        self.package_dir = package_dir
        self.tracked_package = tracked_package
        self.typings_file = typings_file
        self.npm = npm

    @property
    def typings_source(self) -> Path:
        return (self.package_dir / 'node_modules' / self.tracked_package
                / self.typings_file)

    @property
    def typings_destination(self) -> Path:
        return self.package_dir / 'dist' / self.typings_file

    def _run(self, *args: str) -> None:
        # stdout and stderr go straight to the console.
        cmd = [self.npm, *args]
        proc = subprocess.run(cmd, cwd=str(self.package_dir))
        if proc.returncode != 0:
            raise CommandFailedError(cmd, proc.returncode)

    def install(self, version: VersionTag) -> None:
        """
        `package.json` already pins `version`, so a plain install fetches it.
        """
        logger.info("Installing %s@%s", self.tracked_package, version)
        self._run('install')

    def extract_typings(self) -> Path:
        source = self.typings_source
        if not source.is_file():
            raise TypingsNotFoundError(source)
        destination = self.typings_destination
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
        logger.info("Typings extracted successfully!")
        return destination

    def publish(self) -> None:
        self._run('publish')
        logger.info("Package published successfully!")
