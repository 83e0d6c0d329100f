# 2026-10-19  typings_republisher.py

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from republish_utils.checkpoint import CheckpointStore, JsonCheckpointStore
from republish_utils.errors import RepublishError
from republish_utils.general import report_counted_things, yellow_text
from republish_utils.network import fetch_versions
from republish_utils.node_ecosys import PackageManifest, VersionTag
from republish_utils.node_ecosys import list_newer_versions, parse_version_set
from republish_utils.npm_actions import InstallAndPublish, NpmInstallAndPublish


logger = logging.getLogger(__name__)


TRACKED_PACKAGE = os.getenv('TRACKED_PACKAGE', 'electron')
TYPINGS_FILE = os.getenv('TYPINGS_FILE', 'electron.d.ts')
PACKAGE_DIR = Path(os.getenv('PACKAGE_DIR', '.'))
NPM = os.getenv('NPM', 'npm')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
CHECKPOINT_FILE = 'lastVersion.json'
MANIFEST_FILE = 'package.json'


@dataclass(frozen=True)
class Skipped(object):
    version: VersionTag


@dataclass(frozen=True)
class Published(object):
    checkpoint: VersionTag


@dataclass(frozen=True)
class Failed(object):
    version: VersionTag
    reason: str


ProcessResult = Skipped | Published | Failed


@dataclass
class RepublishContext(object):
    """Everything a run touches besides the registry."""
    tracked_package: str
    manifest:        PackageManifest
    actions:         InstallAndPublish
    checkpoints:     CheckpointStore

    @staticmethod
    def make(package_dir: Path) -> 'RepublishContext':
        return RepublishContext(
            TRACKED_PACKAGE,
            PackageManifest(package_dir / MANIFEST_FILE),
            NpmInstallAndPublish(
                package_dir, TRACKED_PACKAGE, TYPINGS_FILE, NPM
            ),
            JsonCheckpointStore(package_dir / CHECKPOINT_FILE),
        )


def discover_versions(
        package_name: str, baseline: VersionTag
        ) -> list[VersionTag]:
    """Versions of `package_name` in the registry newer than `baseline`."""
    all_versions = parse_version_set(fetch_versions(package_name))
    return list_newer_versions(baseline, all_versions)


def process_version(
        candidate: VersionTag,
        checkpoint: VersionTag,
        ctx: RepublishContext
        ) -> ProcessResult:
    """
    Republish the typings for `candidate`.
    The manifest is edited before install and stays edited if a later step
    fails. The checkpoint only moves after a successful publish.
    """
    if candidate == checkpoint:
        logger.info("Version %s is already published. Skipping.", candidate)
        return Skipped(candidate)

    try:
        ctx.manifest.update(ctx.tracked_package, str(candidate))
        ctx.actions.install(candidate)
        ctx.actions.extract_typings()
        ctx.actions.publish()
        ctx.checkpoints.write(candidate)
    except (RepublishError, OSError) as e:
        logger.warning(yellow_text(
            f"Error during extraction and publishing of {candidate}: {e}"
        ))
        return Failed(candidate, str(e))

    return Published(candidate)


def run(ctx: RepublishContext) -> list[ProcessResult]:
    """
    Process every new version, oldest first.
    Stops at the first failed version, so later versions never get
    published on top of a half-updated manifest.
    """
    checkpoint = ctx.checkpoints.read()
    candidates = discover_versions(ctx.tracked_package, checkpoint)
    logger.info(
        "Found newer %s versions than %s %s",
        ctx.tracked_package, checkpoint,
        report_counted_things(len(candidates), 'version')
    )

    results: list[ProcessResult] = []
    for candidate in candidates:
        if not candidate > checkpoint:
            continue
        logger.info("Processing %s version %s", ctx.tracked_package, candidate)
        result = process_version(candidate, checkpoint, ctx)
        results.append(result)
        match result:
            case Published(checkpoint=new_checkpoint):
                checkpoint = new_checkpoint
            case Failed():
                logger.warning(yellow_text(
                    f"Stopping at {candidate}; last published version "
                    f"is still {checkpoint}"
                ))
                break
            case Skipped():
                pass

    return results


def main() -> int:
    level = logging.getLevelNamesMapping().get(LOG_LEVEL)
    logging.basicConfig(
        level=level if level is not None else logging.INFO,
        format='%(asctime)s %(levelname)s: %(message)s'
    )
    if level is None:
        logger.warning(yellow_text(
            f"Unknown LOG_LEVEL '{LOG_LEVEL}', logging at INFO"
        ))
    try:
        results = run(RepublishContext.make(PACKAGE_DIR))
    except Exception:
        logger.exception("Republishing %s typings failed", TRACKED_PACKAGE)
        return 1
    return 1 if any(isinstance(r, Failed) for r in results) else 0


if __name__ == '__main__':
    raise SystemExit(main())
