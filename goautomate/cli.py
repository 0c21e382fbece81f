"""Command line entry point."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import UpdaterConfig
from .errors import GoAutomateError
from .updater import AutoUpdater, VersionControlClient
from .utils import AsyncHTTPClient, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goautomate",
        description="Update the pinned Go version when a newer release is available",
    )
    parser.add_argument("--build-file", type=Path, help="File holding the pinned Go version (default: Dockerfile)")
    parser.add_argument("--version-key", help="Only consider lines of the build file containing this text")
    parser.add_argument("--output-dir", type=Path, help="Where to write the per-platform JSON files")
    parser.add_argument("--download-dir", type=Path, help="Keep downloaded archives here instead of a temp dir")
    parser.add_argument("--no-publish", action="store_true", help="Do not commit and push the changes")
    parser.add_argument("--check-only", action="store_true", help="Only report whether an update is available")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=Path)
    return parser


def load_config(args: argparse.Namespace) -> UpdaterConfig:
    return UpdaterConfig.from_env(
        build_file=args.build_file,
        version_key=args.version_key,
        output_dir=args.output_dir,
        download_dir=args.download_dir,
        publish=False if args.no_publish else None,
        check_only=True if args.check_only else None,
    )


async def main(config: UpdaterConfig, vcs: Optional[VersionControlClient] = None) -> int:
    try:
        async with AsyncHTTPClient() as http:
            result = await AutoUpdater(config, http, vcs).check_and_update()
    except GoAutomateError as e:
        logger.error(f"Update failed: {e}")
        return 1

    if result.published:
        logger.info(f"Successfully committed and pushed Go {result.latest}")
    return 0


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    try:
        config = load_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    return asyncio.run(main(config))


if __name__ == "__main__":
    sys.exit(run())
