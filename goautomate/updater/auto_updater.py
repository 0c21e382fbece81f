"""Checks upstream for a newer Go release and publishes it."""

import logging
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional

from ..config import UpdaterConfig
from ..utils.async_http import AsyncHTTPClient
from ..versions import (
    DownloadManager,
    GoVersionInfo,
    ReleaseResolver,
    fetch_latest_version,
    is_newer,
    read_pinned_version,
    write_sidecar,
)
from .vcs import GitClient, VersionControlClient

logger = logging.getLogger(__name__)


@dataclass
class UpdateResult:
    latest: str
    current: str
    updated: bool = False
    published: bool = False
    releases: List[GoVersionInfo] = field(default_factory=list)
    sidecars: List[Path] = field(default_factory=list)

    @property
    def needs_update(self) -> bool:
        return is_newer(self.latest, self.current)


class AutoUpdater:
    def __init__(self, config: UpdaterConfig, http: AsyncHTTPClient,
                 vcs: Optional[VersionControlClient] = None):
        self.config = config
        self.http = http
        self.vcs = vcs or GitClient(config.git_user_name, config.git_user_email)
        self.resolver = ReleaseResolver.from_config(http, config)
        self.downloads = DownloadManager(http, self.resolver)

    async def get_latest_version(self) -> str:
        return await fetch_latest_version(self.http, self.config.version_url)

    def get_current_version(self) -> str:
        return read_pinned_version(self.config.build_file, self.config.version_key)

    async def check_and_update(self) -> UpdateResult:
        """Check for a newer Go release and, if there is one, fetch and publish it."""
        latest = await self.get_latest_version()
        logger.info(f"Latest Go version: {latest}")
        current = self.get_current_version()
        logger.info(f"Current Go version: {current}")

        result = UpdateResult(latest=latest, current=current)
        if not result.needs_update:
            logger.info("Already on the latest version. No update needed.")
            return result
        if self.config.check_only:
            logger.info(f"Update available: {current} -> {latest}")
            return result

        with self._download_dir() as download_dir:
            for target in self.config.platforms:
                info, _ = await self.downloads.download_release(
                    latest, download_dir, os_name=target.os, arch=target.arch
                )
                result.releases.append(info)
                result.sidecars.append(write_sidecar(info, self.config.output_dir))
        result.updated = True
        logger.info(f"Successfully downloaded Go {latest} for {len(result.releases)} platforms")

        if self.config.publish:
            self.vcs.publish_update(latest)
            result.published = True
        else:
            logger.info("Publishing disabled, leaving changes uncommitted")
        return result

    @contextmanager
    def _download_dir(self) -> Iterator[Path]:
        if self.config.download_dir is not None:
            yield Path(self.config.download_dir)
            return
        with tempfile.TemporaryDirectory(prefix="goautomate-") as tmp:
            yield Path(tmp)
