"""Release metadata resolution against the upstream Go manifest."""

import logging
from typing import TYPE_CHECKING, List, Optional

from ..errors import ChecksumNotFoundError
from ..utils.async_http import AsyncHTTPClient
from .models import GoRelease, GoVersionInfo, parse_releases

if TYPE_CHECKING:
    from ..config import UpdaterConfig

logger = logging.getLogger(__name__)


def build_filename(version: str, os_name: str, arch: str) -> str:
    """Upstream archive name, e.g. ``go1.22.5.linux-amd64.tar.gz``."""
    ext = "zip" if os_name == "windows" else "tar.gz"
    return f"{version}.{os_name}-{arch}.{ext}"


class ReleaseResolver:
    """Derives download URL and checksum for a (version, os, arch) triple."""

    def __init__(self, http: AsyncHTTPClient, releases_url: str, download_base_url: str):
        self.http = http
        self.releases_url = releases_url
        self.download_base_url = download_base_url
        self._releases: Optional[List[GoRelease]] = None

    @classmethod
    def from_config(cls, http: AsyncHTTPClient, config: "UpdaterConfig") -> "ReleaseResolver":
        return cls(http, config.releases_url, config.download_base_url)

    def build_url(self, filename: str) -> str:
        base = self.download_base_url
        if not base.endswith("/"):
            base += "/"
        return base + filename

    async def fetch_releases(self) -> List[GoRelease]:
        """Fetch the upstream release manifest, once per resolver."""
        if self._releases is None:
            data = await self.http.get_json(self.releases_url, "Go releases")
            self._releases = parse_releases(data)
        return self._releases

    async def fetch_checksum(self, filename: str) -> str:
        """Get the official sha256 for an archive filename."""
        for release in await self.fetch_releases():
            for file in release.files:
                if file.filename == filename:
                    return file.sha256
        raise ChecksumNotFoundError(filename)

    async def resolve(self, version: str, os_name: str, arch: str) -> GoVersionInfo:
        filename = build_filename(version, os_name, arch)
        checksum = await self.fetch_checksum(filename)
        info = GoVersionInfo(
            version=version,
            os=os_name,
            arch=arch,
            url=self.build_url(filename),
            checksum=checksum,
        )
        logger.debug(f"Resolved {filename}: {info.url} sha256={checksum}")
        return info
