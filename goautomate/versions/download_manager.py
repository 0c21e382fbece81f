"""Download manager for Go release archives."""

import hashlib
import logging
import platform
from pathlib import Path
from typing import Optional, Tuple

import aiofiles

from ..errors import ChecksumMismatchError, GoAutomateError, WriteError
from ..utils.async_http import AsyncHTTPClient
from .models import GoVersionInfo
from .resolver import ReleaseResolver, build_filename

logger = logging.getLogger(__name__)

# Map to Go identifiers
OS_MAP = {
    "windows": "windows",
    "linux": "linux",
    "darwin": "darwin",
    "freebsd": "freebsd",
}
ARCH_MAP = {
    "amd64": "amd64",
    "x86_64": "amd64",
    "i386": "386",
    "i686": "386",
    "arm64": "arm64",
    "aarch64": "arm64",
    "armv6l": "armv6l",
    "armv7l": "armv6l",
}


def current_platform() -> Tuple[str, str]:
    """Go os/arch names for the running machine."""
    system = platform.system().lower()
    machine = platform.machine().lower()
    return OS_MAP.get(system, system), ARCH_MAP.get(machine, machine)


class DownloadManager:
    def __init__(self, http: AsyncHTTPClient, resolver: ReleaseResolver):
        self.http = http
        self.resolver = resolver

    async def download_file(self, url: str, dest: Path, expected_sha256: str) -> Path:
        """Stream ``url`` to ``dest``, verifying its sha256 on the way."""
        dest = Path(dest)
        hash_sha256 = hashlib.sha256()
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteError(f"failed to create {dest.parent}: {e}") from e

        chunks = self.http.download(url, dest.name)
        try:
            async with aiofiles.open(dest, 'wb') as f:
                async for chunk in chunks:
                    hash_sha256.update(chunk)
                    await f.write(chunk)
        except OSError as e:
            self._discard(dest)
            raise WriteError(f"failed to write {dest}: {e}") from e
        except GoAutomateError:
            self._discard(dest)
            raise
        finally:
            await chunks.aclose()

        actual = hash_sha256.hexdigest()
        if actual != expected_sha256.lower():
            self._discard(dest)
            raise ChecksumMismatchError(dest.name, expected_sha256, actual)

        logger.info(f"Verified {dest.name} (sha256 {actual})")
        return dest

    async def download_release(self, version: str, dest_dir: Path,
                               dest_filename: Optional[str] = None,
                               os_name: Optional[str] = None,
                               arch: Optional[str] = None) -> Tuple[GoVersionInfo, Path]:
        """Resolve and download the archive for a platform, defaulting to this machine."""
        if not os_name or not arch:
            detected_os, detected_arch = current_platform()
            os_name = os_name or detected_os
            arch = arch or detected_arch

        info = await self.resolver.resolve(version, os_name, arch)
        dest = Path(dest_dir) / (dest_filename or build_filename(version, os_name, arch))
        logger.info(f"Downloading {info.url} to {dest}")
        path = await self.download_file(info.url, dest, info.checksum)
        return info, path

    @staticmethod
    def _discard(path: Path):
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove {path}: {e}")
