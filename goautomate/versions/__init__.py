"""Version management module."""

from .compare import is_newer, version_key
from .download_manager import DownloadManager, current_platform
from .models import (
    DEFAULT_PLATFORMS,
    GoRelease,
    GoVersionInfo,
    Platform,
    ReleaseFile,
    read_sidecar,
    write_sidecar,
)
from .parser import extract_version, fetch_latest_version, read_pinned_version
from .resolver import ReleaseResolver, build_filename

__all__ = [
    "is_newer",
    "version_key",
    "DownloadManager",
    "current_platform",
    "DEFAULT_PLATFORMS",
    "GoRelease",
    "GoVersionInfo",
    "Platform",
    "ReleaseFile",
    "read_sidecar",
    "write_sidecar",
    "extract_version",
    "fetch_latest_version",
    "read_pinned_version",
    "ReleaseResolver",
    "build_filename",
]
