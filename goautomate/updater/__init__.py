"""Update orchestration."""

from .auto_updater import AutoUpdater, UpdateResult
from .vcs import GitClient, VersionControlClient

__all__ = ["AutoUpdater", "UpdateResult", "GitClient", "VersionControlClient"]
