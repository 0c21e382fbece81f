"""Version-control clients used to publish a version bump."""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..errors import CommandError

logger = logging.getLogger(__name__)


class VersionControlClient(ABC):
    """Publishes the working tree changes for a new version."""

    @abstractmethod
    def publish_update(self, version: str) -> None:
        ...


class GitClient(VersionControlClient):
    """Commits and pushes everything in the working tree with the git CLI."""

    def __init__(self, user_name: str, user_email: str, cwd: Optional[Path] = None,
                 git: str = "git"):
        self.user_name = user_name
        self.user_email = user_email
        self.cwd = cwd
        self.git = git

    def commands(self, version: str) -> List[Tuple[str, List[str]]]:
        return [
            (self.git, ["config", "--local", "user.name", self.user_name]),
            (self.git, ["config", "--local", "user.email", self.user_email]),
            (self.git, ["add", "."]),
            (self.git, ["commit", "-m", f"Update Go version to {version}"]),
            (self.git, ["push"]),
        ]

    def publish_update(self, version: str) -> None:
        for name, args in self.commands(version):
            self._run(name, args)
        logger.info(f"Committed and pushed Go {version}")

    def _run(self, name: str, args: Sequence[str]):
        logger.debug(f"Running {name} {' '.join(args)}")
        try:
            result = subprocess.run(
                [name, *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise CommandError(name, args, stderr=str(e)) from e
        if result.returncode != 0:
            raise CommandError(name, args, result.returncode, result.stderr)
