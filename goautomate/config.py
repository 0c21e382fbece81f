"""Runtime configuration for the updater."""

import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from .versions.models import DEFAULT_PLATFORMS, Platform

ENV_PREFIX = "GOAUTOMATE_"


class UpdaterConfig(BaseModel):
    """Endpoints, paths and identity used by a single update run."""

    version_url: str = "https://go.dev/VERSION?m=text"
    releases_url: str = "https://go.dev/dl/?mode=json&include=all"
    download_base_url: str = "https://dl.google.com/go/"

    build_file: Path = Path("Dockerfile")
    version_key: Optional[str] = None

    platforms: List[Platform] = Field(default_factory=lambda: list(DEFAULT_PLATFORMS))
    output_dir: Path = Path(".")
    # None downloads into a temporary directory that is dropped after verification
    download_dir: Optional[Path] = None

    publish: bool = True
    check_only: bool = False
    git_user_name: str = "github-actions[bot]"
    git_user_email: str = "41898282+github-actions[bot]@users.noreply.github.com"

    @classmethod
    def from_env(cls, environ: Optional[dict] = None, **overrides) -> "UpdaterConfig":
        """Build a config from GOAUTOMATE_* variables, then apply explicit overrides."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            if name == "platforms":
                continue
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None and raw != "":
                values[name] = raw

        raw_platforms = environ.get(ENV_PREFIX + "PLATFORMS")
        if raw_platforms:
            values["platforms"] = [Platform.parse(p) for p in raw_platforms.split(",") if p.strip()]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
