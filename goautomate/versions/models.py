"""Data models for Go releases."""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import ParseError, WriteError

# Sidecar filenames use the marketing name for darwin
SIDECAR_OS_NAMES = {"darwin": "mac"}


class ReleaseFile(BaseModel):
    filename: str
    os: str = ""
    arch: str = ""
    version: str = ""
    sha256: str = ""
    size: Optional[int] = None
    kind: Optional[str] = None


class GoRelease(BaseModel):
    version: str
    stable: bool = False
    files: List[ReleaseFile] = []


class GoVersionInfo(BaseModel):
    """Resolved download metadata for one platform."""
    model_config = ConfigDict(frozen=True)

    version: str
    os: str
    arch: str
    url: str
    checksum: str


class Platform(BaseModel):
    model_config = ConfigDict(frozen=True)

    os: str
    arch: str

    @classmethod
    def parse(cls, value: str) -> "Platform":
        """Parse ``os/arch``."""
        os_name, sep, arch = value.strip().partition("/")
        if not sep or not os_name or not arch:
            raise ValueError(f"Invalid platform {value!r}, expected os/arch")
        return cls(os=os_name, arch=arch)

    @property
    def sidecar_name(self) -> str:
        return f"{SIDECAR_OS_NAMES.get(self.os, self.os)}_{self.arch}.json"

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"


DEFAULT_PLATFORMS = (
    Platform(os="linux", arch="amd64"),
    Platform(os="linux", arch="arm64"),
    Platform(os="windows", arch="amd64"),
    Platform(os="darwin", arch="amd64"),
    Platform(os="darwin", arch="arm64"),
)


def parse_releases(data) -> List[GoRelease]:
    """Validate a decoded release manifest."""
    if not isinstance(data, list):
        raise ParseError("failed to parse JSON: expected a list of releases")
    try:
        return [GoRelease(**release) for release in data]
    except (TypeError, ValidationError) as e:
        raise ParseError(f"failed to parse JSON: {e}") from e


def write_sidecar(info: GoVersionInfo, output_dir: Path) -> Path:
    """Write the metadata sidecar for ``info`` and return its path."""
    path = Path(output_dir) / Platform(os=info.os, arch=info.arch).sidecar_name
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(info.model_dump_json(indent=2))
            f.write("\n")
    except OSError as e:
        raise WriteError(f"failed to write {path}: {e}") from e
    return path


def read_sidecar(path: Path) -> GoVersionInfo:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return GoVersionInfo.model_validate_json(f.read())
    except OSError as e:
        raise ParseError(f"failed to read {path}: {e}") from e
    except ValidationError as e:
        raise ParseError(f"failed to parse JSON: {e}") from e
