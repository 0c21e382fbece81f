"""Shared fixtures: a fake Go download site and a recording VCS client."""

import asyncio
import hashlib
from pathlib import Path
from typing import Dict, List

import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from goautomate.config import UpdaterConfig
from goautomate.updater import VersionControlClient
from goautomate.utils import AsyncHTTPClient
from goautomate.versions import DEFAULT_PLATFORMS, build_filename


def sha256(content: bytes) -> str:
    return hashlib.sha256(content).hexdigest()


class FakeUpstream:
    """Serves the version index, the release manifest and the archives."""

    def __init__(self, latest: str = "go1.22.5"):
        self.latest = latest
        self.version_body = f"{latest}\n"
        self.archives: Dict[str, bytes] = {}
        self.checksums: Dict[str, str] = {}
        self.manifest_status = 200
        self.manifest_body = None
        self.requests: List[str] = []
        self.base_url = ""
        for target in DEFAULT_PLATFORMS:
            filename = build_filename(latest, target.os, target.arch)
            self.add_archive(filename, f"{filename} contents".encode())

    def add_archive(self, filename: str, content: bytes):
        self.archives[filename] = content
        self.checksums[filename] = sha256(content)

    def url(self, path: str) -> str:
        return self.base_url + path.lstrip("/")

    def manifest(self) -> list:
        return [
            {
                "version": self.latest,
                "stable": True,
                "files": [
                    {"filename": name, "version": self.latest, "sha256": checksum, "kind": "archive"}
                    for name, checksum in self.checksums.items()
                ],
            },
            {
                "version": "go1.21.12",
                "stable": True,
                "files": [
                    {"filename": "go1.21.12.linux-amd64.tar.gz", "sha256": "00" * 32},
                ],
            },
        ]

    def config(self, tmp_path: Path, **overrides) -> UpdaterConfig:
        values = dict(
            version_url=self.url("VERSION?m=text"),
            releases_url=self.url("dl/?mode=json&include=all"),
            download_base_url=self.url("go/"),
            build_file=tmp_path / "Dockerfile",
            output_dir=tmp_path / "out",
        )
        values.update(overrides)
        return UpdaterConfig(**values)

    async def handle_version(self, request):
        self.requests.append(request.path)
        return web.Response(text=self.version_body)

    async def handle_manifest(self, request):
        self.requests.append(request.path)
        if self.manifest_status != 200:
            return web.Response(status=self.manifest_status)
        if self.manifest_body is not None:
            return web.Response(text=self.manifest_body)
        return web.json_response(self.manifest())

    async def handle_download(self, request):
        self.requests.append(request.path)
        content = self.archives.get(request.match_info["filename"])
        if content is None:
            return web.Response(status=404)
        return web.Response(body=content)

    @property
    def downloads(self) -> List[str]:
        return [path for path in self.requests if path.startswith("/go/")]


class RecordingVCS(VersionControlClient):
    def __init__(self):
        self.published: List[str] = []

    def publish_update(self, version: str) -> None:
        self.published.append(version)


@pytest_asyncio.fixture
async def upstream():
    fake = FakeUpstream()
    app = web.Application()
    app.router.add_get("/VERSION", fake.handle_version)
    app.router.add_get("/dl/", fake.handle_manifest)
    app.router.add_get("/go/{filename}", fake.handle_download)
    server = test_utils.TestServer(app)
    await server.start_server()
    fake.base_url = str(server.make_url("/"))
    yield fake
    await server.close()


@pytest_asyncio.fixture
async def closed_url():
    """URL of a server that is no longer listening."""
    server = test_utils.TestServer(web.Application())
    await server.start_server()
    url = str(server.make_url("/"))
    await server.close()
    return url


@pytest_asyncio.fixture
async def http():
    async with AsyncHTTPClient() as client:
        yield client


@pytest.fixture
def vcs():
    return RecordingVCS()


@pytest_asyncio.fixture
async def short_body_url():
    """URL of a server that promises a body it never sends."""
    async def handle(reader, writer):
        await reader.readuntil(b"\r\n\r\n")
        writer.write(
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Type: application/json\r\n"
            b"Content-Length: 1\r\n"
            b"Connection: close\r\n\r\n"
        )
        await writer.drain()
        writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    host, port = server.sockets[0].getsockname()[:2]
    yield f"http://{host}:{port}/"
    server.close()
    await server.wait_closed()
