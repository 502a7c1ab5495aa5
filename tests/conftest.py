"""Shared fixtures: in-memory template kit archives and mocked HTTP."""

import io
import json
import subprocess
import tarfile
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest

KIT_ROOT = "stylish-template-kit-1.0.0"

NEXT_MANIFEST = {
    "name": "stylish-next-app",
    "version": "2.3.1",
    "description": "Stylish Next.js starter",
    "author": "StyleList94",
    "private": True,
    "scripts": {"dev": "next dev", "build": "next build"},
    "dependencies": {"next": "^14.0.0"},
}


def build_kit_archive(files: dict[str, bytes], root: str = KIT_ROOT) -> bytes:
    """Build a gzipped tarball shaped like a GitHub tag archive."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tf:
        root_info = tarfile.TarInfo(root)
        root_info.type = tarfile.DIRTYPE
        root_info.mode = 0o755
        tf.addfile(root_info)
        for name, data in files.items():
            info = tarfile.TarInfo(f"{root}/{name}")
            info.size = len(data)
            info.mode = 0o644
            tf.addfile(info, io.BytesIO(data))
    return buf.getvalue()


@pytest.fixture
def kit_files() -> dict[str, bytes]:
    """Files of a small template kit with two templates."""
    return {
        "README.md": b"# stylish template kit\n",
        "templates/next-app/package.json": json.dumps(NEXT_MANIFEST).encode(),
        "templates/next-app/pnpm-lock.yaml": b"lockfileVersion: '6.0'\n",
        "templates/next-app/src/app/page.tsx": b"export default function Page() {}\n",
        "templates/next-app/.git/HEAD": b"ref: refs/heads/main\n",
        "templates/next-app-legacy/package.json": b'{"name": "legacy"}',
        "templates/react-app/package.json": b'{"name": "stylish-react-app"}',
    }


@pytest.fixture
def kit_archive(kit_files: dict[str, bytes]) -> bytes:
    return build_kit_archive(kit_files)


@pytest.fixture
def kit_archive_path(tmp_path: Path, kit_archive: bytes) -> Path:
    path = tmp_path / "kit.tar.gz"
    path.write_bytes(kit_archive)
    return path


@pytest.fixture
def make_client() -> Callable[..., tuple[httpx.Client, list[httpx.Request]]]:
    """Return a factory for httpx clients served by a MockTransport."""

    def _make(
        content: bytes = b"", status_code: int = 200
    ) -> tuple[httpx.Client, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(status_code, content=content)

        return httpx.Client(transport=httpx.MockTransport(handler)), requests

    return _make


class FakeRun:
    """Stand-in for subprocess.run that records argv and succeeds."""

    def __init__(self, fail_on: str | None = None, returncode: int = 1) -> None:
        self.calls: list[list[str]] = []
        self.cwds: list[Path] = []
        self._fail_on = fail_on
        self._returncode = returncode

    def __call__(self, args: list[str], **kwargs: object) -> subprocess.CompletedProcess:
        self.calls.append(list(args))
        self.cwds.append(Path(str(kwargs.get("cwd"))))
        joined = " ".join(args)
        if self._fail_on is not None and joined.startswith(self._fail_on):
            return subprocess.CompletedProcess(args, self._returncode, "", "boom")
        return subprocess.CompletedProcess(args, 0, "1\n", "")


@pytest.fixture
def fake_run() -> FakeRun:
    return FakeRun()


@pytest.fixture
def make_fake_run() -> Callable[..., FakeRun]:
    return FakeRun


@pytest.fixture
def make_kit_archive() -> Callable[..., bytes]:
    return build_kit_archive


@pytest.fixture(autouse=True)
def mock_which() -> Iterator[MagicMock]:
    """Resolve every executable to its bare name so argv stays predictable."""
    with patch("create_stylish.shell.shutil.which") as mock:
        mock.side_effect = lambda name: name
        yield mock
