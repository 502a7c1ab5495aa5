"""Template kit download and extraction."""

from __future__ import annotations

import logging
import os
import tarfile
import tempfile
import zlib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path, PurePosixPath

import httpx

from create_stylish.config.schema import DEFAULT_TIMEOUT, StylishConfig
from create_stylish.errors import TemplateFetchError
from create_stylish.templates.base import Template

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


@contextmanager
def download_archive(
    url: str, client: httpx.Client, timeout: float = DEFAULT_TIMEOUT
) -> Iterator[Path]:
    """Download url into a temporary file and yield its path.

    The temporary file is removed when the block exits, whether the
    download, the caller's extraction, or neither failed.
    """
    fd, name = tempfile.mkstemp(prefix="create-stylish-", suffix=".tar.gz")
    archive = Path(name)
    try:
        with os.fdopen(fd, "wb") as f:
            try:
                with client.stream(
                    "GET", url, timeout=timeout, follow_redirects=True
                ) as response:
                    if response.status_code != 200:
                        raise TemplateFetchError(
                            f"Download failed with HTTP {response.status_code}: {url}"
                        )
                    for chunk in response.iter_bytes(chunk_size=CHUNK_SIZE):
                        f.write(chunk)
            except httpx.HTTPError as e:
                raise TemplateFetchError(f"Download failed: {e}") from e
        logger.debug("Downloaded %s (%d bytes)", url, archive.stat().st_size)
        yield archive
    finally:
        archive.unlink(missing_ok=True)


def _relative_entry_path(entry_name: str, template_path: str) -> str | None:
    """Map an archive entry to its path inside the template, or None.

    The first component of every entry is the kit root directory, whose
    name depends on the tag, so it is ignored rather than matched.
    """
    entry = PurePosixPath(entry_name)
    if entry.is_absolute() or len(entry.parts) < 2:
        return None

    try:
        relative = PurePosixPath(*entry.parts[1:]).relative_to(template_path)
    except ValueError:
        return None

    if not relative.parts or ".." in relative.parts or ".git" in relative.parts:
        return None
    return relative.as_posix()


def extract_template(archive: Path, template: Template, dest: Path) -> int:
    """Extract the template's subtree from archive into dest.

    Returns the number of files extracted. Only regular files and
    directories are extracted; links and special entries are skipped.

    Raises:
        TemplateFetchError: If the archive is unreadable or does not
            contain the template.
    """
    try:
        with tarfile.open(archive, mode="r:gz") as tf:
            members: list[tarfile.TarInfo] = []
            for member in tf.getmembers():
                relative = _relative_entry_path(member.name, template.archive_path)
                if relative is None:
                    continue
                if not (member.isfile() or member.isdir()):
                    logger.debug("Skipping non-regular entry %s", member.name)
                    continue
                member.name = relative
                members.append(member)

            file_count = sum(1 for member in members if member.isfile())
            if file_count == 0:
                raise TemplateFetchError(
                    f"Template {template.name} not found in archive "
                    f"(expected {template.archive_path}/)"
                )

            tf.extractall(dest, members=members, filter="data")
    except (tarfile.TarError, EOFError, zlib.error, OSError) as e:
        raise TemplateFetchError(f"Failed to extract template: {e}") from e

    logger.debug("Extracted %d files into %s", file_count, dest)
    return file_count


def fetch_template(
    template: Template,
    dest: Path,
    config: StylishConfig,
    client: httpx.Client | None = None,
) -> int:
    """Download the pinned template kit and extract template into dest.

    Returns the number of files extracted.
    """
    url = config.tarball_url
    timeout = config.timeout or DEFAULT_TIMEOUT
    logger.debug("Fetching template %s from %s", template.name, url)

    owns_client = client is None
    http = client if client is not None else httpx.Client()
    try:
        with download_archive(url, http, timeout=timeout) as archive:
            return extract_template(archive, template, dest)
    finally:
        if owns_client:
            http.close()
