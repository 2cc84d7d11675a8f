"""Application package handling.

An application package is either a directory holding `services.xml` and
friends, or a zip archive of such a directory. Either way the deploy service
receives a zip archive, built here in memory.
"""

import io
import zipfile
from logging import getLogger
from pathlib import Path

logger = getLogger(__name__)


class _ZipSink(io.RawIOBase):
    """A write-only, non-seekable byte buffer.

    `zipfile` cannot seek back into it, so every entry is written with a
    trailing data descriptor, the way streaming zip writers do.
    """

    def __init__(self) -> None:
        super().__init__()
        self.buffer = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, b: bytes) -> int:  # type: ignore[override]
        self.buffer += b
        return len(b)


def is_zip_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() == ".zip"


def zip_directory(path: Path) -> bytes:
    """Zip the regular files below `path`, in sorted order, into memory.

    Raises:
        ValueError: If there are no regular files below `path`.
    """
    files = sorted(p for p in path.rglob("*") if p.is_file())
    if not files:
        raise ValueError(f"{path} contains no files")

    sink = _ZipSink()
    with zipfile.ZipFile(sink, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for file_path in files:
            zf.write(file_path, arcname=file_path.relative_to(path).as_posix())

    return bytes(sink.buffer)


def application_package(path: Path) -> bytes:
    """Returns the zip bytes to deploy for the given directory or zip file.

    Args:
        path: An application directory or a `.zip` archive.

    Raises:
        ValueError: If `path` is neither a directory nor a zip file, or is an
            empty directory.
    """
    if path.is_dir():
        data = zip_directory(path)
        logger.debug(f"Packaged directory {path} into {len(data)} bytes")
        return data

    if is_zip_file(path):
        data = path.read_bytes()
        logger.debug(f"Read {len(data)} bytes from {path}")
        return data

    raise ValueError(f"{path} is not a directory or a zip file")
