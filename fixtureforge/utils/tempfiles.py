"""
FixtureForge — Temporary file helper for tests.
"""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from fixtureforge.core.config import settings


def _split_basename(basename: str | tuple[str, str] | list[str] | None) -> tuple[str, str]:
    if basename is None:
        return settings.tempfile_prefix, ""
    if isinstance(basename, str):
        return basename, ""
    prefix, suffix = basename
    return prefix, suffix


@contextmanager
def using_tempfile(
    basename: str | tuple[str, str] | list[str] | None = None,
    dir: str | os.PathLike | None = None,
    *,
    data: str | bytes | None = None,
    encoding: str | None = None,
) -> Generator[Path, None, None]:
    """
    Create a temp file holding ``data``, close it, and yield its path.

    ``basename`` is a prefix or a ``(prefix, suffix)`` pair. Bytes are
    written in binary mode; text uses ``encoding``. The file is removed when
    the block exits, whether or not it raised.
    """
    prefix, suffix = _split_basename(basename)
    fd, name = tempfile.mkstemp(
        prefix=prefix,
        suffix=suffix,
        dir=dir if dir is not None else settings.tempfile_dir,
    )
    path = Path(name)
    try:
        if isinstance(data, bytes):
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
        else:
            with os.fdopen(fd, "w", encoding=encoding) as fh:
                if data is not None:
                    fh.write(data)
        yield path
    finally:
        path.unlink(missing_ok=True)
