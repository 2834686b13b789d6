"""Report file and directory management.

Every report file lives in <output directory>/<symbol set>/<file name>.
Directory creation failures abort the run; file open failures are
logged and reported to the caller as None.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from loguru import logger

from covreport.domain.exceptions import OutputDirectoryError

DIRECTORY_MODE = 0o755


def ensure_directory(directory: Path) -> None:
    """Create directory (mode 0755) unless it already exists.

    Raises:
        OutputDirectoryError: If creation fails, or a non-directory occupies the path
    """
    try:
        directory.mkdir(mode=DIRECTORY_MODE, parents=True)
    except FileExistsError:
        if not directory.is_dir():
            raise OutputDirectoryError(directory, "not a directory") from None
        return
    except OSError as exc:
        raise OutputDirectoryError(directory, exc.strerror or str(exc)) from exc
    logger.debug("Created output directory {}", directory)


def ensure_and_open(base_dir: Path, subset_name: str, file_name: str) -> TextIO | None:
    """Open base_dir/subset_name/file_name for writing.

    Args:
        base_dir: Output root directory
        subset_name: Symbol set name ("" writes directly into base_dir)
        file_name: Report file name

    Returns:
        Open text stream, or None if the file could not be opened (logged).

    Raises:
        OutputDirectoryError: If the set directory cannot be created
    """
    directory = Path(base_dir) / subset_name if subset_name else Path(base_dir)
    ensure_directory(directory)

    path = directory / file_name
    try:
        return path.open("w", encoding="utf-8")
    except OSError as exc:
        logger.error("Unable to open {}: {}", path, exc.strerror or exc)
        return None


def close_stream(stream: TextIO | None) -> None:
    """Flush and close stream. None and closed streams are ignored."""
    if stream is None or stream.closed:
        return
    stream.close()
