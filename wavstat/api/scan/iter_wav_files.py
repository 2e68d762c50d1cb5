"""Lazy recursive discovery of WAV files under a root directory."""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from ...logging_config import get_logger
from ._constants import TRAVERSAL_ERROR
from .ScanOutcome import ScanFailure

logger = get_logger("scan")


def _matches(name: str, extensions: tuple[str, ...]) -> bool:
    return os.path.splitext(name)[1].lower() in extensions


def _list_dir(directory: Path) -> list[os.DirEntry]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def iter_wav_files(
    root: Path,
    extensions: Iterable[str] = (".wav",),
    follow_symlinks: bool = False,
) -> Iterator[Path | ScanFailure]:
    """Return a lazy iterator of WAV file paths under root, depth-first, entries sorted by name.

    Extensions match case-insensitively. Symlinks to files are yielded;
    symlinked directories are only descended when follow_symlinks is set,
    and each real directory is visited once.

    Directories below root that cannot be listed are yielded as ScanFailure
    and the walk continues.

    Raises:
        OSError: If root itself cannot be listed
    """
    exts = tuple(ext.lower() for ext in extensions)
    root = Path(root)
    entries = _list_dir(root)
    visited = {os.path.realpath(root)} if follow_symlinks else None
    return _walk(entries, exts, follow_symlinks, visited)


def _walk(
    entries: list[os.DirEntry],
    exts: tuple[str, ...],
    follow_symlinks: bool,
    visited: set[str] | None,
) -> Iterator[Path | ScanFailure]:
    # One open iterator per directory on the current path
    stack: list[Iterator[os.DirEntry]] = [iter(entries)]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        path = Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
            is_file = not is_dir and entry.is_file()
        except OSError as exc:
            yield ScanFailure(path=path, reason=str(exc), kind=TRAVERSAL_ERROR)
            continue

        if is_dir:
            # Only followed symlinks can reach a directory twice
            if visited is not None:
                real = os.path.realpath(path)
                if real in visited:
                    logger.debug(f"Skipping already visited directory {path}")
                    continue
                visited.add(real)
            try:
                children = _list_dir(path)
            except OSError as exc:
                yield ScanFailure(path=path, reason=str(exc), kind=TRAVERSAL_ERROR)
                continue
            stack.append(iter(children))
        elif is_file and _matches(entry.name, exts):
            yield path
