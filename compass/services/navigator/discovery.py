"""
Filesystem discovery for the codebase navigator.

Resolves the repository root that owns a path, finds key documentation and
enumerates source files. Traversal is depth-bounded, visits entries in
sorted order and never raises: a directory that cannot be read simply
contributes nothing.
"""

import logging
import os

from compass.config import settings
from compass.services.navigator.constants import (
    DOC_SKIP_DIRS,
    KEY_DOC_PATTERNS,
    MAX_SCAN_DEPTH,
    REPOSITORY_MARKERS,
    SOURCE_EXTENSIONS,
    SOURCE_SKIP_DIRS,
)
from compass.services.navigator.types import FileRecord, KeyDocument

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
# Repository Root
# ─────────────────────────────────────────────────────────────


def detect_root_marker(directory: str) -> str | None:
    """Return the first repository marker present in a directory, if any."""
    for marker in REPOSITORY_MARKERS:
        try:
            os.stat(os.path.join(directory, marker))
        except OSError:
            continue
        return marker
    return None


def find_repository_root(start: str) -> str:
    """
    Walk upward from a path to the nearest directory holding a repository marker.

    Marker order only decides which marker is reported inside one directory;
    the nearest directory with any marker wins. The filesystem root is never
    tested.

    Args:
        start: Any path inside (or at) a project

    Returns:
        Absolute path of the repository root, or `start` unchanged if no
        ancestor carries a marker
    """
    current = os.path.abspath(start)

    while True:
        parent = os.path.dirname(current)
        if parent == current:
            break

        marker = detect_root_marker(current)
        if marker is not None:
            logger.debug(f"Repository root {current} (found {marker})")
            return current

        current = parent

    logger.debug(f"No repository marker above {start}, using it as root")
    return start


# ─────────────────────────────────────────────────────────────
# Traversal
# ─────────────────────────────────────────────────────────────


def _sorted_entries(directory: str) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def _walk_files(directory: str, depth: int, max_depth: int, skip_dirs: frozenset[str]):
    """Yield file entries below `directory`, depth-first in sorted order."""
    if depth > max_depth:
        return

    try:
        entries = _sorted_entries(directory)
    except OSError as e:
        logger.debug(f"Skipping unreadable directory {directory}: {e}")
        return

    for entry in entries:
        try:
            if entry.is_dir():
                if entry.name not in skip_dirs:
                    yield from _walk_files(entry.path, depth + 1, max_depth, skip_dirs)
            elif entry.is_file():
                yield entry
        except OSError as e:
            logger.debug(f"Skipping {entry.path}: {e}")


def find_key_docs(root: str, max_depth: int = MAX_SCAN_DEPTH) -> list[KeyDocument]:
    """
    Find onboarding documents (README, ARCHITECTURE, CONTRIBUTING, ...) under a root.

    Args:
        root: Repository root
        max_depth: Deepest directory level entered (root is 0)

    Returns:
        Matching markdown files in traversal order
    """
    docs: list[KeyDocument] = []
    for entry in _walk_files(root, 0, max_depth, DOC_SKIP_DIRS):
        if not entry.name.lower().endswith(".md"):
            continue
        if any(pattern.search(entry.name) for pattern in KEY_DOC_PATTERNS):
            docs.append(
                KeyDocument(
                    path=entry.path,
                    name=entry.name,
                    relative_path=os.path.relpath(entry.path, root),
                )
            )

    logger.debug(f"Found {len(docs)} key documents under {root}")
    return docs


def find_source_files(root: str, max_depth: int = MAX_SCAN_DEPTH) -> list[str]:
    """
    Enumerate source files with an allow-listed extension.

    Args:
        root: Repository root
        max_depth: Deepest directory level entered (root is 0)

    Returns:
        Absolute file paths in traversal order
    """
    files = [
        entry.path
        for entry in _walk_files(root, 0, max_depth, SOURCE_SKIP_DIRS)
        if os.path.splitext(entry.name)[1] in SOURCE_EXTENSIONS
    ]
    logger.debug(f"Found {len(files)} source files under {root}")
    return files


def read_file_record(root: str, path: str, max_bytes: int | None = None) -> FileRecord | None:
    """
    Read one source file into a FileRecord.

    Returns None when the file cannot be read or exceeds `max_bytes`
    (defaults to settings.max_file_bytes). Undecodable bytes are replaced.
    """
    limit = settings.max_file_bytes if max_bytes is None else max_bytes

    try:
        if os.path.getsize(path) > limit:
            logger.debug(f"Skipping {path}: larger than {limit} bytes")
            return None
        with open(path, encoding="utf-8", errors="replace") as f:
            content = f.read()
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return None

    relative_path = os.path.relpath(path, root).replace(os.sep, "/")
    return FileRecord(
        path=relative_path,
        content=content,
        size=len(content),
        lines=len(content.split("\n")),
        extension=os.path.splitext(path)[1],
    )
