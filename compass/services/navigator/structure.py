"""
Project structure listing.

Renders a depth-bounded directory tree for the structural phase. The
external `tree` utility is preferred; when it is missing, fails or times
out, an equivalent listing is produced in Python. Directories carry a
trailing "/" in both renderings.
"""

import asyncio
import logging
import os

from compass.config import settings
from compass.services.navigator.constants import STRUCTURE_IGNORE, STRUCTURE_UNAVAILABLE

logger = logging.getLogger(__name__)


async def render_project_structure(root: str, depth: int | None = None) -> str:
    """
    Render the directory layout of a project.

    Args:
        root: Directory to list
        depth: Levels to descend (defaults to settings.structure_depth)

    Returns:
        The listing text, or "Unable to generate project structure" when
        neither rendering works. Never raises.
    """
    levels = depth if depth is not None else settings.structure_depth

    listing = await _run_tree(root, levels)
    if listing:
        return listing

    try:
        listing = await asyncio.to_thread(render_fallback_tree, root, levels)
    except OSError as e:
        logger.warning(f"Fallback structure listing failed for {root}: {e}")
        return STRUCTURE_UNAVAILABLE

    return listing or STRUCTURE_UNAVAILABLE


async def _run_tree(root: str, depth: int) -> str | None:
    """Run the tree utility; None when it is unavailable or unusable."""
    try:
        process = await asyncio.create_subprocess_exec(
            settings.tree_command,
            "-F",
            "-I",
            "|".join(STRUCTURE_IGNORE),
            "-L",
            str(depth),
            cwd=root,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        logger.debug(f"{settings.tree_command} unavailable, using fallback listing: {e}")
        return None

    try:
        stdout, stderr = await asyncio.wait_for(
            process.communicate(), timeout=settings.structure_timeout
        )
    except TimeoutError:
        logger.warning(f"{settings.tree_command} timed out after {settings.structure_timeout}s")
        process.kill()
        await process.wait()
        return None

    if process.returncode != 0:
        logger.debug(
            f"{settings.tree_command} exited with {process.returncode}: "
            f"{stderr.decode('utf-8', errors='replace').strip()}"
        )
        return None

    return stdout.decode("utf-8", errors="replace").strip() or None


def render_fallback_tree(root: str, depth: int) -> str:
    """
    Render a tree-style listing without the external utility.

    Hidden entries and ignored directories are left out, like `tree -F -I`.
    Raises OSError if the root itself cannot be listed.
    """
    lines = ["."]
    counts = {"directories": 0, "files": 0}
    _append_level(root, "", 1, depth, lines, counts)
    lines.append("")
    lines.append(f"{counts['directories']} directories, {counts['files']} files")
    return "\n".join(lines)


def _append_level(
    directory: str,
    prefix: str,
    level: int,
    depth: int,
    lines: list[str],
    counts: dict[str, int],
) -> None:
    with os.scandir(directory) as it:
        entries = sorted(
            (e for e in it if not e.name.startswith(".") and e.name not in STRUCTURE_IGNORE),
            key=lambda e: e.name.lower(),
        )

    for index, entry in enumerate(entries):
        last = index == len(entries) - 1
        connector = "└── " if last else "├── "
        is_dir = entry.is_dir()

        lines.append(f"{prefix}{connector}{entry.name}{'/' if is_dir else ''}")

        if not is_dir:
            counts["files"] += 1
            continue

        counts["directories"] += 1
        if level < depth:
            try:
                _append_level(
                    entry.path,
                    prefix + ("    " if last else "│   "),
                    level + 1,
                    depth,
                    lines,
                    counts,
                )
            except OSError as e:
                logger.debug(f"Skipping unreadable directory {entry.path}: {e}")
