"""Per-line git change markers for the editor gutter."""

from __future__ import annotations

import enum
import os
import re
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]

_UNSIGNED = re.compile(r"\+?[0-9]+")


class GitLineStatus(enum.Enum):
    """How a line differs from the committed version."""

    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"


def _parse_unsigned(text: str) -> Optional[int]:
    if _UNSIGNED.fullmatch(text):
        return int(text)
    return None


def _parse_range(text: str) -> Tuple[int, int]:
    """Parse ``start[,count]`` from a hunk header; count defaults to 1."""
    if "," in text:
        start_text, count_text = text.split(",", 1)
        start = _parse_unsigned(start_text)
        count = _parse_unsigned(count_text)
        return (0 if start is None else start, 1 if count is None else count)
    start = _parse_unsigned(text)
    return (0 if start is None else start, 1)


def parse_git_diff_output(output: str, total_lines: int) -> List[Optional[GitLineStatus]]:
    """Turn ``git diff --unified=0`` output into one status per buffer line.

    Lines without changes are ``None``. A pure deletion marks the line at
    the new start position (1-based) as removed.
    """
    result: List[Optional[GitLineStatus]] = [None] * total_lines

    def mark(line_num: int, status: GitLineStatus) -> None:
        if 0 < line_num and line_num - 1 < len(result):
            result[line_num - 1] = status

    for line in output.splitlines():
        if not line.startswith("@@"):
            continue
        parts = line.split()
        if len(parts) < 3:
            continue
        _, old_count = _parse_range(parts[1].lstrip("-"))
        new_start, new_count = _parse_range(parts[2].lstrip("+"))

        if old_count == 0:
            for line_num in range(new_start, new_start + new_count):
                mark(line_num, GitLineStatus.ADDED)
        elif new_count == 0:
            mark(new_start, GitLineStatus.REMOVED)
        else:
            for line_num in range(new_start, new_start + new_count):
                mark(line_num, GitLineStatus.MODIFIED)

    return result


def _git(args: Sequence[str], cwd: Path) -> Optional[subprocess.CompletedProcess]:
    try:
        return subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
        )
    except OSError:
        return None


def _decode(data: Union[bytes, str, None]) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def git_diff_for_file(path: PathLike, total_lines: int) -> List[Optional[GitLineStatus]]:
    """Compute gutter markers for ``path`` against ``HEAD``.

    Returns an empty list when the file or its repository cannot be found
    or git fails; an untracked file has every line marked as added.
    """
    try:
        file_path = Path(path).resolve(strict=True)
    except (OSError, RuntimeError):
        return []
    directory = file_path.parent

    root_proc = _git(["rev-parse", "--show-toplevel"], directory)
    if root_proc is None or root_proc.returncode != 0:
        return []
    root = _decode(root_proc.stdout).strip()

    try:
        root_path = Path(root).resolve(strict=True)
    except (OSError, RuntimeError):
        root_path = Path(root)
    try:
        relative = str(file_path.relative_to(root_path))
    except ValueError:
        return []

    tracked_proc = _git(["ls-files", "--error-unmatch", "--", relative], root_path)
    if tracked_proc is None or tracked_proc.returncode != 0:
        return [GitLineStatus.ADDED] * total_lines

    diff_proc = _git(["diff", "HEAD", "--unified=0", "--", relative], root_path)
    if diff_proc is None or diff_proc.returncode != 0:
        return []
    return parse_git_diff_output(_decode(diff_proc.stdout), total_lines)