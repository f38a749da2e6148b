"""Scanning a directory into a tree of test inputs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["UnsupportedPathError", "FileTree", "build_tree"]


class UnsupportedPathError(Exception):
    """Raised when a directory entry is neither a file nor a directory."""


@dataclass
class FileTree:
    """Files found directly in a directory and subtrees for its subdirectories."""

    children: dict[Path, FileTree] = field(default_factory=dict)
    here: set[Path] = field(default_factory=set)


def build_tree(base: str | Path, extensions: Sequence[str] = ()) -> FileTree:
    """Scan ``base`` recursively.

    Without ``extensions`` every file is kept as is. With ``extensions`` only
    files whose extension is one of them are kept, and their extension is
    stripped so that files sharing a stem collapse into one entry.
    """
    tree = FileTree()
    for entry in Path(base).iterdir():
        if entry.is_file():
            if extensions:
                suffix = entry.suffix
                if not suffix or suffix[1:] not in extensions:
                    continue
                entry = entry.with_suffix("")
            tree.here.add(entry)
        elif entry.is_dir():
            tree.children[entry] = build_tree(entry, extensions)
        else:
            raise UnsupportedPathError(f"Unsupported path: {str(entry)!r}.")
    return tree