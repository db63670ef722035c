"""Small file-system helpers used by the repositories."""

from __future__ import annotations

import os


def combine_path(dir_name: str, file_name: str) -> str:
    """Join a directory and a file name with a forward slash."""
    return f"{dir_name}/{file_name}"


def file_exists(path: str, file_name: str | None = None) -> bool:
    """Whether ``path`` (or ``path/file_name`` when given) exists."""
    if file_name is not None:
        path = combine_path(path, file_name)
    return os.path.exists(path)


def dir_exists(path: str) -> bool:
    """Whether ``path`` exists."""
    return os.path.exists(path)


def create_dir(path: str) -> bool:
    """Create a directory; False if something already exists at ``path``."""
    if os.path.exists(path):
        return False
    os.mkdir(path)
    return True


def create_file(dir_name: str, file_name: str, text: str = "") -> bool:
    """Create (or truncate) ``dir_name/file_name`` holding ``text``."""
    with open(combine_path(dir_name, file_name), "w", encoding="utf-8") as fout:
        if text:
            fout.write(text)
    return True