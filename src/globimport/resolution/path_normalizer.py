"""
Import Path Normalization

Turns a matched file into the specifier written in the generated import:
relative to the importing file's directory, forward slashes on every
platform, configured extension removed.
"""

import os
from typing import Sequence

from ..utils.config import DEFAULT_TRIM_FILE_EXTENSIONS, IMPORT_PATH_SEPARATOR


def cross_env_path(any_path: str) -> str:
    """Replace native separators with `/` (./path/to/file on every platform)."""
    if os.sep != IMPORT_PATH_SEPARATOR:
        any_path = any_path.replace(os.sep, IMPORT_PATH_SEPARATOR)
    if os.altsep and os.altsep != IMPORT_PATH_SEPARATOR:
        any_path = any_path.replace(os.altsep, IMPORT_PATH_SEPARATOR)
    return any_path


def _is_dot_relative(path: str) -> bool:
    return path in (".", "..") or path.startswith(("./", "../"))


def trim_extension(path: str, trim_extensions: Sequence[str]) -> str:
    """Strip the first configured extension `path` ends with (case-sensitive)."""
    for ext in trim_extensions:
        suffix = "." + ext
        if path.endswith(suffix):
            return path[:-len(suffix)]
    return path


def normalize(base_directory: str, matched_file_path: str,
              trim_extensions: Sequence[str] = DEFAULT_TRIM_FILE_EXTENSIONS) -> str:
    """
    Relative import path for `matched_file_path` as seen from `base_directory`.

    `matched_file_path` may be absolute or relative to `base_directory`.

    Examples:
        normalize('/base', '/base/a/b.ts') -> './a/b'
        normalize('/base/src', '../lib/x.js') -> '../lib/x'
    """
    target = os.path.normpath(os.path.join(base_directory, matched_file_path))
    relative = cross_env_path(os.path.relpath(target, base_directory))
    if not _is_dot_relative(relative):
        relative = "./" + relative
    return trim_extension(relative, trim_extensions)


class PathNormalizer:
    """`normalize` bound to one set of trim extensions."""

    def __init__(self, trim_extensions: Sequence[str] = DEFAULT_TRIM_FILE_EXTENSIONS):
        self.trim_extensions = tuple(trim_extensions)

    def normalize(self, base_directory: str, matched_file_path: str) -> str:
        return normalize(base_directory, matched_file_path, self.trim_extensions)
