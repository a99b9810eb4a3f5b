"""
Glob Resolution

Matches a relative glob pattern against the filesystem and turns every match
into a ChildModule: the file, the import path to write, and the member name
derived from what the wildcards captured.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..shared.errors import MissingGlobPatternError, NonRelativePatternError
from ..utils.config import GlobImportOptions, GLOB_PREFIX, RELATIVE_PATH_MARKER
from .identifiers import memberify
from .matcher import FileMatch, has_magic, iter_matches
from .path_normalizer import PathNormalizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChildModule:
    """One module pulled in by a glob import"""
    source_file: str
    relative_import_path: str
    derived_name: Optional[str]


def is_glob_source(source: str) -> bool:
    """
    Decide whether an import source is a glob import.

    Raises MissingGlobPatternError for a `glob:`-tagged source without any
    glob syntax. Sources with glob syntax but no `*` are not glob imports.
    """
    if not has_magic(source):
        if source.startswith(GLOB_PREFIX):
            raise MissingGlobPatternError(f"Missing glob pattern '{source}'")
        return False
    return "*" in source


def strip_glob_prefix(source: str) -> str:
    if source.startswith(GLOB_PREFIX):
        return source[len(GLOB_PREFIX):]
    return source


class GlobResolver:
    """
    Resolves one glob pattern to its ordered ChildModule list.

    Stateless apart from the options it was built with; safe to reuse across
    statements and files.
    """

    def __init__(self,
                 options: Optional[GlobImportOptions] = None,
                 matcher: Callable[[str, str], List[FileMatch]] = iter_matches,
                 derive_name: Callable[[str], Optional[str]] = memberify):
        self.options = options or GlobImportOptions()
        self.normalizer = PathNormalizer(self.options.trim_file_extensions)
        self._match = matcher
        self._derive_name = derive_name

    def resolve(self, pattern: str, base_directory: str) -> List[ChildModule]:
        """
        Match `pattern` under `base_directory`.

        Order follows the matcher (sorted by path) and is not re-sorted here.
        Filesystem errors from the matcher propagate unchanged.
        """
        pattern = strip_glob_prefix(pattern)
        if not pattern.startswith(RELATIVE_PATH_MARKER):
            raise NonRelativePatternError(f"Glob pattern must be relative, was '{pattern}'")

        modules = [
            ChildModule(
                source_file=match.file_path,
                relative_import_path=self.normalizer.normalize(base_directory, match.file_path),
                derived_name=self._derive_name(match.captured_subpath),
            )
            for match in self._match(pattern, base_directory)
        ]
        logger.debug(f"resolved {pattern!r} in {base_directory} to {len(modules)} module(s)")
        return modules
