"""
Configuration constants and transform options
"""

import os
import tempfile
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple

# Glob import constants
GLOB_PREFIX = "glob:"
RELATIVE_PATH_MARKER = "."
IMPORT_PATH_SEPARATOR = "/"
MEMBER_SEPARATOR = "$"  # Joins per-segment identifier tokens
PRIVATE_BINDING_FORMAT = "_{local}_{member}"

# Extensions stripped from generated import paths, tried in order
DEFAULT_TRIM_FILE_EXTENSIONS: Tuple[str, ...] = ("js", "jsx", "ts", "tsx")

# Aggregate namespace object
NAMESPACE_DECLARATION_KIND = "const"
NAMESPACE_FREEZE_CALLEE = ("Object", "freeze")

# Host option keys accepted by GlobImportOptions.from_mapping
TRIM_FILE_EXTENSIONS_KEYS = ("trimFileExtensions", "trim_file_extensions")

# Parser configuration constants (cache under temp dir to avoid cluttering project root)
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "globimport_parser.cache")

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"


class ConfigurationError(ValueError):
    """Raised when host-supplied options are malformed"""


@dataclass(frozen=True)
class GlobImportOptions:
    """
    Options for one transform run.

    Immutable and passed explicitly to the resolver, so two files compiled
    with different options never observe each other's settings.
    """
    trim_file_extensions: Tuple[str, ...] = DEFAULT_TRIM_FILE_EXTENSIONS

    def __post_init__(self):
        exts = self.trim_file_extensions
        if isinstance(exts, str) or not isinstance(exts, Iterable):
            raise ConfigurationError(
                f"trim_file_extensions must be a sequence of strings, got {exts!r}"
            )
        exts = tuple(exts)
        for ext in exts:
            if not isinstance(ext, str) or not ext:
                raise ConfigurationError(f"Invalid file extension {ext!r} in trim_file_extensions")
        # dedupe, first occurrence keeps its position
        object.__setattr__(self, "trim_file_extensions", tuple(dict.fromkeys(exts)))

    @classmethod
    def from_mapping(cls, opts: Optional[Mapping[str, Any]]) -> "GlobImportOptions":
        """
        Build options from a host options object (e.g. {"trimFileExtensions": ["js"]}).

        A missing or None value means the defaults; an empty list disables trimming.
        """
        if not opts:
            return cls()
        unknown = set(opts) - set(TRIM_FILE_EXTENSIONS_KEYS)
        if unknown:
            raise ConfigurationError(f"Unknown glob import option(s): {', '.join(sorted(unknown))}")
        for key in TRIM_FILE_EXTENSIONS_KEYS:
            value = opts.get(key)
            if value is not None:
                return cls(trim_file_extensions=value)
        return cls()
