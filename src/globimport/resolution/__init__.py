"""
Glob resolution: matching, import paths, member names and their validation.
"""

from .matcher import FileMatch, expand_braces, glob, has_magic, iter_matches
from .path_normalizer import PathNormalizer, normalize, cross_env_path, trim_extension
from .identifiers import IdentifierDeriver, identifierfy, memberify, is_reserved_word
from .glob_resolver import ChildModule, GlobResolver, is_glob_source, strip_glob_prefix
from .collision_guard import CollisionGuard, validate
