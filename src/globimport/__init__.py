"""
globimport - resolve glob import sources into concrete module imports.

    import * as plugins from 'glob:./plugins/*.js';

becomes one import per matched file plus a frozen `plugins` object keyed by
relative import path.
"""

from .utils.config import GlobImportOptions, ConfigurationError
from .shared.errors import (
    GlobImportError, MissingGlobPatternError, NonRelativePatternError,
    UnresolvableIdentifierError, NameCollisionError, UnsupportedSpecifierShapeError,
)
from .resolution import GlobResolver, ChildModule, memberify, identifierfy, normalize
from .transform import ImportRewriter, DeclarationSynthesizer
from .compiler.driver import TransformDriver, TransformResult

__version__ = "0.1.0"
