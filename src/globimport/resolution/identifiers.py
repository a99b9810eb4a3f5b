"""
Identifier Derivation

`identifierfy` turns an arbitrary string into an ECMAScript identifier;
`memberify` applies it per path segment of a captured glob subpath and joins
the tokens with `$`.

    identifierfy('foo-bar')   -> 'fooBar'
    identifierfy('2d')        -> '_2d'
    identifierfy('default')   -> '_default'
    memberify('icons/2d/arrow-up') -> 'icons$2d$arrowUp'
"""

import logging
from typing import List, Optional

from ..utils.config import MEMBER_SEPARATOR, IMPORT_PATH_SEPARATOR

logger = logging.getLogger(__name__)

# ECMAScript reserved words, strict-mode future reserved words and the
# literals that cannot be used as binding names.
RESERVED_WORDS = frozenset({
    "await", "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with", "yield",
    # strict mode
    "implements", "interface", "let", "package", "private", "protected",
    "public", "static",
    # restricted in strict mode bindings
    "arguments", "eval",
})

_ZWNJ = "\u200c"
_ZWJ = "\u200d"


def is_identifier_start(ch: str) -> bool:
    return ch in ("$", "_") or ch.isidentifier()


def is_identifier_part(ch: str) -> bool:
    return ch in ("$", _ZWNJ, _ZWJ) or ("_" + ch).isidentifier()


def is_reserved_word(name: str) -> bool:
    return name in RESERVED_WORDS


def identifierfy(text: str,
                 prefix_reserved_words: bool = True,
                 prefix_invalid_identifiers: bool = True) -> Optional[str]:
    """
    Convert `text` into an identifier, or None when nothing usable is left.

    - Characters that cannot appear in an identifier are dropped and the
      next kept character is upper-cased (`foo-bar` -> `fooBar`).
    - A result that cannot start an identifier (leading digit) gets a `_`
      prefix when `prefix_invalid_identifiers` is set; otherwise it is
      returned as-is, which is only valid as a non-leading fragment.
    - A reserved word gets a `_` prefix when `prefix_reserved_words` is set.
    """
    chars: List[str] = []
    upper_next = False
    for ch in text:
        if not is_identifier_part(ch):
            upper_next = bool(chars)
            continue
        chars.append(ch.upper() if upper_next else ch)
        upper_next = False

    if not chars:
        return None

    identifier = "".join(chars)
    if not is_identifier_start(identifier[0]) and prefix_invalid_identifiers:
        return "_" + identifier
    if prefix_reserved_words and is_reserved_word(identifier):
        return "_" + identifier
    return identifier


def memberify(captured_subpath: str) -> Optional[str]:
    """
    Member name for a captured glob subpath.

    Only a single-segment subpath is guarded against reserved words (a
    `$`-joined name can never be one), and only the first segment needs a
    valid identifier start.
    """
    pieces = captured_subpath.split(IMPORT_PATH_SEPARATOR)
    prefix_reserved_words = len(pieces) == 1
    ids: List[str] = []
    for index, piece in enumerate(pieces):
        token = identifierfy(
            piece,
            prefix_reserved_words=prefix_reserved_words,
            prefix_invalid_identifiers=index == 0,
        )
        if token is None:
            logger.debug(f"no identifier for segment {piece!r} of {captured_subpath!r}")
            return None
        ids.append(token)
    return MEMBER_SEPARATOR.join(ids)


class IdentifierDeriver:
    """Callable wrapper so the resolver can take the naming rule as a collaborator."""

    def derive(self, captured_subpath: str) -> Optional[str]:
        return memberify(captured_subpath)

    __call__ = derive
