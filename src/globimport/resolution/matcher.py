"""
Glob Matching

Strict filesystem glob that also reports what the wildcards matched.

Supported syntax:
  - `*`, `?`, `[seq]`, `[!seq]` / `[^seq]` within one path segment
  - `**` as a whole segment: zero or more directories
  - `{a,b}` alternatives and `{1..3}` numeric ranges (expanded up front)

Wildcards never match a leading `.` unless the segment itself starts with
`.`, and `**` neither enters dot-directories nor follows symlinked ones.
Strict: a missing path component just means "no match", every other OSError
propagates to the caller.
"""

import errno
import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterator, List, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)

GLOBSTAR = "**"

_MISSING_ERRNOS = (errno.ENOENT, errno.ENOTDIR)
_NUMERIC_RANGE = re.compile(r"^(-?\d+)\.\.(-?\d+)$")


@dataclass(frozen=True)
class FileMatch:
    """One glob result and the text its wildcard segments matched"""
    file_path: str
    captured_subpath: str


# ---------------------------------------------------------------------------
# Brace expansion
# ---------------------------------------------------------------------------

def _find_brace_set(pattern: str) -> Optional[Tuple[int, int, List[str]]]:
    """Locate the first expandable `{...}` and split its body on top-level commas."""
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "{":
            depth = 0
            parts: List[str] = []
            part_start = i + 1
            j = i
            while j < len(pattern):
                c = pattern[j]
                if c == "\\":
                    j += 2
                    continue
                if c == "{":
                    depth += 1
                elif c == "}":
                    depth -= 1
                    if depth == 0:
                        parts.append(pattern[part_start:j])
                        if len(parts) > 1:
                            return i, j, parts
                        match = _NUMERIC_RANGE.match(parts[0])
                        if match:
                            lo, hi = int(match.group(1)), int(match.group(2))
                            step = 1 if hi >= lo else -1
                            return i, j, [str(n) for n in range(lo, hi + step, step)]
                        break  # `{x}` is literal
                elif c == "," and depth == 1:
                    parts.append(pattern[part_start:j])
                    part_start = j + 1
                j += 1
        i += 1
    return None


def expand_braces(pattern: str) -> List[str]:
    """
    Expand `{a,b}` and `{1..3}` forms, left to right.

    >>> expand_braces("./{a,b}/*.js")
    ['./a/*.js', './b/*.js']
    """
    found = _find_brace_set(pattern)
    if found is None:
        return [pattern]
    start, end, alternatives = found
    head, tail = pattern[:start], pattern[end + 1:]
    expanded: List[str] = []
    for alt in alternatives:
        for item in expand_braces(head + alt + tail):
            if item not in expanded:
                expanded.append(item)
    return expanded


# ---------------------------------------------------------------------------
# Segment translation
# ---------------------------------------------------------------------------

def _segment_has_magic(segment: str) -> bool:
    return _translate_segment(segment)[1]


@lru_cache(maxsize=256)
def _translate_segment(segment: str) -> Tuple[Optional[Pattern], bool]:
    """
    Compile one path segment to a regex with a single capture group.

    The group spans from the first wildcard token to the last one, so
    `foo-*.js` captures `bar` from `foo-bar.js` and `*-*.js` captures `a-b`
    from `a-b.js`. Returns (regex, has_magic); regex is None for literals.
    """
    tokens: List[Tuple[str, bool]] = []  # (regex piece, is_wildcard)
    i = 0
    n = len(segment)
    while i < n:
        ch = segment[i]
        if ch == "\\" and i + 1 < n:
            tokens.append((re.escape(segment[i + 1]), False))
            i += 2
        elif ch == "*":
            while i < n and segment[i] == "*":
                i += 1
            tokens.append((r"[^/]*", True))
        elif ch == "?":
            tokens.append((r"[^/]", True))
            i += 1
        elif ch == "[":
            j = i + 1
            if j < n and segment[j] in "!^":
                j += 1
            if j < n and segment[j] == "]":
                j += 1
            while j < n and segment[j] != "]":
                j += 1
            if j >= n:
                tokens.append((re.escape(ch), False))
                i += 1
                continue
            body = segment[i + 1:j]
            negate = body[:1] in ("!", "^")
            if negate:
                body = body[1:]
            body = body.replace("\\", "\\\\").replace("[", "\\[")
            klass = f"[^/{body}]" if negate else f"[{body}]"
            tokens.append((klass, True))
            i = j + 1
        else:
            tokens.append((re.escape(ch), False))
            i += 1

    wild = [idx for idx, (_, is_wild) in enumerate(tokens) if is_wild]
    if not wild:
        return None, False

    first, last = wild[0], wild[-1]
    body = (
        "".join(piece for piece, _ in tokens[:first])
        + "(" + "".join(piece for piece, _ in tokens[first:last + 1]) + ")"
        + "".join(piece for piece, _ in tokens[last + 1:])
    )
    if not segment.startswith("."):
        body = r"(?!\.)" + body
    return re.compile(body, re.DOTALL), True


def has_magic(pattern: str) -> bool:
    """True if `pattern` contains glob syntax (wildcards, classes or brace sets)."""
    expanded = expand_braces(pattern)
    if len(expanded) > 1:
        return True
    return any(
        seg == GLOBSTAR or _segment_has_magic(seg)
        for seg in expanded[0].split("/")
    )


# ---------------------------------------------------------------------------
# Filesystem walk
# ---------------------------------------------------------------------------

def _is_missing(exc: OSError) -> bool:
    return exc.errno in _MISSING_ERRNOS


def _list_dir(path: str) -> List[os.DirEntry]:
    try:
        with os.scandir(path) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        if _is_missing(exc):
            return []
        raise


def _exists(path: str) -> bool:
    try:
        os.lstat(path)
    except OSError as exc:
        if _is_missing(exc):
            return False
        raise
    return True


def _join(rel: str, name: str) -> str:
    return name if not rel else f"{rel}/{name}"


def _walk(cwd: str, rel: str, segments: Tuple[str, ...], captures: Tuple[str, ...]) -> Iterator[Tuple[str, Tuple[str, ...]]]:
    if not segments:
        yield rel, captures
        return

    segment, rest = segments[0], segments[1:]
    here = os.path.join(cwd, rel) if rel else cwd

    if segment == GLOBSTAR:
        yield from _walk_globstar(cwd, rel, rest, captures, "")
        return

    if segment == "":
        # repeated or trailing separator
        yield from _walk(cwd, rel, rest, captures)
        return

    regex, magic = _translate_segment(segment)
    if not magic:
        literal = segment.replace("\\", "")
        child = _join(rel, literal)
        if rest or _exists(os.path.join(cwd, child)):
            yield from _walk(cwd, child, rest, captures)
        return

    for entry in _list_dir(here):
        match = regex.fullmatch(entry.name)
        if match is None:
            continue
        if rest and not entry.is_dir():
            continue
        yield from _walk(cwd, _join(rel, entry.name), rest, captures + (match.group(1),))


def _walk_globstar(cwd: str, rel: str, rest: Tuple[str, ...], captures: Tuple[str, ...], crossed: str) -> Iterator[Tuple[str, Tuple[str, ...]]]:
    """
    Expand `**` below `rel`. With segments left, each crossed directory
    continues the walk; as the last segment it yields the files of every
    crossed directory (never the directories themselves).
    """
    here = os.path.join(cwd, rel) if rel else cwd
    entries = _list_dir(here)
    if rest:
        yield from _walk(cwd, rel, rest, captures + (crossed,))
    else:
        for entry in entries:
            if entry.name.startswith(".") or entry.is_dir():
                continue
            yield _join(rel, entry.name), captures + (_join(crossed, entry.name),)
    for entry in entries:
        if entry.name.startswith(".") or entry.is_symlink() or not entry.is_dir():
            continue
        yield from _walk_globstar(
            cwd, _join(rel, entry.name), rest, captures, _join(crossed, entry.name)
        )


def _path_order(path: str) -> Tuple[str, str]:
    return path.casefold(), path


def iter_matches(pattern: str, cwd: str) -> List[FileMatch]:
    """
    Match `pattern` under `cwd`.

    Returns matches ordered by path, case-insensitively with ties broken on
    the exact string (`a.js` before `B.js` before `b.js`), each path spelled
    the way the pattern spells it (`./plugins/a.js` for `./plugins/*.js`).
    A path reachable through several expansions keeps the capture of the
    first one.
    """
    found: Dict[str, str] = {}
    for expanded in expand_braces(pattern):
        segments = tuple(expanded.split("/"))
        for rel, captures in _walk(cwd, "", segments, ()):
            if rel in found:
                continue
            found[rel] = "/".join(c for c in captures if c)
    logger.debug(f"glob {pattern!r} in {cwd}: {len(found)} match(es)")
    return [FileMatch(path, found[path]) for path in sorted(found, key=_path_order)]


def glob(pattern: str, cwd: str) -> List[str]:
    """Plain path list for `pattern` under `cwd`, sorted."""
    return [m.file_path for m in iter_matches(pattern, cwd)]
