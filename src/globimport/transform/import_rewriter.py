"""
Glob Import Rewriting

Entry point invoked by the host once per import declaration:

    Inspect -> NoOp
    Inspect -> Resolve -> Validate -> Synthesize -> Replace

Any GlobImportError raised on the way gets the statement's location and
aborts the file; the statement is either fully replaced or left untouched.
"""

import logging
import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List, MutableSequence, Optional, Sequence

from ..shared.errors import GlobImportError, GlobImportImplementationError
from ..shared.nodes import ImportDeclaration, Statement
from ..utils.config import GlobImportOptions
from ..resolution.glob_resolver import GlobResolver, is_glob_source
from ..resolution.collision_guard import CollisionGuard
from .declarations import DeclarationSynthesizer

logger = logging.getLogger(__name__)


class StatementSite(ABC):
    """Host handle on one statement that can be swapped for others in place."""

    @property
    @abstractmethod
    def node(self) -> Statement: ...

    @abstractmethod
    def replace_with_multiple(self, nodes: Sequence[Statement]) -> None: ...


class ProgramStatementSite(StatementSite):
    """Statement at `index` of a mutable statement list."""

    def __init__(self, statements: MutableSequence[Statement], index: int):
        self.statements = statements
        self.index = index

    @property
    def node(self) -> Statement:
        return self.statements[self.index]

    def replace_with_multiple(self, nodes: Sequence[Statement]) -> None:
        self.statements[self.index:self.index + 1] = list(nodes)


class ImportRewriter:
    """
    Rewrites glob imports.

    Holds no per-statement state; one instance serves a whole file (or many).
    """

    def __init__(self,
                 options: Optional[GlobImportOptions] = None,
                 resolver: Optional[GlobResolver] = None,
                 guard: Optional[CollisionGuard] = None,
                 synthesizer: Optional[DeclarationSynthesizer] = None):
        self.options = options or GlobImportOptions()
        self.resolver = resolver or GlobResolver(self.options)
        self.guard = guard or CollisionGuard()
        self.synthesizer = synthesizer or DeclarationSynthesizer()

    @contextmanager
    def _statement_scope(self, node: Statement) -> Iterator[None]:
        try:
            yield
        except GlobImportError as exc:
            exc.with_location(node.location)
            raise

    def replacements_for(self, node: ImportDeclaration, filename: str) -> Optional[List[Statement]]:
        """
        Statements replacing `node`, or None when it is not a glob import.

        Args:
            node: import declaration to inspect
            filename: absolute path of the file being compiled
        """
        with self._statement_scope(node):
            pattern = node.source.value
            if not is_glob_source(pattern):
                return None

            base_directory = os.path.dirname(filename)
            modules = self.resolver.resolve(pattern, base_directory)
            self.guard.validate(modules)
            replacement = self.synthesizer.synthesize(node.specifiers, modules)

        for stmt in replacement:
            stmt.location = node.location
        logger.debug(f"{filename}: {pattern!r} -> {len(replacement)} statement(s)")
        return replacement

    def rewrite(self, site: StatementSite, filename: str) -> bool:
        """Replace the import at `site` in place. Returns False for a no-op."""
        node = site.node
        if not isinstance(node, ImportDeclaration):
            raise GlobImportImplementationError(
                f"ImportRewriter invoked on {type(node).__name__}, expected ImportDeclaration"
            )
        replacement = self.replacements_for(node, filename)
        if replacement is None:
            return False
        site.replace_with_multiple(replacement)
        return True
