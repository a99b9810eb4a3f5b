"""
Tests for ImportRewriter: the per-statement entry point.
"""

import errno
import os

import pytest

from globimport.shared.errors import (
    GlobImportImplementationError, MissingGlobPatternError, NameCollisionError,
    NonRelativePatternError, UnsupportedSpecifierShapeError,
)
from globimport.shared.nodes import (
    Identifier, ImportDeclaration, ImportNamespaceSpecifier, ImportSpecifier,
    RawStatement, StringLiteral, VariableDeclaration,
)
from globimport.shared.source_location import SourceLocation
from globimport.resolution import matcher
from globimport.transform.import_rewriter import ImportRewriter, ProgramStatementSite


LOC = SourceLocation("index.js", 3, 1)


def _import(source, specifiers=None):
    return ImportDeclaration(specifiers or [], StringLiteral(source), LOC)


class TestImportRewriter:

    def setup_method(self):
        self.rewriter = ImportRewriter()

    def _rewrite(self, root, node):
        statements = [RawStatement("before();"), node, RawStatement("after();")]
        changed = self.rewriter.rewrite(ProgramStatementSite(statements, 1), str(root / "index.js"))
        return changed, statements

    def test_non_glob_import_is_untouched(self, plugin_tree):
        node = _import("./utils")
        changed, statements = self._rewrite(plugin_tree, node)
        assert not changed
        assert statements[1] is node

    def test_magic_without_star_is_untouched(self, plugin_tree):
        changed, _ = self._rewrite(plugin_tree, _import("./plugins/?.js"))
        assert not changed

    def test_side_effect_form(self, plugin_tree):
        changed, statements = self._rewrite(plugin_tree, _import("glob:./plugins/*.js"))
        assert changed
        assert [s.source.value for s in statements[1:-1]] == ["./plugins/a", "./plugins/b"]
        assert statements[0] == RawStatement("before();")
        assert statements[-1] == RawStatement("after();")

    def test_namespace_form(self, plugin_tree):
        node = _import("./plugins/*.js", [ImportNamespaceSpecifier(Identifier("P"))])
        changed, statements = self._rewrite(plugin_tree, node)
        assert changed
        assert len(statements) == 2 + 2 + 2
        decl = statements[3]
        assert isinstance(decl, VariableDeclaration)
        assert [p.key.value for p in decl.init.properties] == ["./plugins/a", "./plugins/b"]

    def test_replacements_carry_statement_location(self, plugin_tree):
        node = _import("./plugins/*.js", [ImportNamespaceSpecifier(Identifier("P"))])
        replacement = self.rewriter.replacements_for(node, str(plugin_tree / "index.js"))
        assert all(stmt.location == LOC for stmt in replacement)

    def test_missing_pattern_gets_location(self, plugin_tree):
        with pytest.raises(MissingGlobPatternError) as exc_info:
            self._rewrite(plugin_tree, _import("glob:./utils"))
        assert exc_info.value.location == LOC

    def test_non_relative_pattern(self, plugin_tree):
        with pytest.raises(NonRelativePatternError) as exc_info:
            self._rewrite(plugin_tree, _import("glob:plugins/*.js"))
        assert exc_info.value.location == LOC

    def test_named_import_gets_location(self, plugin_tree):
        node = _import("./plugins/*.js", [ImportSpecifier(Identifier("a"))])
        with pytest.raises(UnsupportedSpecifierShapeError) as exc_info:
            self._rewrite(plugin_tree, node)
        assert exc_info.value.location == LOC

    def test_collision_leaves_statements_untouched(self, make_tree):
        root = make_tree(["parts/foo-bar.js", "parts/fooBar.js"])
        node = _import("./parts/*.js", [ImportNamespaceSpecifier(Identifier("P"))])
        statements = [node]
        with pytest.raises(NameCollisionError):
            self.rewriter.rewrite(ProgramStatementSite(statements, 0), str(root / "index.js"))
        assert statements == [node]

    def test_filesystem_errors_propagate(self, plugin_tree, monkeypatch):
        def denied(path):
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)

        monkeypatch.setattr(matcher.os, "scandir", denied)
        with pytest.raises(PermissionError):
            self._rewrite(plugin_tree, _import("./plugins/*.js"))

    def test_non_import_statement_is_an_implementation_error(self, plugin_tree):
        statements = [RawStatement("x();")]
        with pytest.raises(GlobImportImplementationError):
            self.rewriter.rewrite(ProgramStatementSite(statements, 0), str(plugin_tree / "index.js"))

    def test_site_replaces_in_place(self):
        statements = [RawStatement("a"), RawStatement("b"), RawStatement("c")]
        ProgramStatementSite(statements, 1).replace_with_multiple([RawStatement("x"), RawStatement("y")])
        assert [s.text for s in statements] == ["a", "x", "y", "c"]
