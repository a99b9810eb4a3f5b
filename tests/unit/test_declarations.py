"""
Tests for replacement statement synthesis.
"""

import pytest

from globimport.resolution.glob_resolver import ChildModule
from globimport.shared.errors import UnsupportedSpecifierShapeError
from globimport.shared.nodes import (
    CallExpression, ExpressionStatement, Identifier, ImportDeclaration,
    ImportDefaultSpecifier, ImportNamespaceSpecifier, ImportSpecifier,
    MemberExpression, ObjectExpression, ObjectProperty, StringLiteral,
    VariableDeclaration,
)
from globimport.transform.declarations import DeclarationSynthesizer, private_binding_name

MODULES = [
    ChildModule("./plugins/a.js", "./plugins/a", "a"),
    ChildModule("./plugins/sub/d.js", "./plugins/sub/d", "sub$d"),
]


def _freeze(name):
    return ExpressionStatement(CallExpression(
        MemberExpression(Identifier("Object"), Identifier("freeze")),
        [Identifier(name)],
    ))


class TestDeclarationSynthesizer:

    def setup_method(self):
        self.synth = DeclarationSynthesizer()

    def test_private_binding_name(self):
        assert private_binding_name("P", "sub$d") == "_P_sub$d"

    def test_side_effect_form(self):
        result = self.synth.synthesize([], MODULES)
        assert result == [
            ImportDeclaration([], StringLiteral("./plugins/a")),
            ImportDeclaration([], StringLiteral("./plugins/sub/d")),
        ]

    def test_namespace_form(self):
        result = self.synth.synthesize([ImportNamespaceSpecifier(Identifier("P"))], MODULES)
        assert result == [
            ImportDeclaration([ImportNamespaceSpecifier(Identifier("_P_a"))], StringLiteral("./plugins/a")),
            ImportDeclaration([ImportNamespaceSpecifier(Identifier("_P_sub$d"))], StringLiteral("./plugins/sub/d")),
            VariableDeclaration("const", Identifier("P"), ObjectExpression([
                ObjectProperty(StringLiteral("./plugins/a"), Identifier("_P_a")),
                ObjectProperty(StringLiteral("./plugins/sub/d"), Identifier("_P_sub$d")),
            ])),
            _freeze("P"),
        ]

    def test_default_form_uses_default_imports(self):
        result = self.synth.synthesize([ImportDefaultSpecifier(Identifier("all"))], MODULES)
        assert result[0] == ImportDeclaration(
            [ImportDefaultSpecifier(Identifier("_all_a"))], StringLiteral("./plugins/a")
        )
        assert isinstance(result[1].specifiers[0], ImportDefaultSpecifier)
        assert result[-1] == _freeze("all")
        assert len(result) == len(MODULES) + 2

    def test_empty_match_set_still_declares_object(self):
        result = self.synth.synthesize([ImportNamespaceSpecifier(Identifier("P"))], [])
        assert result == [
            VariableDeclaration("const", Identifier("P"), ObjectExpression([])),
            _freeze("P"),
        ]

    def test_empty_match_set_without_specifiers(self):
        assert self.synth.synthesize([], []) == []

    def test_named_specifier_is_unsupported(self):
        with pytest.raises(UnsupportedSpecifierShapeError, match=r"import \{\.\.\.names\.\.\.\}"):
            self.synth.synthesize([ImportSpecifier(Identifier("a"))], MODULES)

    def test_several_specifiers_are_unsupported(self):
        specifiers = [ImportDefaultSpecifier(Identifier("d")), ImportNamespaceSpecifier(Identifier("n"))]
        with pytest.raises(UnsupportedSpecifierShapeError, match="got 2 specifiers"):
            self.synth.synthesize(specifiers, MODULES)
