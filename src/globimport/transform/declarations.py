"""
Replacement Declarations

Builds the statements that stand in for a glob import:

    import './plugins/a';                      // no specifiers
    import './plugins/b';

    import * as _P_a from './plugins/a';       // `import * as P from ...`
    import * as _P_b from './plugins/b';       // (default bindings for `import P from ...`)
    const P = {
      './plugins/a': _P_a,
      './plugins/b': _P_b
    };
    Object.freeze(P);
"""

from typing import List, Sequence

from ..shared.errors import UnsupportedSpecifierShapeError
from ..shared.nodes import (
    CallExpression, ExpressionStatement, Identifier, ImportDeclaration,
    ImportDefaultSpecifier, ImportNamespaceSpecifier, MemberExpression,
    ObjectExpression, ObjectProperty, Specifier, Statement, StringLiteral,
    VariableDeclaration,
)
from ..utils.config import (
    NAMESPACE_DECLARATION_KIND, NAMESPACE_FREEZE_CALLEE, PRIVATE_BINDING_FORMAT,
)
from ..resolution.glob_resolver import ChildModule


def private_binding_name(local_name: str, member_name: str) -> str:
    return PRIVATE_BINDING_FORMAT.format(local=local_name, member=member_name)


def make_side_effect_import(module: ChildModule) -> ImportDeclaration:
    return ImportDeclaration([], StringLiteral(module.relative_import_path))


def make_import(local_name: str, src: str, is_default: bool) -> ImportDeclaration:
    local = Identifier(local_name)
    specifier = ImportDefaultSpecifier(local) if is_default else ImportNamespaceSpecifier(local)
    return ImportDeclaration([specifier], StringLiteral(src))


def make_namespace_object(local_name: str, modules: Sequence[ChildModule]) -> VariableDeclaration:
    properties = [
        ObjectProperty(
            StringLiteral(module.relative_import_path),
            Identifier(private_binding_name(local_name, module.derived_name)),
        )
        for module in modules
    ]
    return VariableDeclaration(NAMESPACE_DECLARATION_KIND, Identifier(local_name), ObjectExpression(properties))


def freeze_namespace_object(local_name: str) -> ExpressionStatement:
    obj, method = NAMESPACE_FREEZE_CALLEE
    return ExpressionStatement(
        CallExpression(
            MemberExpression(Identifier(obj), Identifier(method)),
            [Identifier(local_name)],
        )
    )


class DeclarationSynthesizer:
    """Picks the output shape from the import's specifiers and builds it."""

    def synthesize(self, specifiers: Sequence[Specifier], modules: Sequence[ChildModule]) -> List[Statement]:
        """
        Replacement statements for an import with `specifiers` over `modules`.

        `modules` must already have passed the collision guard.

        Raises:
            UnsupportedSpecifierShapeError: named imports, or more than one specifier
        """
        if not specifiers:
            return [make_side_effect_import(module) for module in modules]

        if len(specifiers) != 1:
            raise UnsupportedSpecifierShapeError(
                f"Glob imports take a single default or namespace binding, got {len(specifiers)} specifiers"
            )

        specifier = specifiers[0]
        if not isinstance(specifier, (ImportDefaultSpecifier, ImportNamespaceSpecifier)):
            raise UnsupportedSpecifierShapeError(
                "Do not support import {...names...} from 'glob:...'",
                help="use `import * as name from '...'` and read members from `name`",
            )

        local_name = specifier.local.name
        is_default = isinstance(specifier, ImportDefaultSpecifier)
        replacement: List[Statement] = [
            make_import(private_binding_name(local_name, module.derived_name), module.relative_import_path, is_default)
            for module in modules
        ]
        replacement.append(make_namespace_object(local_name, modules))
        replacement.append(freeze_namespace_object(local_name))
        return replacement
