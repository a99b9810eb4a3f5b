"""
Shared components: source locations, diagnostics and the module AST.
"""

from .source_location import SourceLocation
from .errors import (
    Error, ErrorReporter,
    GlobImportSourceError, GlobImportError, GlobImportImplementationError,
    MissingGlobPatternError, NonRelativePatternError, UnresolvableIdentifierError,
    NameCollisionError, UnsupportedSpecifierShapeError,
)
from .nodes import (
    ASTNode, Expression, Statement, Program, NodeType,
    ImportDeclaration, ImportDefaultSpecifier, ImportNamespaceSpecifier, ImportSpecifier,
    Specifier, VariableDeclaration, ExpressionStatement, RawStatement,
    Identifier, StringLiteral, ObjectExpression, ObjectProperty,
    CallExpression, MemberExpression,
)
from .ast_visitor import ASTVisitor
