"""
Module AST Definitions

Minimal ECMAScript-module nodes: just enough for the host to hand import
declarations to the glob-import transform and for the transform to build its
replacement statements. Anything the transform does not need to understand is
kept as an opaque RawStatement.

Visitor Pattern Support:
- All nodes have accept() methods for polymorphic dispatch
- Equality is structural over the declared fields (locations are ignored)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union, TYPE_CHECKING, TypeVar
from enum import Enum

from .source_location import SourceLocation

if TYPE_CHECKING:
    from .ast_visitor import ASTVisitor

T = TypeVar('T')


class NodeType(Enum):
    """AST node types"""
    PROGRAM = "program"
    IMPORT_DECL = "import_decl"
    IMPORT_DEFAULT_SPECIFIER = "import_default_specifier"
    IMPORT_NAMESPACE_SPECIFIER = "import_namespace_specifier"
    IMPORT_SPECIFIER = "import_specifier"
    VARIABLE_DECL = "variable_decl"
    EXPR_STMT = "expr_stmt"
    RAW_STMT = "raw_stmt"  # Source text passed through untouched
    IDENTIFIER = "identifier"
    STRING_LITERAL = "string_literal"
    OBJECT_EXPR = "object_expr"
    OBJECT_PROPERTY = "object_property"
    CALL_EXPR = "call_expr"
    MEMBER_EXPR = "member_expr"


class ASTNode:
    """
    Base class for all AST nodes

    Subclasses must implement accept() to call the matching visit_* method.
    """
    __slots__ = ('node_type', 'location')

    def __init__(self, node_type: NodeType, location: Optional[SourceLocation]):
        self.node_type = node_type
        self.location = location

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        raise NotImplementedError(f"accept() not implemented for {self.__class__.__name__}")


class Expression(ASTNode):
    """Base class for expressions"""


class Statement(ASTNode):
    """Base class for statements (the unit the host splices in and out)"""


# =========================================================================
# EXPRESSIONS
# =========================================================================

@dataclass
class Identifier(Expression):
    name: str

    def __init__(self, name: str, location: SourceLocation = None):
        super().__init__(NodeType.IDENTIFIER, location)
        self.name = name

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_identifier(self)


@dataclass
class StringLiteral(Expression):
    value: str

    def __init__(self, value: str, location: SourceLocation = None):
        super().__init__(NodeType.STRING_LITERAL, location)
        self.value = value

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_string_literal(self)


@dataclass
class ObjectProperty(ASTNode):
    """`key: value` entry of an object literal"""
    key: Union[StringLiteral, Identifier]
    value: Expression

    def __init__(self, key: Union[StringLiteral, Identifier], value: Expression, location: SourceLocation = None):
        super().__init__(NodeType.OBJECT_PROPERTY, location)
        self.key = key
        self.value = value

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_object_property(self)


@dataclass
class ObjectExpression(Expression):
    properties: List[ObjectProperty]

    def __init__(self, properties: List[ObjectProperty], location: SourceLocation = None):
        super().__init__(NodeType.OBJECT_EXPR, location)
        self.properties = properties

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_object_expression(self)


@dataclass
class MemberExpression(Expression):
    """`object.property` (non-computed)"""
    object: Expression
    property: Identifier

    def __init__(self, object: Expression, property: Identifier, location: SourceLocation = None):
        super().__init__(NodeType.MEMBER_EXPR, location)
        self.object = object
        self.property = property

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_member_expression(self)


@dataclass
class CallExpression(Expression):
    callee: Expression
    arguments: List[Expression]

    def __init__(self, callee: Expression, arguments: List[Expression], location: SourceLocation = None):
        super().__init__(NodeType.CALL_EXPR, location)
        self.callee = callee
        self.arguments = arguments

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_call_expression(self)


# =========================================================================
# IMPORT SPECIFIERS
# =========================================================================

@dataclass
class ImportDefaultSpecifier(ASTNode):
    """`import local from '...'`"""
    local: Identifier

    def __init__(self, local: Identifier, location: SourceLocation = None):
        super().__init__(NodeType.IMPORT_DEFAULT_SPECIFIER, location)
        self.local = local

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_import_default_specifier(self)


@dataclass
class ImportNamespaceSpecifier(ASTNode):
    """`import * as local from '...'`"""
    local: Identifier

    def __init__(self, local: Identifier, location: SourceLocation = None):
        super().__init__(NodeType.IMPORT_NAMESPACE_SPECIFIER, location)
        self.local = local

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_import_namespace_specifier(self)


@dataclass
class ImportSpecifier(ASTNode):
    """`import { imported as local } from '...'`"""
    local: Identifier
    imported: Identifier

    def __init__(self, local: Identifier, imported: Optional[Identifier] = None, location: SourceLocation = None):
        super().__init__(NodeType.IMPORT_SPECIFIER, location)
        self.local = local
        self.imported = imported if imported is not None else Identifier(local.name, local.location)

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_import_specifier(self)


Specifier = Union[ImportDefaultSpecifier, ImportNamespaceSpecifier, ImportSpecifier]


# =========================================================================
# STATEMENTS
# =========================================================================

@dataclass
class ImportDeclaration(Statement):
    """
    Import declaration.

    An empty specifier list is a side-effect import (`import './a';`).
    """
    specifiers: List[Specifier]
    source: StringLiteral

    def __init__(self, specifiers: List[Specifier], source: StringLiteral, location: SourceLocation = None):
        super().__init__(NodeType.IMPORT_DECL, location)
        self.specifiers = specifiers
        self.source = source

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_import_declaration(self)


@dataclass
class VariableDeclaration(Statement):
    """Single-binding declaration (`const name = init;`)"""
    kind: str
    name: Identifier
    init: Expression

    def __init__(self, kind: str, name: Identifier, init: Expression, location: SourceLocation = None):
        super().__init__(NodeType.VARIABLE_DECL, location)
        self.kind = kind
        self.name = name
        self.init = init

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_variable_declaration(self)


@dataclass
class ExpressionStatement(Statement):
    """Expression evaluated for its side effect"""
    expr: Expression

    def __init__(self, expr: Expression, location: SourceLocation = None):
        super().__init__(NodeType.EXPR_STMT, location or (expr.location if expr else None))
        self.expr = expr

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_expression_statement(self)


@dataclass
class RawStatement(Statement):
    """Source line the frontend does not model; emitted verbatim"""
    text: str

    def __init__(self, text: str, location: SourceLocation = None):
        super().__init__(NodeType.RAW_STMT, location)
        self.text = text

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_raw_statement(self)


@dataclass
class Program(ASTNode):
    """Program root node"""
    statements: List[Statement]

    def __init__(self, statements: List[Statement], location: SourceLocation = None):
        super().__init__(NodeType.PROGRAM, location)
        self.statements = statements

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_program(self)
