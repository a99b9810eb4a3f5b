"""
AST Visitor Pattern

Abstract visitor with one visit_* method per node type. Nodes dispatch through
accept(), so a visitor never needs isinstance() chains.
"""

from typing import TypeVar, Generic, TYPE_CHECKING
from abc import ABC, abstractmethod

if TYPE_CHECKING:
    from .nodes import (
        Program, ImportDeclaration, ImportDefaultSpecifier, ImportNamespaceSpecifier,
        ImportSpecifier, VariableDeclaration, ExpressionStatement, RawStatement,
        Identifier, StringLiteral, ObjectExpression, ObjectProperty,
        CallExpression, MemberExpression,
    )

T = TypeVar('T')


class ASTVisitor(ABC, Generic[T]):
    """
    Base visitor over module AST nodes.

    Example:
        class NameCollector(ASTVisitor[str]):
            def visit_identifier(self, node: Identifier) -> str:
                return node.name
            ...
    """

    # Statements
    @abstractmethod
    def visit_program(self, node: 'Program') -> T: ...

    @abstractmethod
    def visit_import_declaration(self, node: 'ImportDeclaration') -> T: ...

    @abstractmethod
    def visit_variable_declaration(self, node: 'VariableDeclaration') -> T: ...

    @abstractmethod
    def visit_expression_statement(self, node: 'ExpressionStatement') -> T: ...

    @abstractmethod
    def visit_raw_statement(self, node: 'RawStatement') -> T: ...

    # Specifiers
    @abstractmethod
    def visit_import_default_specifier(self, node: 'ImportDefaultSpecifier') -> T: ...

    @abstractmethod
    def visit_import_namespace_specifier(self, node: 'ImportNamespaceSpecifier') -> T: ...

    @abstractmethod
    def visit_import_specifier(self, node: 'ImportSpecifier') -> T: ...

    # Expressions
    @abstractmethod
    def visit_identifier(self, node: 'Identifier') -> T: ...

    @abstractmethod
    def visit_string_literal(self, node: 'StringLiteral') -> T: ...

    @abstractmethod
    def visit_object_expression(self, node: 'ObjectExpression') -> T: ...

    @abstractmethod
    def visit_object_property(self, node: 'ObjectProperty') -> T: ...

    @abstractmethod
    def visit_call_expression(self, node: 'CallExpression') -> T: ...

    @abstractmethod
    def visit_member_expression(self, node: 'MemberExpression') -> T: ...
