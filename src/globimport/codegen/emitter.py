"""
Code Emission

Prints module AST back to JavaScript source, one statement per line.
"""

from typing import List

from ..shared.ast_visitor import ASTVisitor
from ..shared.nodes import (
    CallExpression, ExpressionStatement, Identifier, ImportDeclaration,
    ImportDefaultSpecifier, ImportNamespaceSpecifier, ImportSpecifier, MemberExpression,
    ObjectExpression, ObjectProperty, Program, RawStatement, StringLiteral,
    VariableDeclaration,
)

INDENT = "  "

_QUOTE_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def quote(value: str) -> str:
    """Single-quoted JavaScript string literal for `value`."""
    return "'" + "".join(_QUOTE_ESCAPES.get(ch, ch) for ch in value) + "'"


class CodeEmitter(ASTVisitor[str]):

    def emit(self, program: Program) -> str:
        code = program.accept(self)
        return code + "\n" if code else code

    # Statements
    def visit_program(self, node: Program) -> str:
        return "\n".join(stmt.accept(self) for stmt in node.statements)

    def visit_import_declaration(self, node: ImportDeclaration) -> str:
        source = node.source.accept(self)
        if not node.specifiers:
            return f"import {source};"

        parts: List[str] = []
        named: List[str] = []
        for specifier in node.specifiers:
            if isinstance(specifier, ImportSpecifier):
                named.append(specifier.accept(self))
            else:
                parts.append(specifier.accept(self))
        if named:
            parts.append("{ " + ", ".join(named) + " }")
        return f"import {', '.join(parts)} from {source};"

    def visit_variable_declaration(self, node: VariableDeclaration) -> str:
        return f"{node.kind} {node.name.accept(self)} = {node.init.accept(self)};"

    def visit_expression_statement(self, node: ExpressionStatement) -> str:
        return f"{node.expr.accept(self)};"

    def visit_raw_statement(self, node: RawStatement) -> str:
        return node.text

    # Specifiers
    def visit_import_default_specifier(self, node: ImportDefaultSpecifier) -> str:
        return node.local.accept(self)

    def visit_import_namespace_specifier(self, node: ImportNamespaceSpecifier) -> str:
        return f"* as {node.local.accept(self)}"

    def visit_import_specifier(self, node: ImportSpecifier) -> str:
        if node.imported.name == node.local.name:
            return node.local.accept(self)
        return f"{node.imported.accept(self)} as {node.local.accept(self)}"

    # Expressions
    def visit_identifier(self, node: Identifier) -> str:
        return node.name

    def visit_string_literal(self, node: StringLiteral) -> str:
        return quote(node.value)

    def visit_object_expression(self, node: ObjectExpression) -> str:
        if not node.properties:
            return "{}"
        body = ",\n".join(INDENT + prop.accept(self) for prop in node.properties)
        return "{\n" + body + "\n}"

    def visit_object_property(self, node: ObjectProperty) -> str:
        return f"{node.key.accept(self)}: {node.value.accept(self)}"

    def visit_call_expression(self, node: CallExpression) -> str:
        args = ", ".join(arg.accept(self) for arg in node.arguments)
        return f"{node.callee.accept(self)}({args})"

    def visit_member_expression(self, node: MemberExpression) -> str:
        return f"{node.object.accept(self)}.{node.property.accept(self)}"
