"""
Glob Import Pass

Walks the top-level statements of a program once, in order, and hands every
import declaration to the ImportRewriter. Replacement statements are spliced in
place and skipped by the walk, so generated imports are never re-inspected.
"""

import logging

from ..shared.nodes import ImportDeclaration, Program
from ..transform.import_rewriter import ImportRewriter, ProgramStatementSite
from .base import BasePass, TransformContext

logger = logging.getLogger(__name__)


class GlobImportPass(BasePass):

    def run(self, program: Program, ctx: TransformContext) -> Program:
        rewriter = ImportRewriter(ctx.options)
        statements = program.statements
        rewritten = 0
        index = 0
        while index < len(statements):
            if not isinstance(statements[index], ImportDeclaration):
                index += 1
                continue
            before = len(statements)
            if rewriter.rewrite(ProgramStatementSite(statements, index), ctx.filename):
                rewritten += 1
                index += len(statements) - before + 1
            else:
                index += 1
        logger.debug(f"{ctx.filename}: rewrote {rewritten} glob import(s)")
        return program
