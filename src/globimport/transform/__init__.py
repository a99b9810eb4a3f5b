"""
Glob import transform: replacement synthesis and in-place rewriting.
"""

from .declarations import DeclarationSynthesizer, private_binding_name
from .import_rewriter import ImportRewriter, StatementSite, ProgramStatementSite
