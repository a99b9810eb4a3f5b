"""Code generation: module AST back to source."""
from .emitter import CodeEmitter, quote
