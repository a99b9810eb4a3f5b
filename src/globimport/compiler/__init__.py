"""Driver for whole-file transforms."""
from .driver import TransformDriver, TransformResult
