"""Program passes."""
from .base import BasePass, TransformContext
from .glob_imports import GlobImportPass
