"""
Transform Driver

Runs the whole host pipeline for one file:

1. Parsing (source -> Program)
2. Glob import pass (rewrite glob imports in place)
3. Emission (Program -> source)
"""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Any, Union

from ..codegen.emitter import CodeEmitter
from ..frontend.parser import Parser
from ..passes.base import BasePass, TransformContext
from ..passes.glob_imports import GlobImportPass
from ..shared.errors import GlobImportSourceError, ErrorReporter
from ..shared.nodes import Program
from ..utils.config import GlobImportOptions, DEFAULT_FILE_ENCODING

logger = logging.getLogger(__name__)


class TransformResult:
    """Result of transforming one file"""

    def __init__(
        self,
        code: Optional[str] = None,
        program: Optional[Program] = None,
        ctx: Optional[TransformContext] = None,
        success: bool = False,
    ):
        self.code = code
        self.program = program
        self.ctx = ctx
        self.success = success

    @property
    def reporter(self) -> Optional[ErrorReporter]:
        return self.ctx.reporter if self.ctx else None

    def has_errors(self) -> bool:
        if self.reporter is not None:
            return self.reporter.has_errors()
        return not self.success

    def format_errors(self, color: Optional[bool] = False) -> str:
        if self.reporter is None or not self.reporter.has_errors():
            return ""
        return self.reporter.format_all_errors(color=color)


class TransformDriver:
    """
    Parses, rewrites and re-emits module sources.

    Stateless between calls: every call builds a fresh TransformContext, so one
    driver can serve any number of files.
    """

    def __init__(self, options: Union[GlobImportOptions, Mapping[str, Any], None] = None,
                 parser: Optional[Parser] = None):
        if not isinstance(options, GlobImportOptions):
            options = GlobImportOptions.from_mapping(options)
        self.options = options
        self.parser = parser or Parser()
        self.passes: List[BasePass] = [GlobImportPass()]
        self.emitter = CodeEmitter()

    def transform(self, source: str, source_file: str,
                  options: Optional[GlobImportOptions] = None) -> TransformResult:
        """
        Transform `source`, the contents of `source_file`.

        `source_file` should be absolute: glob patterns resolve against its
        directory. Source errors stop the file and land in the result's
        reporter; filesystem errors propagate.
        """
        ctx = TransformContext(str(source_file), options or self.options, source=source)
        try:
            program = self.parser.parse(source, ctx.filename)
            for pass_instance in self.passes:
                program = pass_instance.run(program, ctx)
        except GlobImportSourceError as e:
            logger.debug(f"{ctx.filename}: {e.message}")
            ctx.reporter.report_exception(e)
            return TransformResult(ctx=ctx, success=False)

        return TransformResult(
            code=self.emitter.emit(program),
            program=program,
            ctx=ctx,
            success=True,
        )

    def transform_file(self, path: Union[str, Path],
                       options: Optional[GlobImportOptions] = None) -> TransformResult:
        path = Path(path).resolve()
        source = path.read_text(encoding=DEFAULT_FILE_ENCODING)
        return self.transform(source, str(path), options)
