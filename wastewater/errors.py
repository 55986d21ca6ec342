"""Pipeline error taxonomy.

Every error is fatal for the run. Each carries the stage it was raised in
and, when known, the source (file or table name) at fault, so the CLI can
print one line that tells the user where to look.
"""

from typing import Optional


class PipelineError(Exception):
    stage = "pipeline"

    def __init__(self, message: str, stage: Optional[str] = None, source: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if stage is not None:
            self.stage = stage
        self.source = source

    def __str__(self) -> str:
        where = f"{self.stage}"
        if self.source:
            where += f" [{self.source}]"
        return f"{where}: {self.message}"


class SourceNotFoundError(PipelineError):
    stage = "load"


class SourceFormatError(PipelineError):
    stage = "load"


class SchemaMismatchError(PipelineError):
    stage = "load"


class DateParseError(PipelineError):
    stage = "normalize"


class EmptyResultError(PipelineError):
    stage = "filter"


class NormalizationUndefinedError(PipelineError):
    stage = "combine"
