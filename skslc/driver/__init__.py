"""
skslc Driver Package

Batch command handling for the SkSL compiler: argument batching, stage and
backend selection by file extension, the settings pragma and result codes.
"""

from .errors import (ResultCode, DriverError, InputError, PragmaError,
                     CompileError, OutputError)
from .stages import resolve_program_kind
from .pragma import detect_shader_settings
from .backends import Backend, Job, base_name, resolve_backend
from .job import JobRunner, process_command
from .batch import split_batch, run_batch

__all__ = [
    "ResultCode",
    "DriverError",
    "InputError",
    "PragmaError",
    "CompileError",
    "OutputError",
    "resolve_program_kind",
    "detect_shader_settings",
    "Backend",
    "Job",
    "base_name",
    "resolve_backend",
    "JobRunner",
    "process_command",
    "split_batch",
    "run_batch",
]
