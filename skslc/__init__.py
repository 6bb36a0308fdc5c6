"""
skslc - SkSL Compiler Driver

Compiles SkSL shaders to SPIR-V, GLSL, Metal, C++ fragment processors and
dehydrated modules, one `--`-separated job at a time.

Example:
    import skslc

    runner = skslc.JobRunner(my_compiler_factory)
    code = skslc.run_batch(
        ["skslc", "blur.frag", "blur.glsl", "--", "GrBlur.fp", "GrBlur.cpp"],
        runner.run)
    print(code)  # ResultCode.SUCCESS
"""

from .compiler import (Compiler, CompilerFactory, Dehydrator, ProgramKind,
                       ProgramSettings, ShaderCaps, ShaderCapsCache)
from .driver import (ResultCode, JobRunner, process_command, run_batch,
                     split_batch, detect_shader_settings)
from .cli import main

__version__ = "0.1.0"

__all__ = [
    # Driver
    'JobRunner',
    'process_command',
    'run_batch',
    'split_batch',
    'detect_shader_settings',
    'ResultCode',
    'main',

    # Compiler interface
    'Compiler',
    'CompilerFactory',
    'Dehydrator',
    'ProgramKind',
    'ProgramSettings',
    'ShaderCaps',
    'ShaderCapsCache',
]


def version() -> str:
    """Get skslc version string."""
    return __version__
