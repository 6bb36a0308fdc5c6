"""
SkSL Compiler Interface Package

Types shared between the driver and a compiler backend: program kinds and
settings, capability bundles, output streams and the Compiler base class.
"""

from .program import (ProgramKind, ProgramSettings, DEFAULT_INLINE_THRESHOLD,
                      INLINE_THRESHOLD_MAX)
from .caps import ShaderCaps, ShaderCapsCache, CAPS_NAMES, STANDALONE_CAPS
from .stream import FileOutputStream
from .base import Compiler, CompilerFactory, Dehydrator, UnavailableCompiler

__all__ = [
    "ProgramKind",
    "ProgramSettings",
    "DEFAULT_INLINE_THRESHOLD",
    "INLINE_THRESHOLD_MAX",
    "ShaderCaps",
    "ShaderCapsCache",
    "CAPS_NAMES",
    "STANDALONE_CAPS",
    "FileOutputStream",
    "Compiler",
    "CompilerFactory",
    "Dehydrator",
    "UnavailableCompiler",
]
