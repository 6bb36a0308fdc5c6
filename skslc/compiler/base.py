"""
SkSL Compiler Interface

The narrow surface the driver uses to reach the compiler and its code
generators. Backends subclass Compiler and are handed to the driver as a
CompilerFactory.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple

from .caps import ShaderCaps
from .program import ProgramKind, ProgramSettings
from .stream import FileOutputStream


class Dehydrator(ABC):
    """Serializes a loaded module into a portable byte blob."""

    @abstractmethod
    def write_symbols(self, symbols: Any) -> None:
        pass

    @abstractmethod
    def write_elements(self, elements: Any) -> None:
        pass

    @abstractmethod
    def finish(self) -> bytes:
        """Return the serialized module."""
        pass

    def prefix_at_offset(self, offset: int) -> str:
        """Text to emit before the byte at `offset` in generated source."""
        return ""


class Compiler(ABC):
    """
    A compiler bound to one set of target capabilities.

    Every emitter returns False on failure, after which `error_text()`
    describes what went wrong.
    """

    def __init__(self, caps: ShaderCaps, permit_invalid_static_tests: bool = False):
        self.caps = caps
        self.permit_invalid_static_tests = permit_invalid_static_tests

    @abstractmethod
    def compile_program(self, kind: ProgramKind, text: str,
                        settings: ProgramSettings) -> Optional[Any]:
        """Compile source text, returning a program or None on error."""
        pass

    @abstractmethod
    def to_spirv(self, program: Any, out: FileOutputStream) -> bool:
        pass

    @abstractmethod
    def to_glsl(self, program: Any, out: FileOutputStream) -> bool:
        pass

    @abstractmethod
    def to_metal(self, program: Any, out: FileOutputStream) -> bool:
        pass

    @abstractmethod
    def to_h(self, program: Any, base_name: str, out: FileOutputStream) -> bool:
        pass

    @abstractmethod
    def to_cpp(self, program: Any, base_name: str, out: FileOutputStream) -> bool:
        pass

    @abstractmethod
    def load_module(self, kind: ProgramKind,
                    path: str) -> Optional[Tuple[Any, Any]]:
        """Load a module, returning (symbol table, declarations) or None."""
        pass

    @abstractmethod
    def make_dehydrator(self) -> Dehydrator:
        pass

    @abstractmethod
    def error_text(self) -> str:
        pass


CompilerFactory = Callable[[ShaderCaps, bool], Compiler]


class UnavailableCompiler(Compiler):
    """Stand-in used when no compiler backend has been configured."""

    MESSAGE = ("no SkSL compiler backend is configured; "
               "set SKSLC_COMPILER=<module>:<factory>\n")

    def compile_program(self, kind, text, settings):
        return None

    def to_spirv(self, program, out):
        return False

    def to_glsl(self, program, out):
        return False

    def to_metal(self, program, out):
        return False

    def to_h(self, program, base_name, out):
        return False

    def to_cpp(self, program, base_name, out):
        return False

    def load_module(self, kind, path):
        return None

    def make_dehydrator(self):
        raise RuntimeError(self.MESSAGE.strip())

    def error_text(self) -> str:
        return self.MESSAGE
