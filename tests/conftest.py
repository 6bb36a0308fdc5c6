import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from skslc.compiler import (Compiler, Dehydrator, ProgramKind, ProgramSettings,
                            ShaderCaps, ShaderCapsCache)


class FakeProgram:
    def __init__(self, kind: ProgramKind, text: str, settings: ProgramSettings):
        self.kind = kind
        self.text = text
        self.settings = settings


class FakeDehydrator(Dehydrator):
    def __init__(self, data: bytes, break_every: int = 0):
        self.data = data
        self.break_every = break_every
        self.written: List[Any] = []

    def write_symbols(self, symbols):
        self.written.append(symbols)

    def write_elements(self, elements):
        self.written.append(elements)

    def finish(self) -> bytes:
        return self.data

    def prefix_at_offset(self, offset: int) -> str:
        if self.break_every and offset and offset % self.break_every == 0:
            return "\n"
        return ""


class FakeCompiler(Compiler):
    """Compiler that writes a one-line summary of the program it was given."""

    def __init__(self, caps: ShaderCaps, permit_invalid_static_tests: bool = False, *,
                 fail_compile: bool = False,
                 fail_emit: bool = False,
                 errors: str = "error: 1: undeclared identifier 'x'\n1 error\n",
                 module: Optional[Tuple[Any, Any]] = ("symbols", ["decl"]),
                 dehydrated: bytes = b"\x01\xff\x10",
                 break_every: int = 0):
        super().__init__(caps, permit_invalid_static_tests)
        self.fail_compile = fail_compile
        self.fail_emit = fail_emit
        self.errors = errors
        self.module = module
        self.dehydrated = dehydrated
        self.break_every = break_every
        self.programs: List[FakeProgram] = []
        self.emitted: List[Tuple[str, Optional[str]]] = []
        self.dehydrator: Optional[FakeDehydrator] = None

    def compile_program(self, kind, text, settings):
        if self.fail_compile:
            return None
        program = FakeProgram(kind, text, settings)
        self.programs.append(program)
        return program

    def _emit(self, backend: str, program: FakeProgram, out, base_name=None) -> bool:
        self.emitted.append((backend, base_name))
        out.write_text(f"// {backend} {program.kind.name} {base_name or ''}\n")
        return not self.fail_emit

    def to_spirv(self, program, out):
        return self._emit("spirv", program, out)

    def to_glsl(self, program, out):
        return self._emit("glsl", program, out)

    def to_metal(self, program, out):
        return self._emit("metal", program, out)

    def to_h(self, program, base_name, out):
        return self._emit("h", program, out, base_name)

    def to_cpp(self, program, base_name, out):
        return self._emit("cpp", program, out, base_name)

    def load_module(self, kind, path):
        return self.module

    def make_dehydrator(self):
        self.dehydrator = FakeDehydrator(self.dehydrated, self.break_every)
        return self.dehydrator

    def error_text(self) -> str:
        return self.errors


class FakeCompilerFactory:
    """CompilerFactory that remembers every compiler it built."""

    def __init__(self, **options: Any):
        self.options = options
        self.compilers: List[FakeCompiler] = []

    def __call__(self, caps: ShaderCaps, permit_invalid_static_tests: bool = False) -> FakeCompiler:
        compiler = FakeCompiler(caps, permit_invalid_static_tests, **self.options)
        self.compilers.append(compiler)
        return compiler

    @property
    def last(self) -> FakeCompiler:
        return self.compilers[-1]


@pytest.fixture
def make_compiler_factory() -> Callable[..., FakeCompilerFactory]:
    return FakeCompilerFactory


@pytest.fixture
def compiler_factory() -> FakeCompilerFactory:
    return FakeCompilerFactory()


@pytest.fixture
def caps_cache() -> ShaderCapsCache:
    return ShaderCapsCache()


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], str]:
    def _write_source(name: str, text: str = "void main() {}\n") -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write_source
