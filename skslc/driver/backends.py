"""
skslc Backends

Routes an output file name to the code generator that produces it and runs
that generator inside the common open / compile / emit / close envelope.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import numpy as np

from ..compiler.base import Compiler, CompilerFactory, Dehydrator
from ..compiler.caps import ShaderCaps
from ..compiler.program import ProgramKind, ProgramSettings
from ..compiler.stream import FileOutputStream
from .errors import CompileError, InputError, OutputError


COMPILATION_FAILED_BANNER = "### Compilation failed:\n\n"

# File name affixes stripped to name generated C++ classes and includes
FP_PREFIX = "Gr"
FP_SUFFIX = ".fp"
DEHYDRATED_SUFFIX = ".sksl"


def base_name(path: str, prefix: str, suffix: str) -> str:
    """
    Strip a directory, a file name prefix and a suffix from a path.

    base_name("src/gpu/effects/GrFooFragmentProcessor.fp", "Gr", ".fp")
    returns "FooFragmentProcessor". A file name that does not start with
    `prefix` and end with `suffix` yields the empty string.
    """
    start = max(path.rfind('/'), path.rfind('\\')) + 1
    file_name = path[start:]
    if not file_name.startswith(prefix) or not file_name.endswith(suffix):
        return ""
    if len(file_name) < len(prefix) + len(suffix):
        return ""
    return file_name[len(prefix):len(file_name) - len(suffix)]


@dataclass
class Job:
    """Everything a backend needs to produce one output file."""
    kind: ProgramKind
    text: str
    settings: ProgramSettings
    caps: ShaderCaps
    input_path: str
    output_path: str


# (compiler, program, job, out) -> success
Emitter = Callable[[Compiler, Any, Job, FileOutputStream], bool]


@dataclass
class Backend:
    """A code generator selected by output file suffix."""

    name: str
    suffix: str
    emit: Optional[Emitter] = None
    permit_invalid_static_tests: bool = False
    replace_settings: Optional[bool] = None

    def run(self, job: Job, compiler_factory: CompilerFactory) -> None:
        """
        Compile `job` and write the artifact to `job.output_path`.

        Raises:
            OutputError: If the output cannot be opened or closed
            CompileError: If compilation or emission failed. The output file
                then holds a failure banner and the compiler's diagnostics.
        """
        out = FileOutputStream(job.output_path)
        try:
            if not out.is_valid():
                raise OutputError(f"error writing '{job.output_path}'")

            if self.replace_settings is not None:
                job.settings.replace_settings = self.replace_settings

            try:
                compiler = compiler_factory(job.caps, self.permit_invalid_static_tests)
                produced = self.produce(compiler, job, out)
                error_text = "" if produced else compiler.error_text()
            except Exception as e:
                # A crashing backend fails this job only
                produced = False
                error_text = f"{e}\n"

            if not produced:
                out.close()
                _write_compile_error(job.output_path, error_text)
                raise CompileError(error_text)

            if not out.close():
                raise OutputError(f"error writing '{job.output_path}'")
        finally:
            out.close()

    def produce(self, compiler: Compiler, job: Job, out: FileOutputStream) -> bool:
        """Compile the program and emit it into `out`."""
        program = compiler.compile_program(job.kind, job.text, job.settings)
        if program is None:
            return False
        return self.emit(compiler, program, job, out)


class DehydrationBackend(Backend):
    """Writes a module's symbols and declarations as a C byte array."""

    def produce(self, compiler: Compiler, job: Job, out: FileOutputStream) -> bool:
        module = compiler.load_module(job.kind, job.input_path)
        if module is None:
            return False
        symbols, elements = module

        dehydrator = compiler.make_dehydrator()
        dehydrator.write_symbols(symbols)
        dehydrator.write_elements(elements)
        data = dehydrator.finish()

        name = base_name(job.input_path, "", DEHYDRATED_SUFFIX)
        out.write_text(format_dehydrated(name, data, dehydrator))
        return True


def format_dehydrated(name: str, data: bytes, dehydrator: Dehydrator) -> str:
    """Render a dehydrated module as C source defining SKSL_INCLUDE_<name>."""
    # Decimal literal for every byte, rendered in one pass
    literals = np.char.add(np.frombuffer(data, dtype=np.uint8).astype(str), ",")
    parts = [f"static uint8_t SKSL_INCLUDE_{name}[] = {{"]
    for offset, literal in enumerate(literals.tolist()):
        parts.append(dehydrator.prefix_at_offset(offset) + literal)
    parts.append("};\n")
    parts.append(f"static constexpr size_t SKSL_INCLUDE_{name}_LENGTH = "
                 f"sizeof(SKSL_INCLUDE_{name});\n")
    return "".join(parts)


def _write_compile_error(output_path: str, error_text: str) -> None:
    """Overwrite the output, if any, with the compiler's diagnostics."""
    error_stream = FileOutputStream(output_path)
    error_stream.write_text(COMPILATION_FAILED_BANNER)
    error_stream.write_text(error_text)
    error_stream.close()


def _emit_spirv(compiler, program, job, out):
    return compiler.to_spirv(program, out)


def _emit_glsl(compiler, program, job, out):
    return compiler.to_glsl(program, out)


def _emit_metal(compiler, program, job, out):
    return compiler.to_metal(program, out)


def _emit_h(compiler, program, job, out):
    return compiler.to_h(program, base_name(job.input_path, FP_PREFIX, FP_SUFFIX), out)


def _emit_cpp(compiler, program, job, out):
    return compiler.to_cpp(program, base_name(job.input_path, FP_PREFIX, FP_SUFFIX), out)


BACKENDS: List[Backend] = [
    Backend("spirv", ".spirv", _emit_spirv),
    Backend("glsl", ".glsl", _emit_glsl),
    Backend("metal", ".metal", _emit_metal),
    Backend("h", ".h", _emit_h,
            permit_invalid_static_tests=True, replace_settings=False),
    Backend("cpp", ".cpp", _emit_cpp,
            permit_invalid_static_tests=True, replace_settings=False),
    DehydrationBackend("dehydrated", ".dehydrated.sksl"),
]


def resolve_backend(output_path: str) -> Backend:
    """
    Select the backend for an output file by its extension.

    Raises:
        InputError: If no backend produces files with this extension
    """
    for backend in BACKENDS:
        if output_path.endswith(backend.suffix):
            return backend
    raise InputError("expected output filename to end with '.spirv', '.glsl', "
                     "'.cpp', '.h', '.metal', or '.dehydrated.sksl'")
