"""
skslc Job Runner

Runs a single `<input> <output> [flags]` command.
"""

from typing import List, Optional

from ..compiler.base import CompilerFactory, UnavailableCompiler
from ..compiler.caps import ShaderCapsCache
from ..compiler.program import ProgramSettings
from .backends import Job, resolve_backend
from .errors import DriverError, InputError, ResultCode
from .pragma import detect_shader_settings
from .stages import resolve_program_kind


USAGE = ("usage: skslc <input> <output> <flags> -- <input2> <output2> <flags> -- ...\n"
         "\n"
         "Allowed flags:\n"
         "--settings:   honor embedded /*#pragma settings*/ comments.\n"
         "--nosettings: ignore /*#pragma settings*/ comments\n")

SETTINGS_FLAGS = {
    "--settings": True,
    "--nosettings": False,
}


def show_usage() -> None:
    """Print the usage banner; used when the arguments don't make sense."""
    print(USAGE, end='')


class JobRunner:
    """
    Runs jobs against one compiler backend and capability cache.

    Example:
        runner = JobRunner(my_compiler_factory)
        code = runner.run(["skslc", "in.sksl", "out.glsl"])
    """

    def __init__(self,
                 compiler_factory: Optional[CompilerFactory] = None,
                 caps_cache: Optional[ShaderCapsCache] = None,
                 debug: bool = False):
        """
        Args:
            compiler_factory: Builds a Compiler for a capability bundle
            caps_cache: Source of named capability bundles, shared by all jobs
            debug: Print a trace line for every job
        """
        self.compiler_factory = compiler_factory or UnavailableCompiler
        self.caps_cache = caps_cache if caps_cache is not None else ShaderCapsCache()
        self.debug = debug

    def run(self, args: List[str]) -> ResultCode:
        """
        Process one command.

        Args:
            args: The program name followed by the command's arguments

        Returns:
            The job's result code. Failures are reported on stdout.
        """
        honor_settings = parse_flags(args)
        if honor_settings is None:
            return ResultCode.INPUT_ERROR

        try:
            self._run(args[1], args[2], honor_settings)
        except DriverError as e:
            message = str(e)
            print(message, end="" if message.endswith("\n") else "\n")
            return e.result_code
        return ResultCode.SUCCESS

    def _run(self, input_path: str, output_path: str, honor_settings: bool) -> None:
        kind = resolve_program_kind(input_path)
        backend = resolve_backend(output_path)

        if self.debug:
            print(f"skslc: {input_path} -> {output_path} ({kind.name.lower()}, {backend.name})")

        text = read_source(input_path)

        settings = ProgramSettings()
        caps = self.caps_cache.standalone()
        if honor_settings:
            caps = detect_shader_settings(text, settings, caps, self.caps_cache)

        job = Job(kind, text, settings, caps, input_path, output_path)
        backend.run(job, self.compiler_factory)


def parse_flags(args: List[str]) -> Optional[bool]:
    """
    Validate the shape of a command.

    Returns:
        Whether to honor settings pragmas, or None (after printing usage) if
        the command is malformed.
    """
    if len(args) == 4:
        flag = args[3]
        if flag not in SETTINGS_FLAGS:
            print(f"unrecognized flag: {flag}\n")
            show_usage()
            return None
        return SETTINGS_FLAGS[flag]
    if len(args) != 3:
        show_usage()
        return None
    return True


def read_source(input_path: str) -> str:
    """Read a whole shader source file."""
    try:
        with open(input_path, 'r', encoding='utf-8', errors='surrogateescape',
                  newline='') as f:
            return f.read()
    except OSError:
        raise InputError(f"error reading '{input_path}'")


def process_command(args: List[str],
                    compiler_factory: Optional[CompilerFactory] = None,
                    caps_cache: Optional[ShaderCapsCache] = None) -> ResultCode:
    """Run a single command with a throwaway JobRunner."""
    return JobRunner(compiler_factory, caps_cache).run(args)
