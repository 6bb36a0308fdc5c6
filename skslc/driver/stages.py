"""
skslc Stage Resolution

Maps an input file name to the program kind it holds.
"""

from ..compiler.program import ProgramKind
from .errors import InputError


INPUT_SUFFIXES = {
    '.vert': ProgramKind.VERTEX,
    '.frag': ProgramKind.FRAGMENT,
    '.sksl': ProgramKind.FRAGMENT,
    '.geom': ProgramKind.GEOMETRY,
    '.fp': ProgramKind.FRAGMENT_PROCESSOR,
    '.stage': ProgramKind.PIPELINE_STAGE,
}


def resolve_program_kind(input_path: str) -> ProgramKind:
    """
    Determine the shader stage from the input file's extension.

    Raises:
        InputError: If the extension is not one of INPUT_SUFFIXES
    """
    for suffix, kind in INPUT_SUFFIXES.items():
        if input_path.endswith(suffix):
            return kind
    raise InputError("input filename must end in '.vert', '.frag', '.geom', "
                     "'.fp', '.stage', or '.sksl'")
