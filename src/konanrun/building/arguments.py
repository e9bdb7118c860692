"""Serialize compilation options into the compiler command line grammar.

The order of the tokens is fixed:

    <source> [-memory-model M] [-verbose] [-nomain] [-p KIND] [-g] [EXTRA...] -o OUT
"""

from ..exceptions import InvalidOptionsError
from ..models import ArgumentList, CompileOptions


def build(options: CompileOptions) -> ArgumentList:
    """Build the argument list matching `options`.

    Args:
        options: Options of the compilation.

    Raises:
        InvalidOptionsError: Raised if the source or the output path is empty.

    Returns:
        Tokens to hand to the compiler entry point, the tool name excluded.
    """
    if not options.source.strip():
        msg = "the source path cannot be empty"
        raise InvalidOptionsError(msg)
    if not options.output.strip():
        msg = "the output path cannot be empty"
        raise InvalidOptionsError(msg)
    tokens = [options.source]
    if options.memory_model is not None:
        tokens.extend(["-memory-model", options.memory_model.value])
    if options.verbose:
        tokens.append("-verbose")
    if options.nomain:
        tokens.append("-nomain")
    if options.output_kind is not None:
        tokens.extend(["-p", options.output_kind.value])
    if options.debug:
        tokens.append("-g")
    tokens.extend(options.extra_arguments)
    tokens.extend(["-o", options.output])
    return tuple(tokens)
