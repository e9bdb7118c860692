from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from ..models import MemoryModel, OutputKind
from . import app


@app.command(name="compile")
def compile_(
    source: str,
    /,
    *,
    output: str,
    memory_model: MemoryModel | None = None,
    verbose: bool = False,
    nomain: bool = False,
    output_kind: OutputKind | None = None,
    debug: bool = False,
    extra: Annotated[list[str] | None, Parameter(allow_leading_hyphen=True)] = None,
    workdir: Path = Path(),
) -> None:
    """Compile SOURCE with the options given on the command line.

    Args:
        source: Kotlin source file to compile
        output: Path of the produced artifact
        memory_model: Memory model of the produced binary
        verbose: Ask the compiler for a verbose output
        nomain: Do not look for an entry point in SOURCE
        output_kind: Kind of artifact to produce
        debug: Emit debug information
        extra: Additional arguments forwarded verbatim to the compiler
        workdir: Directory to load the settings for and to run the compiler in

    """
    from pydantic import ValidationError

    from ..configuring.settings import Settings
    from ..exceptions import InvalidOptionsError
    from ..models import CompileOptions
    from ..pipelines import run

    try:
        options = CompileOptions(
            source=source,
            output=output,
            memory_model=memory_model,
            verbose=verbose,
            nomain=nomain,
            output_kind=output_kind,
            debug=debug,
            extra_arguments=tuple(extra or ()),
        )
    except ValidationError as e:
        raise InvalidOptionsError(str(e)) from e
    run(options, Settings.from_yaml(workdir))
