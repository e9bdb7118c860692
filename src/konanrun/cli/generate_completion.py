from typing import Literal

from .. import app_name
from . import app

Shell = Literal["zsh", "bash", "fish"]


@app.command()
def generate_completion(shell: Shell | None = None, /) -> None:
    """Print a completion script for konanrun, to be sourced by your shell.

    Args:
        shell: Shell to generate the script for. Defaults to the one in $SHELL

    """
    from os import environ
    from pathlib import PurePath
    from typing import get_args

    from ..exceptions import KonanrunError

    if shell is None:
        detected = PurePath(environ.get("SHELL", "")).name
        if detected not in get_args(Shell):
            msg = (
                f"cannot generate completion for shell {detected or '(unset)'!r}, "
                f"pass one of {', '.join(get_args(Shell))}"
            )
            raise KonanrunError(msg)
        shell = detected
    print(app.generate_completion(prog_name=app_name, shell=shell))
