from pathlib import Path

from ..models import TargetName
from . import app


@app.command()
def args(name: TargetName, /, *, workdir: Path = Path()) -> None:
    """Print the compiler arguments of the target NAME without compiling.

    Args:
        name: Name of the target
        workdir: Directory to load the settings for

    """
    from shlex import join

    from ..building.arguments import build
    from ..configuring.settings import Settings

    print(join(build(Settings.from_yaml(workdir).target(name))))
