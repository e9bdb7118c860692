from pathlib import Path

from ..models import TargetName
from . import app


@app.command()
def run(name: TargetName, /, *, workdir: Path = Path()) -> None:
    """Compile the target NAME defined in the configuration files.

    Args:
        name: Name of the target to compile
        workdir: Directory to load the settings for and to run the compiler in

    """
    from ..configuring.settings import Settings
    from ..pipelines import run_target

    run_target(name, Settings.from_yaml(workdir))
