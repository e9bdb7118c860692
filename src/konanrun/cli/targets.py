from pathlib import Path

from . import app


@app.command()
def targets(*, workdir: Path = Path()) -> None:
    """List the targets defined in the configuration files.

    Args:
        workdir: Directory to load the settings for

    """
    from rich.console import Console
    from rich.table import Table

    from ..configuring.settings import Settings

    settings = Settings.from_yaml(workdir)
    console = Console()
    if not settings.targets:
        console.print("No target defined!")
        return
    table = Table("Target", "Source", "Output")
    for name, target in sorted(settings.targets.items()):
        table.add_row(
            name, str(target.get("source", "")), str(target.get("output", ""))
        )
    console.print(table)
