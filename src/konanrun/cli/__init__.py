from logging import INFO, basicConfig, getLogger
from sys import exit

from cyclopts import App
from rich.logging import RichHandler

app = App(help="Compile Kotlin/Native sources with structured options.")
app.register_install_completion_command()


def main() -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, tracebacks_show_locals=False)],
    )
    from ..exceptions import CompilationFailedError, KonanrunError
    from ..utils import import_module_and_submodules

    logger = getLogger(__name__)
    import_module_and_submodules(__name__)
    try:
        app()
    except CompilationFailedError as e:
        logger.critical("%s: %s", type(e).__name__, e)
        exit(e.code if 0 < e.code < 256 else 1)
    except KonanrunError as e:
        logger.critical("%s: %s", type(e).__name__, e)
        exit(1)
