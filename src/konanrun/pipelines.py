from logging import getLogger

from .building.arguments import build
from .building.invoking import invoke
from .components import EntryPoint
from .components.protocols import EntryPointProtocol
from .configuring.settings import Settings
from .models import CompileOptions, InvocationResult, TargetName

_logger = getLogger(__name__)


def entry_point(settings: Settings) -> EntryPointProtocol:
    return EntryPoint.new(settings.entry_point, settings)


def run(
    options: CompileOptions,
    settings: Settings,
    tool: EntryPointProtocol | None = None,
) -> InvocationResult:
    args = build(options)
    return invoke(tool if tool is not None else entry_point(settings), args)


def run_target(
    name: TargetName,
    settings: Settings,
    tool: EntryPointProtocol | None = None,
) -> InvocationResult:
    _logger.info("Compiling target %s", name)
    return run(settings.target(name), settings, tool)
