from logging import getLogger

from ..components.protocols import EntryPointProtocol
from ..exceptions import CompilationFailedError
from ..models import ArgumentList, InvocationResult

_logger = getLogger(__name__)


def invoke(tool: EntryPointProtocol, args: ArgumentList) -> InvocationResult:
    _logger.info("Invoking %s with %s", tool, " ".join(args))
    result = tool.run(args)
    if not result.ok:
        _logger.warning("Compilation failed with exit code %d", result.exit_code)
        if result.stderr:
            _logger.warning("Captured stderr\n%s", result.stderr)
        if result.stdout:
            _logger.warning("Captured stdout\n%s", result.stdout)
        raise CompilationFailedError(result.exit_code, result)
    _logger.info("Compilation succeeded")
    return result
