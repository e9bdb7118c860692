from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import InvocationResult


class KonanrunError(Exception):
    pass


class SettingsError(KonanrunError):
    pass


class InvalidOptionsError(KonanrunError):
    pass


class ToolUnavailableError(KonanrunError):
    pass


class CompilationFailedError(KonanrunError):
    def __init__(self, code: int, result: "InvocationResult | None" = None) -> None:
        super().__init__(f"compilation failed with exit code {code}")
        self.code = code
        self.result = result


class CompilationTimeoutError(KonanrunError):
    def __init__(self, timeout: float) -> None:
        super().__init__(f"compilation did not finish within {timeout} seconds")
        self.timeout = timeout
