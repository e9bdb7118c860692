from collections.abc import Callable, Mapping
from logging import getLogger
from pathlib import Path
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveFloat,
    ValidationInfo,
    field_validator,
)

from ..exceptions import CompilationTimeoutError, ToolUnavailableError
from ..models import ArgumentList, InvocationResult
from . import EntryPoint

_logger = getLogger(__name__)


class SubprocessEntryPointExtraKwArgs(BaseModel):
    model_config = ConfigDict(validate_default=True)
    command: tuple[str, ...] = ("konanc",)
    timeout: PositiveFloat | None = None
    capture_output: bool = True
    environment: dict[str, str] = Field(default_factory=dict)
    cwd: Path | None = None

    @field_validator("cwd")
    @classmethod
    def _resolve_cwd(cls, value: Path | None, info: ValidationInfo) -> Path | None:
        current_dir = getattr(info.context, "current_dir", None)
        if current_dir is None:
            return value
        return current_dir if value is None else current_dir / value


class SubprocessEntryPoint(
    EntryPoint, key="subprocess", extra_kwargs_class=SubprocessEntryPointExtraKwArgs
):
    def __init__(
        self,
        command: tuple[str, ...] = ("konanc",),
        timeout: float | None = None,
        capture_output: bool = True,
        environment: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> None:
        if not command:
            msg = "the compiler command cannot be empty"
            raise ToolUnavailableError(msg)
        self._command = command
        self._timeout = timeout
        self._capture_output = capture_output
        self._environment = dict(environment or {})
        self._cwd = cwd

    def __str__(self) -> str:
        return self._command[0]

    def run(self, args: ArgumentList) -> InvocationResult:
        from os import environ
        from subprocess import TimeoutExpired, run

        env = {**environ, **self._environment} if self._environment else None
        try:
            completed_process = run(
                [*self._command, *args],
                cwd=self._cwd,
                env=env,
                capture_output=self._capture_output,
                encoding="utf8",
                errors="replace",
                timeout=self._timeout,
                check=False,
            )
        except (FileNotFoundError, PermissionError, NotADirectoryError) as e:
            msg = f"could not start {self._command[0]}: {e}"
            raise ToolUnavailableError(msg) from e
        except TimeoutExpired as e:
            raise CompilationTimeoutError(e.timeout) from e
        return InvocationResult(
            completed_process.returncode,
            completed_process.stdout,
            completed_process.stderr,
        )


class CallableEntryPointExtraKwArgs(BaseModel):
    target: str


class CallableEntryPoint(
    EntryPoint, key="callable", extra_kwargs_class=CallableEntryPointExtraKwArgs
):
    """Call a Python function in-process with the argument list.

    The function receives the argument list as a list of strings. Its return value \
    is the exit code, `None` meaning success. A `SystemExit` raised by the function \
    is converted to its exit code the way the interpreter would.
    """

    def __init__(self, target: str | Callable[[list[str]], Any]) -> None:
        self._target = target

    def __str__(self) -> str:
        if isinstance(self._target, str):
            return self._target
        return getattr(self._target, "__qualname__", repr(self._target))

    def run(self, args: ArgumentList) -> InvocationResult:
        from ..utils import import_callable

        function = (
            import_callable(self._target)
            if isinstance(self._target, str)
            else self._target
        )
        try:
            returned = function(list(args))
        except SystemExit as e:
            returned = e.code
        return InvocationResult(_exit_code(returned))


def _exit_code(value: Any) -> int:
    match value:
        case None:
            return 0
        case bool():
            return int(value)
        case int():
            return value
        case _:
            _logger.error("%s", value)
            return 1
