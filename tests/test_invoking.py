from logging import WARNING

from pytest import LogCaptureFixture, raises

from konanrun.building.invoking import invoke
from konanrun.exceptions import CompilationFailedError
from konanrun.models import ArgumentList, InvocationResult


class StubEntryPoint:
    def __init__(
        self, exit_code: int, stdout: str | None = None, stderr: str | None = None
    ) -> None:
        self._result = InvocationResult(exit_code, stdout, stderr)
        self.calls: list[ArgumentList] = []

    def run(self, args: ArgumentList) -> InvocationResult:
        self.calls.append(args)
        return self._result


def test_invoke_passes_arguments_verbatim() -> None:
    tool = StubEntryPoint(0, stdout="done")
    args = ("/a b/c.kt", "-g", "-o", "/out dir/Test")

    result = invoke(tool, args)

    assert tool.calls == [args]
    assert result.ok
    assert result.stdout == "done"


def test_invoke_raises_on_non_zero_exit_code() -> None:
    tool = StubEntryPoint(1)

    with raises(CompilationFailedError) as excinfo:
        invoke(tool, ("a.kt", "-o", "a"))

    assert excinfo.value.code == 1
    assert excinfo.value.result == InvocationResult(1)


def test_invoke_logs_captured_output_on_failure(caplog: LogCaptureFixture) -> None:
    tool = StubEntryPoint(2, stdout="compiling", stderr="error: unresolved reference")

    with caplog.at_level(WARNING), raises(CompilationFailedError):
        invoke(tool, ("a.kt", "-o", "a"))

    assert "error: unresolved reference" in caplog.text
    assert "compiling" in caplog.text
    assert "exit code 2" in caplog.text
