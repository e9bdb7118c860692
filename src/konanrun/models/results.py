from dataclasses import dataclass


@dataclass(frozen=True)
class InvocationResult:
    exit_code: int
    stdout: str | None = None
    stderr: str | None = None

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
