from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import ArgumentList, InvocationResult


class EntryPointProtocol(Protocol):
    """Callable interface of the compiler.

    Anything with a `run` method fits, which lets tests replace the compiler.
    """

    def run(self, args: "ArgumentList") -> "InvocationResult": ...
