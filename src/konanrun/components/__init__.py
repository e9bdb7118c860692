from abc import abstractmethod
from typing import TYPE_CHECKING

from ..configuring.registry import Component

if TYPE_CHECKING:
    from ..models import ArgumentList, InvocationResult


class EntryPoint(Component, key="entry_point"):
    """Run the compiler with an argument list and report its exit status."""

    @abstractmethod
    def run(self, args: "ArgumentList") -> "InvocationResult":
        raise NotImplementedError


def _load_components() -> None:
    from ..utils import import_module_and_submodules

    import_module_and_submodules(__name__)


_load_components()
