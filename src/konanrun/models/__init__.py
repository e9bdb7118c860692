"""Model classes shared by the different parts of konanrun.

- [`options`][konanrun.models.options] contains the compilation options and the \
    enumerations of the values the compiler accepts
- [`results`][konanrun.models.results] contains the outcome of a compiler invocation
- [`scalars`][konanrun.models.scalars] contains NewTypes and aliases that help \
    disambiguate types that are used a lot in different contexts
"""

from .options import CompileOptions, MemoryModel, OutputKind
from .results import InvocationResult
from .scalars import ArgumentList, TargetName

__all__ = [
    "ArgumentList",
    "CompileOptions",
    "InvocationResult",
    "MemoryModel",
    "OutputKind",
    "TargetName",
]
