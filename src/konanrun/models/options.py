from enum import Enum

from pydantic import BaseModel, ConfigDict


class MemoryModel(Enum):
    Strict = "strict"
    Relaxed = "relaxed"
    Experimental = "experimental"


class OutputKind(Enum):
    Program = "program"
    Static = "static"
    Dynamic = "dynamic"
    Framework = "framework"
    Library = "library"
    Bitcode = "bitcode"


class CompileOptions(BaseModel):
    """Compiler flags for a single invocation.

    Paths are kept as plain strings: they are forwarded to the compiler as single \
    tokens and are never resolved or split.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    source: str
    output: str
    memory_model: MemoryModel | None = None
    verbose: bool = False
    nomain: bool = False
    output_kind: OutputKind | None = None
    debug: bool = False
    extra_arguments: tuple[str, ...] = ()
