"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Callable, Iterable, Iterator
from contextlib import suppress
from pathlib import Path
from typing import Any


def import_module_and_submodules(package_name: str) -> None:
    """Import all modules and submodules from a package.

    From https://github.com/allenai/allennlp/blob/master/allennlp/common/util.py.

    Args:
        package_name: Name of the package to fully import.
    """
    from importlib import import_module
    from pkgutil import walk_packages

    module = import_module(package_name)
    path = getattr(module, "__path__", [])
    path_string = "" if not path else path[0]

    for module_finder, name, _ in walk_packages(path):
        if (
            path_string
            and hasattr(module_finder, "path")
            and module_finder.path != path_string
        ):
            continue
        subpackage = f"{package_name}.{name}"
        import_module_and_submodules(subpackage)


def import_callable(reference: str) -> Callable[..., Any]:
    """Resolve a `package.module:attribute` reference to a callable.

    Args:
        reference: Module path and attribute name separated by a colon. The \
            attribute can be dotted to reach into classes or submodules.

    Raises:
        ToolUnavailableError: Raised if the module cannot be imported, the attribute \
            does not exist or is not callable.

    Returns:
        The referenced callable.
    """
    from functools import reduce
    from importlib import import_module

    from .exceptions import ToolUnavailableError

    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        msg = f"{reference!r} is not of the form package.module:function"
        raise ToolUnavailableError(msg)
    try:
        module = import_module(module_name)
    except ImportError as e:
        msg = f"could not import {module_name}: {e}"
        raise ToolUnavailableError(msg) from e
    try:
        target = reduce(getattr, attribute.split("."), module)
    except AttributeError as e:
        msg = f"could not find {attribute} in {module_name}"
        raise ToolUnavailableError(msg) from e
    if not callable(target):
        msg = f"{reference} is not callable"
        raise ToolUnavailableError(msg)
    return target


def dirs_hierarchy(user_config_dir: Path, current_dir: Path) -> Iterator[Path]:
    """Yield the directories to look for configuration into, by increasing priority.

    Args:
        user_config_dir: Configuration directory of the user.
        current_dir: Directory the command is run from.

    Yields:
        The user configuration directory, then every directory from the root of the \
            filesystem down to `current_dir`.
    """
    yield user_config_dir
    yield from intermediate_dirs(Path(current_dir.resolve().anchor), current_dir)


def intermediate_dirs(start: Path, end: Path) -> Iterator[Path]:
    start = start.resolve()
    yield start
    for part in end.resolve().relative_to(start).parts:
        start /= part
        yield start


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))


def load_all_yamls(paths: Iterable[Path]) -> Iterator[Any]:
    for path in paths:
        with suppress(FileNotFoundError):
            yield load_yaml(path)
