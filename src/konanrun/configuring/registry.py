# mypy: disable-error-code="attr-defined"
# ruff: noqa: SLF001
from abc import ABCMeta
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from ..exceptions import SettingsError

if TYPE_CHECKING:
    from pydantic import BaseModel

    from .settings import Settings

# Cannot use typing.Self in metaclasses
_Self = TypeVar("_Self", bound="RegistryMeta")
_logger = getLogger(__name__)


class RegistryMeta(ABCMeta):
    """Register implementations of a component interface under a key.

    A class created with a `key` and no registered base becomes an interface and \
    owns a new registry. A class created with a `key` and an interface among its \
    bases is recorded in that interface's registry, along with the optional pydantic \
    model validating its configuration.
    """

    registries: ClassVar[dict[str, set[str]]] = {}

    def __new__(
        cls: type[_Self],
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        *_args: Any,
        **_kwargs: Any,
    ) -> _Self:
        return super().__new__(cls, name, bases, namespace)

    def __init__(
        cls: _Self,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        key: str | None = None,
        extra_kwargs_class: type["BaseModel"] | None = None,
    ) -> None:
        super().__init__(name, bases, namespace)
        if key is None:
            return
        interface = next(
            (
                base
                for base in bases
                if isinstance(base, RegistryMeta) and hasattr(base, "_registry")
            ),
            None,
        )
        if interface is None:
            _logger.debug("Creating registry %s based on class %s", key, cls)
            cls._registry: dict[str, tuple[_Self, type[BaseModel] | None]] = {}
            cls._registry_name = key
            RegistryMeta.registries[key] = set()
        else:
            _logger.debug(
                "Registering %s as %s/%s", cls, interface._registry_name, key
            )
            interface._registry[key] = (cls, extra_kwargs_class)
            RegistryMeta.registries[interface._registry_name].add(key)


class Component(metaclass=RegistryMeta):
    @classmethod
    def new[**P, T](
        cls: Callable[P, T],
        _key: str,
        _settings: "Settings",
        /,
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> T:
        """Instantiate the implementation registered as `_key`.

        Its configuration is read from `components.<registry>.<key>` in the \
        settings and validated by the model given at registration.

        Raises:
            SettingsError: Raised if no implementation is registered as `_key` or \
                if its configuration is invalid.
        """
        from pydantic import ValidationError

        if _key not in cls._registry:
            msg = (
                f"unknown {cls._registry_name} {_key!r}, expected one of "
                f"{', '.join(sorted(cls._registry))}"
            )
            raise SettingsError(msg)
        subclass, extra_kwargs_class = cls._registry[_key]
        conf_dct = _settings.components.get(cls._registry_name, {}).get(_key, {})
        try:
            extra_kwargs = (
                vars(extra_kwargs_class.model_validate(conf_dct, context=_settings))
                if extra_kwargs_class
                else {}
            )
        except ValidationError as e:
            msg = f"invalid configuration for {cls._registry_name}/{_key}:\n{e}"
            raise SettingsError(msg) from e
        _logger.debug(
            "Instantiating %s from registry entry %s/%s with args %s, kwargs %s and "
            "extra kwargs %s",
            subclass,
            cls._registry_name,
            _key,
            args,
            kwargs,
            extra_kwargs,
        )
        return subclass(*args, **kwargs, **extra_kwargs)
