from functools import reduce
from pathlib import Path
from typing import Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import BaseModel, Field, ValidationError

from .. import app_name
from ..exceptions import InvalidOptionsError, SettingsError
from ..models import CompileOptions, TargetName
from ..utils import dirs_hierarchy, load_all_yamls

config_file_name = f"{app_name}.yml"


def user_config_dir() -> Path:
    return Path(appdirs_user_config_dir(app_name)).resolve()


class Settings(BaseModel):
    """Merged content of the configuration files.

    Targets are kept unvalidated so that a broken target does not prevent the \
    others from being used. They are validated when accessed through `target`.

    `current_dir` is the directory the settings were loaded for. The compiler runs \
    there unless a working directory is configured for the entry point.
    """

    entry_point: str = "subprocess"
    components: dict[str, dict[str, dict[str, Any]]] = Field(default_factory=dict)
    targets: dict[TargetName, dict[str, Any]] = Field(default_factory=dict)
    current_dir: Path | None = None

    def target(self, name: TargetName) -> CompileOptions:
        if name not in self.targets:
            msg = f"unknown target {name!r}"
            if self.targets:
                msg += f", expected one of {', '.join(sorted(self.targets))}"
            raise SettingsError(msg)
        try:
            return CompileOptions.model_validate(self.targets[name])
        except ValidationError as e:
            msg = f"invalid options for target {name!r}:\n{e}"
            raise InvalidOptionsError(msg) from e

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load and merge every configuration file applying to `path`.

        Files found closer to `path` override the keys of the ones found higher in \
        the hierarchy. The user configuration directory comes first.

        Args:
            path: Directory the command is run from.

        Raises:
            SettingsError: Raised if a file cannot be parsed or if the merged content \
                is invalid.

        Returns:
            The validated settings.
        """
        from yaml import YAMLError

        try:
            contents = list(
                load_all_yamls(
                    d
                    for p in dirs_hierarchy(user_config_dir(), path.resolve())
                    if (d := p / config_file_name).is_file()
                )
            )
        except YAMLError as e:
            msg = f"could not parse a {config_file_name} file:\n{e}"
            raise SettingsError(msg) from e
        if not all(isinstance(c, dict) for c in contents if c is not None):
            msg = f"{config_file_name} files must contain a mapping"
            raise SettingsError(msg)
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **b}, (c for c in contents if c is not None), {}
        )
        content["current_dir"] = path.resolve()
        try:
            return cls.model_validate(content)
        except ValidationError as e:
            msg = f"invalid settings:\n{e}"
            raise SettingsError(msg) from e
