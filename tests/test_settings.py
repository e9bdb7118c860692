from pathlib import Path

from pytest import MonkeyPatch, fixture, raises

from konanrun.configuring import settings as settings_module
from konanrun.configuring.settings import Settings
from konanrun.exceptions import InvalidOptionsError, SettingsError
from konanrun.models import CompileOptions, MemoryModel, TargetName


@fixture
def user_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    user_dir = tmp_path / "user"
    user_dir.mkdir()
    monkeypatch.setattr(
        settings_module, "appdirs_user_config_dir", lambda _: str(user_dir)
    )
    return user_dir


def test_defaults_without_files(user_dir: Path, tmp_path: Path) -> None:
    settings = Settings.from_yaml(tmp_path)

    assert settings.entry_point == "subprocess"
    assert settings.targets == {}


def test_closer_files_override(user_dir: Path, tmp_path: Path) -> None:
    project = tmp_path / "project"
    module = project / "module"
    module.mkdir(parents=True)
    (user_dir / "konanrun.yml").write_text("entry_point: callable\n", encoding="utf8")
    (project / "konanrun.yml").write_text(
        "targets:\n  a: {source: a.kt, output: a}\n", encoding="utf8"
    )
    (module / "konanrun.yml").write_text(
        "targets:\n  b: {source: b.kt, output: b}\n", encoding="utf8"
    )

    settings = Settings.from_yaml(module)

    assert settings.entry_point == "callable"
    assert set(settings.targets) == {"b"}
    assert Settings.from_yaml(project).targets.keys() == {"a"}


def test_empty_file_is_ignored(user_dir: Path, tmp_path: Path) -> None:
    (tmp_path / "konanrun.yml").write_text("", encoding="utf8")

    expected = Settings(current_dir=tmp_path.resolve())

    assert Settings.from_yaml(tmp_path) == expected


def test_target(user_dir: Path, tmp_path: Path) -> None:
    (tmp_path / "konanrun.yml").write_text(
        "targets:\n"
        "  test:\n"
        "    source: hello.kt\n"
        "    memory_model: relaxed\n"
        "    output: build/Test\n",
        encoding="utf8",
    )

    options = Settings.from_yaml(tmp_path).target(TargetName("test"))

    assert options == CompileOptions(
        source="hello.kt", memory_model=MemoryModel.Relaxed, output="build/Test"
    )


def test_unknown_target() -> None:
    with raises(SettingsError):
        Settings().target(TargetName("missing"))


def test_invalid_target() -> None:
    settings = Settings(targets={TargetName("t"): {"source": "a.kt", "debug": "x"}})

    with raises(InvalidOptionsError):
        settings.target(TargetName("t"))


def test_invalid_yaml(user_dir: Path, tmp_path: Path) -> None:
    (tmp_path / "konanrun.yml").write_text("targets: [\n", encoding="utf8")

    with raises(SettingsError):
        Settings.from_yaml(tmp_path)


def test_non_mapping_yaml(user_dir: Path, tmp_path: Path) -> None:
    (tmp_path / "konanrun.yml").write_text("- a\n- b\n", encoding="utf8")

    with raises(SettingsError):
        Settings.from_yaml(tmp_path)


def test_invalid_settings(user_dir: Path, tmp_path: Path) -> None:
    (tmp_path / "konanrun.yml").write_text("entry_point: [a]\n", encoding="utf8")

    with raises(SettingsError):
        Settings.from_yaml(tmp_path)
