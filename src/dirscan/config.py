from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, TypedDict, cast

import yaml

from .formatting import DEFAULT_TOP_FILES


class RawAppConfig(TypedDict, total=False):
    top_files: int
    log_level: str
    show_progress: bool


class RawConfigFile(TypedDict):
    config: RawAppConfig


CONFIG_FILENAME: Path = Path("dirscan.yaml")


def type_error(value: object) -> NoReturn:
    raise TypeError(f"Unexpected value of wrong type: {value!r}")


def _expect(raw: dict[str, object], key: str, expected: type, default: object) -> object:
    value: object | None = raw.get(key, default)
    # bool is an int subclass, don't let `top_files: true` through
    if isinstance(value, bool) and expected is not bool:
        type_error(value)
    if not isinstance(value, expected):
        type_error(value)
    return value


@dataclass(slots=True)
class AppConfig:
    top_files: int = DEFAULT_TOP_FILES
    log_level: str = "WARNING"
    show_progress: bool = True

    @staticmethod
    def load(path: Path = CONFIG_FILENAME) -> "AppConfig":
        """Read the config file, falling back to defaults when it is absent."""
        if not path.exists():
            return AppConfig()

        with path.open("r", encoding="UTF-8") as f:
            raw_loaded_obj: object | None = cast(object, yaml.safe_load(f))

        if not raw_loaded_obj:
            raise ValueError("Config file is empty or invalid YAML.")

        if not isinstance(raw_loaded_obj, dict):
            type_error(raw_loaded_obj)

        raw_dict: dict[str, object] = cast(dict[str, object], raw_loaded_obj)

        cfg_raw: object | None = raw_dict.get("config")
        if not isinstance(cfg_raw, dict):
            type_error(cfg_raw)

        cfg: dict[str, object] = cast(dict[str, object], cfg_raw)
        defaults: AppConfig = AppConfig()

        appConfig: AppConfig = AppConfig(
            top_files=cast(int, _expect(cfg, "top_files", int, defaults.top_files)),
            log_level=cast(str, _expect(cfg, "log_level", str, defaults.log_level)),
            show_progress=cast(bool, _expect(cfg, "show_progress", bool, defaults.show_progress)),
        )

        return appConfig

    def save(self, path: Path = CONFIG_FILENAME) -> None:
        raw: RawConfigFile = {"config": self.to_raw()}
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(raw, f, sort_keys=False)

    def to_raw(self) -> RawAppConfig:
        return {
            "top_files": self.top_files,
            "log_level": self.log_level,
            "show_progress": self.show_progress,
        }
