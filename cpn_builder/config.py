from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, Doctype, Generator


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    spacing_x: int = Defaults.SPACING_X
    spacing_y: int = Defaults.SPACING_Y
    id_prefix: str = Defaults.ID_PREFIX
    id_seed: int = Defaults.ID_SEED
    tool: str = Generator.TOOL
    tool_version: str = Generator.VERSION
    format_version: str = Generator.FORMAT
    indent: int = Defaults.INDENT
    dtd_system: str = Doctype.SYSTEM_ID

    def __post_init__(self) -> None:
        if self.spacing_x < 1:
            raise ValueError(f"spacing_x must be positive, got {self.spacing_x}")
        if self.spacing_y < 1:
            raise ValueError(f"spacing_y must be positive, got {self.spacing_y}")
        if not self.id_prefix:
            raise ValueError("id_prefix must not be empty")
        if self.id_seed < 0:
            raise ValueError(f"id_seed must be non-negative, got {self.id_seed}")
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")

    @classmethod
    def from_env(cls) -> BuilderConfig:
        return cls(
            spacing_x=int(os.getenv("CPN_SPACING_X", str(Defaults.SPACING_X))),
            spacing_y=int(os.getenv("CPN_SPACING_Y", str(Defaults.SPACING_Y))),
            id_prefix=os.getenv("CPN_ID_PREFIX", Defaults.ID_PREFIX),
            id_seed=int(os.getenv("CPN_ID_SEED", str(Defaults.ID_SEED))),
            indent=int(os.getenv("CPN_INDENT", str(Defaults.INDENT))),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> BuilderConfig:
        config = BuilderConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: BuilderConfig) -> BuilderConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        layout = _get_table(data, "layout")
        ids = _get_table(data, "ids")
        generator = _get_table(data, "generator")
        output = _get_table(data, "output")
        spacing_x = base_config.spacing_x
        if (value := layout.get("spacing_x")) is not None:
            spacing_x = _coerce_int(value, key="layout.spacing_x")
        spacing_y = base_config.spacing_y
        if (value := layout.get("spacing_y")) is not None:
            spacing_y = _coerce_int(value, key="layout.spacing_y")
        id_prefix = base_config.id_prefix
        if value := ids.get("prefix"):
            id_prefix = str(value)
        id_seed = base_config.id_seed
        if (value := ids.get("seed")) is not None:
            id_seed = _coerce_int(value, key="ids.seed")
        tool = base_config.tool
        if value := generator.get("tool"):
            tool = str(value)
        tool_version = base_config.tool_version
        if value := generator.get("version"):
            tool_version = str(value)
        format_version = base_config.format_version
        if value := generator.get("format"):
            format_version = str(value)
        indent = base_config.indent
        if (value := output.get("indent")) is not None:
            indent = _coerce_int(value, key="output.indent")
        dtd_system = base_config.dtd_system
        if value := output.get("dtd_system"):
            dtd_system = str(value)
        return BuilderConfig(
            spacing_x=spacing_x,
            spacing_y=spacing_y,
            id_prefix=id_prefix,
            id_seed=id_seed,
            tool=tool,
            tool_version=tool_version,
            format_version=format_version,
            indent=indent,
            dtd_system=dtd_system,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
