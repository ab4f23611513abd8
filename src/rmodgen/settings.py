"""Emitter settings."""

import pathlib
from dataclasses import dataclass

import tomli as tomllib

CONFIG_FILE_NAME = "rmodgen.toml"


@dataclass
class EmitterSettings:
    """Emitter settings."""

    input_path: pathlib.Path | None = None
    output_path: pathlib.Path | None = None

    debug_mode: bool = False


def _read_table(config_path: pathlib.Path) -> dict:
    """Settings table of a config file: top level for rmodgen.toml, `[tool.rmodgen]` for pyproject.toml."""
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    if config_path.name == "pyproject.toml":
        return data.get("tool", {}).get("rmodgen", {})
    return data


def load_settings_from_toml(
    config_path: pathlib.Path,
    override_input_folder: pathlib.Path | None = None,
    override_output_folder: pathlib.Path | None = None,
) -> EmitterSettings:
    """Load settings from a TOML file."""
    if not config_path.exists():
        if override_input_folder is None:
            raise FileNotFoundError(f"Configuration file {config_path} does not exist")
        return EmitterSettings(
            input_path=override_input_folder,
            output_path=override_output_folder,
        )

    settings = _read_table(config_path)
    output_path = settings.get("output_path")
    return EmitterSettings(
        input_path=override_input_folder or pathlib.Path(settings.get("input_path", ".")),
        output_path=override_output_folder or (pathlib.Path(output_path) if output_path else None),
        debug_mode=bool(settings.get("debug", False)),
    )


def collect_settings(
    work_dir: pathlib.Path,
    override_input_folder: pathlib.Path | None = None,
    override_output_folder: pathlib.Path | None = None,
    override_config_file: pathlib.Path | None = None,
) -> EmitterSettings:
    """Collect settings."""
    if not work_dir.exists():
        raise FileNotFoundError(f"Work directory {work_dir} does not exist")

    config_file: pathlib.Path | None = None

    if override_config_file is not None:
        config_file = override_config_file
    elif override_input_folder is not None and (override_input_folder / CONFIG_FILE_NAME).exists():
        config_file = override_input_folder / CONFIG_FILE_NAME
    elif override_input_folder is not None and (override_input_folder / "pyproject.toml").exists():
        config_file = override_input_folder / "pyproject.toml"
    elif (work_dir / CONFIG_FILE_NAME).exists():
        config_file = work_dir / CONFIG_FILE_NAME
    elif (work_dir / "pyproject.toml").exists():
        config_file = work_dir / "pyproject.toml"

    if config_file is not None:
        return load_settings_from_toml(
            config_path=config_file,
            override_input_folder=override_input_folder,
            override_output_folder=override_output_folder,
        )
    return EmitterSettings(
        input_path=override_input_folder or work_dir,
        output_path=override_output_folder,
    )
