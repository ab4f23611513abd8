import argparse
import logging
import pathlib
import sys

from rmodgen.frontend import from_descriptor, load_descriptor
from rmodgen.settings import CONFIG_FILE_NAME, collect_settings

logger = logging.getLogger(__name__)

DESCRIPTOR_SUFFIXES = (".json", ".toml")
_CONFIG_FILES = {CONFIG_FILE_NAME, "pyproject.toml"}


def find_descriptors(input_path: pathlib.Path) -> list[pathlib.Path]:
    """All descriptor files below `input_path`, config files excluded."""
    return sorted(
        path
        for path in input_path.glob("**/*")
        if path.is_file() and path.suffix in DESCRIPTOR_SUFFIXES and path.name not in _CONFIG_FILES
    )


def compile_descriptor_file(path: pathlib.Path) -> str:
    """Render the Rust source described by a descriptor file."""
    return from_descriptor(load_descriptor(path)).render()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Render JSON/TOML item descriptors to Rust source files")
    parser.add_argument(
        "-i", "--input-folder", type=pathlib.Path, help="Path to the input folder containing descriptors"
    )
    parser.add_argument(
        "-o", "--output-folder", type=pathlib.Path, help="Path to the output folder for rendered Rust files"
    )
    parser.add_argument("-c", "--config", type=pathlib.Path, help="Path to the configuration file")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args(argv)

    settings = collect_settings(
        work_dir=pathlib.Path.cwd(),
        override_input_folder=args.input_folder,
        override_output_folder=args.output_folder,
        override_config_file=args.config,
    )
    settings.debug_mode = settings.debug_mode or args.debug
    logging.basicConfig(
        level=logging.DEBUG if settings.debug_mode else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    assert settings.input_path is not None
    fail_counter = 0
    total_counter = 0
    for descriptor_path in find_descriptors(settings.input_path):
        total_counter += 1
        relative = descriptor_path.relative_to(settings.input_path)
        output_relative = relative.with_suffix(".rs")
        try:
            code = compile_descriptor_file(descriptor_path)
        except Exception as e:
            if settings.debug_mode:
                raise e
            logger.error("Skipped: %s (%s)", descriptor_path, e)
            fail_counter += 1
            continue

        if settings.output_path is not None:
            output_path = settings.output_path / output_relative
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as rs_file:
                rs_file.write(code)
            logger.info("Rendered %s to %s", descriptor_path, output_path)
        else:
            print(f"// {output_relative}")
            print(code)

    logger.info("Rendered %d of %d descriptors", total_counter - fail_counter, total_counter)
    return 1 if fail_counter > 0 else 0


if __name__ == "__main__":
    sys.exit(main())
