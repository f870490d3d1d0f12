"""Interpolate command implementation."""

import logging
from argparse import Namespace
from pathlib import Path
from typing import List, Optional

from interpolator.config import InterpolationConfig, load_config
from interpolator.exceptions import InterpolationError
from interpolator.security.masking import MaskingFilter, ValueMasker
from interpolator.variables import VariableInterpolator


logger = logging.getLogger(__name__)

OUTPUT_PREFIX = 'out-'


def output_path_for(input_path: Path) -> Path:
    """Output file sits next to the input, named out-<name>."""
    return input_path.parent / f"{OUTPUT_PREFIX}{input_path.name}"


def validate_input_files(paths: List[Path]) -> None:
    """
    Check every input before anything is written.

    Raises:
        FileNotFoundError: If a path does not exist or is not a regular file
    """
    for path in paths:
        if not path.is_file():
            raise FileNotFoundError(f"file {path} does not exist")


def interpolate_file(input_path: Path, interpolator: VariableInterpolator) -> Optional[Path]:
    """
    Interpolate one file and write the result alongside it.

    Returns:
        The written output path, or None when the file has no placeholders

    Raises:
        UnresolvedVariableError: If a placeholder cannot be resolved; no output is written
    """
    document = input_path.read_bytes()
    result = interpolator.interpolate(document)

    if not interpolator.placeholders:
        logger.info(f"No variables to interpolate in {input_path}")
        return None

    output_path = output_path_for(input_path)
    output_path.write_bytes(result)
    logger.info(f"Interpolated {len(interpolator.placeholders)} variable(s): {input_path} -> {output_path}")
    return output_path


def resolve_config(args: Namespace) -> InterpolationConfig:
    """Combine the config file with command line overrides."""
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path)
    return config.merge(
        prefix=args.prefix,
        alternative_prefix=args.alternative_prefix,
        log_level=args.log_level
    )


def configure_logging(args: Namespace, config: InterpolationConfig) -> None:
    log_level = getattr(logging, config.log_level.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logging.getLogger('interpolator').setLevel(log_level)


def interpolate_files(args: Namespace) -> int:
    """
    Interpolate every file given on the command line.

    Exit codes: 0 on success, 1 on a missing file or unresolved variable,
    2 on an invalid config file.
    """
    masker = ValueMasker()
    masking_filter = MaskingFilter(masker)
    root_logger = logging.getLogger()

    try:
        config = resolve_config(args)
        configure_logging(args, config)
        for handler in root_logger.handlers:
            handler.addFilter(masking_filter)

        paths = [Path(p) for p in args.files]
        validate_input_files(paths)

        interpolator = VariableInterpolator(
            primary_prefix=config.prefix,
            alternative_prefix=config.alternative_prefix,
            masker=masker
        )
        for path in paths:
            interpolate_file(path, interpolator)

        return 0

    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except InterpolationError as e:
        logger.error(str(e))
        return e.exit_code
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
    finally:
        for handler in root_logger.handlers:
            handler.removeFilter(masking_filter)
