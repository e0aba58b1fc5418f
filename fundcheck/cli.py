import argparse
import logging

from .config import DEFAULT_EXTENSIONS, DEFAULT_NUMBER_LENGTH, ValidatorConfig
from .errors import ConfigurationError
from .patterns import (
    DEFAULT_DELIMITER,
    DEFAULT_FUND_PATTERN,
    DEFAULT_INVENTORY_PATTERN,
    DEFAULT_UNIT_PATTERN,
)
from .utils import setup_logging
from .validator import FundValidator

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the fund/inventory/unit structure of a digitized archive before ingestion"
    )
    parser.add_argument("--source", action="append", default=[], metavar="PATH",
                        help="Source root holding fund directories (repeatable, required)")
    parser.add_argument("--destination", action="append", default=[], metavar="PATH",
                        help="Destination archive root; units already present there are reported (repeatable)")
    parser.add_argument("--exclude", action="append", default=[], metavar="NAME",
                        help="Directory base name to skip at fund, inventory or unit level (repeatable)")
    parser.add_argument("--extension", action="append", default=[], metavar="EXT",
                        help=f"Allowed image extension (repeatable, default {', '.join(DEFAULT_EXTENSIONS)})")
    parser.add_argument("--number-length", type=int, default=DEFAULT_NUMBER_LENGTH,
                        help="Zero-padded width of the image index")
    parser.add_argument("--use-prefix", action="store_true",
                        help="Image names carry the archive prefix and the unit name")
    parser.add_argument("--archive-prefix", type=str, default="", help="Archive prefix literal, e.g. GAYO")
    parser.add_argument("--fund-pattern", type=str, default=DEFAULT_FUND_PATTERN, help="Regex fragment for fund labels")
    parser.add_argument("--inventory-pattern", type=str, default=DEFAULT_INVENTORY_PATTERN,
                        help="Regex fragment for inventory labels")
    parser.add_argument("--unit-pattern", type=str, default=DEFAULT_UNIT_PATTERN, help="Regex fragment for unit labels")
    parser.add_argument("--delimiter", type=str, default=DEFAULT_DELIMITER,
                        help="Delimiter joining fund, inventory, unit and image name parts")
    parser.add_argument("--check-images", action="store_true",
                        help="Verify every image with the external integrity tool")
    parser.add_argument("--tool-dir", type=str, help="Directory containing the integrity tool (default: PATH)")
    parser.add_argument("--log-file", type=str, help="Append log entries to this file")
    parser.add_argument("--continue-on-error", action="store_true",
                        help="Record violations and keep going instead of stopping at the first one")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar over source roots")
    parser.add_argument("--show-patterns", action="store_true", help="Print the composed name rules and exit")
    return parser


def config_from_args(args: argparse.Namespace) -> ValidatorConfig:
    return ValidatorConfig(
        source_roots=tuple(args.source),
        destination_roots=tuple(args.destination),
        excluded=frozenset(args.exclude),
        extensions=tuple(args.extension) or DEFAULT_EXTENSIONS,
        number_length=args.number_length,
        use_prefix=args.use_prefix,
        archive_prefix=args.archive_prefix,
        fund_pattern=args.fund_pattern,
        inventory_pattern=args.inventory_pattern,
        unit_pattern=args.unit_pattern,
        delimiter=args.delimiter,
        check_images=args.check_images,
        tool_dir=args.tool_dir,
        log_file=args.log_file,
        continue_on_error=args.continue_on_error,
        verbose=args.verbose,
        debug=args.debug,
        show_progress=args.progress,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, debug=args.debug, log_file=args.log_file)
    logger = logging.getLogger(__name__)

    if not args.source:
        parser.error("at least one --source is required")
    try:
        config = config_from_args(args)
        if args.show_patterns:
            rules = config.rules
            for rule in (rules.fund, rules.inventory, rules.unit):
                print(f"{rule.level}: ^{rule.pattern}$")
            return EXIT_OK
        validator = FundValidator(config)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return EXIT_CONFIG

    result = validator.run()
    return EXIT_OK if result.ok else EXIT_VIOLATIONS


if __name__ == "__main__":
    raise SystemExit(main())
