# File: genointervals/cli.py
# Location: genointervals/genointervals/cli.py

"""
Command-line interface of genointervals.

Parses one interval file and writes its per-chromosome statistics as a TSV
table and/or an HTML summary report.
"""

import argparse
import datetime
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import bed_options_from_config, columns_from_config, load_config, options_from_config
from .errors import GenoIntervalsError
from .formats import FORMATS, create_parser as create_format_parser
from .hashing import HashFunction
from .report import generate_html_report
from .version import __version__

logger = logging.getLogger("genointervals")

_DELIMITER_ALIASES = {"\\t": "\t", "tab": "\t", "comma": ",", "space": " "}


def create_parser() -> argparse.ArgumentParser:
    """Create and return the argument parser for the genointervals CLI."""
    parser = argparse.ArgumentParser(
        description="genointervals: Parse genomic interval files and summarize them."
    )

    general_group = parser.add_argument_group("General Options")
    general_group.add_argument(
        "--version",
        action="version",
        version=f"genointervals {__version__}",
        help="Show the current version and exit",
    )
    general_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARN", "ERROR"],
        default="INFO",
        help="Set the logging level",
    )
    general_group.add_argument(
        "--log-file", help="Path to a file to write logs to (in addition to stderr)."
    )
    general_group.add_argument(
        "-c",
        "--config",
        help="Path to configuration file",
        default=None,
    )

    io_group = parser.add_argument_group("Core Input/Output")
    io_group.add_argument("input", help="Interval file to parse")
    io_group.add_argument(
        "-f",
        "--format",
        choices=sorted(FORMATS),
        default="bed",
        help="Format of the input file (default: bed)",
    )
    io_group.add_argument(
        "--stats-output", help="Write per-chromosome statistics to this TSV file"
    )
    io_group.add_argument("--html-report", help="Write an HTML summary report to this file")

    parse_group = parser.add_argument_group("Parsing Options")
    parse_group.add_argument(
        "--assembly",
        help="Reference assembly (hg19, mm10) used for coverage and chromosome checks",
    )
    parse_group.add_argument(
        "--start-offset", type=int, help="Number of header lines to skip"
    )
    parse_group.add_argument(
        "--max-lines", type=int, help="Maximum number of lines to read after the header"
    )
    parse_group.add_argument(
        "--delimiter",
        help="Field delimiter; accepts a single character or one of: \\t, tab, comma, space",
    )
    parse_group.add_argument(
        "--hash-function",
        choices=[h.value for h in HashFunction],
        help="Hash function used for interval keys",
    )
    parse_group.add_argument(
        "--no-strict-chromosomes",
        action="store_true",
        help="Keep intervals on chromosomes missing from the reference assembly",
    )
    return parser


def parse_args(args_list=None):
    """Parse command line arguments.

    Parameters
    ----------
    args_list : list, optional
        List of arguments to parse. If None, uses sys.argv

    Returns
    -------
    argparse.Namespace
        Parsed arguments
    """
    parser = create_parser()
    return parser.parse_args(args_list)


def _configure_logging(log_level: str, log_file: Optional[str]) -> None:
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
    }
    logger.setLevel(log_level_map[log_level])

    if log_file:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        fh = logging.FileHandler(log_file)
        fh.setLevel(log_level_map[log_level])
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        logger.addHandler(fh)
        logger.debug(f"Logging to file enabled: {log_file}")


def merge_cli_options(cfg: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Return a copy of ``cfg`` with the parse options given on the command line applied."""
    merged = dict(cfg)
    if args.assembly is not None:
        merged["assembly"] = args.assembly
    if args.start_offset is not None:
        merged["start_offset"] = args.start_offset
    if args.max_lines is not None:
        merged["max_lines_to_read"] = args.max_lines
    if args.delimiter is not None:
        merged["delimiter"] = _DELIMITER_ALIASES.get(args.delimiter, args.delimiter)
    if args.hash_function is not None:
        merged["hash_function"] = args.hash_function
    if args.no_strict_chromosomes:
        merged["strict_chromosome_filtering"] = False
    return merged


def main(argv: Optional[List[str]] = None) -> int:
    """Run main entry point for the genointervals CLI.

    Steps:
        1. Parse arguments.
        2. Configure logging and load config.
        3. Apply command-line overrides to the configuration.
        4. Parse the input file.
        5. Write the statistics table and HTML report if requested.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    args = parse_args(argv)
    _configure_logging(args.log_level, args.log_file)

    start_time = datetime.datetime.now()
    logger.info(f"Run started at {start_time.isoformat()}")
    logger.debug(f"CLI arguments: {args}")

    try:
        cfg = merge_cli_options(load_config(args.config), args)
        logger.debug(f"Configuration loaded: {cfg}")

        options = options_from_config(cfg)
        columns = columns_from_config(cfg, args.format)
        builder_options = bed_options_from_config(cfg) if args.format == "bed" else {}
        interval_parser = create_format_parser(args.format, columns, options, **builder_options)

        dataset = interval_parser.parse(args.input)
    except OSError as e:
        logger.error(str(e))
        return 1
    except (GenoIntervalsError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    for message in dataset.messages[:10]:
        logger.info(message)
    if len(dataset.messages) > 10:
        logger.info(f"... {len(dataset.messages) - 10} more messages")

    if args.stats_output:
        stats_path = Path(args.stats_output)
        stats_path.parent.mkdir(parents=True, exist_ok=True)
        dataset.statistics_frame().to_csv(stats_path, sep="\t", index=False, na_rep="NaN")
        logger.info(f"Statistics written to {stats_path}")

    if args.html_report:
        generate_html_report(dataset, args.html_report, cfg)

    end_time = datetime.datetime.now()
    logger.info(f"Run ended at {end_time.isoformat()}")
    logger.info(f"Total runtime: {end_time - start_time}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
