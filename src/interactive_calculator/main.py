"""
Command-line entrypoint of the interactive calculator.

This script:
- Parses and validates the logging options
- Configures the package logger
- Runs the calculator loop on stdin/stdout
- Maps the way the session ended to an exit code
"""

import argparse
from pathlib import Path
import sys
from typing import Literal, Optional, Sequence

from pydantic import BaseModel, ValidationError

from interactive_calculator.common.errors import InputExhaustedError
from interactive_calculator.common.logger import logger, setup_logging
from interactive_calculator.console.loop import CalculatorLoop

EXIT_OK = 0
EXIT_INPUT_EXHAUSTED = 1
EXIT_INTERRUPTED = 130

INPUT_EXHAUSTED_MESSAGE = "Input berakhir sebelum perhitungan selesai."


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    log_level : str
        Minimum level of the log records written to stderr.
    log_file : Optional[Path]
        Optional file receiving a copy of the log records.
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_file: Optional[Path] = None


def parse_args(argv: Optional[Sequence[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Interactive calculator for single binary operations"
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Logging level written to stderr (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional path of a file receiving the logs",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(log_level=args.log_level, log_file=args.log_file)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main function executed by the ``kalkulator`` console script.

    :return: Process exit code
    :rtype: int
    """
    cli_args = parse_args(argv)
    setup_logging(cli_args.log_level, cli_args.log_file)

    try:
        CalculatorLoop().run()
    except InputExhaustedError as exc:
        logger.error(f"🛑 {exc}")
        print(INPUT_EXHAUSTED_MESSAGE, file=sys.stderr)
        return EXIT_INPUT_EXHAUSTED
    except KeyboardInterrupt:
        logger.warning("🛑 Session interrupted by the user")
        print(file=sys.stderr)
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
