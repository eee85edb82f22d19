"""Main execution script for the C Positive Sum Grader."""

import argparse
import json
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Load .env before config reads the environment
load_dotenv()

import config
from utils.logger import setup_logger
from utils.error_handler import ConfigError, GradingError, UserCancelledError
from services.c_engine import CCompilerEngine
from services.execution import ExecutionAdapter
from core.grader import Grader
from core.results import GradeReport
import ui.cli as cli

# Initialize logger as early as possible after config is loaded
logger = setup_logger()


def build_grader() -> Grader:
    """Creates a Grader backed by the configured C compiler.

    Raises:
        ConfigError: If the compiler is not installed.
    """
    engine = CCompilerEngine()
    compiler_path = engine.check_available()
    logger.info(f"Using C compiler at {compiler_path}")
    return Grader(ExecutionAdapter(engine))


def read_source(path: str) -> str:
    """Reads the submission from ``path``, or from stdin when ``path`` is ``-``."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def run_grading(grader: Grader, source_text: str, as_json: bool = False) -> Optional[GradeReport]:
    """Runs one grading pass and hands the outcome to the presentation layer.

    Any unexpected failure aborts the run: no report is produced and the error is
    shown with a score of 0.

    Returns:
        The GradeReport, or None if the run was aborted.
    """
    try:
        if as_json:
            report = grader.grade(source_text)
        else:
            with cli.running_status():
                report = grader.grade(source_text)

        if as_json:
            print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
        else:
            cli.display_report(report)
    except GradingError as e:
        logger.warning(f"Grading rejected: {e}")
        _present_error(str(e), as_json)
        return None
    except Exception as e:
        logger.critical(f"Unexpected error during grading: {e}", exc_info=True)
        _present_error(f"General error while running the tests: {e}", as_json)
        return None

    return report


def _present_error(message: str, as_json: bool):
    if as_json:
        print(json.dumps({"score": 0, "error": message}, indent=2, ensure_ascii=False))
    else:
        cli.display_run_error(message)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Grade a C program that sums 5 positive integers."
    )
    parser.add_argument("source", nargs="?", help="C source file to grade ('-' reads stdin). Prompts if omitted.")
    parser.add_argument("--json", action="store_true", help="print the grade report as JSON")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function: read a submission, grade it and display the report."""
    args = parse_args(argv)
    logger.info("Starting C Positive Sum Grader.")
    if not args.json:
        cli.display_welcome()

    try:
        grader = build_grader()
        path = args.source or cli.prompt_for_source_path()
        source_text = read_source(path)
        logger.info(f"Grading submission from {path} ({len(source_text)} chars).")
        report = run_grading(grader, source_text, as_json=args.json)
        return 0 if report is not None else 1
    except FileNotFoundError as e:
        logger.error(f"Source file not found: {e}")
        _present_error(f"Missing source file: {e.filename}", args.json)
    except OSError as e:
        logger.error(f"Could not read source file: {e}", exc_info=config.DEBUG)
        _present_error(f"Could not read source file: {e}", args.json)
    except ConfigError as e:
        logger.critical(f"Setup error: {e}", exc_info=config.DEBUG)
        _present_error(f"Setup Error: {e}", args.json)
    except UserCancelledError as e:
        logger.info(f"Operation cancelled by user: {e}")
        cli.display_warning(f"Operation cancelled: {e}")
    except KeyboardInterrupt:
        logger.info("Operation interrupted by user (Ctrl+C).")
        cli.display_warning("Operation interrupted.")
    finally:
        if not args.json:
            cli.display_farewell()
    return 1


def cli_entry():
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
