"""Command-line interface for the flight filter."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from data.generators.sample_flights import generate_sample_flights
from filters import RuleReport, default_rules, evaluate_rules, print_reports


def setup_logging(level: str = "WARNING", log_file: str = None) -> None:
    """Configure logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=handlers
    )


def run_checks(now: Optional[datetime] = None) -> List[RuleReport]:
    """Build the sample flights, apply every rule and print the matches."""
    logger = logging.getLogger(__name__)

    # Generate instance
    logger.info("Generating sample flights...")
    flights = generate_sample_flights(now)

    # Evaluate
    reports = evaluate_rules(flights, default_rules(), now)

    print_reports(reports)

    return reports


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Filter sample flights through validation rules"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Log file path"
    )

    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.log_level, args.log_file)

    try:
        run_checks()
    except ValueError as e:
        sys.exit(f"error: {e}")


if __name__ == "__main__":
    main()
