"""Query jobs in a Nomad cluster.

Usage:
    nquery
    nquery web --status running --type service
    nquery --periodic --fields ID --fields Periodic.Spec --pretty

Environment Variables (also read from .env):
    NOMAD_ADDR - Nomad API address (default: http://127.0.0.1:4646)
    NQUERY_LOG_LEVEL - Log level (default: WARNING)
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .client import NomadClient
from .config import QueryConfig
from .exceptions import NomadError
from .filters import FilterCriteria, TriState, select_jobs
from .output import render
from .projection import FieldSelector, project
from .repository import JobRepository

logger = logging.getLogger("nquery")


def setup_logging(level: str, verbose: bool) -> None:
    """Configure logging on stderr so stdout only carries the JSON result."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    # Reduce noise from the HTTP stack unless in verbose mode
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nquery",
        description="Query jobs in a Nomad cluster and print them as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # All jobs, full records
  %(prog)s web --status running             # Running jobs whose ID starts with "web"
  %(prog)s --type batch --no-periodic       # Non-periodic batch jobs
  %(prog)s --parameterized -f ID -f ParameterizedJob.Payload --pretty
        """,
    )

    parser.add_argument(
        "job_name",
        nargs="?",
        default="",
        help="A prefix that the job ID must match (case-insensitive)",
    )
    parser.add_argument(
        "--status",
        help="Return jobs with this status",
    )
    parser.add_argument(
        "--type",
        dest="job_type",
        help="Return jobs of this type",
    )

    periodic = parser.add_mutually_exclusive_group()
    periodic.add_argument(
        "--periodic",
        action="store_true",
        help="Return periodic jobs",
    )
    periodic.add_argument(
        "--no-periodic",
        action="store_true",
        help="Exclude periodic jobs",
    )

    parameterized = parser.add_mutually_exclusive_group()
    parameterized.add_argument(
        "--parameterized",
        action="store_true",
        help="Return parameterized jobs",
    )
    parameterized.add_argument(
        "--no-parameterized",
        action="store_true",
        help="Exclude parameterized jobs",
    )

    parser.add_argument(
        "-f", "--fields",
        action="append",
        default=[],
        metavar="FIELD",
        help="Include only these fields in the output (repeatable)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print the JSON output",
    )
    parser.add_argument(
        "--skip-failed",
        action="store_true",
        help="Skip jobs whose details cannot be fetched instead of failing",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run(args: argparse.Namespace, config: QueryConfig) -> str:
    """Execute a parsed query and return the rendered JSON."""
    criteria = FilterCriteria(
        name_prefix=args.job_name,
        status=args.status,
        job_type=args.job_type,
        periodic=TriState.from_flags(args.periodic, args.no_periodic),
        parameterized=TriState.from_flags(args.parameterized, args.no_parameterized),
    )
    selector = FieldSelector.from_fields(args.fields)

    with NomadClient(config) as client:
        jobs = select_jobs(
            JobRepository(client), criteria, skip_failed=config.skip_failed
        )

    if selector:
        return render(project(selector, jobs), pretty=args.pretty)
    return render(jobs, pretty=args.pretty)


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    load_dotenv()
    config = QueryConfig.from_env(skip_failed=args.skip_failed)
    setup_logging(config.log_level, args.verbose)
    logger.debug(f"Using Nomad at {config.address}")

    try:
        output = run(args, config)
    except NomadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)

    print(output)
    sys.exit(0)


if __name__ == "__main__":
    main()
