"""Command line interface for the remote export destination."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .errors import ConfigurationError
from .loaders.remote_loader import RemoteDestination
from .models.config import ExportConfig
from .models.record import Row
from .models.schema import schema_to_dict
from .runner import ExportRunner

logger = logging.getLogger(__name__)


def load_rows(path: str) -> List[Row]:
    """Load rows from a JSON file holding one row object or a list of them."""
    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, list):
        data = [data]

    return [Row.from_dict(item) for item in data]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Remote Export - POST migrated rows to a remote API"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Run export
    run_parser = subparsers.add_parser("run", help="Export rows to the remote endpoint")
    run_parser.add_argument("--config", required=True, help="Path to destination config file")
    run_parser.add_argument("--input", required=True, help="Path to rows JSON file")
    run_parser.add_argument("--output", help="Write the load result as JSON to this path")
    run_parser.add_argument("--stop-on-error", action="store_true", help="Stop at the first failed row")
    run_parser.add_argument("--max-errors", type=int, default=100, help="Stop after this many failed rows")
    run_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    # Check configuration
    check_parser = subparsers.add_parser("check", help="Validate a destination config")
    check_parser.add_argument("--config", required=True, help="Path to destination config file")
    check_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        if args.command == "run":
            return run_export(args)
        if args.command == "check":
            return run_check(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 2


def run_export(args) -> int:
    """Export rows from a JSON file."""
    config = ExportConfig.load(args.config)
    rows = load_rows(args.input)

    destination = RemoteDestination.create(config)
    runner = ExportRunner(
        destination,
        continue_on_error=not args.stop_on_error,
        max_errors=args.max_errors,
    )
    result = runner.run(rows)

    print("\n" + "=" * 60)
    print("EXPORT COMPLETE")
    print("=" * 60)
    print(f"Rows Attempted: {result.total_attempted}")
    print(f"Succeeded: {result.total_succeeded}")
    print(f"Failed: {result.total_failed}")
    if result.aborted:
        print("Stopped early after failures")
    if result.duration_seconds:
        print(f"Duration: {result.duration_seconds:.2f} seconds")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(result.to_dict(), f, indent=2, default=str)
        print(f"Result saved to {args.output}")

    return 1 if result.total_failed else 0


def run_check(args) -> int:
    """Validate a config and print the identifier and field schemas."""
    config = ExportConfig.load(args.config)
    destination = RemoteDestination.create(config)
    destination.check_requirements()

    print(json.dumps({
        "ids": schema_to_dict(destination.get_ids()),
        "fields": schema_to_dict(destination.fields()),
    }, indent=2))
    print("\nConfiguration is valid!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
