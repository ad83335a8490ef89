"""Command-line interface for the barclamp packager.

This module provides the CLI entry point for generating packaging
metadata and building a barclamp package.
"""

import argparse
import sys
from pathlib import Path

from .config import CROWBAR_DIR_VAR, PackagingConfig
from .core.errors import PackagingError
from .pipeline import PackagingPipeline
from .registry import PackagerRegistry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="barclamp-packager",
        description="Generate packaging metadata for a barclamp and build its package",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Environment:
  {CROWBAR_DIR_VAR}  directory holding the shared packaging templates (required)

Examples:
  # Build an RPM into /tmp/packages
  barclamp-packager barclamps/nova /tmp/packages rpm

  # Only render debian/control and debian/rules
  barclamp-packager --no-build barclamps/nova /tmp/packages deb
        """,
    )

    parser.add_argument("component", type=Path, help="Barclamp source directory")

    parser.add_argument("destination", type=Path, help="Directory receiving the built package")

    parser.add_argument(
        "package_type",
        choices=PackagerRegistry.list_package_types(),
        help="Native package type to build",
    )

    parser.add_argument(
        "--no-build",
        action="store_true",
        help="Stop after rendering the packaging metadata",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress to stderr")

    return parser


def report_error(error: PackagingError) -> None:
    """Print an error and every validation issue it carries to stderr."""
    print(f"Error: {error}", file=sys.stderr)
    for issue in getattr(error, "issues", []):
        print(f"  {issue}", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the packager."""
    args = build_parser().parse_args(argv)

    try:
        config = PackagingConfig.from_env()

        packager = PackagerRegistry.create_packager(args.package_type, config=config)
        pipeline = PackagingPipeline(config, packager, verbose=args.verbose)

        if args.no_build:
            pipeline.generate_metadata(args.component, args.destination)
            status = 0
        else:
            status = pipeline.run(args.component, args.destination)

    except PackagingError as e:
        report_error(e)
        sys.exit(e.exit_code)

    if status != 0:
        print(f"Error: {args.package_type} build failed with exit code {status}", file=sys.stderr)
    sys.exit(status)


if __name__ == "__main__":
    main()
