"""schema-validator CLI: check proposed schemas against a schema registry."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from pydantic import ValidationError


def main():
    """Main CLI entry point for schema-validator."""
    try:
        validator_version = get_version("schema-validator")
    except PackageNotFoundError:
        validator_version = "dev"

    parser = argparse.ArgumentParser(
        prog="schema-validator",
        description="Validates proposed Avro schemas against a schema registry"
    )
    parser.add_argument("--version", action="version", version=f"schema-validator {validator_version}")
    parser.add_argument(
        "-r", "--registry-url",
        dest="registry_url",
        default=None,
        help="Avro schema registry URL (defaults to $SCHEMA_VALIDATOR_REGISTRY_URL)"
    )
    parser.add_argument(
        "-d", "--schema-dir",
        dest="schema_dir",
        type=Path,
        required=True,
        help="Path to directory of proposed schemas"
    )
    parser.add_argument(
        "-e", "--extensions",
        dest="file_extensions",
        default=".avsc",
        help="Comma-delimited list of supported file extensions. Can optionally omit the leading dot."
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Maximum number of subjects checked concurrently"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Registry request timeout in seconds"
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write the run outcome as canonical JSON to this path"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the final result line."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr."
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Lazy import: keep --help and --version free of the validation stack
    from .api import validate_schema_dir
    from .config import ValidatorSettings
    from ._internal.discovery import parse_file_extensions
    from ._internal.reporting import render_subject, render_summary

    try:
        settings = ValidatorSettings.from_env(
            registry_url=args.registry_url,
            timeout_seconds=args.timeout,
            max_workers=args.max_workers,
            extensions=parse_file_extensions(args.file_extensions),
        )
        if settings.registry_url is None:
            parser.error("must provide a --registry-url")

        run = validate_schema_dir(args.schema_dir.resolve(), settings)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not args.quiet:
        for outcome in run.subjects:
            print()
            for line in render_subject(outcome):
                print(line)
        print()

    if args.report is not None:
        from ._internal.canonical_json import dump_report

        args.report.parent.mkdir(parents=True, exist_ok=True)
        args.report.write_text(dump_report(run), encoding="utf-8")
        if not args.quiet:
            print(f"  Report: {args.report}")

    summary = render_summary(run)
    if not args.quiet:
        print(summary[0])
    print(summary[-1])
    sys.exit(0 if run.ok else 1)


if __name__ == "__main__":
    main()
