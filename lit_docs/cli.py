"""Command-line interface for generating Lit component documentation."""

import argparse
import logging
import sys

from lit_docs.errors import ConfigError
from lit_docs.generate_docs import generate_docs
from lit_docs.load_config import OUTPUT_FORMATS, load_config
from lit_docs.run_report import RunReport, config_hash

__version__ = "0.1.0"


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the `lit-docs` command."""
    ap = argparse.ArgumentParser(
        prog="lit-docs",
        description=(
            "Extract documentation records (properties, events, methods, slots, "
            "CSS custom properties and parts) from Lit components, following "
            "mixin chains across files."
        ),
    )
    ap.add_argument(
        "patterns",
        nargs="*",
        help="Glob patterns of component files (default: from config, '**/*.lit.ts')",
    )
    ap.add_argument(
        "-o",
        "--overwrite",
        action="store_true",
        help="Replace existing output files",
    )
    ap.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format of the records",
    )
    ap.add_argument(
        "--output-name",
        help="File name written beside each component ('{stem}' is replaced by the source name)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve components and print counts without writing files",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON run report to this path",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the documentation generator."""
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    level = "DEBUG" if args.verbose else str(config["log_level"]).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    output = config["output"]
    report = RunReport(config_hash(config)) if args.report else None

    generate_docs(
        args.patterns or config["patterns"],
        overwrite=args.overwrite or bool(output.get("overwrite")),
        output_name=args.output_name or output.get("file_name", "component-docs.json"),
        output_format=args.format or output["format"],
        ignore_dirs=config["ignore_dirs"],
        dry_run=args.dry_run,
        report=report,
    )

    if report is not None:
        report.generate_report(args.report)
        print(f"Report written to {args.report}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
