"""Orchestration: find component files, resolve them and write their records."""

import glob
import json
import logging
from collections.abc import Iterable
from pathlib import Path

import yaml

from lit_docs.errors import ConfigError
from lit_docs.load_config import DEFAULT_CONFIG, OUTPUT_FORMATS
from lit_docs.models import ComponentDocs
from lit_docs.parser import parse_lit_component
from lit_docs.run_report import DRY_RUN, ERROR, NOT_A_COMPONENT, SKIPPED, WRITTEN, FileResult, RunReport

logger = logging.getLogger(__name__)

COUNTED_SECTIONS = ("properties", "events", "methods", "slots", "css_properties", "css_parts")


def find_source_files(patterns: Iterable[str], ignore_dirs: Iterable[str] = ()) -> list[Path]:
    """Expand glob patterns (with `**` support) into a sorted list of files."""
    ignored = set(ignore_dirs)
    found: set[Path] = set()
    for pattern in patterns:
        for match in glob.glob(pattern, recursive=True):
            path = Path(match)
            if not path.is_file():
                continue
            if ignored.intersection(path.parent.parts):
                continue
            found.add(path)
    return sorted(found)


def output_path_for(source: Path, output_name: str) -> Path:
    """Return where the record of `source` is written.

    `{stem}` in the output name is replaced by the source file name without
    its last extension.
    """
    return source.parent / output_name.replace("{stem}", source.stem)


def serialize_docs(docs: ComponentDocs, output_format: str) -> str:
    """Render a record as JSON or YAML text."""
    data = docs.to_dict()
    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def count_sections(docs: ComponentDocs) -> dict[str, int]:
    """Return the number of entries in each documented section."""
    return {name: len(getattr(docs, name)) for name in COUNTED_SECTIONS}


def generate_docs(
    patterns: Iterable[str],
    *,
    overwrite: bool = False,
    output_name: str = DEFAULT_CONFIG["output"]["file_name"],
    output_format: str = DEFAULT_CONFIG["output"]["format"],
    ignore_dirs: Iterable[str] = tuple(DEFAULT_CONFIG["ignore_dirs"]),
    dry_run: bool = False,
    report: RunReport | None = None,
) -> int:
    """Write a documentation record for every component matched by `patterns`.

    Files that are not components, or fail to parse, are reported and
    skipped. Returns the number of records written (or that would be
    written, in a dry run).
    """
    if output_format not in OUTPUT_FORMATS:
        msg = f"Unknown output format {output_format!r}"
        raise ConfigError(msg)

    files = find_source_files(patterns, ignore_dirs)
    if not files:
        print("No source files matched.")
        return 0

    written = 0
    claimed: set[Path] = set()
    for source in files:
        result = _process_file(source, overwrite, output_name, output_format, dry_run, claimed)
        if result.status in {WRITTEN, DRY_RUN}:
            written += 1
        if report is not None:
            report.add_result(result)

    print(f"Documented {written} component(s) from {len(files)} file(s).")
    return written


def _process_file(
    source: Path,
    overwrite: bool,
    output_name: str,
    output_format: str,
    dry_run: bool,
    claimed: set[Path],
) -> FileResult:
    try:
        docs = parse_lit_component(str(source))
    except Exception as e:
        logger.exception("Failed to process %s", source)
        return FileResult(source=str(source), status=ERROR, error=str(e))

    if docs is None:
        return FileResult(source=str(source), status=NOT_A_COMPONENT)

    counts = count_sections(docs)
    target = output_path_for(source, output_name)
    result = FileResult(
        source=str(source),
        status=WRITTEN,
        output=str(target),
        tag_name=docs.tag_name,
        counts=counts,
    )

    if target in claimed:
        logger.warning("%s already holds a record from this run; skipping %s", target, source)
        result.status = SKIPPED
        return result
    if target.exists() and not overwrite:
        print(f"Skipping {source}: {target} exists (use --overwrite)")
        result.status = SKIPPED
        return result

    claimed.add(target)
    summary = ", ".join(f"{n} {name.replace('_', ' ')}" for name, n in counts.items())
    if dry_run:
        print(f"[dry-run] <{docs.tag_name}> {source} -> {target} ({summary})")
        result.status = DRY_RUN
        return result

    try:
        target.write_text(serialize_docs(docs, output_format), encoding="utf-8")
    except OSError as e:
        logger.exception("Could not write %s", target)
        result.status = ERROR
        result.error = str(e)
        return result

    print(f"<{docs.tag_name}> {source} -> {target} ({summary})")
    return result
