"""Logic for generating reports on a documentation run."""

import hashlib
import json
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

WRITTEN = "written"
SKIPPED = "skipped"
NOT_A_COMPONENT = "not_a_component"
ERROR = "error"
DRY_RUN = "dry_run"

# Settings that change logging only, never the records written.
HASH_EXCLUDED_KEYS = {"log_level"}


def config_hash(config: dict[str, Any]) -> str:
    """Fingerprint the settings that affect generated records.

    Two runs with equal hashes read the same files and write the same
    records; key order and logging settings do not matter.
    """
    relevant = {k: v for k, v in config.items() if k not in HASH_EXCLUDED_KEYS}
    canonical = json.dumps(relevant, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


@dataclass
class FileResult:
    """Outcome of processing one source file."""

    source: str
    status: str
    output: str | None = None
    tag_name: str | None = None
    counts: dict[str, int] | None = None
    error: str | None = None


class RunReport:
    """Collects and summarizes the per-file results of a run."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.results: list[FileResult] = []
        self.start_time = time.time()

    def add_result(self, result: FileResult) -> None:
        """Add a single file result to the report."""
        self.results.append(result)

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_files": len(self.results),
            },
            "results": [asdict(r) for r in self.results],
            "stats": self.compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def compute_stats(self) -> dict[str, Any]:
        """Count results by status and sum the documented facts."""
        status_counts: dict[str, int] = {}
        totals: dict[str, int] = {}
        for r in self.results:
            status_counts[r.status] = status_counts.get(r.status, 0) + 1
            for key, value in (r.counts or {}).items():
                totals[key] = totals.get(key, 0) + value

        return {
            "by_status": status_counts,
            "components": sum(1 for r in self.results if r.tag_name),
            "totals": totals,
        }
