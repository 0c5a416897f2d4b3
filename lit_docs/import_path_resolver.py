"""Heuristic resolution of relative module specifiers to source files."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

EXTENSION_PRIORITY = (".ts", ".tsx", ".mts", ".cts", ".js", ".mjs", ".cjs", ".jsx")
SOURCE_EXTENSIONS = (".ts", ".tsx", ".mts", ".cts")
OUTPUT_EXTENSIONS = (".js", ".mjs", ".cjs", ".jsx")
NAMING_SUFFIXES = ("mixin", "mixins", "component", "element", "lit", "styles")
SUFFIX_SEPARATORS = (".", "-")


def normalize_path(path: str | Path) -> str:
    """Return an absolute, normalized path string used as a cache key."""
    return os.path.abspath(os.fspath(path))


def is_bare_specifier(specifier: str) -> bool:
    """Check whether a specifier names a package rather than a file."""
    return not specifier.startswith((".", "/"))


class ImportPathResolver:
    """Resolves import specifiers the way bundlers and editors tend to.

    Probing is read-only and never raises; anything unresolved yields None.
    """

    def __init__(
        self,
        extensions: tuple[str, ...] = EXTENSION_PRIORITY,
        naming_suffixes: tuple[str, ...] = NAMING_SUFFIXES,
    ) -> None:
        """Initialize the resolver with the ranked extension and suffix lists."""
        self.extensions = extensions
        self.naming_suffixes = naming_suffixes

    def resolve(self, specifier: str, from_file: str) -> str | None:
        """Resolve `specifier` as written in `from_file` to an existing file."""
        if not specifier or is_bare_specifier(specifier):
            return None

        base_dir = Path(normalize_path(from_file)).parent
        raw_path = Path(normalize_path(base_dir / specifier))
        fallback_base = Path(specifier.rstrip("/")).name

        candidates = self._candidate_bases(raw_path)
        if fallback_base and fallback_base not in {".", ".."}:
            for candidate in self._candidate_bases(base_dir / fallback_base):
                if candidate not in candidates:
                    candidates.append(candidate)

        # Files win over directories so `./foo` prefers foo.ts to foo/index.ts.
        for candidate in candidates:
            resolved = self._probe_file(candidate)
            if resolved:
                return resolved
        for candidate in candidates:
            resolved = self._probe_directory(candidate)
            if resolved:
                return resolved

        if fallback_base and fallback_base not in {".", ".."}:
            search_dirs = [raw_path.parent]
            if base_dir not in search_dirs:
                search_dirs.append(base_dir)
            for directory in search_dirs:
                resolved = self._search_directory(directory, fallback_base)
                if resolved:
                    return resolved

        logger.debug("Unresolved import %r in %s", specifier, from_file)
        return None

    def _candidate_bases(self, base: Path) -> list[Path]:
        """Return the base path plus its conventional-suffix variants."""
        candidates = [base]
        if base.suffix.lower() in self.extensions:
            return candidates
        for suffix in self.naming_suffixes:
            for separator in SUFFIX_SEPARATORS:
                candidates.append(base.with_name(f"{base.name}{separator}{suffix}"))
        return candidates

    def _file_candidates(self, base: Path) -> list[Path]:
        candidates = [base]
        current = base.suffix.lower()
        if current not in self.extensions:
            candidates.extend(base.with_name(base.name + ext) for ext in self.extensions)
        elif current in OUTPUT_EXTENSIONS:
            candidates.extend(base.with_suffix(ext) for ext in SOURCE_EXTENSIONS)
        elif current in SOURCE_EXTENSIONS:
            candidates.extend(base.with_suffix(ext) for ext in OUTPUT_EXTENSIONS)
        return candidates

    def _probe_file(self, base: Path) -> str | None:
        for candidate in self._file_candidates(base):
            if _is_file(candidate):
                return normalize_path(candidate)
        return None

    def _probe_directory(self, base: Path) -> str | None:
        if not _is_dir(base):
            return None
        for ext in self.extensions:
            index = base / f"index{ext}"
            if _is_file(index):
                return normalize_path(index)
        return None

    def _search_directory(self, directory: Path, base_name: str) -> str | None:
        """Find the shortest-named sibling file or package starting with `base_name`."""
        best: tuple[int, str] | None = None
        try:
            entries = sorted(os.scandir(directory), key=lambda e: e.name)
            for entry in entries:
                if not entry.name.startswith(base_name):
                    continue
                if entry.is_file():
                    if Path(entry.name).suffix.lower() not in self.extensions:
                        continue
                    resolved = normalize_path(entry.path)
                elif entry.is_dir():
                    resolved = self._probe_directory(Path(entry.path))
                    if resolved is None:
                        continue
                else:
                    continue
                score = len(entry.name) - len(base_name)
                if best is None or score < best[0]:
                    best = (score, resolved)
        except OSError:
            return None
        return best[1] if best else None


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False
