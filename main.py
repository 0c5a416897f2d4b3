"""Generate documentation records for the Lit components in this directory tree."""

from lit_docs.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
