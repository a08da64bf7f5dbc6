"""Module entry point for `python -m wp_schema_system`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
