"""Module entrypoint for ``python -m package_protections.cli``."""

from __future__ import annotations

from .main import main

if __name__ == "__main__":  # pragma: no cover
    main()
