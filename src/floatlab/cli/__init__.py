"""CLI modules for the floatlab demonstrations.

Note: avoid importing submodules at import-time. This keeps `python -m floatlab.cli.<cmd>`
free of `runpy` warnings and avoids side effects from eager imports.
"""

from __future__ import annotations


def epsilon_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `floatlab.cli.epsilon.main`."""

    from .epsilon import main

    return main(argv)


def horner_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `floatlab.cli.horner.main`."""

    from .horner import main

    return main(argv)


def run_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `floatlab.cli.run.main`."""

    from .run import main

    return main(argv)


__all__ = ["epsilon_main", "horner_main", "run_main"]
