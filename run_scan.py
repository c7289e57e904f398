"""Entry point wrapper for the card catalog scanner."""
from __future__ import annotations

from cardsource.run_scan import run_cli


if __name__ == "__main__":  # pragma: no cover
    run_cli()
