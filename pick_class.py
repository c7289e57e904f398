#!/usr/bin/env python3
"""Entry point wrapper for the interactive class picker."""

from deckpicker import main


if __name__ == "__main__":
    main()
