"""Entrypoint for `python -m term_select`."""

from .cli import main


if __name__ == "__main__":
    main()
