"""Module entrypoint for ``python -m textpager``."""

from .cli import main


if __name__ == "__main__":
    main()
