"""Entry point for ``python -m mediatypes``."""

from mediatypes.cli import app

if __name__ == "__main__":
    app()
