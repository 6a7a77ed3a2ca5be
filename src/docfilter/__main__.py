"""Allow running docfilter with ``python -m docfilter``."""

from docfilter.cli import app

if __name__ == "__main__":
    app()
