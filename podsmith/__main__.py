"""Allow running PODSMITH with `python -m podsmith`."""

from podsmith.cli.app import app

if __name__ == "__main__":
    app()
