"""Allow ``python -m tagindex``."""

from tagindex.cli.main import app

if __name__ == "__main__":
    app()
