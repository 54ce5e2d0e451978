"""Allow ``python -m termdecl``."""

from termdecl.cli import app

app()
