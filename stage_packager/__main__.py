"""Allow ``python -m stage_packager`` to run the command-line interface."""

from .cli import app

app()
