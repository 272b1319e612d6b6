"""util-suite command line interface."""

from utilsuite.cli.app import app

__all__ = ["app"]
