from lazyrules.cli.main import cli

__all__ = ["cli"]
