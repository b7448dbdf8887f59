"""sstarterc command line entry point."""

import sys
from importlib.metadata import PackageNotFoundError, version


def _version() -> str:
    try:
        return version("sstarter")
    except PackageNotFoundError:
        return "unknown"


def main(argv: list[str] | None = None) -> int:
    """Run ``sstarterc`` with ``argv`` and return its exit code."""
    import click
    import typer

    from sstarter.cli._create_app import _create_app

    argv = sys.argv[1:] if argv is None else argv
    if argv[:1] in (["--version"], ["-V"]):
        print(f"sstarterc {_version()}")
        return 0

    try:
        _create_app()(argv)
    except SystemExit as e:
        # Typer apps always finish through SystemExit
        return e.code if isinstance(e.code, int) else (0 if e.code is None else 1)
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0
