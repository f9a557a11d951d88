"""Module entry point for `python -m spotcat.cli`."""

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    from spotcat.cli import cli

    cli()
