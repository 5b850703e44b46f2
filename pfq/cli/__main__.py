"""Module entry point for `python -m pfq.cli`."""

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    from pfq.cli import cli

    cli()
