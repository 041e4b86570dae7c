"""Allow ``python -m nuget_cmdline`` invocation."""

from __future__ import annotations

from nuget_cmdline.cli.app import cli

if __name__ == "__main__":
    cli()
