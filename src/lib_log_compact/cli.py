"""Click command group for the ``lib_log_compact`` console script.

Contents
--------
* :func:`cli` - root group; prints the metadata banner without a subcommand.
* ``info`` - metadata banner.
* ``logdemo`` - replay the reference sequence with a chosen palette.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .adapters import COLOR_THEMES
from .lib_log_compact import logdemo, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (overrides {log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool) -> None:
    """Compact, aligned console log lines."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--theme", type=click.Choice(sorted(COLOR_THEMES), case_sensitive=False), default="classic", show_default=True)
@click.option("--source", default="MyApp", show_default=True, help="Source name shown in the headers.")
@click.option("--pause", type=click.FloatRange(min=0.0), default=1.0, show_default=True, help="Seconds to wait before the fourth record.")
@click.option("--force-color/--no-color", "force_color", default=True, show_default=True)
def cli_logdemo(theme: str, source: str, pause: float, force_color: bool) -> None:
    """Replay the sample sequence showing full, compacted and time-only headers."""

    logdemo(theme=theme, source=source, pause=pause, force_color=force_color, no_color=not force_color)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group in a test-friendly manner.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0.1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return 0


__all__ = ["cli", "main"]
