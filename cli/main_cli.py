"""
Main CLI Interface for jr
"""

import click
from click.core import ParameterSource
from rich.console import Console

from rpc import __version__
from rpc.errors import JrError
from utils.config import DEFAULT_CONFIG_FILE, resolve_config
from utils.logging import setup_logging
from .invocation import Invocation, execute
from .stdin import read_stdin, stdin_is_piped


CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    # Like Go's flag package: options stop at the first positional argument,
    # so parameter tokens that start with "-" are left alone.
    "allow_interspersed_args": False,
}


def _from_command_line(ctx: click.Context, name: str) -> bool:
    return ctx.get_parameter_source(name) == ParameterSource.COMMANDLINE


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="jr")
@click.option('-no-format', '--no-format', 'no_format', is_flag=True,
              help='Do not format JSON output')
@click.option('--timeout', '-t', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Seconds to wait for the connection and the reply (default: wait forever)')
@click.option('--wrap-params', is_flag=True,
              help='Send params as a one-element array, as Go net/rpc servers expect')
@click.option('--config-file', default=DEFAULT_CONFIG_FILE, show_default=True,
              help='Configuration file path')
@click.option('--log-file', default=None, help='Also write log records to this file')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging on stderr')
@click.argument('args', nargs=-1)
@click.pass_context
def main_cli(ctx, no_format, timeout, wrap_params, config_file, log_file, verbose, args):
    """Call METHOD on the JSON-RPC server at ADDRESS:PORT and print the reply.

    \b
    Usage:
      jr ADDRESS:PORT METHOD [PARAMETER...]

    \b
    Parameters are key/value pairs. They come in two forms:
      key=value     (for strings; result is "key":"value")
      key:=value    (for raw JSON; result is "key":value)

    A single parameter without "=" is sent on its own: as a JSON string, or
    as raw JSON when it starts with ":". With no parameters, data piped on
    stdin is sent as the raw params.
    """
    obj = ctx.ensure_object(dict)

    overrides = {}
    if _from_command_line(ctx, 'no_format'):
        overrides['no_format'] = no_format
    if _from_command_line(ctx, 'wrap_params'):
        overrides['wrap_params'] = wrap_params
    if timeout is not None:
        overrides['timeout'] = timeout
    if log_file:
        overrides['log_file'] = log_file
    if verbose:
        overrides['log_level'] = 'DEBUG'

    config = resolve_config(config_file, overrides)
    logger = setup_logging(config['log_level'], config['log_file'])

    if len(args) < 2:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(2)

    invocation = Invocation.from_args(
        args,
        format_output=not config['no_format'],
        timeout=config['timeout'],
        wrap_params=config['wrap_params'],
    )
    logger.debug(f"Invocation: {invocation}")

    probe = obj.get('stdin_probe', stdin_is_piped)
    reader = obj.get('stdin_reader', lambda: read_stdin(click.get_binary_stream('stdin')))

    try:
        output = execute(invocation, probe(), reader)
    except JrError as e:
        console = Console(stderr=True)
        console.print(e.describe(), style="red", markup=False, highlight=False, soft_wrap=True)
        ctx.exit(1)

    click.echo(output)


def main():
    """Entry point for the jr console script"""
    main_cli(obj={})


if __name__ == "__main__":
    main()
