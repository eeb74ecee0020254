'''
    Command line entry point: runs the dispatch scenario, or a single fly call
'''

import click

from boxdispatch import __version__
from boxdispatch.config.logging import configure_logging
from boxdispatch.core.dispatcher import Dispatcher
from boxdispatch.utils.boxing import TYPE_NAMES, Typed, parse_literal
from boxdispatch.utils.overload import format_signature, overload

TYPE_CHOICE = click.Choice(list(TYPE_NAMES))


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name='boxdispatch')
@click.option('-v', '--verbose', is_flag=True, envvar='BOXDISPATCH_VERBOSE', help='Debug logging to stderr.')
@click.option('--log-json', is_flag=True, envvar='BOXDISPATCH_LOG_JSON', help='JSON log lines on stderr.')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_json: bool) -> None:
    '''Overload resolution with boxing: fly("test") then fly(56).'''
    configure_logging(verbose=verbose, log_json=log_json)
    if ctx.invoked_subcommand is None:
        Dispatcher().run()


@cli.command()
@click.argument('value')
@click.option('-t', '--type', 'type_name', type=TYPE_CHOICE, default='str', show_default=True,
              help='Declared type of VALUE.')
def fly(value: str, type_name: str) -> None:
    '''Call fly with VALUE declared as the given type.'''
    static_type = TYPE_NAMES[type_name]
    try:
        parsed = parse_literal(value, static_type)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint='VALUE') from exc
    Dispatcher().fly(Typed(parsed, static_type))


@cli.command()
@click.option('-t', '--type', 'type_name', type=TYPE_CHOICE, required=True, help='Declared argument type.')
def resolve(type_name: str) -> None:
    '''Show which fly overload a declared type selects.'''
    resolution = overload.resolve(Dispatcher.fly.name, TYPE_NAMES[type_name])
    selected = format_signature('fly', resolution.param_types)
    boxing = 'boxing' if resolution.boxed else 'no boxing'
    click.echo(f'fly({type_name}) -> {selected} [{boxing}]')
