import logging
import shlex
import typing

import click

from . import __doc__, __version__
from .gpg import GPG
from .settings import DEFAULT_SETTINGS, DIGEST_ALGORITHMS

log = logging.getLogger(__name__)

CONTEXT_SETTINGS = {
    # Everything from the first argument the wrapper doesn't know about
    # onwards belongs to gpg.
    'ignore_unknown_options': True,
    'allow_interspersed_args': False,
}


@click.command(help=__doc__, context_settings=CONTEXT_SETTINGS)
@click.option(
    '--gpg-binary', 'executable',
    metavar='PATH',
    envvar='GPG_ENCRYPT_GPG',
    default='gpg',
    show_default=True,
    help="The gpg executable to run.")
@click.option(
    '--s2k-digest', 's2k_digest_algo',
    envvar='GPG_ENCRYPT_S2K_DIGEST',
    default=DEFAULT_SETTINGS.s2k_digest_algo,
    show_default=True,
    type=click.Choice(sorted(DIGEST_ALGORITHMS), case_sensitive=False),
    help="Digest used to mangle the passphrase.")
@click.option(
    '--print-command',
    default=False,
    is_flag=True,
    help="Print the gpg command instead of running it.")
@click.option(
    '--debug-wrapper', 'debug',
    envvar='GPG_ENCRYPT_DEBUG',
    default=False,
    is_flag=True,
    help="Enable debug logging.")
@click.version_option(__version__, '--wrapper-version', prog_name='gpg-encrypt')
@click.argument('arguments', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(
        ctx: click.Context,
        executable: str,
        s2k_digest_algo: str,
        print_command: bool,
        debug: bool,
        arguments: typing.Tuple[str, ...]):
    logging.basicConfig(level=(logging.DEBUG if debug else logging.WARNING))

    settings = DEFAULT_SETTINGS.evolve(s2k_digest_algo=s2k_digest_algo.lower())
    gpg = GPG(executable=executable, settings=settings)

    if print_command:
        click.echo(shlex.join(gpg.command(arguments)))
        return

    ctx.exit(gpg.run(arguments))
