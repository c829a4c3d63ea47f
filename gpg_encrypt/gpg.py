import logging
import os
import pathlib
import shlex
import subprocess
import typing

import attr

from .settings import DEFAULT_SETTINGS, Settings
from .utils import controlling_tty, exit_status, ignore_interrupts, start_error

log = logging.getLogger(__name__)


@attr.s(frozen=True)
class GPG:
    executable: str = attr.ib(default='gpg')
    settings: Settings = attr.ib(default=DEFAULT_SETTINGS)
    home: typing.Optional[pathlib.Path] = attr.ib(default=None)

    def command(self, arguments: typing.Sequence[str]) -> typing.Tuple[str, ...]:
        return (self.executable, *self.settings.arguments(), *arguments)

    def environment(self) -> typing.Dict[str, str]:
        """
        Build the environment gpg runs in.

        Loopback pin-entry needs to know which terminal to prompt on, so
        GPG_TTY is set from standard input when it isn't set already.
        """
        env = dict(os.environ)
        if self.home:
            env['GNUPGHOME'] = self.home.as_posix()
        if 'GPG_TTY' not in env:
            tty = controlling_tty()
            if tty:
                log.debug(f"Setting GPG_TTY to {tty}")
                env['GPG_TTY'] = tty
            else:
                log.debug("GPG_TTY is not set and stdin is not a terminal")
        return env

    def run(self, arguments: typing.Sequence[str]) -> int:
        """
        Run gpg and wait for it to exit, returning its exit status.

        Standard streams are inherited so gpg can prompt for a passphrase and
        report its own errors. SIGINT is ignored here while gpg runs, so
        Ctrl-C ends gpg alone and its exit status is what we report.
        """
        command = self.command(arguments)
        log.debug(f"Running {shlex.join(command)}")
        try:
            process = subprocess.Popen(command, env=self.environment())
        except OSError as error:
            raise start_error(self.executable, error) from error

        # gpg must not inherit SIG_IGN, so only ignore SIGINT once it has started.
        with ignore_interrupts():
            returncode = process.wait()

        status = exit_status(returncode)
        log.debug(f"{self.executable} exited with status {status}")
        return status

    def encrypt(
            self,
            path: typing.Optional[pathlib.Path] = None,
            output: typing.Optional[pathlib.Path] = None,
            arguments: typing.Sequence[str] = ()) -> int:
        """Encrypt a file, or standard input when no path is given."""
        args: typing.List[str] = []
        if output is not None:
            args += ['--output', str(output)]
        args += arguments
        if path is not None:
            args.append(str(path))
        log.debug(f"Encrypting {path or 'stdin'} to {output or 'the default output'}")
        return self.run(args)
