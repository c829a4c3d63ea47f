import pathlib
import shutil
import subprocess
import typing

import attr
import click.testing
import pytest

import gpg_encrypt.cli

FAKE_GPG = """\
#!/bin/sh
printf '%s\\n' "$@" > "$FAKE_GPG_ARGUMENTS"
exit "${FAKE_GPG_STATUS:-0}"
"""

INTERRUPTIBLE_GPG = """\
#!/bin/sh
trap 'echo "gpg: signal Interrupt caught ... exiting" >&2; exit 2' INT
printf '%s\\n' "$@" > "$FAKE_GPG_ARGUMENTS"
while :; do sleep 1; done
"""


@pytest.fixture()
def invoke():
    def invoke_func(arguments: typing.Sequence[str], **kwargs) -> click.testing.Result:
        assert all(isinstance(arg, str) for arg in arguments)
        runner = click.testing.CliRunner()
        return runner.invoke(gpg_encrypt.cli.main, arguments, **kwargs)

    return invoke_func


@attr.s(frozen=True)
class FakeGPG:
    executable: pathlib.Path = attr.ib()
    recorded: pathlib.Path = attr.ib()

    def __str__(self):
        return self.executable.as_posix()

    def arguments(self) -> typing.List[str]:
        return self.recorded.read_text().splitlines()


@pytest.fixture()
def fake_gpg(tmp_path, monkeypatch) -> FakeGPG:
    """A gpg executable that records its arguments and exits with $FAKE_GPG_STATUS."""
    bin_dir = tmp_path / 'bin'
    bin_dir.mkdir()
    executable = bin_dir / 'gpg'
    executable.write_text(FAKE_GPG)
    executable.chmod(0o755)
    recorded = bin_dir / 'arguments'
    monkeypatch.setenv('FAKE_GPG_ARGUMENTS', recorded.as_posix())
    monkeypatch.delenv('FAKE_GPG_STATUS', raising=False)
    return FakeGPG(executable=executable, recorded=recorded)


@pytest.fixture()
def workdir(tmp_path, monkeypatch) -> pathlib.Path:
    directory = tmp_path / 'work'
    directory.mkdir()
    (directory / 'example.txt').write_text("hello world\n")
    monkeypatch.chdir(directory)
    return directory


@pytest.fixture()
def gnupghome(tmp_path) -> typing.Iterator[pathlib.Path]:
    if shutil.which('gpg') is None:
        pytest.skip("gpg is not installed")

    home = tmp_path / 'gnupg'
    home.mkdir(mode=0o700)
    yield home

    if shutil.which('gpgconf'):
        subprocess.run(
            ('gpgconf', '--homedir', home.as_posix(), '--kill', 'all'),
            check=False)


@pytest.fixture()
def interruptible_gpg(fake_gpg) -> FakeGPG:
    """A gpg that runs until it gets SIGINT, then exits with status 2."""
    fake_gpg.executable.write_text(INTERRUPTIBLE_GPG)
    return fake_gpg
