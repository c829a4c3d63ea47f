"""
The settings gpg is always run with.
"""

import typing

import attr

from .utils import GPGEncryptException

CIPHER_ALGORITHMS = frozenset({
    'aes', 'aes128', 'aes192', 'aes256',
    'camellia128', 'camellia192', 'camellia256',
    'twofish', 'blowfish', 'cast5', '3des', 'idea',
})

DIGEST_ALGORITHMS = frozenset({
    'sha1', 'sha224', 'sha256', 'sha384', 'sha512', 'ripemd160',
})

S2K_MODES = frozenset({0, 1, 3})

# The smallest and largest iteration counts the OpenPGP S2K encoding allows.
S2K_COUNT_MIN = 1024
S2K_COUNT_MAX = 65011712


def _one_of(choices: typing.AbstractSet[typing.Any]):
    def validator(instance, attribute, value):
        if value not in choices:
            raise GPGEncryptException(
                f"Invalid {attribute.name} {value!r}, expected one of "
                f"{', '.join(sorted(str(c) for c in choices))}")
    return validator


def _s2k_count(instance, attribute, value):
    if not S2K_COUNT_MIN <= value <= S2K_COUNT_MAX:
        raise GPGEncryptException(
            f"Invalid {attribute.name} {value}, expected a number between "
            f"{S2K_COUNT_MIN} and {S2K_COUNT_MAX}")


@attr.s(frozen=True, kw_only=True)
class Settings:
    cipher_algo: str = attr.ib(default='aes256', validator=_one_of(CIPHER_ALGORITHMS))
    digest_algo: str = attr.ib(default='sha256', validator=_one_of(DIGEST_ALGORITHMS))
    cert_digest_algo: str = attr.ib(default='sha256', validator=_one_of(DIGEST_ALGORITHMS))
    s2k_mode: int = attr.ib(default=3, validator=_one_of(S2K_MODES))
    # The passphrase digest has always been sha512, though sha256 is what
    # the rest of the settings use.
    s2k_digest_algo: str = attr.ib(default='sha512', validator=_one_of(DIGEST_ALGORITHMS))
    s2k_count: int = attr.ib(default=S2K_COUNT_MAX, validator=_s2k_count)

    def arguments(self) -> typing.Tuple[str, ...]:
        """Render the settings as gpg arguments."""
        return (
            '--symmetric',
            '--cipher-algo', self.cipher_algo,
            '--digest-algo', self.digest_algo,
            '--cert-digest-algo', self.cert_digest_algo,
            '--compress-algo', 'none', '-z', '0',
            '--s2k-mode', str(self.s2k_mode),
            '--s2k-digest-algo', self.s2k_digest_algo,
            '--s2k-count', str(self.s2k_count),
            '--no-symkey-cache',
            '--force-mdc',
            '--quiet', '--no-greeting',
            '--pinentry-mode=loopback',
        )

    def evolve(self, **changes) -> 'Settings':
        return attr.evolve(self, **changes)


DEFAULT_SETTINGS = Settings()
FIXED_ARGUMENTS = DEFAULT_SETTINGS.arguments()
