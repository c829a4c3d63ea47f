"""
Encrypt a file with gpg using our best settings.

Symmetric encryption is used, so the same passphrase encrypts and decrypts
the file. Any arguments not listed below are passed directly to gpg after the
fixed settings, in the order they were given.

The settings used are:

\b
    * --symmetric                 Encrypt with a passphrase only.
    * --cipher-algo aes256        AES256 cipher.
    * --digest-algo sha256        SHA256 digest.
    * --cert-digest-algo sha256   SHA256 digest when signing a key.
    * --compress-algo none -z 0   No compression.
    * --s2k-mode 3                Iterated and salted passphrase mangling.
    * --s2k-digest-algo sha512    SHA512 passphrase mangling digest.
    * --s2k-count 65011712        Maximum passphrase iterations.
    * --no-symkey-cache           Disable the passphrase cache.
    * --force-mdc                 Use a modification detection code.
    * --quiet --no-greeting       No informational output.
    * --pinentry-mode=loopback    Read the passphrase from the terminal.

Encrypt a file, creating 'foo.txt.gpg':

\b
    $ gpg-encrypt foo.txt

Encrypt a file to a specific output file name:

\b
    $ gpg-encrypt foo --output goo.gpg

Encrypt a directory, then delete it:

\b
    $ tar -c foo | gpg-encrypt --output foo.tar.gpg && rm -rf foo

If gpg fails with 'Inappropriate ioctl for device' set the terminal gpg
should prompt on:

\b
    $ export GPG_TTY=$(tty)

If gpg warns that the 'gpg-agent' server is older than it, restart it:

\b
    $ gpgconf --kill all
"""

__author__ = 'Joel Parker Henderson'
__version__ = '4.0.0'
