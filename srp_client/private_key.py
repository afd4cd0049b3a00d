# SPDX-License-Identifier: LGPL-3.0-or-later
# Private key derivation and password verifier registration

from dataclasses import dataclass
from ssl import RAND_bytes

from .constants import SRP_SALT_SIZE
from .digest import SrpDigest, get_digest
from .params import DomainParameters
from .tools import int_from_bytes_le, int_to_bytes_le


__all__ = [
    'RegistrationData',
    'srp6a_private_key',
    'compute_password_verifier',
    'generate_salt',
    'create_registration',
]


@dataclass
class RegistrationData:
    """Values sent once to the server, over a protected channel, when a user registers."""
    username: bytes
    salt: bytes
    verifier: bytes


def srp6a_private_key(username: bytes, password: bytes, salt: bytes, digest: str | SrpDigest) -> bytes:
    """
    Compute the user private key as described in SRP-6a.

    x = H(salt || H(username || ":" || password))

    This is a reference scheme. A dedicated password hashing function (PBKDF2,
    scrypt, argon2) is a better choice when both peers agree on it; the engine
    only consumes the resulting bytes.

    Args:
        username: User name bytes
        password: Password bytes
        salt: Salt returned by the server (or generated at registration)
        digest: Hash algorithm name or SrpDigest

    Returns:
        Private key bytes, digest_size long

    Raises:
        TypeError: If any of username, password or salt is not bytes
    """
    for name, value in (('username', username), ('password', password), ('salt', salt)):
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError(f'{name} must be bytes')

    digest = get_digest(digest)
    inner = digest.digest(username, b':', password)
    return digest.digest(salt, inner)


def compute_password_verifier(private_key: bytes, params: DomainParameters) -> bytes:
    """
    Compute the password verifier v = g^x mod N for registration on the server.

    `private_key` is interpreted as a little-endian integer and the verifier
    is returned little-endian.
    """
    if not isinstance(params, DomainParameters):
        raise TypeError('params must be a DomainParameters instance')

    x = int_from_bytes_le(private_key)
    return int_to_bytes_le(params.powm(x))


def generate_salt(size: int = SRP_SALT_SIZE) -> bytes:
    """Generate a random salt using RAND_bytes from OpenSSL."""
    if not isinstance(size, int) or size <= 0:
        raise ValueError('Salt size must be a positive integer')

    return RAND_bytes(size)


def create_registration(
    *,
    username: bytes,
    password: bytes,
    params: DomainParameters,
    digest: str | SrpDigest,
    salt: bytes | None = None,
) -> RegistrationData:
    """
    Build the registration payload for `username`.

    A fresh salt is generated when none is given. The private key is derived
    with srp6a_private_key(); callers using a different password hashing
    scheme should call compute_password_verifier() directly.
    """
    if salt is None:
        salt = generate_salt()

    private_key = srp6a_private_key(username, password, salt, digest)
    return RegistrationData(
        username=bytes(username),
        salt=bytes(salt),
        verifier=compute_password_verifier(private_key, params),
    )
