# SPDX-License-Identifier: LGPL-3.0-or-later
"""Client side of the SRP-6a password-authenticated key exchange.

The client and server share only a verifier derived from the user's password.
After the exchange both hold the same session key and each has proven to the
other that it derived it, without the password crossing the wire. Big integers
travel little-endian.

Example::

    params = get_group_parameters(2048, 'sha256')
    client = SrpClient(params, 'sha256')

    # send username and A, receive salt and B
    salt, b_pub = conn.send_handshake(username, client.a_pub)

    private_key = srp6a_private_key(username, password, salt, 'sha256')
    verifier = client.process_reply(private_key, b_pub)

    # send M1, receive M2
    server_proof = conn.send_proof(verifier.get_proof())
    key = verifier.verify_server(server_proof)

Registration::

    data = create_registration(username=username, password=password, params=params, digest='sha256')
    conn.send_registration_data(data.username, data.salt, data.verifier)

"""
from .error import (
    SrpError,
    MaliciousPublicValue,
    ServerAuthenticationFailed,
    RandomSourceFailure,
    SessionConsumed,
    SRP_E_MALICIOUS_VALUE,
    SRP_E_AUTH_FAILED,
    SRP_E_RANDOM_FAILURE,
    SRP_E_CONSUMED,
    SRP_E_FAULT,
)

from .constants import (
    SrpState,
    SRP_SALT_SIZE,
    SRP_DEFAULT_DIGEST,
    SRP_DEFAULT_GROUP,
)

from .tools import powm, int_from_bytes_le, int_to_bytes_le
from .digest import SrpDigest, get_digest
from .params import DomainParameters, SRP_GROUPS, compute_multiplier, get_group_parameters
from .private_key import (
    RegistrationData,
    srp6a_private_key,
    compute_password_verifier,
    generate_salt,
    create_registration,
)
from .client import SrpClient, SrpClientVerifier
from .cli import main


__all__ = [
    # Core types
    'DomainParameters',
    'SrpDigest',
    'SrpClient',
    'SrpClientVerifier',
    'RegistrationData',
    'SrpState',

    # Exceptions
    'SrpError',
    'MaliciousPublicValue',
    'ServerAuthenticationFailed',
    'RandomSourceFailure',
    'SessionConsumed',

    # Key derivation and registration
    'srp6a_private_key',
    'compute_password_verifier',
    'generate_salt',
    'create_registration',

    # Parameters
    'SRP_GROUPS',
    'compute_multiplier',
    'get_group_parameters',
    'get_digest',

    # Arithmetic
    'powm',
    'int_from_bytes_le',
    'int_to_bytes_le',

    # Error codes
    'SRP_E_MALICIOUS_VALUE',
    'SRP_E_AUTH_FAILED',
    'SRP_E_RANDOM_FAILURE',
    'SRP_E_CONSUMED',
    'SRP_E_FAULT',

    # Constants
    'SRP_SALT_SIZE',
    'SRP_DEFAULT_DIGEST',
    'SRP_DEFAULT_GROUP',

    'main',
]
