# SPDX-License-Identifier: LGPL-3.0-or-later
# SRP-6a client state machine: ephemeral key generation, handshake processing
# and server proof verification.

import hmac
import logging
from collections.abc import Callable
from ssl import RAND_bytes

from .constants import SRP_DEFAULT_DIGEST, SrpState
from .digest import SrpDigest, get_digest
from .error import MaliciousPublicValue, RandomSourceFailure, ServerAuthenticationFailed, SessionConsumed
from .params import DomainParameters
from .private_key import compute_password_verifier
from .tools import int_from_bytes_le, int_to_bytes_le, powm


__all__ = ['SrpClient', 'SrpClientVerifier']

logger = logging.getLogger(__name__)


def _check_bytes(name: str, value) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f'{name} must be bytes')
    return bytes(value)


class SrpClientVerifier:
    """
    Client state after the handshake with the server.

    Holds the client proof M1, the expected server proof M2 and the session
    key K. The key is handed out once, either by verify_server() after the
    server proved knowledge of K, or by get_key() for callers that authenticate
    the server some other way.
    """

    def __init__(self, *, proof: bytes, server_proof: bytes, key: bytes):
        self.__proof = proof
        self.__server_proof = server_proof
        self.__key = key
        self.__state = SrpState.HANDSHAKE_VERIFIED

    def __consume(self, operation: str) -> bytes:
        if self.__state != SrpState.HANDSHAKE_VERIFIED:
            raise SessionConsumed(f'{operation}: verifier already used ({self.__state})')

        key, self.__key = self.__key, None
        return key

    @property
    def state(self) -> SrpState:
        return self.__state

    def get_proof(self) -> bytes:
        """Client proof M1 to send to the server. May be called any number of times."""
        return self.__proof

    def get_key(self) -> bytes:
        """
        Release the shared session key without authenticating the server.

        Only safe when the peer is authenticated by other means, for example an
        authenticated cipher keyed with the result. Consumes the verifier.
        """
        key = self.__consume('get_key')
        self.__state = SrpState.KEY_RELEASED
        logger.debug('Session key released without server proof verification')
        return key

    def verify_server(self, reply: bytes) -> bytes:
        """
        Verify the server proof and return the shared session key.

        Consumes the verifier whether or not verification succeeds.

        Raises:
            TypeError: If reply is not bytes
            ServerAuthenticationFailed: If reply does not match the expected M2
            SessionConsumed: If the verifier was already used
        """
        reply = _check_bytes('reply', reply)
        key = self.__consume('verify_server')

        if not hmac.compare_digest(self.__server_proof, reply):
            self.__state = SrpState.REJECTED
            logger.warning('SRP server proof verification failed')
            raise ServerAuthenticationFailed()

        self.__state = SrpState.AUTHENTICATED
        logger.debug('SRP server authenticated')
        return key

    def __repr__(self):
        return f'SrpClientVerifier({self.__state})'


class SrpClient:
    """
    SRP client state before the handshake with the server.

    A fresh secret ephemeral value `a` is drawn on construction. The instance
    is single use: process_reply() consumes it and drops `a`.

    Usage::

        client = SrpClient(params, 'sha256')
        salt, b_pub = send_handshake(username, client.a_pub)
        private_key = srp6a_private_key(username, password, salt, 'sha256')
        verifier = client.process_reply(private_key, b_pub)
        server_proof = send_proof(verifier.get_proof())
        key = verifier.verify_server(server_proof)
    """

    def __init__(
        self,
        params: DomainParameters,
        digest: str | SrpDigest = SRP_DEFAULT_DIGEST,
        rng: Callable[[int], bytes] | None = None,
    ):
        if not isinstance(params, DomainParameters):
            raise TypeError('params must be a DomainParameters instance')

        if rng is not None and not callable(rng):
            raise TypeError('rng must be callable')

        self.__params = params
        self.__digest = get_digest(digest)

        length = params.byte_length
        buf = (rng or RAND_bytes)(length)
        if not isinstance(buf, (bytes, bytearray)) or len(buf) != length:
            raise RandomSourceFailure(f'random source did not return {length} bytes')

        self.__a = int_from_bytes_le(buf)
        self.__a_pub = params.powm(self.__a)
        self.__state = SrpState.SESSION_STARTED
        logger.debug('Created SRP session (%d-bit modulus, %s)', params.n.bit_length(), self.__digest.name)

    @property
    def params(self) -> DomainParameters:
        return self.__params

    @property
    def digest(self) -> SrpDigest:
        return self.__digest

    @property
    def state(self) -> SrpState:
        return self.__state

    @property
    def a_pub(self) -> bytes:
        """Public ephemeral value A, little-endian, to send with the username."""
        return int_to_bytes_le(self.__a_pub)

    def get_password_verifier(self, private_key: bytes) -> bytes:
        """Password verifier for user registration on the server."""
        return compute_password_verifier(_check_bytes('private_key', private_key), self.__params)

    def __calc_key(self, a: int, b_pub: int, x: int, u: int) -> bytes:
        n = self.__params.n
        interm = (self.__params.k * self.__params.powm(x)) % n
        # We work modulo N, so B (= kv + g^b mod N) can be smaller than kg^x
        if b_pub > interm:
            v = (b_pub - interm) % n
        else:
            v = (n + b_pub - interm) % n

        # S = (B - kg^x) ^ (a + ux). Only the u*x term is reduced mod N.
        s = powm(v, a + (u * x) % n, n)
        return self.__digest.digest(int_to_bytes_le(s))

    def process_reply(self, private_key: bytes, b_pub: bytes) -> SrpClientVerifier:
        """
        Process the server reply to the handshake.

        Args:
            private_key: Output of srp6a_private_key() or another password hashing function
            b_pub: Server public ephemeral value B as received

        Returns:
            SrpClientVerifier holding M1, M2 and K

        Raises:
            TypeError: If arguments are not bytes
            MaliciousPublicValue: If B mod N == 0
            SessionConsumed: If this session already processed a reply
        """
        private_key = _check_bytes('private_key', private_key)
        b_pub_raw = _check_bytes('b_pub', b_pub)

        if self.__state != SrpState.SESSION_STARTED:
            raise SessionConsumed('process_reply: session already used')

        a, self.__a = self.__a, None
        self.__state = SrpState.CONSUMED
        a_pub = int_to_bytes_le(self.__a_pub)

        # u = H(A, B)
        u = int_from_bytes_le(self.__digest.digest(a_pub, b_pub_raw))

        b_pub = int_from_bytes_le(b_pub_raw)
        if b_pub % self.__params.n == 0:
            logger.warning('Rejecting SRP server reply: B is congruent to 0 mod N')
            raise MaliciousPublicValue()

        x = int_from_bytes_le(private_key)
        key = self.__calc_key(a, b_pub, x, u)

        # M1 = H(A, B, K)
        proof = self.__digest.digest(a_pub, int_to_bytes_le(b_pub), key)

        # M2 = H(A, M1, K)
        server_proof = self.__digest.digest(a_pub, proof, key)

        logger.debug('SRP handshake processed, awaiting server proof')
        return SrpClientVerifier(proof=proof, server_proof=server_proof, key=key)

    def __repr__(self):
        return f'SrpClient({self.__state})'
