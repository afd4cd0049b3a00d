"""Constants and enums for the SRP client."""
from enum import StrEnum


class SrpState(StrEnum):
    """States of a client-side SRP exchange."""
    SESSION_STARTED = 'SESSION_STARTED'
    CONSUMED = 'CONSUMED'  # ClientSession after process_reply(), success or not
    HANDSHAKE_VERIFIED = 'HANDSHAKE_VERIFIED'
    AUTHENTICATED = 'AUTHENTICATED'
    REJECTED = 'REJECTED'
    KEY_RELEASED = 'KEY_RELEASED'  # get_key() without server confirmation


SRP_SALT_SIZE = 32
SRP_DEFAULT_DIGEST = 'sha256'
SRP_DEFAULT_GROUP = 2048
