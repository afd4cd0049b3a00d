# SPDX-License-Identifier: LGPL-3.0-or-later
# SRP exception classes

SRP_E_MALICIOUS_VALUE = 1
SRP_E_AUTH_FAILED = 2
SRP_E_RANDOM_FAILURE = 3
SRP_E_CONSUMED = 4
SRP_E_FAULT = 5

ERROR_CODE_NAMES = {
    SRP_E_MALICIOUS_VALUE: "SRP_E_MALICIOUS_VALUE",
    SRP_E_AUTH_FAILED: "SRP_E_AUTH_FAILED",
    SRP_E_RANDOM_FAILURE: "SRP_E_RANDOM_FAILURE",
    SRP_E_CONSUMED: "SRP_E_CONSUMED",
    SRP_E_FAULT: "SRP_E_FAULT",
}


class SrpError(RuntimeError):
    """
    Base class for SRP protocol failures.

    Attributes:
        code: Integer error code (one of SRP_E_* constants)
    """

    def __init__(self, message: str, code: int = SRP_E_FAULT):
        super().__init__(message)
        self.code = code

    def __repr__(self):
        code_name = ERROR_CODE_NAMES.get(self.code, "UNKNOWN_ERROR")
        return f"{type(self).__name__}({code_name}: {super().__str__()})"


class MaliciousPublicValue(SrpError):
    """The server public ephemeral value is congruent to zero modulo N."""

    def __init__(self, message: str = "Malicious b_pub value"):
        super().__init__(message, SRP_E_MALICIOUS_VALUE)


class ServerAuthenticationFailed(SrpError):
    """The server proof did not match the expected M2. The session key is withheld."""

    def __init__(self, message: str = "Incorrect server proof"):
        super().__init__(message, SRP_E_AUTH_FAILED)


class RandomSourceFailure(SrpError):
    """The random source returned unusable output while creating a session."""

    def __init__(self, message: str):
        super().__init__(message, SRP_E_RANDOM_FAILURE)


class SessionConsumed(SrpError):
    """A one-shot session or verifier was used a second time."""

    def __init__(self, message: str):
        super().__init__(message, SRP_E_CONSUMED)


__all__ = [
    'SrpError',
    'MaliciousPublicValue',
    'ServerAuthenticationFailed',
    'RandomSourceFailure',
    'SessionConsumed',
    'ERROR_CODE_NAMES',
    'SRP_E_MALICIOUS_VALUE',
    'SRP_E_AUTH_FAILED',
    'SRP_E_RANDOM_FAILURE',
    'SRP_E_CONSUMED',
    'SRP_E_FAULT',
]
