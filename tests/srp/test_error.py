# SPDX-License-Identifier: LGPL-3.0-or-later
"""Test SRP exception classes and error codes."""

import unittest

import srp_client
from srp_client.error import ERROR_CODE_NAMES


class TestErrorCodes(unittest.TestCase):
    """Test error code assignment."""

    def test_codes_unique(self):
        """Test every exported code is distinct and named."""
        self.assertEqual(len(set(ERROR_CODE_NAMES)), len(ERROR_CODE_NAMES))
        for code, name in ERROR_CODE_NAMES.items():
            self.assertEqual(getattr(srp_client, name), code)

    def test_every_code_is_raised_by_a_class(self):
        """Test each code maps to the exception that carries it."""
        errors = [
            srp_client.SrpError('fault'),
            srp_client.MaliciousPublicValue(),
            srp_client.ServerAuthenticationFailed(),
            srp_client.RandomSourceFailure('short read'),
            srp_client.SessionConsumed('used'),
        ]

        self.assertEqual(sorted(e.code for e in errors), sorted(ERROR_CODE_NAMES))

    def test_subclasses(self):
        """Test specific failures derive from SrpError."""
        for cls in (
            srp_client.MaliciousPublicValue,
            srp_client.ServerAuthenticationFailed,
            srp_client.RandomSourceFailure,
            srp_client.SessionConsumed,
        ):
            self.assertTrue(issubclass(cls, srp_client.SrpError))

    def test_repr(self):
        """Test repr shows the class and code name."""
        err = srp_client.MaliciousPublicValue()
        self.assertEqual(repr(err), 'MaliciousPublicValue(SRP_E_MALICIOUS_VALUE: Malicious b_pub value)')
        self.assertEqual(repr(srp_client.SrpError('boom')), 'SrpError(SRP_E_FAULT: boom)')


if __name__ == '__main__':
    unittest.main()
