# SPDX-License-Identifier: LGPL-3.0-or-later
"""Test the srpclt command line."""

from base64 import b64decode
import contextlib
import io
import json
import unittest
from unittest.mock import patch

from srp_client import compute_password_verifier, get_group_parameters, srp6a_private_key
from srp_client.cli import get_parser, main, register


class TestParser(unittest.TestCase):
    """Test argument parsing."""

    def test_register_defaults(self):
        """Test register sub-command defaults."""
        args = get_parser().parse_args(['register', '-U', 'alice'])

        self.assertEqual(args.name, 'register')
        self.assertEqual(args.username, 'alice')
        self.assertIsNone(args.password)
        self.assertEqual(args.group, 2048)
        self.assertEqual(args.digest, 'sha256')

    def test_unknown_group(self):
        """Test only named groups are accepted."""
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                get_parser().parse_args(['register', '-U', 'alice', '-g', '512'])


class TestRegister(unittest.TestCase):
    """Test the register sub-command."""

    def run_register(self, argv):
        args = get_parser().parse_args(argv)
        stdout = io.StringIO()
        stderr = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            rv = register(args)
        return rv, stdout.getvalue(), stderr.getvalue()

    def test_register_with_salt(self):
        """Test the printed verifier matches the library computation."""
        rv, out, _ = self.run_register(['register', '-U', 'alice', '-P', 'pw', '-s', 'aa' * 32, '-g', '1024'])
        self.assertEqual(rv, 0)

        payload = json.loads(out)
        salt = bytes.fromhex('aa' * 32)
        params = get_group_parameters(1024, 'sha256')
        expected = compute_password_verifier(srp6a_private_key(b'alice', b'pw', salt, 'sha256'), params)

        self.assertEqual(payload['username'], 'alice')
        self.assertEqual(b64decode(payload['salt']), salt)
        self.assertEqual(b64decode(payload['verifier']), expected)

    def test_register_1536_group(self):
        """Test the 1536-bit group can be selected."""
        rv, out, _ = self.run_register(['register', '-U', 'alice', '-P', 'pw', '-s', 'aa' * 32, '-g', '1536'])
        self.assertEqual(rv, 0)

        params = get_group_parameters(1536, 'sha256')
        private_key = srp6a_private_key(b'alice', b'pw', bytes.fromhex('aa' * 32), 'sha256')
        self.assertEqual(b64decode(json.loads(out)['verifier']), compute_password_verifier(private_key, params))

    def test_password_prompt(self):
        """Test the password is prompted for when not given."""
        with patch('srp_client.cli.getpass', return_value='pw') as mock_getpass:
            rv, out, _ = self.run_register(['register', '-U', 'alice', '-s', 'aa' * 32, '-g', '1024'])

        mock_getpass.assert_called_once()
        self.assertEqual(rv, 0)
        self.assertIn('verifier', json.loads(out))

    def test_invalid_salt(self):
        """Test a non-hex salt is reported."""
        rv, out, err = self.run_register(['register', '-U', 'alice', '-P', 'pw', '-s', 'zz'])

        self.assertEqual(rv, 1)
        self.assertEqual(out, '')
        self.assertIn('Invalid salt', err)

    def test_invalid_digest(self):
        """Test an unknown digest is reported."""
        rv, _, err = self.run_register(['register', '-U', 'alice', '-P', 'pw', '-d', 'nohash', '-g', '1024'])

        self.assertEqual(rv, 1)
        self.assertIn('nohash', err)


class TestMain(unittest.TestCase):
    """Test the srpclt entry point."""

    def test_groups(self):
        """Test listing the named groups."""
        stdout = io.StringIO()
        with patch('sys.argv', ['srpclt', 'groups']), patch('srp_client.cli.setup_logging'):
            with contextlib.redirect_stdout(stdout):
                main()

        self.assertEqual(stdout.getvalue().splitlines(), ['1024 g=2', '1536 g=2', '2048 g=2'])

    def test_register_exit_code(self):
        """Test register exits with its return code."""
        argv = ['srpclt', 'register', '-U', 'alice', '-P', 'pw', '-s', 'zz']
        with patch('sys.argv', argv), patch('srp_client.cli.setup_logging'):
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as ctx:
                    main()

        self.assertEqual(ctx.exception.code, 1)


if __name__ == '__main__':
    unittest.main()
