"""Command line entry point for srpclt.

Example::

    $ srpclt register -U alice
    Password:
    {"username": "alice", "salt": "...", "verifier": "..."}
    $ srpclt groups
    1024 g=2
    2048 g=2

"""
import argparse
from base64 import b64encode
from getpass import getpass
import json
import logging
import sys

from .constants import SRP_DEFAULT_DIGEST, SRP_DEFAULT_GROUP
from .params import SRP_GROUPS, get_group_parameters
from .private_key import create_registration

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    """Send log records to stderr. DEBUG level when `verbose` is set."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_parser():
    """Construct the argument parser for `srpclt`."""
    parser = argparse.ArgumentParser(prog='srpclt')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(help='sub-command help', dest='name')

    # register options
    iparser = subparsers.add_parser('register', help='Compute the registration payload for a user')
    iparser.add_argument('-U', '--username', required=True)
    iparser.add_argument('-P', '--password')
    iparser.add_argument('-s', '--salt', help='Hex-encoded salt (random if omitted)')
    iparser.add_argument(
        '-g',
        '--group',
        type=int,
        choices=sorted(SRP_GROUPS),
        default=SRP_DEFAULT_GROUP,
        help='Size in bits of the RFC 5054 group',
    )
    iparser.add_argument('-d', '--digest', default=SRP_DEFAULT_DIGEST)

    # groups
    subparsers.add_parser('groups', help='List the available SRP groups')

    return parser


def register(args):
    """Print the registration payload for `args.username` as JSON.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    password = args.password
    if password is None:
        password = getpass()

    try:
        salt = bytes.fromhex(args.salt) if args.salt else None
    except ValueError:
        print(f'Invalid salt: {args.salt!r} is not hex-encoded', file=sys.stderr)
        return 1

    try:
        params = get_group_parameters(args.group, args.digest)
        data = create_registration(
            username=args.username.encode(),
            password=password.encode(),
            params=params,
            digest=args.digest,
            salt=salt,
        )
    except ValueError as e:
        print(f'Failed to compute verifier: {e}', file=sys.stderr)
        return 1

    logger.debug('Computed verifier for %s with %d-bit group', args.username, args.group)
    print(json.dumps({
        'username': data.username.decode(),
        'salt': b64encode(data.salt).decode(),
        'verifier': b64encode(data.verifier).decode(),
    }))
    return 0


def main():
    """The entry point for srpclt. Run `srpclt -h` to see usage.

    Sub-commands:
        register, groups

    """
    parser = get_parser()
    args = parser.parse_args()
    setup_logging(args.verbose)

    if args.name == 'register':
        sys.exit(register(args))
    elif args.name == 'groups':
        for bits, (_, g) in sorted(SRP_GROUPS.items()):
            print(f'{bits} g={g}')
    else:
        parser.print_help()
