# SPDX-License-Identifier: LGPL-3.0-or-later
# Hash capability used by the SRP engine. The protocol logic only relies on
# digest() and digest_size, so any hashlib algorithm can be plugged in.

import hashlib


__all__ = ['SrpDigest', 'get_digest']


class SrpDigest:
    """Named hashlib algorithm with a fixed output length."""

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise TypeError('Digest name must be a string')

        try:
            probe = hashlib.new(name)
        except ValueError:
            raise ValueError(f'{name}: unsupported digest algorithm') from None

        if probe.digest_size == 0:
            # variable-length algorithms (shake_*) have no fixed output size
            raise ValueError(f'{name}: digest must have a fixed output size')

        self.__name = probe.name
        self.__digest_size = probe.digest_size

    @property
    def name(self) -> str:
        return self.__name

    @property
    def digest_size(self) -> int:
        return self.__digest_size

    def digest(self, *parts: bytes) -> bytes:
        """
        Hash the concatenation of `parts` in the order given.

        Raises:
            TypeError: If a part is not bytes-like
        """
        h = hashlib.new(self.__name)
        for part in parts:
            if not isinstance(part, (bytes, bytearray, memoryview)):
                raise TypeError('digest(): pass ints as bytes explicitly')
            h.update(part)

        return h.digest()

    def __eq__(self, other):
        if not isinstance(other, SrpDigest):
            return NotImplemented
        return self.__name == other.name

    def __hash__(self):
        return hash(self.__name)

    def __repr__(self):
        return f'SrpDigest({self.__name!r})'


def get_digest(digest: str | SrpDigest) -> SrpDigest:
    """Accept either an algorithm name or an SrpDigest instance."""
    if isinstance(digest, SrpDigest):
        return digest

    return SrpDigest(digest)
