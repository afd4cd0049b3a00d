# SPDX-License-Identifier: LGPL-3.0-or-later
# SRP domain parameters (N, g, k) and well-known groups

from dataclasses import dataclass

from .digest import SrpDigest, get_digest
from .tools import int_from_bytes_le, int_to_bytes_le, int_to_bytes_le_padded, powm


__all__ = [
    'DomainParameters',
    'SRP_GROUPS',
    'compute_multiplier',
    'get_group_parameters',
]


# RFC 5054 Appendix A groups, keyed by bit size. Values are (N, g).
SRP_GROUPS = {
    1024: (
        int(
            'EEAF0AB9ADB38DD69C33F80AFA8FC5E86072618775FF3C0B9EA2314C'
            '9C256576D674DF7496EA81D3383B4813D692C6E0E0D5D8E250B98BE4'
            '8E495C1D6089DAD15DC7D7B46154D6B6CE8EF4AD69B15D4982559B29'
            '7BCF1885C529F566660E57EC68EDBC3C05726CC02FD4CBF4976EAA9A'
            'FD5138FE8376435B9FC61D2FC0EB06E3',
            16
        ),
        2,
    ),
    1536: (
        int(
            '9DEF3CAFB939277AB1F12A8617A47BBBDBA51DF499AC4C80BEEEA961'
            '4B19CC4D5F4F5F556E27CBDE51C6A94BE4607A291558903BA0D0F843'
            '80B655BB9A22E8DCDF028A7CEC67F0D08134B1C8B97989149B609E0B'
            'E3BAB63D47548381DBC5B1FC764E3F4B53DD9DA1158BFD3E2B9C8CF5'
            '6EDF019539349627DB2FD53D24B7C48665772E437D6C7F8CE442734A'
            'F7CCB7AE837C264AE3A9BEB87F8A2FE9B8B5292E5A021FFF5E91479E'
            '8CE7A28C2442C6F315180F93499A234DCF76E3FED135F9BB',
            16
        ),
        2,
    ),
    2048: (
        int(
            'AC6BDB41324A9A9BF166DE5E1389582FAF72B6651987EE07FC319294'
            '3DB56050A37329CBB4A099ED8193E0757767A13DD52312AB4B03310D'
            'CD7F48A9DA04FD50E8083969EDB767B0CF6095179A163AB3661A05FB'
            'D5FAAAE82918A9962F0B93B855F97993EC975EEAA80D740ADBF4FF74'
            '7359D041D5C33EA71D281E446B14773BCA97B43A23FB801676BD207A'
            '436C6481F1D2B9078717461A5B9D32E688F87748544523B524B0D57D'
            '5EA77A2775D2ECFA032CFBDBF52FB3786160279004E57AE6AF874E73'
            '03CE53299CCC041C7BC308D82A5698F3A8D0C38271AE35F8E9DBFBB6'
            '94B5C803D89F7AE435DE236D525F54759B65E372FCD68EF20FA7111F'
            '9E4AFF73',
            16
        ),
        2,
    ),
}


def compute_multiplier(n: int, g: int, digest: str | SrpDigest) -> int:
    """
    Derive the SRP-6a multiplier k = H(N, PAD(g)).

    Both values are serialized little-endian and g is zero-padded to the byte
    width of N. The digest is read back as a little-endian integer.
    """
    digest = get_digest(digest)
    n_bytes = int_to_bytes_le(n)
    return int_from_bytes_le(digest.digest(n_bytes, int_to_bytes_le_padded(g, len(n_bytes))))


@dataclass(frozen=True)
class DomainParameters:
    """
    Shared SRP group: large prime modulus `n`, generator `g` and multiplier `k`.

    Both peers must use identical values. A mismatch is not detectable by the
    client and shows up as a failed server proof.
    """
    n: int
    g: int
    k: int

    def __post_init__(self):
        for field in ('n', 'g', 'k'):
            value = getattr(self, field)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f'{field} must be an integer')

        if self.n <= 1:
            raise ValueError('Modulus N must be greater than 1')

        if not 1 < self.g < self.n:
            raise ValueError('Generator g must be in range (1, N)')

        if self.k < 0:
            raise ValueError('Multiplier k must be non-negative')

    @classmethod
    def from_group(cls, n: int, g: int, digest: str | SrpDigest) -> 'DomainParameters':
        """Build parameters with k derived from N and g."""
        return cls(n=n, g=g, k=compute_multiplier(n, g, digest))

    @property
    def byte_length(self) -> int:
        """Number of random bytes drawn for an ephemeral secret."""
        return self.n.bit_length() // 8

    def powm(self, exponent: int) -> int:
        """Return g^exponent mod N."""
        return powm(self.g, exponent, self.n)


def get_group_parameters(bits: int, digest: str | SrpDigest) -> DomainParameters:
    """
    Return DomainParameters for one of the RFC 5054 groups in SRP_GROUPS.

    Raises:
        ValueError: If `bits` does not name a known group
    """
    if bits not in SRP_GROUPS:
        raise ValueError(f'{bits}: unknown SRP group, expected one of {sorted(SRP_GROUPS)}')

    n, g = SRP_GROUPS[bits]
    return DomainParameters.from_group(n, g, digest)
