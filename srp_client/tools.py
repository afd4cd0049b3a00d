# SPDX-License-Identifier: LGPL-3.0-or-later
# Big integer helpers for SRP: modular exponentiation and the little-endian wire codec


__all__ = [
    'powm',
    'int_from_bytes_le',
    'int_to_bytes_le',
    'int_to_bytes_le_padded',
]


def powm(base: int, exponent: int, modulus: int) -> int:
    """
    Compute base^exponent mod modulus by binary (square-and-multiply) exponentiation.

    The running time depends on the bit pattern of the exponent, so this is not
    constant time and leaks timing information about secret exponents.

    Args:
        base: Non-negative base
        exponent: Non-negative exponent
        modulus: Modulus, must be greater than 1

    Returns:
        Integer in range [0, modulus)

    Raises:
        TypeError: If any argument is not an integer
        ValueError: If an argument is out of range
    """
    for value in (base, exponent, modulus):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('powm() arguments must be integers')

    if modulus <= 1:
        raise ValueError('Modulus must be greater than 1')

    if base < 0 or exponent < 0:
        raise ValueError('Base and exponent must be non-negative')

    result = 1
    base %= modulus
    while exponent:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1

    return result


def int_from_bytes_le(data: bytes) -> int:
    """Interpret a byte string as an unsigned little-endian integer."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError('Expected a bytes-like object')

    return int.from_bytes(data, 'little')


def int_to_bytes_le(value: int) -> bytes:
    """Serialize an unsigned integer to minimal-length little-endian bytes.

    Zero is encoded as a single zero byte.
    """
    if value < 0:
        raise ValueError('Cannot serialize a negative integer')

    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), 'little')


def int_to_bytes_le_padded(value: int, length: int) -> bytes:
    """Serialize an unsigned integer to exactly `length` little-endian bytes."""
    if value < 0:
        raise ValueError('Cannot serialize a negative integer')

    return value.to_bytes(length, 'little')
