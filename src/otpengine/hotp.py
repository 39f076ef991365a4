import hmac
import struct

from .algorithms import Algorithm
from .errors import InvalidInputError

MAX_COUNTER = 2**64 - 1


def int_to_bytestring(i: int) -> bytes:
    """
    Turns a counter into the 8-byte big-endian message that is fed to the
    HMAC along with the secret (RFC 4226 section 5.2).
    """
    if isinstance(i, bool) or not isinstance(i, int):
        raise InvalidInputError("counter must be an integer, got {}".format(type(i).__name__))
    if i < 0:
        raise InvalidInputError("counter must be a non-negative integer")
    if i > MAX_COUNTER:
        raise InvalidInputError("counter must fit in 64 bits")
    return struct.pack(">Q", i)


def dynamic_truncate(hmac_hash: bytes) -> int:
    """
    RFC 4226 dynamic truncation.

    The low nibble of the last digest byte picks an offset; the four bytes
    starting there are read big-endian with the top bit cleared, giving a
    non-negative 31-bit integer.
    """
    offset = hmac_hash[-1] & 0xF
    return (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )


def format_code(bin_code: int, digits: int) -> str:
    return str(bin_code % 10**digits).zfill(digits)


def hotp_code(key: bytes, counter: int, algorithm: Algorithm, digits: int) -> str:
    """
    Derives the one-time code for a single counter value.

    :param key: raw secret bytes
    :param counter: HOTP counter, or the time step for TOTP
    :param algorithm: HMAC hash algorithm
    :param digits: length of the returned code
    :returns: decimal code, zero-padded to ``digits`` characters
    """
    hasher = hmac.new(key, int_to_bytestring(counter), algorithm.digest)
    return format_code(dynamic_truncate(hasher.digest()), digits)
