import base64
import binascii
import unicodedata
from hmac import compare_digest

from .errors import InvalidSecretError


def b32encode_secret(raw: bytes) -> str:
    """
    Encodes raw key bytes as base32 text without ``=`` padding, the form
    authenticator apps expect.

    :param raw: key bytes
    :returns: upper-case base32 text
    """
    return base64.b32encode(raw).decode("ascii").rstrip("=")


def b32decode_secret(text: str) -> bytes:
    """
    Decodes base32 secret text back to raw key bytes.

    Decoding is case-insensitive and tolerates missing ``=`` padding, since
    secrets are usually stored and typed without it.

    :param text: base32 secret text
    :returns: key bytes
    :raises InvalidSecretError: if the text is empty or not valid base32
    """
    if not isinstance(text, str):
        raise InvalidSecretError("secret must be base32 text, got {}".format(type(text).__name__))
    secret = text.rstrip("=")
    if not secret:
        raise InvalidSecretError("secret must not be empty")
    missing_padding = len(secret) % 8
    if missing_padding != 0:
        secret += "=" * (8 - missing_padding)
    try:
        return base64.b32decode(secret, casefold=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidSecretError("secret is not valid base32: {}".format(e)) from e


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
