from dataclasses import dataclass, field

from . import utils
from .compat import random_bytes
from .errors import InvalidInputError, InvalidSecretError

SECRET_BYTES = 20  # 160 bits, the RFC 4226 recommendation


@dataclass(frozen=True)
class Secret:
    """
    Immutable shared secret: the raw HMAC key plus its base32 transport text.

    ``text`` is kept exactly as supplied so it round-trips to storage; ``raw``
    is what the HMAC is keyed with. The two must always agree.
    """

    raw: bytes = field(repr=False)
    text: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.raw, bytes):
            raise InvalidSecretError("secret bytes must be bytes, got {}".format(type(self.raw).__name__))
        if not self.raw:
            raise InvalidSecretError("secret must not be empty")
        if utils.b32decode_secret(self.text) != self.raw:
            raise InvalidSecretError("secret text does not encode the secret bytes")

    @classmethod
    def from_base32(cls, text: str) -> "Secret":
        """
        :param text: base32 secret text, padding optional
        :raises InvalidSecretError: if the text cannot be decoded
        """
        return cls(raw=utils.b32decode_secret(text), text=text)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Secret":
        if isinstance(raw, bytearray):
            raw = bytes(raw)
        if not isinstance(raw, bytes):
            raise InvalidSecretError("secret bytes must be bytes, got {}".format(type(raw).__name__))
        return cls(raw=raw, text=utils.b32encode_secret(raw))

    @classmethod
    def random(cls, length: int = SECRET_BYTES) -> "Secret":
        """
        Generates a fresh secret from the operating system CSPRNG.

        Failures of the random source propagate; there is no weaker fallback.

        :param length: number of random key bytes
        """
        if length < 16:
            raise InvalidInputError("Secrets should be at least 128 bits")
        return cls.from_bytes(random_bytes(length))
