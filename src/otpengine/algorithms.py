import hashlib
from enum import Enum
from typing import Any, Callable, Union

from .errors import InvalidAlgorithmError


class Algorithm(str, Enum):
    """
    Hash algorithms usable for the HMAC step of HOTP/TOTP.
    """

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digest(self) -> Callable[..., Any]:
        """
        The ``hashlib`` constructor handed to ``hmac.new``.
        """
        return _DIGESTS[self]

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        """
        Resolves an algorithm name such as ``"sha256"`` or ``"SHA256"``.

        :param value: an ``Algorithm`` member or its name
        :raises InvalidAlgorithmError: for anything outside SHA1, SHA256, SHA512
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise InvalidAlgorithmError(value)


_DIGESTS = {
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
}
