from typing import Any, Sequence

from .algorithms import Algorithm as Algorithm
from .compat import random
from .errors import InvalidAlgorithmError as InvalidAlgorithmError
from .errors import InvalidInputError as InvalidInputError
from .errors import InvalidSecretError as InvalidSecretError
from .errors import OTPError as OTPError
from .otp import OTP as OTP
from .secret import Secret as Secret


def generate(**options: Any) -> OTP:
    """
    Creates an engine; identical to ``OTP(**options)``. Without a ``secret``
    option a random 160-bit secret is generated.
    """
    return OTP.generate(**options)


def random_base32(length: int = 32, chars: Sequence[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567") -> str:
    """
    Returns random base32 secret text of ``length`` characters.
    """
    # Note: the otpauth scheme DOES NOT use base32 padding for secret lengths not divisible by 8.
    # Some third-party tools have bugs when dealing with such secrets.
    if length < 32:
        raise InvalidInputError("Secrets should be at least 160 bits")

    return "".join(random.choice(chars) for _ in range(length))
