import logging
from typing import Any, Optional, Union

from . import utils
from .algorithms import Algorithm
from .errors import InvalidInputError
from .hotp import MAX_COUNTER, hotp_code
from .secret import Secret
from .totp import Timestamp, timecode, to_timestamp_ms, validate_period

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = Algorithm.SHA1
DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30
DEFAULT_WINDOW = 1
MAX_DIGITS = 10


class OTP(object):
    """
    HOTP (RFC 4226) and TOTP (RFC 6238) generator and verifier for one secret.

    Configuration is fixed at construction. The ``period`` argument accepted
    by :meth:`totp` and :meth:`totp_verify` only applies to that call; use
    :meth:`with_period` to get an engine with a different default period.
    """

    def __init__(
        self,
        secret: Union[str, Secret, None] = None,
        algorithm: Union[Algorithm, str] = DEFAULT_ALGORITHM,
        digits: int = DEFAULT_DIGITS,
        period: int = DEFAULT_PERIOD,
    ) -> None:
        """
        :param secret: base32 secret text or a :class:`Secret`; a random
            160-bit secret is generated when omitted
        :param algorithm: SHA1, SHA256 or SHA512
        :param digits: number of decimal digits in each code, 1 to 10
        :param period: TOTP time step in seconds
        :raises InvalidAlgorithmError: for an unsupported algorithm
        :raises InvalidInputError: for bad digits, period or secret text
        """
        self._algorithm = Algorithm.parse(algorithm)
        if isinstance(digits, bool) or not isinstance(digits, int) or digits < 1:
            raise InvalidInputError("digits must be a positive integer, got {!r}".format(digits))
        if digits > MAX_DIGITS:
            raise InvalidInputError("digits must be no greater than {}".format(MAX_DIGITS))
        self._digits = digits
        self._period = validate_period(period)

        generated = secret is None
        if generated:
            self._secret = Secret.random()
        elif isinstance(secret, Secret):
            self._secret = secret
        else:
            self._secret = Secret.from_base32(secret)

        logger.debug(
            "Created OTP engine algorithm=%s digits=%d period=%d generated_secret=%s",
            self._algorithm.value,
            self._digits,
            self._period,
            generated,
        )

    @classmethod
    def generate(cls, **options: Any) -> "OTP":
        """
        Convenience constructor; identical to ``OTP(**options)``.
        """
        return cls(**options)

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def digits(self) -> int:
        return self._digits

    @property
    def secret(self) -> str:
        """
        The secret in its base32 transport form.
        """
        return self._secret.text

    @property
    def secret_bytes(self) -> bytes:
        return self._secret.raw

    @property
    def period(self) -> int:
        return self._period

    def with_period(self, period: int) -> "OTP":
        """
        Returns a new engine with the same secret, algorithm and digits but a
        different default period. This engine is left unchanged.
        """
        return type(self)(secret=self._secret, algorithm=self._algorithm, digits=self._digits, period=period)

    def generate_otp(self, counter: int) -> str:
        """
        :param counter: the HMAC counter value to use as the OTP input.
            Either the HOTP counter or the TOTP time step.
        """
        return hotp_code(self._secret.raw, counter, self._algorithm, self._digits)

    def timecode(self, timestamp: Optional[Timestamp] = None, period: Optional[int] = None) -> int:
        """
        Returns the TOTP time step containing ``timestamp``.

        :param timestamp: milliseconds since the epoch or a ``datetime``;
            defaults to now
        :param period: time step in seconds for this call only
        """
        return timecode(to_timestamp_ms(timestamp), self._period if period is None else period)

    def hotp(self, counter: int) -> str:
        """
        Generates the HOTP code for ``counter``.

        The engine keeps no counter state; callers advance and store the
        counter themselves.
        """
        return self.generate_otp(counter)

    def totp(self, timestamp: Optional[Timestamp] = None, period: Optional[int] = None) -> str:
        """
        Generates the TOTP code for ``timestamp``.

        :param timestamp: milliseconds since the epoch or a ``datetime``;
            defaults to now
        :param period: time step in seconds for this call only; the engine's
            own period is not changed
        :returns: OTP
        """
        return self.generate_otp(self.timecode(timestamp, period))

    def hotp_verify(self, code: str, counter: int) -> bool:
        """
        Checks ``code`` against the HOTP code for exactly ``counter``.

        :param code: the OTP to check
        :param counter: the OTP HMAC counter
        """
        if utils.strings_equal(_as_code(code), self.hotp(counter)):
            return True
        logger.debug("HOTP verification failed for counter %d", counter)
        return False

    def totp_verify(
        self,
        code: str,
        timestamp: Optional[Timestamp] = None,
        window: int = DEFAULT_WINDOW,
        period: Optional[int] = None,
    ) -> bool:
        """
        Checks ``code`` against the TOTP codes of the time steps from
        ``window`` steps before ``timestamp`` to ``window`` steps after it.

        :param code: the OTP to check
        :param timestamp: milliseconds since the epoch or a ``datetime``;
            defaults to now
        :param window: number of adjacent time steps accepted on each side,
            to absorb clock skew; 0 accepts only the current step
        :param period: time step in seconds for this call only
        """
        if isinstance(window, bool) or not isinstance(window, int):
            raise InvalidInputError("window must be an integer, got {!r}".format(window))
        if window < 0:
            raise InvalidInputError("window must not be negative, got {}".format(window))
        code = _as_code(code)
        base_counter = self.timecode(timestamp, period)

        for i in range(-window, window + 1):
            counter = base_counter + i
            # steps outside the 64-bit counter range have no code
            if counter < 0 or counter > MAX_COUNTER:
                continue
            if utils.strings_equal(code, self.generate_otp(counter)):
                return True

        logger.debug("TOTP verification failed for steps %d..%d", base_counter - window, base_counter + window)
        return False

    def __repr__(self) -> str:
        return "{}(algorithm={}, digits={}, period={})".format(
            type(self).__name__, self._algorithm.value, self._digits, self._period
        )


def _as_code(code: Any) -> str:
    if isinstance(code, str):
        return code
    if isinstance(code, int) and not isinstance(code, bool):
        return str(code)
    raise InvalidInputError("code must be a string, got {}".format(type(code).__name__))
