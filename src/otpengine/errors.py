class OTPError(Exception):
    """
    Base class for errors raised by the OTP engine.
    """


class InvalidAlgorithmError(OTPError, ValueError):
    """
    Raised when an engine is constructed with an unsupported hash algorithm.
    """

    def __init__(self, algorithm: object) -> None:
        super().__init__(
            "Invalid algorithm: {}. Supported algorithms are SHA1, SHA256, SHA512.".format(algorithm)
        )
        self.algorithm = algorithm


class InvalidInputError(OTPError, ValueError):
    """
    Raised for caller mistakes such as a non-positive period or a negative window.
    """


class InvalidSecretError(InvalidInputError):
    """
    Raised when secret text cannot be decoded into key bytes.
    """
