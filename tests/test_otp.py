"""
Tests for engine construction, configuration and error handling.
"""

import logging
from unittest.mock import patch

import pytest

import otpengine
from otpengine import (
    OTP,
    Algorithm,
    InvalidAlgorithmError,
    InvalidInputError,
    InvalidSecretError,
    OTPError,
    Secret,
)


class TestConstruction:
    def test_defaults(self):
        otp = OTP()
        assert otp.algorithm is Algorithm.SHA1
        assert otp.digits == 6
        assert otp.period == 30

    def test_generated_secret(self):
        otp = OTP()
        assert len(otp.secret_bytes) == 20
        assert len(otp.secret) == 32
        assert Secret.from_base32(otp.secret).raw == otp.secret_bytes

    def test_generated_secrets_differ(self):
        secrets = {OTP().secret for _ in range(10)}
        assert len(secrets) == 10

    def test_explicit_configuration(self, rfc_secret):
        otp = OTP(secret=rfc_secret, algorithm="SHA256", digits=8, period=60)
        assert otp.secret == rfc_secret
        assert otp.secret_bytes == b"12345678901234567890"
        assert otp.algorithm is Algorithm.SHA256
        assert otp.digits == 8
        assert otp.period == 60

    def test_secret_value(self):
        secret = Secret.from_bytes(b"12345678901234567890")
        otp = OTP(secret=secret)
        assert otp.secret == "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
        assert otp.hotp(0) == "755224"

    def test_lower_case_unpadded_secret(self, rfc_secret):
        assert OTP(secret=rfc_secret.lower()).hotp(0) == "755224"

    def test_accessors_are_read_only(self, rfc_secret):
        otp = OTP(secret=rfc_secret)
        for name in ("algorithm", "digits", "secret", "period"):
            with pytest.raises(AttributeError):
                setattr(otp, name, None)

    def test_generate_classmethod(self, rfc_secret):
        otp = OTP.generate(secret=rfc_secret, digits=8)
        assert isinstance(otp, OTP)
        assert otp.digits == 8

    def test_generate_module_function(self):
        otp = otpengine.generate()
        assert isinstance(otp, OTP)
        assert len(otp.secret_bytes) == 20

    def test_repr_hides_secret(self, rfc_secret):
        otp = OTP(secret=rfc_secret)
        assert rfc_secret not in repr(otp)
        assert repr(otp) == "OTP(algorithm=SHA1, digits=6, period=30)"


class TestConfigurationErrors:
    @pytest.mark.parametrize("algorithm", ["MD5", "SHA384", "", None, 1])
    def test_unsupported_algorithm(self, algorithm):
        with pytest.raises(InvalidAlgorithmError):
            OTP(algorithm=algorithm)

    def test_unsupported_algorithm_fails_before_secret_generation(self):
        with patch("otpengine.secret.random_bytes") as random_bytes:
            with pytest.raises(InvalidAlgorithmError):
                OTP(algorithm="MD5")
        random_bytes.assert_not_called()

    def test_algorithm_error_is_value_error(self):
        with pytest.raises(ValueError, match="Supported algorithms are SHA1, SHA256, SHA512"):
            OTP(algorithm="MD5")

    @pytest.mark.parametrize("digits", [0, -6, 11, 6.0, "6", True])
    def test_bad_digits(self, digits):
        with pytest.raises(InvalidInputError):
            OTP(digits=digits)

    @pytest.mark.parametrize("period", [0, -30, 30.0, "30"])
    def test_bad_period(self, period):
        with pytest.raises(InvalidInputError):
            OTP(period=period)

    @pytest.mark.parametrize("secret", ["", "====", "not base32!", "GEZDGNBVG1", b"GEZDGNBV"])
    def test_malformed_secret(self, secret):
        with pytest.raises(InvalidSecretError):
            OTP(secret=secret)

    def test_error_hierarchy(self):
        assert issubclass(InvalidSecretError, InvalidInputError)
        assert issubclass(InvalidInputError, OTPError)
        assert issubclass(InvalidAlgorithmError, OTPError)

    def test_randomness_failure_propagates(self):
        with patch("otpengine.secret.random_bytes", side_effect=OSError("no entropy")):
            with pytest.raises(OSError, match="no entropy"):
                OTP()


class TestLogging:
    def test_construction_logged_without_secret(self, rfc_secret, caplog):
        with caplog.at_level(logging.DEBUG, logger="otpengine"):
            OTP(secret=rfc_secret)
        assert "algorithm=SHA1" in caplog.text
        assert rfc_secret not in caplog.text

    def test_failed_verification_logged_without_code(self, rfc_secret, caplog):
        otp = OTP(secret=rfc_secret)
        with caplog.at_level(logging.DEBUG, logger="otpengine"):
            assert not otp.totp_verify("123456", 1672531200000)
        assert "TOTP verification failed" in caplog.text
        assert "123456" not in caplog.text
