import base64

import pytest

# RFC 4226 Appendix D / RFC 6238 Appendix B seeds
RFC_SEED_SHA1 = b"12345678901234567890"
RFC_SEED_SHA256 = b"12345678901234567890123456789012"
RFC_SEED_SHA512 = b"1234567890123456789012345678901234567890123456789012345678901234"


def b32(raw: bytes) -> str:
    return base64.b32encode(raw).decode("ascii")


@pytest.fixture
def rfc_secret() -> str:
    """'12345678901234567890' in base32."""
    return "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
