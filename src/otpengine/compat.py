import secrets

# Secure random source; never falls back to the ``random`` module PRNG.
random = secrets.SystemRandom()


def random_bytes(n: int) -> bytes:
    return secrets.token_bytes(n)
