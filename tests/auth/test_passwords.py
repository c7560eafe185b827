"""
Unit tests for password hashing
"""

from stackshop.auth.passwords import hash_password, is_password_hash, verify_password


def test_hash_format():
    encoded = hash_password("password01", salt="abc", iterations=1000)

    algorithm, iterations, salt, digest = encoded.split("$")
    assert algorithm == "pbkdf2_sha256"
    assert iterations == "1000"
    assert salt == "abc"
    assert len(digest) == 64
    assert is_password_hash(encoded)


def test_salt_is_random():
    assert hash_password("password01", iterations=1000) != hash_password(
        "password01", iterations=1000
    )


def test_verify_password():
    encoded = hash_password("password01", iterations=1000)

    assert verify_password("password01", encoded) is True
    assert verify_password("password02", encoded) is False


def test_verify_rejects_unusable_hashes():
    assert verify_password("password01", None) is False
    assert verify_password("password01", "password01") is False
    assert verify_password("password01", "md5$1$salt$digest") is False
    assert is_password_hash("password01") is False
