import pytest

from components.authservice import Argon2PasswordHasher, Argon2Params, DEFAULT_ARGON2_PARAMS
from components.authservice.errors import HashVerificationError

FAST_PARAMS = Argon2Params(memory_cost=8, time_cost=1, parallelism=1)


def test_hash_and_verify_round_trip():
    hasher = Argon2PasswordHasher()
    encoded = hasher.hash("s3cret", FAST_PARAMS)
    assert encoded.startswith("$argon2id$")
    assert "s3cret" not in encoded
    assert hasher.verify("s3cret", encoded) is True
    assert hasher.verify("s3cret!", encoded) is False


def test_hash_is_salted_per_call():
    hasher = Argon2PasswordHasher()
    a = hasher.hash("same-password", FAST_PARAMS)
    b = hasher.hash("same-password", FAST_PARAMS)
    assert a != b
    assert hasher.verify("same-password", a)
    assert hasher.verify("same-password", b)


def test_encoded_hash_carries_its_params():
    hasher = Argon2PasswordHasher()
    encoded = hasher.hash("pw", Argon2Params(memory_cost=16, time_cost=2, parallelism=1))
    assert "m=16,t=2,p=1" in encoded
    # verification reads params from the encoding, not from the defaults
    assert hasher.verify("pw", encoded)


def test_default_params_are_argon2id_interactive_profile():
    assert DEFAULT_ARGON2_PARAMS.memory_cost == 64 * 1024
    assert DEFAULT_ARGON2_PARAMS.time_cost == 1
    assert DEFAULT_ARGON2_PARAMS.parallelism == 2
    assert DEFAULT_ARGON2_PARAMS.salt_len == 16
    assert DEFAULT_ARGON2_PARAMS.hash_len == 32


@pytest.mark.parametrize("encoded", ["", "plaintext", "$2b$12$notargon"])
def test_verify_malformed_hash_raises(encoded):
    with pytest.raises(HashVerificationError):
        Argon2PasswordHasher().verify("pw", encoded)
