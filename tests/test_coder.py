# tests/test_coder.py
import base64
import hashlib
import json
import time

import jwt
import pytest

from jwthmac.adapters.pyjwt.hs256 import HS256Signer, HS256Verifier
from jwthmac.coder import decode, encode
from jwthmac.config.settings import HmacSettings
from jwthmac.domain.exceptions import (
    ClaimShapeError,
    ExpiredTokenError,
    InvalidSignatureError,
    InvalidTokenError,
    MalformedTokenError,
    SigningError,
    UnexpectedAlgorithmError,
)

FROZEN = 1_700_000_000.25


def _segments(token):
    return token.split(".")


def _b64decode(segment):
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def _payload(token):
    return json.loads(_b64decode(_segments(token)[1]))


def _valid_claims(**overrides):
    now = int(time.time())
    claims = {
        "usr": "user-42",
        "iss": "svc-a",
        "iat": now,
        "exp": now + 60,
        "scopes": ["read", "write"],
    }
    claims.update(overrides)
    return claims


# --- encode ----------------------------------------------------------------


# "s3cr3t" is shorter than PyJWT's recommended HMAC key length
@pytest.mark.filterwarnings("ignore")
def test_concrete_scenario():
    settings = HmacSettings(signing_key="s3cr3t", issuer="svc-a", expiry_ms=60000)
    token = encode(settings, "user-42", ["read", "write"])

    assert decode(settings, token) == (["read", "write"], "user-42")


def test_wire_format(settings):
    token = HS256Signer(settings, clock=lambda: FROZEN).sign("user-42", ["read"])
    header_b64, payload_b64, sig_b64 = _segments(token)

    assert json.loads(_b64decode(header_b64)) == {"alg": "HS256", "typ": "JWT"}
    assert all("=" not in s for s in (header_b64, payload_b64, sig_b64))
    assert len(_b64decode(sig_b64)) == hashlib.sha256().digest_size
    assert _payload(token) == {
        "usr": "user-42",
        "iss": "svc-a",
        "iat": 1_700_000_000,
        "exp": 1_700_000_060,
        "scopes": ["read"],
    }


def test_expiry_is_truncated_to_whole_seconds():
    settings = HmacSettings(signing_key="k", issuer="svc-a", expiry_ms=1500)
    claims = HS256Signer(settings, clock=lambda: 100.75).build_claims("u", [])

    assert claims.issued_at == 100
    assert claims.expires_at == 102


def test_same_second_is_byte_identical(settings):
    signer = HS256Signer(settings, clock=lambda: FROZEN)

    assert signer.sign("user-42", ["read"]) == signer.sign("user-42", ["read"])


def test_different_seconds_differ_only_in_time_claims(settings):
    first = HS256Signer(settings, clock=lambda: FROZEN).sign("user-42", ["read"])
    second = HS256Signer(settings, clock=lambda: FROZEN + 5).sign("user-42", ["read"])

    assert first != second
    assert _segments(first)[0] == _segments(second)[0]
    a, b = _payload(first), _payload(second)
    assert b["iat"] - a["iat"] == 5
    assert b["exp"] - a["exp"] == 5
    assert {k: v for k, v in a.items() if k not in ("iat", "exp")} == {
        k: v for k, v in b.items() if k not in ("iat", "exp")
    }


def test_scope_order_and_empty_values_survive(settings):
    scopes = ["write", "admin", "read"]
    assert decode(settings, encode(settings, "u", scopes)) == (scopes, "u")
    assert decode(settings, encode(settings, "", [])) == ([], "")


def test_unserializable_scope_raises_signing_error(settings):
    with pytest.raises(SigningError):
        encode(settings, "user-42", ["read", object()])


# --- decode: structure -----------------------------------------------------


@pytest.mark.parametrize(
    "token",
    [
        "", "abc", "a.b", "a.b.c.d", "!!!.???.###", "e30.e30",
        "\ud800.a.b", "eyJ\u00e9.a.b", None, b"a.b.c", 42,
    ],
)
def test_malformed_tokens(settings, token):
    with pytest.raises(MalformedTokenError):
        decode(settings, token)


def test_non_object_payload_is_malformed(settings, forge_token):
    token = forge_token({"alg": "HS256", "typ": "JWT"}, ["usr"], settings.signing_key)

    with pytest.raises(MalformedTokenError):
        decode(settings, token)


# --- decode: algorithm pinning --------------------------------------------


def test_none_algorithm_is_rejected(settings):
    token = jwt.encode(_valid_claims(), None, algorithm="none")

    with pytest.raises(UnexpectedAlgorithmError):
        decode(settings, token)


def test_other_hmac_algorithm_is_rejected(settings, forge_token):
    token = forge_token(
        {"alg": "HS512", "typ": "JWT"},
        _valid_claims(),
        settings.signing_key,
        digest=hashlib.sha512,
    )

    with pytest.raises(UnexpectedAlgorithmError):
        decode(settings, token)


@pytest.mark.parametrize("alg", ["RS256", "ES256", "none", "hs256", "", None])
def test_forged_header_algorithm_is_rejected(settings, forge_token, alg):
    token = forge_token({"alg": alg, "typ": "JWT"}, _valid_claims(), settings.signing_key)

    with pytest.raises(UnexpectedAlgorithmError):
        decode(settings, token)


def test_missing_algorithm_is_rejected(settings, forge_token):
    token = forge_token({"typ": "JWT"}, _valid_claims(), settings.signing_key)

    with pytest.raises(UnexpectedAlgorithmError):
        decode(settings, token)


# --- decode: signature -----------------------------------------------------


def test_wrong_key_is_rejected(settings):
    token = encode(settings, "user-42", ["read"])
    other = HmacSettings("another-signing-key-for-hs256-xy", "svc-a", 60000)

    with pytest.raises(InvalidSignatureError):
        decode(other, token)


def test_modified_payload_is_rejected(settings):
    header, _, sig = _segments(encode(settings, "user-42", ["read"]))
    forged = base64.urlsafe_b64encode(
        json.dumps(_valid_claims(scopes=["read", "admin"])).encode()
    ).rstrip(b"=").decode()

    with pytest.raises(InvalidSignatureError):
        decode(settings, f"{header}.{forged}.{sig}")


def test_every_payload_character_is_covered_by_signature(settings):
    header, payload, sig = _segments(encode(settings, "user-42", ["read"]))

    for i, ch in enumerate(payload):
        swapped = "A" if ch != "A" else "B"
        tampered = payload[:i] + swapped + payload[i + 1:]
        with pytest.raises(InvalidTokenError):
            decode(settings, f"{header}.{tampered}.{sig}")


def test_stripped_signature_is_rejected(settings):
    header, payload, _ = _segments(encode(settings, "user-42", ["read"]))

    with pytest.raises(InvalidSignatureError):
        decode(settings, f"{header}.{payload}.")


# --- decode: time ------------------------------------------------------------


def test_expired_token(settings):
    signer = HS256Signer(settings, clock=lambda: time.time() - 120)
    token = signer.sign("user-42", ["read"])

    with pytest.raises(ExpiredTokenError):
        decode(settings, token)


def test_one_millisecond_expiry(settings):
    short_lived = HmacSettings(settings.signing_key, "svc-a", expiry_ms=1)
    token = encode(short_lived, "user-42", ["read"])
    time.sleep(0.002)

    with pytest.raises(ExpiredTokenError):
        decode(settings, token)


def test_expiry_boundary(settings):
    token = HS256Signer(settings, clock=lambda: FROZEN).sign("user-42", ["read"])
    exp = _payload(token)["exp"]

    claims = HS256Verifier(settings, clock=lambda: exp - 0.001).verify(token)
    assert claims.expires_at == exp

    with pytest.raises(ExpiredTokenError):
        HS256Verifier(settings, clock=lambda: exp).verify(token)


def test_future_issued_at_is_not_checked(settings, forge_token):
    now = int(time.time())
    token = forge_token(
        {"alg": "HS256", "typ": "JWT"},
        _valid_claims(iat=now + 3600, exp=now + 7200),
        settings.signing_key,
    )

    assert decode(settings, token) == (["read", "write"], "user-42")


def test_issuer_is_carried_but_not_enforced(settings):
    other_issuer = HmacSettings(settings.signing_key, issuer="svc-b", expiry_ms=60000)
    token = encode(other_issuer, "user-42", ["read"])

    assert decode(settings, token) == (["read"], "user-42")
    assert HS256Verifier(settings).verify(token).issuer == "svc-b"


def test_unknown_claims_are_ignored(settings, forge_token):
    token = forge_token(
        {"alg": "HS256", "typ": "JWT"},
        _valid_claims(usr="u", scopes=[], sub=5, jti=5, aud=7, nbf=True),
        settings.signing_key,
    )

    assert decode(settings, token) == ([], "u")


# --- decode: claim shapes -------------------------------------------------


@pytest.mark.parametrize(
    "overrides",
    [
        {"scopes": 7},
        {"scopes": "read"},
        {"scopes": ["read", 3]},
        {"scopes": ["read", {"name": "write"}]},
        {"usr": 42},
        {"exp": "tomorrow"},
        {"exp": [1]},
    ],
)
def test_wrong_claim_shapes(settings, forge_token, overrides):
    token = forge_token(
        {"alg": "HS256", "typ": "JWT"},
        _valid_claims(**overrides),
        settings.signing_key,
    )

    with pytest.raises(ClaimShapeError):
        decode(settings, token)


@pytest.mark.parametrize("missing", ["usr", "scopes", "exp"])
def test_missing_claims(settings, forge_token, missing):
    claims = _valid_claims()
    del claims[missing]
    token = forge_token({"alg": "HS256", "typ": "JWT"}, claims, settings.signing_key)

    with pytest.raises(ClaimShapeError):
        decode(settings, token)


def test_decode_is_idempotent(settings):
    token = encode(settings, "user-42", ["read", "write"])

    assert decode(settings, token) == decode(settings, token)
