from datetime import timedelta

import pytest
from rest_framework_simplejwt.tokens import AccessToken

from users.helpers import hash_password, issue_session, resolve_session, verify_password
from users.principal import Principal


def test_hash_password_is_salted_and_verifiable():
    first = hash_password("secret123")
    second = hash_password("secret123")

    assert first != "secret123"
    assert first != second
    assert verify_password("secret123", first)
    assert not verify_password("wrong-one", first)


def test_verify_password_rejects_empty_input():
    assert not verify_password("", hash_password("secret123"))
    assert not verify_password("secret123", "")


@pytest.mark.django_db
def test_created_users_store_a_verifiable_hash(make_user):
    user = make_user("erin@example.com", password="s3cret-pass")

    assert user.password != "s3cret-pass"
    assert verify_password("s3cret-pass", user.password)
    assert not verify_password("wrong-one", user.password)


@pytest.mark.django_db
def test_session_round_trip_carries_identity(partner):
    payload = resolve_session(issue_session(partner))

    assert payload == {"user_id": partner.pk, "email": "paula@example.com", "role": "partner"}


@pytest.mark.django_db
def test_tampered_session_resolves_to_none(customer):
    token = issue_session(customer)
    head, body, signature = token.split(".")
    forged = ".".join([head, body, signature[::-1]])

    assert resolve_session(forged) is None


@pytest.mark.django_db
def test_expired_session_resolves_to_none(customer):
    token = AccessToken.for_user(customer)
    token.set_exp(lifetime=-timedelta(seconds=1))

    assert resolve_session(str(token)) is None


@pytest.mark.parametrize("token", [None, "", "not-a-token", "a.b.c"])
def test_malformed_session_resolves_to_none(token):
    assert resolve_session(token) is None


def test_principal_from_anonymous_user_is_none():
    from django.contrib.auth.models import AnonymousUser

    assert Principal.from_user(AnonymousUser()) is None
    assert Principal.from_user(None) is None
