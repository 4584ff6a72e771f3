import pytest
from django.conf import settings

from users.models import User

pytestmark = pytest.mark.django_db


def test_register_sets_http_only_cookie(api_client):
    response = api_client.post(
        "/api/auth/register/",
        {"email": "New.User@Example.com", "password": "secret123", "name": "New User"},
        format="json",
    )

    assert response.status_code == 201
    assert response.data["user"]["email"] == "new.user@example.com"
    assert response.data["user"]["role"] == "customer"
    assert "password" not in response.data["user"]

    cookie = response.cookies[settings.AUTH_COOKIE_NAME]
    assert cookie["httponly"]
    assert cookie["path"] == "/"
    assert cookie["samesite"] == "Lax"
    assert cookie["max-age"] == 7 * 24 * 60 * 60


def test_register_as_partner(api_client):
    response = api_client.post(
        "/api/auth/register/",
        {"email": "owner@example.com", "password": "secret123", "name": "Owner", "role": "partner"},
        format="json",
    )

    assert response.status_code == 201
    assert User.objects.get(email="owner@example.com").role == User.PARTNER


def test_register_rejects_duplicate_email_case_insensitively(api_client, customer):
    response = api_client.post(
        "/api/auth/register/",
        {"email": "CAROL@example.com", "password": "secret123", "name": "Carol Two"},
        format="json",
    )

    assert response.status_code == 400
    assert "already exists" in response.data["error"]


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "x@example.com", "password": "short", "name": "Xavier"},
        {"email": "x@example.com", "password": "secret123", "name": "X"},
        {"email": "not-an-email", "password": "secret123", "name": "Xavier"},
        {"email": "x@example.com", "password": "secret123", "name": "Xavier", "role": "admin"},
    ],
)
def test_register_validation_errors(api_client, payload):
    response = api_client.post("/api/auth/register/", payload, format="json")

    assert response.status_code == 400
    assert "error" in response.data
    assert not User.objects.filter(email="x@example.com").exists()


def test_login_then_me(api_client, customer):
    response = api_client.post(
        "/api/auth/login/", {"email": "carol@example.com", "password": "secret123"}, format="json"
    )
    assert response.status_code == 200
    assert settings.AUTH_COOKIE_NAME in response.cookies

    me = api_client.get("/api/auth/me/")
    assert me.status_code == 200
    assert me.data["user"]["id"] == customer.pk


@pytest.mark.parametrize("email,password", [("carol@example.com", "wrong-pass"), ("nobody@example.com", "secret123")])
def test_login_failure_is_generic(api_client, customer, email, password):
    response = api_client.post("/api/auth/login/", {"email": email, "password": password}, format="json")

    assert response.status_code == 401
    assert response.data == {"error": "Invalid credentials"}


def test_me_requires_session(api_client):
    response = api_client.get("/api/auth/me/")

    assert response.status_code == 401
    assert response.data == {"error": "Authentication required"}


def test_invalid_cookie_is_treated_as_anonymous(api_client):
    api_client.cookies[settings.AUTH_COOKIE_NAME] = "garbage"

    assert api_client.get("/api/auth/me/").status_code == 401


def test_session_of_deleted_user_is_anonymous(client_for, make_user):
    user = make_user("gone@example.com")
    client = client_for(user)
    user.delete()

    assert client.get("/api/auth/me/").status_code == 401


def test_logout_clears_cookie(client_for, customer):
    client = client_for(customer)

    response = client.post("/api/auth/logout/")

    assert response.status_code == 200
    assert response.cookies[settings.AUTH_COOKIE_NAME].value == ""
    assert client.get("/api/auth/me/").status_code == 401


def test_profile_update_keeps_email_and_role(client_for, customer):
    client = client_for(customer)

    response = client.put(
        "/api/auth/profile/",
        {"display_name": "CJ", "phone": "555-0100", "role": "partner", "email": "hacker@example.com"},
        format="json",
    )

    assert response.status_code == 200
    customer.refresh_from_db()
    assert customer.display_name == "CJ"
    assert customer.phone == "555-0100"
    assert customer.role == User.CUSTOMER
    assert customer.email == "carol@example.com"


def test_profile_rejects_short_name(client_for, customer):
    response = client_for(customer).patch("/api/auth/profile/", {"name": "C"}, format="json")

    assert response.status_code == 400
    assert "fields" in response.data
