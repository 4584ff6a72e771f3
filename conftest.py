from decimal import Decimal

import pytest
from django.conf import settings
from rest_framework.test import APIClient

from restaurants.models import MenuItem, Restaurant
from users.helpers import issue_session
from users.models import User


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def make_user(db):
    def _make_user(email, role=User.CUSTOMER, password="secret123", **extra):
        extra.setdefault("name", email.split("@")[0].title())
        return User.objects.create_user(email=email, password=password, role=role, **extra)
    return _make_user


@pytest.fixture
def customer(make_user):
    return make_user("carol@example.com", name="Carol")


@pytest.fixture
def other_customer(make_user):
    return make_user("dave@example.com", name="Dave")


@pytest.fixture
def partner(make_user):
    return make_user("paula@example.com", role=User.PARTNER, name="Paula")


@pytest.fixture
def other_partner(make_user):
    return make_user("quentin@example.com", role=User.PARTNER, name="Quentin")


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    """An API client carrying a session cookie for ``user`` (anonymous for None)."""
    def _client_for(user=None):
        client = APIClient()
        if user is not None:
            client.cookies[settings.AUTH_COOKIE_NAME] = issue_session(user)
        return client
    return _client_for


@pytest.fixture
def make_restaurant(db):
    def _make_restaurant(owner, **fields):
        fields.setdefault("name", "Trattoria Roma")
        fields.setdefault("cuisine", "Italian")
        fields.setdefault("description", "Wood fired pizza and fresh pasta made daily.")
        fields.setdefault("address", "12 Via Appia")
        return Restaurant.objects.create(owner=owner, **fields)
    return _make_restaurant


@pytest.fixture
def restaurant(make_restaurant, partner):
    return make_restaurant(partner)


@pytest.fixture
def make_menu_item(db):
    def _make_menu_item(restaurant, name, price, **fields):
        fields.setdefault("description", f"House special {name.lower()}")
        fields.setdefault("category", MenuItem.MAIN_COURSE)
        return MenuItem.objects.create(restaurant=restaurant, name=name, price=Decimal(price), **fields)
    return _make_menu_item


@pytest.fixture
def item_a(make_menu_item, restaurant):
    return make_menu_item(restaurant, "Margherita", "8.00")


@pytest.fixture
def item_b(make_menu_item, restaurant):
    return make_menu_item(restaurant, "Garlic Bread", "5.50", category=MenuItem.SIDE_DISH)
