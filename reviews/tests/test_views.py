from decimal import Decimal

import pytest

from reviews.models import Review

pytestmark = pytest.mark.django_db


def reviews_url(restaurant):
    return f"/api/restaurants/{restaurant.pk}/reviews/"


def review_url(restaurant, review_id):
    return f"/api/restaurants/{restaurant.pk}/reviews/{review_id}/"


def test_reviews_drive_restaurant_rating(client_for, restaurant, customer, other_customer):
    carol = client_for(customer)
    dave = client_for(other_customer)

    first = carol.post(reviews_url(restaurant), {"rating": 5, "comment": "Best pizza in town!"}, format="json")
    assert first.status_code == 201
    assert first.data["restaurant_rating"] == Decimal("5.0")
    assert first.data["user_name"] == "Carol"

    second = dave.post(reviews_url(restaurant), {"rating": 4, "comment": "Very good, slightly slow."}, format="json")
    assert second.data["restaurant_rating"] == Decimal("4.5")
    restaurant.refresh_from_db()
    assert restaurant.rating == Decimal("4.5")

    deleted = carol.delete(review_url(restaurant, first.data["id"]))
    assert deleted.status_code == 200
    assert deleted.data["restaurant_rating"] == Decimal("4.0")
    restaurant.refresh_from_db()
    assert restaurant.rating == Decimal("4.0")


def test_second_review_is_rejected(client_for, restaurant, customer):
    client = client_for(customer)
    client.post(reviews_url(restaurant), {"rating": 5, "comment": "Best pizza in town!"}, format="json")

    response = client.post(reviews_url(restaurant), {"rating": 1, "comment": "Changed my mind entirely."}, format="json")

    assert response.status_code == 400
    assert response.data == {"error": "You have already reviewed this restaurant"}
    assert Review.objects.filter(restaurant=restaurant, user=customer).count() == 1


@pytest.mark.parametrize("payload", [{"rating": 0, "comment": "Valid comment here."},
                                     {"rating": 6, "comment": "Valid comment here."},
                                     {"rating": 3, "comment": "Too short"}])
def test_review_validation(client_for, restaurant, customer, payload):
    response = client_for(customer).post(reviews_url(restaurant), payload, format="json")

    assert response.status_code == 400
    assert not Review.objects.exists()


def test_only_customers_review(client_for, api_client, restaurant, partner):
    payload = {"rating": 5, "comment": "My own place is great."}

    assert client_for(partner).post(reviews_url(restaurant), payload, format="json").status_code == 403
    assert api_client.post(reviews_url(restaurant), payload, format="json").status_code == 401


def test_only_author_edits_or_deletes(client_for, restaurant, customer, other_customer, partner):
    created = client_for(customer).post(
        reviews_url(restaurant), {"rating": 2, "comment": "Pizza arrived cold."}, format="json"
    )
    url = review_url(restaurant, created.data["id"])

    for intruder in (other_customer, partner):
        assert client_for(intruder).patch(url, {"rating": 5}, format="json").status_code == 403
        assert client_for(intruder).delete(url).status_code == 403

    response = client_for(customer).patch(url, {"rating": 4}, format="json")
    assert response.status_code == 200
    assert response.data["restaurant_rating"] == Decimal("4.0")


def test_reviews_are_public_and_scoped_to_restaurant(api_client, client_for, restaurant, make_restaurant,
                                                    partner, customer):
    other = make_restaurant(partner, name="Second Branch")
    client_for(customer).post(reviews_url(restaurant), {"rating": 5, "comment": "Best pizza in town!"}, format="json")

    response = api_client.get(reviews_url(restaurant))
    assert response.status_code == 200
    assert len(response.data) == 1

    assert api_client.get(reviews_url(other)).data == []
    review_id = response.data[0]["id"]
    assert api_client.get(review_url(restaurant, review_id)).status_code == 200
    assert api_client.get(review_url(other, review_id)).status_code == 404


def test_reviews_of_missing_restaurant(api_client):
    assert api_client.get("/api/restaurants/999999/reviews/").status_code == 404
