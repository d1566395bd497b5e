# =============================================================================
# tests/test_campgrounds.py - Campground and Review Page Tests
# =============================================================================
# This module contains tests for:
# - Campground listing, creation, editing and deletion
# - The login guard and author-only permissions
# - Reviews: posting, deleting, cascade delete with the campground
# - Form validation and the ?_method= override
# =============================================================================

import pytest
from bson import ObjectId

from tests.helpers import flash_messages

CAMPGROUND = {
    "title": "Misty Hollow",
    "location": "Bozeman, Montana",
    "price": "18",
    "description": "Quiet sites by the river.",
}

MISSING_ID = "641af2bb4929465a40608aa4"


@pytest.fixture
def signed_in(client, register):
    """alice is registered and signed in."""
    register()
    client.get("/campgrounds")


@pytest.fixture
def create_campground(client):
    """
    Create a campground as the signed-in user; returns its id.

    The show page is visited afterwards to use up the creation flash,
    unless drain=False.
    """
    def _create(drain=True, **overrides):
        response = client.post(
            "/campgrounds",
            data={**CAMPGROUND, **overrides},
            follow_redirects=False,
        )
        assert response.status_code == 302
        if drain:
            client.get(response.headers["location"])
        return response.headers["location"].rsplit("/", 1)[-1]
    return _create


@pytest.fixture
def switch_user(client, register):
    """Sign out and sign in as a second user, bob."""
    def _switch():
        client.get("/logout")
        register(username="bob", email="b@x.com", password="pw2")
        client.get("/campgrounds")
    return _switch


# =============================================================================
# Listing and Viewing
# =============================================================================

class TestCampgroundPages:
    """Public pages."""

    def test_home(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "YelpCamp" in response.text

    def test_index_empty(self, client):
        response = client.get("/campgrounds")

        assert response.status_code == 200

    def test_index_lists_campgrounds(self, client, signed_in, create_campground):
        create_campground()
        create_campground(title="Silent Bayshore")

        page = client.get("/campgrounds").text

        assert "Misty Hollow" in page
        assert "Silent Bayshore" in page

    def test_show(self, client, signed_in, create_campground):
        campground_id = create_campground(drain=False)

        page = client.get(f"/campgrounds/{campground_id}").text

        assert "Misty Hollow" in page
        assert "Submitted by alice" in page
        assert flash_messages(page, "success") == ["Successfully made a new campground!"]

    @pytest.mark.parametrize("campground_id", [MISSING_ID, "not-an-object-id"])
    def test_show_missing(self, client, campground_id):
        response = client.get(f"/campgrounds/{campground_id}", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/campgrounds"
        page = client.get("/campgrounds").text
        assert flash_messages(page, "error") == ["Cannot find that campground!"]


# =============================================================================
# Creating
# =============================================================================

class TestCreateCampground:
    """POST /campgrounds and the login guard."""

    def test_new_form_requires_login(self, client):
        response = client.get("/campgrounds/new", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/login"

    def test_create_requires_login(self, client, fake_db):
        response = client.post("/campgrounds", data=CAMPGROUND, follow_redirects=False)

        assert response.headers["location"] == "/login"
        assert fake_db["campgrounds"].docs == []

    def test_create(self, client, signed_in, create_campground, fake_db):
        campground_id = create_campground()

        doc = fake_db["campgrounds"].docs[0]
        assert str(doc["_id"]) == campground_id
        assert doc["title"] == "Misty Hollow"
        assert doc["price"] == 18
        assert doc["reviews"] == []
        user_id = fake_db["users"].docs[0]["_id"]
        assert doc["author"] == user_id

    def test_create_invalid_form(self, client, signed_in, fake_db):
        response = client.post(
            "/campgrounds",
            data={**CAMPGROUND, "price": "-5"},
            follow_redirects=False,
        )

        assert response.status_code == 400
        assert "price" in response.text
        assert fake_db["campgrounds"].docs == []

    def test_create_missing_field(self, client, signed_in):
        data = {k: v for k, v in CAMPGROUND.items() if k != "title"}

        response = client.post("/campgrounds", data=data)

        assert response.status_code == 400
        assert "title" in response.text


# =============================================================================
# Editing and Deleting
# =============================================================================

class TestEditCampground:
    """Edit form, PUT and DELETE."""

    def test_edit_form(self, client, signed_in, create_campground):
        campground_id = create_campground()

        page = client.get(f"/campgrounds/{campground_id}/edit").text

        assert f"/campgrounds/{campground_id}?_method=PUT" in page
        assert "Misty Hollow" in page

    def test_update_via_method_override(self, client, signed_in, create_campground, fake_db):
        campground_id = create_campground()

        response = client.post(
            f"/campgrounds/{campground_id}?_method=PUT",
            data={**CAMPGROUND, "title": "Misty Hollow Revisited"},
            follow_redirects=False,
        )

        assert response.headers["location"] == f"/campgrounds/{campground_id}"
        assert fake_db["campgrounds"].docs[0]["title"] == "Misty Hollow Revisited"
        page = client.get(response.headers["location"]).text
        assert flash_messages(page, "success") == ["Successfully updated campground!"]

    def test_update_with_real_put(self, client, signed_in, create_campground, fake_db):
        campground_id = create_campground()

        client.put(f"/campgrounds/{campground_id}", data={**CAMPGROUND, "price": "25"})

        assert fake_db["campgrounds"].docs[0]["price"] == 25

    def test_update_by_other_user(self, client, signed_in, create_campground, switch_user, fake_db):
        campground_id = create_campground()
        switch_user()

        response = client.post(
            f"/campgrounds/{campground_id}?_method=PUT",
            data={**CAMPGROUND, "title": "Hijacked"},
            follow_redirects=False,
        )

        assert response.headers["location"] == f"/campgrounds/{campground_id}"
        assert fake_db["campgrounds"].docs[0]["title"] == "Misty Hollow"
        page = client.get(response.headers["location"]).text
        assert flash_messages(page, "error") == ["You do not have permission to do that!"]

    def test_edit_form_by_other_user(self, client, signed_in, create_campground, switch_user):
        campground_id = create_campground()
        switch_user()

        response = client.get(f"/campgrounds/{campground_id}/edit", follow_redirects=False)

        assert response.headers["location"] == f"/campgrounds/{campground_id}"

    def test_delete(self, client, signed_in, create_campground, fake_db):
        campground_id = create_campground()

        response = client.post(
            f"/campgrounds/{campground_id}?_method=DELETE",
            follow_redirects=False,
        )

        assert response.headers["location"] == "/campgrounds"
        assert fake_db["campgrounds"].docs == []
        page = client.get("/campgrounds").text
        assert flash_messages(page, "success") == ["Successfully deleted campground"]

    def test_delete_by_other_user(self, client, signed_in, create_campground, switch_user, fake_db):
        campground_id = create_campground()
        switch_user()

        client.post(f"/campgrounds/{campground_id}?_method=DELETE")

        assert len(fake_db["campgrounds"].docs) == 1

    def test_delete_missing(self, client, signed_in):
        response = client.delete(f"/campgrounds/{MISSING_ID}", follow_redirects=False)

        assert response.headers["location"] == "/campgrounds"

    def test_unknown_override_is_ignored(self, client, signed_in, create_campground, fake_db):
        campground_id = create_campground()

        response = client.post(f"/campgrounds/{campground_id}?_method=TRACE")

        assert response.status_code == 405
        assert len(fake_db["campgrounds"].docs) == 1


# =============================================================================
# Reviews
# =============================================================================

class TestReviews:
    """POST/DELETE /campgrounds/{id}/reviews."""

    def _post_review(self, client, campground_id, body="Lovely spot", rating="4", drain=True):
        response = client.post(
            f"/campgrounds/{campground_id}/reviews",
            data={"body": body, "rating": rating},
            follow_redirects=False,
        )
        if drain and response.status_code == 302:
            client.get(response.headers["location"])
        return response

    def test_create_review(self, client, signed_in, create_campground, fake_db):
        campground_id = create_campground()

        response = self._post_review(client, campground_id, drain=False)

        assert response.headers["location"] == f"/campgrounds/{campground_id}"
        review = fake_db["reviews"].docs[0]
        assert review["rating"] == 4
        assert fake_db["campgrounds"].docs[0]["reviews"] == [review["_id"]]
        page = client.get(f"/campgrounds/{campground_id}").text
        assert "Lovely spot" in page
        assert "By alice" in page
        assert flash_messages(page, "success") == ["Created new review!"]

    def test_create_review_requires_login(self, client, signed_in, create_campground, fake_db):
        campground_id = create_campground()
        client.get("/logout")

        response = self._post_review(client, campground_id)

        assert response.headers["location"] == "/login"
        assert fake_db["reviews"].docs == []

    def test_review_rating_out_of_range(self, client, signed_in, create_campground, fake_db):
        campground_id = create_campground()

        response = self._post_review(client, campground_id, rating="6")

        assert response.status_code == 400
        assert fake_db["reviews"].docs == []

    def test_review_on_missing_campground(self, client, signed_in, fake_db):
        response = self._post_review(client, MISSING_ID)

        assert response.headers["location"] == "/campgrounds"
        assert fake_db["reviews"].docs == []

    def test_delete_review(self, client, signed_in, create_campground, fake_db):
        campground_id = create_campground()
        self._post_review(client, campground_id)
        review_id = str(fake_db["reviews"].docs[0]["_id"])

        response = client.post(
            f"/campgrounds/{campground_id}/reviews/{review_id}?_method=DELETE",
            follow_redirects=False,
        )

        assert response.headers["location"] == f"/campgrounds/{campground_id}"
        assert fake_db["reviews"].docs == []
        assert fake_db["campgrounds"].docs[0]["reviews"] == []
        page = client.get(f"/campgrounds/{campground_id}").text
        assert flash_messages(page, "success") == ["Successfully deleted review"]

    def test_delete_review_by_other_user(self, client, signed_in, create_campground, switch_user, fake_db):
        campground_id = create_campground()
        self._post_review(client, campground_id)
        review_id = str(fake_db["reviews"].docs[0]["_id"])
        switch_user()

        client.delete(f"/campgrounds/{campground_id}/reviews/{review_id}")

        assert len(fake_db["reviews"].docs) == 1

    def test_delete_missing_review(self, client, signed_in, create_campground):
        campground_id = create_campground()

        response = client.delete(
            f"/campgrounds/{campground_id}/reviews/{ObjectId()}",
            follow_redirects=False,
        )

        assert response.headers["location"] == f"/campgrounds/{campground_id}"
        page = client.get(response.headers["location"]).text
        assert flash_messages(page, "error") == ["Cannot find that review!"]

    def test_deleting_campground_deletes_its_reviews(self, client, signed_in, create_campground, fake_db):
        kept_id = create_campground(title="Kept")
        self._post_review(client, kept_id, body="stays")
        campground_id = create_campground()
        self._post_review(client, campground_id)
        self._post_review(client, campground_id, body="Second")

        client.delete(f"/campgrounds/{campground_id}")

        assert [r["body"] for r in fake_db["reviews"].docs] == ["stays"]
