# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the Pydantic models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Documents read back from MongoDB map onto the models
# - Default values work as expected
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from bson import ObjectId
from pydantic import ValidationError

from core.models import (
    AuthUser,
    Campground,
    CampgroundForm,
    Credentials,
    FlashCategory,
    FlashMessage,
    Image,
    Review,
    ReviewForm,
    SessionData,
    UserRecord,
)


# =============================================================================
# User Models
# =============================================================================

class TestUserRecord:
    """Test UserRecord."""

    def test_from_document(self):
        oid = ObjectId()
        record = UserRecord.from_document({
            "_id": oid,
            "email": "a@x.com",
            "username": "alice",
            "password_hash": "$pbkdf2-sha256$secret",
        })

        assert record.id == str(oid)
        assert record.to_auth_user() == AuthUser(id=str(oid), email="a@x.com", username="alice")

    def test_repr_hides_hash(self):
        record = UserRecord(id="1", email="a@x.com", username="alice", password_hash="$pbkdf2$secret")

        assert "secret" not in repr(record)

    def test_auth_user_has_no_hash(self):
        assert "password_hash" not in AuthUser.model_fields

    def test_auth_user_is_frozen(self):
        user = AuthUser(id="1", email="a@x.com", username="alice")

        with pytest.raises(ValidationError):
            user.username = "mallory"

    def test_credentials_repr_hides_password(self):
        assert "pw1" not in repr(Credentials(username="alice", password="pw1"))


# =============================================================================
# Session Models
# =============================================================================

class TestSessionData:
    """Test SessionData defaults."""

    def test_defaults(self):
        data = SessionData()

        assert data.user_id is None
        assert data.return_to is None
        assert data.flash == {"success": [], "error": []}

    def test_default_flash_not_shared(self):
        first = SessionData()
        first.flash["success"].append("hi")

        assert SessionData().flash["success"] == []

    def test_round_trip_through_json(self):
        data = SessionData(user_id="u1", return_to="/campgrounds/new")

        assert SessionData.model_validate(data.model_dump(mode="json")) == data


class TestFlashMessage:
    """Test FlashMessage constructors."""

    def test_success(self):
        message = FlashMessage.success("Welcome back")

        assert message.category == FlashCategory.SUCCESS
        assert message.text == "Welcome back"

    def test_error(self):
        assert FlashMessage.error("no").category == FlashCategory.ERROR


# =============================================================================
# Campground Models
# =============================================================================

class TestCampgroundForm:
    """Test CampgroundForm validation."""

    def test_valid(self):
        form = CampgroundForm(title="Misty Hollow", location="Bozeman, Montana", price="18.5", description="Quiet")

        assert form.price == 18.5

    @pytest.mark.parametrize("field, value", [
        ("title", ""),
        ("location", ""),
        ("price", -1),
        ("price", "free"),
        ("description", ""),
    ])
    def test_invalid(self, field, value):
        data = {"title": "T", "location": "L", "price": 10, "description": "D", field: value}

        with pytest.raises(ValidationError):
            CampgroundForm(**data)


class TestReviewForm:
    """Test ReviewForm validation."""

    @pytest.mark.parametrize("rating", [1, 5])
    def test_rating_bounds(self, rating):
        assert ReviewForm(body="Nice", rating=rating).rating == rating

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            ReviewForm(body="Nice", rating=rating)

    def test_body_required(self):
        with pytest.raises(ValidationError):
            ReviewForm(body="", rating=3)


class TestCampground:
    """Test Campground / Review documents."""

    def test_from_document(self):
        oid, author, review = ObjectId(), ObjectId(), ObjectId()
        campground = Campground.from_document({
            "_id": oid,
            "title": "Misty Hollow",
            "price": 18,
            "author": author,
            "reviews": [review],
            "geometry": {"type": "Point", "coordinates": [-111.04, 45.68]},
            "images": [{"url": "https://res.cloudinary.com/x/image/upload/v1/a.png", "filename": "a"}],
        })

        assert campground.id == str(oid)
        assert campground.author_id == str(author)
        assert campground.review_ids == [str(review)]
        assert campground.geometry.coordinates == [-111.04, 45.68]

    def test_from_document_without_author(self):
        campground = Campground.from_document({"_id": ObjectId(), "title": "T", "price": 1})

        assert campground.author_id is None
        assert campground.review_ids == []
        assert campground.images == []

    def test_image_thumbnail(self):
        image = Image(url="https://res.cloudinary.com/x/image/upload/v1/a.png", filename="a")

        assert image.thumbnail == "https://res.cloudinary.com/x/image/upload/w_200/v1/a.png"

    def test_review_from_document(self):
        author = ObjectId()
        review = Review.from_document({"_id": ObjectId(), "body": "Nice", "rating": 4, "author": author})

        assert review.author_id == str(author)
        assert review.rating == 4
