# =============================================================================
# core/models/campground.py - Campground and Review Schemas
# =============================================================================
# - CampgroundForm / ReviewForm: validated form input
# - Campground / Review: documents read back from MongoDB
#
# References (author, reviews) are stored as ObjectIds and exposed as hex
# strings.
# =============================================================================

from typing import Any, Literal

from pydantic import BaseModel, Field


class Image(BaseModel):
    """An uploaded image (hosted on Cloudinary)."""
    url: str
    filename: str

    @property
    def thumbnail(self) -> str:
        """Cloudinary URL resized to 200px wide."""
        return self.url.replace("/upload", "/upload/w_200")


class Geometry(BaseModel):
    """GeoJSON point, coordinates are [longitude, latitude]."""
    type: Literal["Point"] = "Point"
    coordinates: list[float] = Field(..., min_length=2, max_length=2)


class CampgroundForm(BaseModel):
    """
    Fields a user submits when creating or editing a campground.

    Example:
        {
            "title": "Misty Hollow",
            "location": "Bozeman, Montana",
            "price": 18,
            "description": "Quiet sites by the river."
        }
    """

    title: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, max_length=200)
    price: float = Field(..., ge=0)
    description: str = Field(..., min_length=1)


class ReviewForm(BaseModel):
    """Review input; rating is 1 to 5 stars."""

    body: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)


class Review(BaseModel):
    id: str
    body: str
    rating: int
    author_id: str | None = None

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Review":
        """Create from a raw MongoDB document."""
        author = doc.get("author")
        return cls(
            id=str(doc["_id"]),
            body=doc.get("body", ""),
            rating=int(doc.get("rating", 0)),
            author_id=str(author) if author else None,
        )


class Campground(BaseModel):
    """A campground as shown on the index and show pages."""

    id: str
    title: str
    price: float
    description: str = ""
    location: str = ""
    geometry: Geometry | None = None
    images: list[Image] = Field(default_factory=list)
    author_id: str | None = None
    review_ids: list[str] = Field(default_factory=list)

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Campground":
        """Create from a raw MongoDB document."""
        author = doc.get("author")
        return cls(
            id=str(doc["_id"]),
            title=doc.get("title", ""),
            price=doc.get("price", 0),
            description=doc.get("description", ""),
            location=doc.get("location", ""),
            geometry=doc.get("geometry"),
            images=doc.get("images") or [],
            author_id=str(author) if author else None,
            review_ids=[str(r) for r in doc.get("reviews") or []],
        )
