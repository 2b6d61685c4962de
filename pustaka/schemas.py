"""Request and response bodies of the book API."""

import re
from dataclasses import asdict, dataclass

_INT64_MAX = 2**63 - 1
_NUMBER = re.compile(r"[0-9]+")

# (payload key, reported field name, is numeric) in declaration order
_FIELDS = (
    ("title", "Title", False),
    ("price", "Price", True),
    ("description", "Description", False),
    ("rating", "Rating", True),
    ("discount", "Discount", True),
)


class RequestValidationError(Exception):
    """Raised when a request body fails validation; ``errors`` lists the messages."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


@dataclass(frozen=True)
class BookRequest:
    """A validated book request body."""

    title: str
    price: int
    description: str
    rating: int
    discount: int


@dataclass(frozen=True)
class BookResponse:
    """The book representation returned by the API."""

    id: int
    title: str
    description: str
    rating: int
    price: int
    discount: int

    @classmethod
    def from_book(cls, book):
        """Build a response from a stored book; an unsaved book reports id 0."""
        return cls(
            id=book.id or 0,
            title=book.title or "",
            description=book.description or "",
            rating=book.rating or 0,
            price=book.price or 0,
            discount=book.discount or 0,
        )

    def to_dict(self):
        return asdict(self)


def _literal(field_name, value, numeric):
    if value is None:
        return ""
    if numeric:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise RequestValidationError([f"Invalid value for field {field_name}"])
        return value if isinstance(value, str) else str(value)
    if not isinstance(value, str):
        raise RequestValidationError([f"Invalid value for field {field_name}"])
    return value


def _to_int64(literal):
    value = int(literal)
    return value if value <= _INT64_MAX else 0


def parse_book_request(payload):
    """Validate a decoded JSON body and return a BookRequest."""
    if not isinstance(payload, dict):
        raise RequestValidationError(["Request body must be a JSON object"])

    literals = {}
    errors = []
    for key, field_name, numeric in _FIELDS:
        literal = _literal(field_name, payload.get(key), numeric)
        if literal == "":
            errors.append(f"Error on field {field_name}, condition: required")
        elif numeric and not _NUMBER.fullmatch(literal):
            errors.append(f"Error on field {field_name}, condition: number")
        literals[key] = literal
    if errors:
        raise RequestValidationError(errors)

    return BookRequest(
        title=literals["title"],
        price=_to_int64(literals["price"]),
        description=literals["description"],
        rating=_to_int64(literals["rating"]),
        discount=_to_int64(literals["discount"]),
    )