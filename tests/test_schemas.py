import pytest

from pustaka.models import Book
from pustaka.schemas import (
    BookRequest,
    BookResponse,
    RequestValidationError,
    parse_book_request,
)

VALID = {
    "title": "Clean Code",
    "description": "A handbook",
    "price": 100,
    "rating": 5,
    "discount": 10,
}


def test_valid_payload():
    request = parse_book_request(VALID)
    assert request == BookRequest(
        title="Clean Code", price=100, description="A handbook", rating=5, discount=10
    )


def test_numeric_strings_are_accepted():
    request = parse_book_request({**VALID, "price": "250"})
    assert request.price == 250


def test_zero_is_present():
    assert parse_book_request({**VALID, "discount": 0}).discount == 0


def test_missing_title_reported():
    payload = {key: value for key, value in VALID.items() if key != "title"}
    with pytest.raises(RequestValidationError) as excinfo:
        parse_book_request(payload)
    assert excinfo.value.errors == ["Error on field Title, condition: required"]


def test_negative_number_fails_number_condition():
    with pytest.raises(RequestValidationError) as excinfo:
        parse_book_request({**VALID, "price": -5})
    assert excinfo.value.errors == ["Error on field Price, condition: number"]


def test_decimal_fails_number_condition():
    with pytest.raises(RequestValidationError) as excinfo:
        parse_book_request({**VALID, "rating": 4.5})
    assert len(excinfo.value.errors) == 1
    assert "Rating" in excinfo.value.errors[0]


def test_errors_follow_field_order():
    with pytest.raises(RequestValidationError) as excinfo:
        parse_book_request({})
    fields = [message.split(",")[0].split()[-1] for message in excinfo.value.errors]
    assert fields == ["Title", "Price", "Description", "Rating", "Discount"]


def test_overflow_becomes_zero():
    assert parse_book_request({**VALID, "price": 2**70}).price == 0


@pytest.mark.parametrize("payload", [None, [], "text"])
def test_non_object_rejected(payload):
    with pytest.raises(RequestValidationError) as excinfo:
        parse_book_request(payload)
    assert len(excinfo.value.errors) == 1


def test_wrong_type_for_title_rejected():
    with pytest.raises(RequestValidationError):
        parse_book_request({**VALID, "title": 12})


def test_response_from_book_round_trip():
    book = Book(id=3, title="T", description="D", price=7, rating=2, discount=1)
    response = BookResponse.from_book(book)
    assert response.to_dict() == {
        "id": 3,
        "title": "T",
        "description": "D",
        "rating": 2,
        "price": 7,
        "discount": 1,
    }


def test_response_from_unsaved_book_has_zero_id():
    book = Book(title="", description="", price=0, rating=0, discount=0)
    assert BookResponse.from_book(book).id == 0