"""Business operations on books."""

from .models import Book


class BookService:
    """Turns validated requests into repository operations."""

    def __init__(self, repository):
        self._repository = repository

    def find_all(self):
        return self._repository.find_all()

    def find_by_id(self, book_id):
        return self._repository.find_by_id(book_id)

    def create(self, request):
        book = Book(
            title=request.title,
            description=request.description,
            rating=request.rating,
            price=request.price,
            discount=request.discount,
        )
        return self._repository.create(book)

    def update(self, book_id, request):
        book = self._repository.find_by_id(book_id)
        book.title = request.title
        book.description = request.description
        book.rating = request.rating
        book.price = request.price
        book.discount = request.discount
        return self._repository.update(book)

    def delete(self, book_id):
        book = self._repository.find_by_id(book_id)
        return self._repository.delete(book)