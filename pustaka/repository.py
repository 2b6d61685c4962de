"""Persistence of books."""

from datetime import datetime, timezone

from sqlalchemy import create_engine, select
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base, Book


def connect(dsn):
    """Open the database at *dsn*, create missing tables and return a session factory."""
    url = make_url(dsn)
    options = {}
    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
    engine = create_engine(url, **options)
    Base.metadata.create_all(engine)
    return sessionmaker(engine, expire_on_commit=False)


def _empty_book():
    return Book(title="", description="", price=0, rating=0, discount=0)


class BookRepository:
    """CRUD access to the books table."""

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def find_all(self):
        with self._session_factory() as session:
            return list(session.scalars(select(Book).order_by(Book.id)))

    def find_by_id(self, book_id):
        """Return the stored book, or an empty unsaved book when there is none."""
        with self._session_factory() as session:
            book = session.get(Book, book_id)
        return book if book is not None else _empty_book()

    def create(self, book):
        with self._session_factory() as session:
            session.add(book)
            session.commit()
        return book

    def update(self, book):
        """Save *book*; an unsaved book is inserted."""
        book.updated_at = datetime.now(timezone.utc)
        with self._session_factory() as session:
            merged = session.merge(book)
            session.commit()
        return merged

    def delete(self, book):
        if book.id is None:
            raise ValueError("cannot delete a book without an id")
        with self._session_factory() as session:
            stored = session.get(Book, book.id)
            if stored is not None:
                session.delete(stored)
                session.commit()
        return book