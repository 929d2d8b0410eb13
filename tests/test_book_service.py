"""
Tests for BookService: registration merge, borrow and return transitions.
"""

import pytest
from sqlalchemy import text

from libraryportal.errors import (
    BookNotBorrowedError,
    BookNotFoundError,
    BookUnavailableError,
    BorrowerNotFoundError,
    DuplicateRegistrationError,
    ErrorKind,
)
from libraryportal.models import BookStatus


@pytest.fixture
def borrower(borrower_service, sample_borrower):
    return borrower_service.register_borrower(sample_borrower)


def test_register_new_book(book_service, sample_book):
    book = book_service.register_book(sample_book)

    assert book.id is not None
    assert book.isbn == "111"
    assert book.title == "A"
    assert book.author == "X"
    assert book.no_of_copies == 1
    assert book.status == BookStatus.AVAILABLE


def test_register_same_natural_key_adds_copy(book_service, sample_book):
    first = book_service.register_book(sample_book)
    first_id = first.id

    second = book_service.register_book({**sample_book, "id": 999})

    assert second.id == first_id
    assert second.no_of_copies == 2
    assert len(book_service.get_all_books()) == 1


def test_register_ignores_client_copies_and_status(book_service, sample_book):
    book = book_service.register_book({**sample_book, "noOfCopies": 40, "status": "BORROWED"})

    assert book.no_of_copies == 1
    assert book.status == BookStatus.AVAILABLE


def test_register_different_author_is_new_record(book_service, sample_book):
    book_service.register_book(sample_book)
    other = book_service.register_book({**sample_book, "author": "Y"})

    assert other.no_of_copies == 1
    assert len(book_service.get_all_books()) == 2


@pytest.mark.parametrize("payload", [
    {"isbn": "", "title": "A", "author": "X"},
    {"title": "A", "author": "X"},
])
def test_register_without_isbn_fails(book_service, payload):
    with pytest.raises(DuplicateRegistrationError) as exc_info:
        book_service.register_book(payload)

    assert exc_info.value.kind is ErrorKind.INVALID_INPUT
    assert exc_info.value.message == "ISBN number is required."
    assert book_service.get_all_books() == []


def test_get_all_books_in_storage_order(book_service):
    for isbn in ("3", "1", "2"):
        book_service.register_book({"isbn": isbn, "title": "T", "author": "A"})

    assert [b.isbn for b in book_service.get_all_books()] == ["3", "1", "2"]


def test_borrow_available_book(book_service, borrower, sample_book):
    book_service.register_book(sample_book)
    book = book_service.register_book(sample_book)

    details = book_service.borrow_book(borrower.id, book.id)

    assert details.status == "BORROWED"
    assert details.book_id == book.id
    assert details.borrower_id == borrower.id
    assert details.borrower_email == "jane@example.com"
    assert details.isbn == "111"

    book = book_service.books.get(book.id)
    assert book.status == BookStatus.BORROWED
    assert book.no_of_copies == 1


def test_borrow_borrowed_book_fails_without_mutation(book_service, borrower, sample_book):
    book = book_service.register_book(sample_book)
    book_service.borrow_book(borrower.id, book.id)

    with pytest.raises(BookUnavailableError) as exc_info:
        book_service.borrow_book(borrower.id, book.id)

    assert exc_info.value.kind is ErrorKind.CONFLICT
    assert exc_info.value.message == "The book is already borrowed by another member."
    book = book_service.books.get(book.id)
    assert book.status == BookStatus.BORROWED
    assert book.no_of_copies == 0


def test_borrow_unknown_book(book_service, borrower):
    with pytest.raises(BookNotFoundError) as exc_info:
        book_service.borrow_book(borrower.id, 42)

    assert exc_info.value.kind is ErrorKind.NOT_FOUND


def test_borrow_unknown_borrower_mutates_nothing(book_service, sample_book):
    book = book_service.register_book(sample_book)

    with pytest.raises(BorrowerNotFoundError) as exc_info:
        book_service.borrow_book(42, book.id)

    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    book = book_service.books.get(book.id)
    assert book.status == BookStatus.AVAILABLE
    assert book.no_of_copies == 1


def test_borrow_rejects_stale_status(book_service, borrower, sample_book):
    book = book_service.register_book(sample_book)
    loaded = book_service.books.get(book.id)
    assert loaded.status == BookStatus.AVAILABLE

    # another transaction flips the row after it was read into the session
    book_service.session.execute(
        text("UPDATE books SET status = 'BORROWED' WHERE id = :id"), {"id": loaded.id}
    )

    with pytest.raises(BookUnavailableError):
        book_service.borrow_book(borrower.id, loaded.id)


def test_borrow_rolls_back_when_a_later_step_fails(book_service, borrower, sample_book, monkeypatch):
    book_id = book_service.register_book(sample_book).id

    def fail(_borrower):
        raise RuntimeError("write failed")

    # the status transition has already been flushed when the borrower save fails
    monkeypatch.setattr(book_service.borrowers, "save", fail)

    with pytest.raises(RuntimeError):
        book_service.borrow_book(borrower.id, book_id)

    book = book_service.books.get(book_id)
    assert book.status == BookStatus.AVAILABLE
    assert book.no_of_copies == 1


def test_return_borrowed_book(book_service, borrower, sample_book):
    book_service.register_book(sample_book)
    book = book_service.register_book(sample_book)
    book_service.borrow_book(borrower.id, book.id)

    returned = book_service.return_book(book.id)

    assert returned.status == BookStatus.AVAILABLE
    assert returned.no_of_copies == 2


def test_return_available_book_fails_without_mutation(book_service, sample_book):
    book = book_service.register_book(sample_book)

    with pytest.raises(BookNotBorrowedError) as exc_info:
        book_service.return_book(book.id)

    assert exc_info.value.kind is ErrorKind.CONFLICT
    assert exc_info.value.message == "The book is not currently borrowed."
    book = book_service.books.get(book.id)
    assert book.status == BookStatus.AVAILABLE
    assert book.no_of_copies == 1


def test_return_unknown_book(book_service):
    with pytest.raises(BookNotFoundError) as exc_info:
        book_service.return_book(7)

    assert exc_info.value.message == "Book not found with id: 7"
