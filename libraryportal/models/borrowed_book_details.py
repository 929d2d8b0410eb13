from __future__ import annotations

from dataclasses import dataclass

from libraryportal.models.book import Book
from libraryportal.models.borrower import Borrower


@dataclass(frozen=True)
class BorrowedBookDetails:
    """Borrower + book snapshot returned by a successful borrow. Never persisted."""

    borrower_id: int
    borrower_name: str | None
    borrower_email: str
    book_id: int
    isbn: str
    title: str | None
    author: str | None
    status: str

    @classmethod
    def of(cls, borrower: Borrower, book: Book) -> BorrowedBookDetails:
        return cls(
            borrower_id=borrower.id,
            borrower_name=borrower.name,
            borrower_email=borrower.email,
            book_id=book.id,
            isbn=book.isbn,
            title=book.title,
            author=book.author,
            status=book.status.value,
        )

    def to_dict(self):
        return {
            "borrowerId": self.borrower_id,
            "borrowerName": self.borrower_name,
            "borrowerEmail": self.borrower_email,
            "bookId": self.book_id,
            "isbn": self.isbn,
            "title": self.title,
            "author": self.author,
            "status": self.status,
        }
