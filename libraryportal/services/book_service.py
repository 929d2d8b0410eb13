from flask import current_app

from libraryportal.errors import (
    BookNotBorrowedError,
    BookNotFoundError,
    BookUnavailableError,
    BorrowerNotFoundError,
    DuplicateRegistrationError,
)
from libraryportal.models.book import Book, BookStatus
from libraryportal.models.borrowed_book_details import BorrowedBookDetails
from libraryportal.services._fields import text_field
from libraryportal.utils.decorators import transactional

ALREADY_BORROWED = "The book is already borrowed by another member."
NOT_BORROWED = "The book is not currently borrowed."


class BookService:
    def __init__(self, book_repo, borrower_repo):
        self.books = book_repo
        self.borrowers = borrower_repo
        self.session = book_repo.session

    def _get_book(self, book_id: int) -> Book:
        book = self.books.get(book_id)
        if book is None:
            current_app.logger.error(f"[book_service] Book not found: {book_id}")
            raise BookNotFoundError(f"Book not found with id: {book_id}")
        return book

    @transactional
    def register_book(self, data: dict) -> Book:
        """
        Registers a book, or adds a copy when (isbn, title, author) already
        exists. Client supplied id / copies / status are never used.
        """
        isbn = text_field(data, "isbn")
        title = text_field(data, "title")
        author = text_field(data, "author")
        current_app.logger.info(f"[book_service] Registering a new book: {title}")

        if not isbn:
            current_app.logger.error("[book_service] ISBN is required for book registration")
            raise DuplicateRegistrationError("ISBN number is required.")

        existing = self.books.find_by_natural_key(isbn, title, author)
        if existing is not None:
            existing.no_of_copies += 1
            current_app.logger.info(
                f"[book_service] Incrementing copies of existing book {existing.id}: {existing.no_of_copies}"
            )
            return self.books.save(existing)

        book = Book(isbn=isbn, title=title, author=author, no_of_copies=1, status=BookStatus.AVAILABLE)
        current_app.logger.info(f"[book_service] Saving new book: {title}")
        return self.books.add(book)

    def get_all_books(self):
        current_app.logger.info("[book_service] Fetching all books")
        return self.books.list_all()

    @transactional
    def borrow_book(self, borrower_id: int, book_id: int) -> BorrowedBookDetails:
        current_app.logger.info(f"[book_service] Borrowing book {book_id} for borrower {borrower_id}")

        book = self._get_book(book_id)
        borrower = self.borrowers.get(borrower_id)
        if borrower is None:
            current_app.logger.error(f"[book_service] Borrower not found: {borrower_id}")
            raise BorrowerNotFoundError(f"Borrower not found with id: {borrower_id}")

        if book.status != BookStatus.AVAILABLE:
            current_app.logger.error(f"[book_service] Book {book_id} is {book.status.value}: {ALREADY_BORROWED}")
            raise BookUnavailableError(ALREADY_BORROWED)

        if not self.books.transition(book.id, BookStatus.AVAILABLE, BookStatus.BORROWED, -1):
            current_app.logger.warning(f"[book_service] Book {book_id} was borrowed concurrently")
            raise BookUnavailableError(ALREADY_BORROWED)

        self.books.refresh(book)
        self.borrowers.save(borrower)
        current_app.logger.info(f"[book_service] Book {book_id} set to BORROWED, copies={book.no_of_copies}")
        return BorrowedBookDetails.of(borrower, book)

    @transactional
    def return_book(self, book_id: int) -> Book:
        current_app.logger.info(f"[book_service] Returning book {book_id}")

        book = self._get_book(book_id)
        if book.status != BookStatus.BORROWED:
            current_app.logger.error(f"[book_service] Book {book_id} is {book.status.value}: {NOT_BORROWED}")
            raise BookNotBorrowedError(NOT_BORROWED)

        if not self.books.transition(book.id, BookStatus.BORROWED, BookStatus.AVAILABLE, 1):
            current_app.logger.warning(f"[book_service] Book {book_id} was returned concurrently")
            raise BookNotBorrowedError(NOT_BORROWED)

        self.books.refresh(book)
        current_app.logger.info(f"[book_service] Book {book_id} set to AVAILABLE, copies={book.no_of_copies}")
        return book
