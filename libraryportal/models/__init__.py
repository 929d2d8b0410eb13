from libraryportal.models.book import Book, BookStatus
from libraryportal.models.borrower import Borrower
from libraryportal.models.borrowed_book_details import BorrowedBookDetails

__all__ = ["Book", "BookStatus", "Borrower", "BorrowedBookDetails"]
