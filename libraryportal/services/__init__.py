from libraryportal.services.book_service import BookService
from libraryportal.services.borrower_service import BorrowerService

__all__ = ["BookService", "BorrowerService"]
