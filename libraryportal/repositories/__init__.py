from libraryportal.repositories.book_repo import BookRepo
from libraryportal.repositories.borrower_repo import BorrowerRepo

__all__ = ["BookRepo", "BorrowerRepo"]
