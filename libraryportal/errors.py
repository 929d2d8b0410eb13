"""
Domain errors and the error-kind -> HTTP status tables used by the controllers.
"""
import enum


class ErrorKind(enum.Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_INPUT = "invalid_input"


class LibraryError(Exception):
    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BookNotFoundError(LibraryError):
    kind = ErrorKind.NOT_FOUND


class BorrowerNotFoundError(LibraryError):
    kind = ErrorKind.NOT_FOUND


class BookUnavailableError(LibraryError):
    kind = ErrorKind.CONFLICT


class BookNotBorrowedError(LibraryError):
    kind = ErrorKind.CONFLICT


class DuplicateRegistrationError(LibraryError):
    kind = ErrorKind.INVALID_INPUT


# Borrow/return report every domain failure as a bad request
BOOK_ERROR_STATUS = {
    ErrorKind.NOT_FOUND: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.INVALID_INPUT: 400,
}

BORROWER_ERROR_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 400,
    ErrorKind.INVALID_INPUT: 400,
}
