from sqlalchemy import select, update

from libraryportal.models.book import Book, BookStatus


class BookRepo:
    """Book store. Writes are flushed, never committed: the caller owns the transaction."""

    def __init__(self, session):
        self.session = session

    def list_all(self):
        return self.session.scalars(select(Book).order_by(Book.id)).all()

    def get(self, book_id: int):
        return self.session.get(Book, book_id)

    def find_by_natural_key(self, isbn: str, title, author):
        stmt = select(Book).filter_by(isbn=isbn, title=title, author=author).order_by(Book.id)
        return self.session.scalars(stmt).first()

    def add(self, book: Book):
        self.session.add(book)
        self.session.flush()
        return book

    def save(self, book: Book):
        self.session.add(book)
        self.session.flush()
        return book

    def transition(self, book_id: int, expected: BookStatus, new: BookStatus, copies_delta: int) -> bool:
        """
        Conditional status change: only applies while the row still has the
        expected status. Returns False if another transaction got there first.
        """
        stmt = (
            update(Book)
            .where(Book.id == book_id, Book.status == expected)
            .values(status=new, no_of_copies=Book.no_of_copies + copies_delta)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        return result.rowcount == 1

    def refresh(self, book: Book):
        self.session.refresh(book)
        return book
