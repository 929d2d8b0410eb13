import enum

from libraryportal.extensions import db


class BookStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    BORROWED = "BORROWED"


class Book(db.Model):
    __tablename__ = "books"
    __table_args__ = (
        db.Index("ix_books_natural_key", "isbn", "title", "author"),
    )

    id = db.Column(db.Integer, primary_key=True)
    isbn = db.Column(db.String(32), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=True)
    author = db.Column(db.String(200), nullable=True)

    # one record per title; status is a single flag for the whole record
    no_of_copies = db.Column(db.Integer, nullable=False, default=1)
    status = db.Column(
        db.Enum(BookStatus, native_enum=False, length=16),
        nullable=False,
        default=BookStatus.AVAILABLE,
    )

    def to_dict(self):
        return {
            "id": self.id,
            "isbn": self.isbn,
            "title": self.title,
            "author": self.author,
            "noOfCopies": self.no_of_copies,
            "status": self.status.value if self.status else None,
        }
