from sqlalchemy import delete, select

from libraryportal.models.borrower import Borrower


class BorrowerRepo:
    def __init__(self, session):
        self.session = session

    def list_all(self):
        return self.session.scalars(select(Borrower).order_by(Borrower.id)).all()

    def get(self, borrower_id: int):
        return self.session.get(Borrower, borrower_id)

    def get_by_email(self, email: str):
        return self.session.scalars(select(Borrower).filter_by(email=email)).first()

    def add(self, borrower: Borrower):
        self.session.add(borrower)
        self.session.flush()
        return borrower

    def save(self, borrower: Borrower):
        self.session.add(borrower)
        self.session.flush()
        return borrower

    def delete_by_id(self, borrower_id: int) -> int:
        # bulk delete: a missing id simply matches no rows
        result = self.session.execute(
            delete(Borrower)
            .where(Borrower.id == borrower_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount
