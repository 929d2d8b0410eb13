from flask import current_app

from libraryportal.errors import BorrowerNotFoundError, DuplicateRegistrationError
from libraryportal.models.borrower import Borrower
from libraryportal.services._fields import text_field
from libraryportal.utils.decorators import transactional


class BorrowerService:
    def __init__(self, borrower_repo):
        self.borrowers = borrower_repo
        self.session = borrower_repo.session

    @staticmethod
    def _validate_email(email):
        if not email:
            current_app.logger.error("[borrower_service] Email address is required for borrower registration")
            raise DuplicateRegistrationError("Email address is required.")

    @transactional
    def register_borrower(self, data: dict) -> Borrower:
        email = text_field(data, "email")
        current_app.logger.info(f"[borrower_service] Registering a new borrower: {email}")
        self._validate_email(email)

        if self.borrowers.get_by_email(email) is not None:
            current_app.logger.error(f"[borrower_service] A borrower with the same email already exists: {email}")
            raise DuplicateRegistrationError("A borrower with the same email already exists.")

        borrower = self.borrowers.add(Borrower(name=text_field(data, "name"), email=email))
        current_app.logger.info(f"[borrower_service] Borrower registered successfully: {borrower.id}")
        return borrower

    def get_all_borrowers(self):
        current_app.logger.info("[borrower_service] Fetching all borrowers")
        return self.borrowers.list_all()

    def get_borrower_by_id(self, borrower_id: int) -> Borrower:
        current_app.logger.info(f"[borrower_service] Fetching borrower by id: {borrower_id}")
        borrower = self.borrowers.get(borrower_id)
        if borrower is None:
            raise BorrowerNotFoundError(f"Borrower not found with id: {borrower_id}")
        return borrower

    @transactional
    def update_borrower(self, borrower_id: int, data: dict) -> Borrower:
        current_app.logger.info(f"[borrower_service] Updating borrower with id: {borrower_id}")
        borrower = self.get_borrower_by_id(borrower_id)

        email = text_field(data, "email")
        self._validate_email(email)
        other = self.borrowers.get_by_email(email)
        if other is not None and other.id != borrower.id:
            current_app.logger.error(f"[borrower_service] Email already used by borrower {other.id}: {email}")
            raise DuplicateRegistrationError("A borrower with the same email already exists.")

        borrower.name = text_field(data, "name")
        borrower.email = email
        return self.borrowers.save(borrower)

    @transactional
    def delete_borrower(self, borrower_id: int) -> None:
        current_app.logger.info(f"[borrower_service] Deleting borrower with id: {borrower_id}")
        if not self.borrowers.delete_by_id(borrower_id):
            current_app.logger.debug(f"[borrower_service] No borrower with id {borrower_id}, nothing deleted")
