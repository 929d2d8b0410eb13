from flask import Blueprint, jsonify

from libraryportal.controllers import error_response, get_service, json_body
from libraryportal.errors import BOOK_ERROR_STATUS, LibraryError

book_bp = Blueprint("books", __name__, url_prefix="/api/books")


@book_bp.post("/registerbook")
def register_book():
    try:
        book = get_service("book_service").register_book(json_body())
        return jsonify(book.to_dict()), 201
    except LibraryError as e:
        return error_response(e, BOOK_ERROR_STATUS)


@book_bp.get("/getBooks")
def get_books():
    books = get_service("book_service").get_all_books()
    return jsonify([b.to_dict() for b in books])


@book_bp.put("/<id:book_id>/<id:borrower_id>/borrow")
def borrow_book(book_id: int, borrower_id: int):
    try:
        details = get_service("book_service").borrow_book(borrower_id, book_id)
        return jsonify(details.to_dict())
    except LibraryError as e:
        return error_response(e, BOOK_ERROR_STATUS)


@book_bp.put("/<id:book_id>/return")
def return_book(book_id: int):
    try:
        book = get_service("book_service").return_book(book_id)
        return jsonify(book.to_dict())
    except LibraryError as e:
        return error_response(e, BOOK_ERROR_STATUS)
