from flask import Blueprint, jsonify

from libraryportal.controllers import error_response, get_service, json_body
from libraryportal.errors import BORROWER_ERROR_STATUS, ErrorKind, LibraryError

borrower_bp = Blueprint("borrowers", __name__, url_prefix="/api/borrowers")


@borrower_bp.post("/registerBorrower")
def register_borrower():
    data = json_body()
    try:
        borrower = get_service("borrower_service").register_borrower(data)
        return jsonify(borrower.to_dict()), 201
    except LibraryError as e:
        return error_response(e, BORROWER_ERROR_STATUS, f" : {data.get('email')}")


@borrower_bp.get("/getBorrowers")
def get_borrowers():
    borrowers = get_service("borrower_service").get_all_borrowers()
    return jsonify([b.to_dict() for b in borrowers])


@borrower_bp.get("/getBorrowerById/<id:borrower_id>")
def get_borrower(borrower_id: int):
    try:
        borrower = get_service("borrower_service").get_borrower_by_id(borrower_id)
        return jsonify(borrower.to_dict())
    except LibraryError as e:
        return error_response(e, BORROWER_ERROR_STATUS)


@borrower_bp.put("/updateBorrowerById/<id:borrower_id>")
def update_borrower(borrower_id: int):
    try:
        borrower = get_service("borrower_service").update_borrower(borrower_id, json_body())
        return jsonify(borrower.to_dict())
    except LibraryError as e:
        # only the not-found message names the id
        suffix = f" : {borrower_id}" if e.kind is ErrorKind.NOT_FOUND else ""
        return error_response(e, BORROWER_ERROR_STATUS, suffix)


@borrower_bp.delete("/deleteBorrowerById/<id:borrower_id>")
def delete_borrower(borrower_id: int):
    get_service("borrower_service").delete_borrower(borrower_id)
    return "", 204
