"""
OpenAPI document served by flasgger under /swagger-ui.
"""

_ID = {"type": "integer", "format": "int64", "minimum": 1}


def _path_id(name: str, description: str):
    return {"name": name, "in": "path", "required": True, "description": description, "schema": _ID}


def _json(ref: str, many: bool = False):
    schema = {"$ref": f"#/components/schemas/{ref}"}
    if many:
        schema = {"type": "array", "items": schema}
    return {"application/json": {"schema": schema}}


def _ok(description: str, ref: str, many: bool = False):
    return {"description": description, "content": _json(ref, many)}


def _error(description: str):
    return {"description": description, "content": _json("ErrorResponse")}


API_DOCS = {
    "info": {
        "title": "Library Portal API",
        "description": "Register books and borrowers, borrow and return books.",
        "version": "0.1.0",
    },
    "tags": [
        {"name": "Books"},
        {"name": "Borrowers"},
    ],
    "components": {
        "schemas": {
            "Book": {
                "type": "object",
                "required": ["isbn"],
                "properties": {
                    "id": {"type": "integer", "format": "int64", "readOnly": True},
                    "isbn": {"type": "string", "example": "978-0132350884"},
                    "title": {"type": "string", "example": "Clean Code"},
                    "author": {"type": "string", "example": "Robert C. Martin"},
                    "noOfCopies": {"type": "integer", "readOnly": True},
                    "status": {"type": "string", "enum": ["AVAILABLE", "BORROWED"], "readOnly": True},
                },
            },
            "Borrower": {
                "type": "object",
                "required": ["email"],
                "properties": {
                    "id": {"type": "integer", "format": "int64", "readOnly": True},
                    "name": {"type": "string", "example": "Jane Reader"},
                    "email": {"type": "string", "format": "email", "example": "jane@example.com"},
                },
            },
            "BorrowedBookDetails": {
                "type": "object",
                "properties": {
                    "borrowerId": {"type": "integer", "format": "int64"},
                    "borrowerName": {"type": "string"},
                    "borrowerEmail": {"type": "string"},
                    "bookId": {"type": "integer", "format": "int64"},
                    "isbn": {"type": "string"},
                    "title": {"type": "string"},
                    "author": {"type": "string"},
                    "status": {"type": "string", "enum": ["AVAILABLE", "BORROWED"]},
                },
            },
            "ErrorResponse": {
                "type": "object",
                "properties": {
                    "errorCode": {"type": "integer"},
                    "errorMessage": {"type": "string"},
                },
            },
        },
    },
    "paths": {
        "/api/books/registerbook": {
            "post": {
                "tags": ["Books"],
                "summary": "Register a book, or add a copy to an existing title",
                "requestBody": {"required": True, "content": _json("Book")},
                "responses": {
                    "201": _ok("Registered or merged book", "Book"),
                    "400": _error("ISBN number is missing"),
                },
            },
        },
        "/api/books/getBooks": {
            "get": {
                "tags": ["Books"],
                "summary": "List all books",
                "responses": {"200": _ok("All books", "Book", many=True)},
            },
        },
        "/api/books/{bookId}/{borrowerId}/borrow": {
            "put": {
                "tags": ["Books"],
                "summary": "Borrow a book",
                "parameters": [
                    _path_id("bookId", "Book to borrow"),
                    _path_id("borrowerId", "Borrowing member"),
                ],
                "responses": {
                    "200": _ok("Borrow details", "BorrowedBookDetails"),
                    "400": _error("Unknown book or borrower, or book already borrowed"),
                },
            },
        },
        "/api/books/{bookId}/return": {
            "put": {
                "tags": ["Books"],
                "summary": "Return a borrowed book",
                "parameters": [_path_id("bookId", "Book to return")],
                "responses": {
                    "200": _ok("Returned book", "Book"),
                    "400": _error("Unknown book, or book not borrowed"),
                },
            },
        },
        "/api/borrowers/registerBorrower": {
            "post": {
                "tags": ["Borrowers"],
                "summary": "Register a borrower",
                "requestBody": {"required": True, "content": _json("Borrower")},
                "responses": {
                    "201": _ok("Registered borrower", "Borrower"),
                    "400": _error("Missing or duplicate email"),
                },
            },
        },
        "/api/borrowers/getBorrowers": {
            "get": {
                "tags": ["Borrowers"],
                "summary": "List all borrowers",
                "responses": {"200": _ok("All borrowers", "Borrower", many=True)},
            },
        },
        "/api/borrowers/getBorrowerById/{id}": {
            "get": {
                "tags": ["Borrowers"],
                "summary": "Get a borrower",
                "parameters": [_path_id("id", "Borrower id")],
                "responses": {
                    "200": _ok("Borrower", "Borrower"),
                    "404": _error("Borrower not found"),
                },
            },
        },
        "/api/borrowers/updateBorrowerById/{id}": {
            "put": {
                "tags": ["Borrowers"],
                "summary": "Update a borrower's name and email",
                "parameters": [_path_id("id", "Borrower id")],
                "requestBody": {"required": True, "content": _json("Borrower")},
                "responses": {
                    "200": _ok("Updated borrower", "Borrower"),
                    "400": _error("Missing or duplicate email"),
                    "404": _error("Borrower not found"),
                },
            },
        },
        "/api/borrowers/deleteBorrowerById/{id}": {
            "delete": {
                "tags": ["Borrowers"],
                "summary": "Delete a borrower",
                "parameters": [_path_id("id", "Borrower id")],
                "responses": {"204": {"description": "Deleted, or nothing to delete"}},
            },
        },
    },
}
