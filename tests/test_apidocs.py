"""
Tests for the Swagger UI and the OpenAPI document.
"""

from libraryportal.apidocs import API_DOCS


def test_swagger_ui_is_public(client):
    response = client.get("/swagger-ui/index.html")

    assert response.status_code == 200
    assert b"swagger-ui" in response.data


def test_openapi_document_is_public(client):
    response = client.get("/swagger-ui/api-docs.json")

    assert response.status_code == 200
    paths = response.get_json()["paths"]
    assert set(paths) == {
        "/api/books/registerbook",
        "/api/books/getBooks",
        "/api/books/{bookId}/{borrowerId}/borrow",
        "/api/books/{bookId}/return",
        "/api/borrowers/registerBorrower",
        "/api/borrowers/getBorrowers",
        "/api/borrowers/getBorrowerById/{id}",
        "/api/borrowers/updateBorrowerById/{id}",
        "/api/borrowers/deleteBorrowerById/{id}",
    }


def test_server_assigned_fields_are_read_only():
    schemas = API_DOCS["components"]["schemas"]

    book = schemas["Book"]["properties"]
    assert book["id"]["readOnly"] is True
    assert book["noOfCopies"]["readOnly"] is True
    assert book["status"]["readOnly"] is True
    assert schemas["Borrower"]["properties"]["id"]["readOnly"] is True
