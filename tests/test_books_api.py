"""
Library Catalog — /books Endpoint Tests
=========================================

What:  End-to-end tests for the book routes against a real SQLite file.
How:   HTTPX AsyncClient over ASGITransport; each test gets a freshly seeded
       database (see conftest.py).

Seeded bookids: 1 "1984", 2 Harry Potter, 3 The Hobbit, 4 To Kill a Mockingbird.
"""

import pytest
from sqlalchemy import func, select

from library_catalog.models import Book

pytestmark = pytest.mark.asyncio


async def _book_count(app) -> int:
    async with app.state.database.engine.connect() as conn:
        return (await conn.execute(select(func.count()).select_from(Book))).scalar_one()


class TestReadBooks:

    async def test_get_seeded_book(self, test_client):
        response = await test_client.get("/books/1")

        assert response.status_code == 200
        assert response.json() == {
            "bookid": 1,
            "title": "1984",
            "author": "George Orwell",
            "genre": "Dystopian",
            "pages": 328,
            "publishedDate": "1949-06-08",
        }

    async def test_list_defaults_to_first_page(self, test_client):
        response = await test_client.get("/books")

        assert response.status_code == 200
        books = response.json()
        assert [b["bookid"] for b in books] == [1, 2, 3, 4]
        assert books[0]["authorid"] == 2
        assert books[0]["genreid"] == 2
        assert books[0]["author"] == "George Orwell"

    async def test_pages_do_not_overlap(self, test_client):
        first = (await test_client.get("/books", params={"page": 1, "limit": 1})).json()
        second = (await test_client.get("/books", params={"page": 2, "limit": 1})).json()

        assert len(first) == 1 and len(second) == 1
        assert first[0]["bookid"] != second[0]["bookid"]
        assert second[0]["title"] == "Harry Potter and the Sorcerer's Stone"

    async def test_page_past_the_end_is_empty(self, test_client):
        response = await test_client.get("/books", params={"page": 5, "limit": 10})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.parametrize(
        "params",
        [
            {"page": 0},
            {"page": -2},
            {"limit": 0},
            {"limit": 51},
            {"page": "abc"},
        ],
    )
    async def test_bad_paging_rejected(self, test_client, params):
        response = await test_client.get("/books", params=params)

        assert response.status_code == 400
        assert "error" in response.json()

    async def test_unknown_book(self, test_client):
        response = await test_client.get("/books/9999")

        assert response.status_code == 404
        assert response.json() == {"error": "Book not found"}

    async def test_non_integer_id(self, test_client):
        response = await test_client.get("/books/abc")

        assert response.status_code == 400
        assert "error" in response.json()

    async def test_book_with_unresolved_author_is_hidden(self, test_app, test_client):
        async with test_app.state.database.engine.begin() as conn:
            result = await conn.execute(
                Book.__table__.insert().values(
                    title="Orphan",
                    authorid=None,
                    genreid=1,
                    pages=10,
                    publishedDate="2000-01-01",
                )
            )
            orphan_id = result.inserted_primary_key[0]

        detail = await test_client.get(f"/books/{orphan_id}")
        listing = await test_client.get("/books", params={"limit": 50})

        assert detail.status_code == 404
        assert orphan_id not in [b["bookid"] for b in listing.json()]


class TestCreateBook:

    async def test_create_then_fetch(self, test_client, book_payload):
        response = await test_client.post("/books", json=book_payload)

        assert response.status_code == 201
        bookid = response.json()["bookid"]
        assert bookid == 5

        fetched = (await test_client.get(f"/books/{bookid}")).json()
        assert fetched == {
            "bookid": bookid,
            "title": "Animal Farm",
            "author": "George Orwell",
            "genre": "Dystopian",
            "pages": 112,
            "publishedDate": "1945-08-17",
        }

    @pytest.mark.parametrize("field", ["title", "authorid", "genreid", "pages", "publishedDate"])
    async def test_missing_field_rejected(self, test_app, test_client, book_payload, field):
        del book_payload[field]

        response = await test_client.post("/books", json=book_payload)

        assert response.status_code == 400
        assert response.json() == {"error": "All fields are required"}
        assert await _book_count(test_app) == 4

    async def test_falsy_field_rejected(self, test_app, test_client, book_payload):
        book_payload["pages"] = 0

        response = await test_client.post("/books", json=book_payload)

        assert response.status_code == 400
        assert await _book_count(test_app) == 4

    async def test_unknown_author_is_storage_error(self, test_app, test_client, book_payload):
        book_payload["authorid"] = 999

        response = await test_client.post("/books", json=book_payload)

        assert response.status_code == 500
        assert "FOREIGN KEY" in response.json()["error"]
        assert await _book_count(test_app) == 4

    async def test_malformed_body_rejected(self, test_client):
        response = await test_client.post(
            "/books",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400


class TestUpdateBook:

    async def test_update_replaces_all_fields(self, test_client, book_payload):
        response = await test_client.put("/books/3", json=book_payload)

        assert response.status_code == 200
        assert response.json() == {"message": "Book updated successfully"}

        fetched = (await test_client.get("/books/3")).json()
        assert fetched["title"] == "Animal Farm"
        assert fetched["author"] == "George Orwell"
        assert fetched["publishedDate"] == "1945-08-17"

    async def test_update_unknown_book(self, test_client, book_payload):
        response = await test_client.put("/books/9999", json=book_payload)

        assert response.status_code == 404
        assert response.json() == {"error": "Book not found"}

    async def test_unknown_genre_is_storage_error(self, test_client, book_payload):
        book_payload["genreid"] = 999

        response = await test_client.put("/books/1", json=book_payload)

        assert response.status_code == 500
        assert "FOREIGN KEY" in response.json()["error"]
        fetched = (await test_client.get("/books/1")).json()
        assert fetched["title"] == "1984"
        assert fetched["genre"] == "Dystopian"

    async def test_update_missing_field_leaves_row(self, test_client, book_payload):
        del book_payload["title"]

        response = await test_client.put("/books/1", json=book_payload)

        assert response.status_code == 400
        assert (await test_client.get("/books/1")).json()["title"] == "1984"


class TestDeleteBook:

    async def test_delete_then_get(self, test_app, test_client):
        response = await test_client.delete("/books/2")

        assert response.status_code == 200
        assert response.json() == {"message": "Book deleted successfully"}
        assert (await test_client.get("/books/2")).status_code == 404
        assert await _book_count(test_app) == 3

    async def test_delete_unknown_book(self, test_client):
        response = await test_client.delete("/books/9999")

        assert response.status_code == 404
        assert response.json() == {"error": "Book not found"}


class TestIntegerRange:
    """Numbers SQLite cannot store never reach the driver."""

    HUGE_ID = "99999999999999999999"

    async def test_get_huge_id(self, test_client):
        response = await test_client.get(f"/books/{self.HUGE_ID}")

        assert response.status_code == 404
        assert response.json() == {"error": "Book not found"}

    async def test_put_huge_id(self, test_client, book_payload):
        response = await test_client.put(f"/books/{self.HUGE_ID}", json=book_payload)

        assert response.status_code == 404
        assert response.json() == {"error": "Book not found"}

    async def test_delete_id_just_past_int64(self, test_app, test_client):
        response = await test_client.delete("/books/9223372036854775808")

        assert response.status_code == 404
        assert await _book_count(test_app) == 4

    async def test_huge_page(self, test_client):
        response = await test_client.get("/books", params={"page": 10**19})

        assert response.status_code == 400
        assert response.json() == {"error": "page is out of range"}

    async def test_huge_foreign_key_in_body(self, test_app, test_client, book_payload):
        book_payload["authorid"] = 10**20

        response = await test_client.post("/books", json=book_payload)

        assert response.status_code == 400
        assert await _book_count(test_app) == 4
