"""
BDD step definitions for the user activity feature (pytest-bdd).
Challenge: Express requirements in Gherkin; map to HTTP calls.
"""

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import given, parsers, scenarios, then, when

from library.main import app

# Load all scenarios from the feature file
scenarios("../features/user_activity.feature")


@pytest.fixture
def http(override_stores):
    """Sync client; stores are the in-memory fakes from conftest."""
    return TestClient(app)


@given("an empty library")
def empty_library(book_repo):
    assert book_repo.books == {}


@when(parsers.parse('"{username}" creates a book titled "{title}"'))
def create_book(http, username, title):
    r = http.post(
        "/books",
        json={
            "title": title,
            "author_name": "Frank Herbert",
            "price": 9.99,
            "ebook_available": True,
            "publish_date": "1965-08-01",
            "username": username,
        },
    )
    assert r.status_code == 201


@when(parsers.parse('"{username}" lists books'))
def list_books(http, username):
    assert http.get("/books", params={"username": username}).status_code == 200


@when(parsers.parse('"{username}" reads the store inventory'))
def read_inventory(http, username):
    assert http.get("/store", params={"username": username}).status_code == 200


@then(parsers.parse('the activity of "{username}" is "{expected}"'))
def activity_is(http, username, expected):
    r = http.get(f"/activity/{username}")
    assert r.status_code == 200
    assert r.json() == [a.strip() for a in expected.split(",")]


@then(parsers.parse('"{username}" has no activity'))
def no_activity(http, username):
    r = http.get(f"/activity/{username}")
    assert r.status_code == 200
    assert r.json() == []
