"""
Pytest configuration and shared fixtures.
"""

import mongomock
import pytest
from flask import template_rendered
from mongoengine import disconnect

from catalog import create_app
from catalog.model import Author, Book


@pytest.fixture
def app():
    """Create an app bound to an in-memory MongoDB."""
    disconnect()
    app = create_app({
        "TESTING": True,
        "MONGODB_HOST": "mongodb://localhost/catalog_test",
        "MONGODB_CONNECT_OPTIONS": {"mongo_client_class": mongomock.MongoClient},
        "SEED_ON_STARTUP": False,
    })
    yield app
    Book.drop_collection()
    Author.drop_collection()
    disconnect()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def captured_templates(app):
    """Record (template, context) for every template rendered by the app."""
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)


@pytest.fixture
def authors(app):
    """Three saved authors keyed by family name."""
    return {
        "Orwell": Author(first_name="George", family_name="Orwell").save(),
        "Austen": Author(first_name="Jane", family_name="Austen").save(),
        "Bronte": Author(first_name="Charlotte", family_name="Bronte").save(),
    }


@pytest.fixture
def books(authors):
    """Saved books keyed by title, inserted out of title order."""
    return {
        "Persuasion": Book(title="Persuasion", author=authors["Austen"],
                           summary="Anne Elliot and Captain Wentworth.").save(),
        "Animal Farm": Book(title="Animal Farm", author=authors["Orwell"],
                            summary="All animals are equal.").save(),
        "Jane Eyre": Book(title="Jane Eyre", author=authors["Bronte"],
                          summary="An orphan becomes a governess.").save(),
    }


@pytest.fixture
def rendered(captured_templates):
    """Look up the context of the last render of a template by name."""
    def lookup(name):
        for template, context in reversed(captured_templates):
            if template.name == name:
                return context
        raise AssertionError(f"{name} was not rendered")
    return lookup
