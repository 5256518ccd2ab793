from collections import namedtuple
from typing import Optional

from markupsafe import escape

from ..model import Author, Book

FieldError = namedtuple("FieldError", ["field", "msg"])

# Checked in this order; errors are reported in the same order.
BOOK_FIELDS = (
    ("title", "Title must not be empty."),
    ("author", "Author must not be empty."),
    ("summary", "Summary must not be empty."),
)
UNKNOWN_AUTHOR = "Author must be an existing author."


def sanitize(raw) -> str:
    """Trim a submitted value and HTML-escape it."""
    return str(escape((raw or "").strip()))


class BookForm:
    """
    Trimmed, escaped book fields from a submitted form plus the errors found.

    Every field is sanitized and checked even when an earlier one fails, so
    the candidate book always carries what the user typed.
    """

    def __init__(self, formdata):
        self.data = {}
        self.errors = []
        self.author: Optional[Author] = None

        for name, message in BOOK_FIELDS:
            value = sanitize(formdata.get(name))
            self.data[name] = value
            if len(value) < 1:
                self.errors.append(FieldError(name, message))

        # Only a form with every required field filled is checked against the store.
        if not self.errors:
            self.author = Author.find(self.data["author"])
            if self.author is None:
                self.errors.append(FieldError("author", UNKNOWN_AUTHOR))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self):
        return [e.msg for e in self.errors]

    def make_book(self, book_id=None) -> Book:
        """Candidate book from the sanitized values; ``book_id`` pins its identity."""
        book = Book(
            title=self.data["title"],
            author=self.author if self.author is not None else self.data["author"],
            summary=self.data["summary"],
        )
        if book_id is not None:
            book.id = book_id
        return book
