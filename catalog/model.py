from mongoengine import Document, StringField, DateField, ReferenceField
from bson import DBRef, ObjectId
from typing import Dict, Any, Iterable, List, Optional
from .log import get_logger

from .seed_data import all_authors, all_books

logger = get_logger(__name__)

BOOK_URL_PREFIX = "/catalog/book"


def is_object_id(value) -> bool:
    """True if ``value`` can be used as a document identifier."""
    return isinstance(value, ObjectId) or (isinstance(value, str) and ObjectId.is_valid(value))


class Author(Document):
    meta = {"collection": "authors", "indexes": ["family_name"], "strict": False}
    first_name    = StringField(required=True, max_length=100)
    family_name   = StringField(required=True, max_length=100)
    date_of_birth = DateField()
    date_of_death = DateField()

    @property
    def name(self) -> str:
        if not self.first_name or not self.family_name:
            return ""
        return f"{self.family_name}, {self.first_name}"

    @property
    def lifespan(self) -> str:
        born = self.date_of_birth.strftime("%b %d, %Y") if self.date_of_birth else ""
        died = self.date_of_death.strftime("%b %d, %Y") if self.date_of_death else ""
        if not born and not died:
            return ""
        return f"{born} - {died}"

    @classmethod
    def by_family_name(cls) -> List["Author"]:
        return list(cls.objects.order_by("+family_name"))

    @classmethod
    def find(cls, author_id) -> Optional["Author"]:
        if not is_object_id(author_id):
            return None
        return cls.objects(id=author_id).first()

    @classmethod
    def seed_many(cls, items: Iterable[Dict[str, Any]]) -> Dict[str, "Author"]:
        """Upsert authors by name; returns them keyed by their seed ``key``."""
        seeded = {}
        for raw in items:
            dates = {f"set__{k}": raw[k] for k in ("date_of_birth", "date_of_death") if raw.get(k)}
            seeded[raw["key"]] = cls.objects(
                first_name=raw["first_name"], family_name=raw["family_name"]
            ).modify(
                upsert=True, new=True,
                set__first_name=raw["first_name"],
                **dates,
            )
        return seeded


class Book(Document):
    meta = {"collection": "books", "indexes": ["title"], "strict": False}
    title   = StringField(required=True, min_length=1)
    author  = ReferenceField(Author, required=True)
    summary = StringField(required=True, min_length=1)

    @property
    def url(self) -> str:
        return f"{BOOK_URL_PREFIX}/{self.id}"

    @property
    def author_id(self) -> str:
        """Referenced author's id, read without dereferencing."""
        ref = self._data.get("author")
        if ref is None:
            return ""
        if isinstance(ref, Document):
            return str(ref.pk)
        if isinstance(ref, DBRef):
            return str(ref.id)
        return str(ref)

    @classmethod
    def list_by_title(cls) -> List["Book"]:
        """All books projected to title/author, authors populated, sorted by title."""
        return cls.objects.only("title", "author").order_by("+title").select_related()

    @classmethod
    def find_populated(cls, book_id) -> Optional["Book"]:
        if not is_object_id(book_id):
            return None
        book = cls.objects(id=book_id).first()
        if book is None:
            return None
        return book.select_related()

    @classmethod
    def update_fields(cls, book_id, *, title: str, author: Author, summary: str) -> int:
        if not is_object_id(book_id):
            return 0
        return cls.objects(id=book_id).update_one(
            set__title=title, set__author=author, set__summary=summary,
        )

    @classmethod
    def delete_by_id(cls, book_id) -> int:
        if not is_object_id(book_id):
            return 0
        return cls.objects(id=book_id).delete()

    @classmethod
    def seed_many(cls, items: Iterable[Dict[str, Any]], authors: Dict[str, Author]) -> int:
        count = 0
        for raw in items:
            cls.objects(title=raw["title"]).modify(
                upsert=True, new=True,
                set__author=authors[raw["author"]],
                set__summary=raw["summary"],
            )
            count += 1
        return count


def seed_catalog_if_empty() -> int:
    """Load the sample catalog when no book exists yet; returns books written."""
    if Book.objects.first() is not None:
        return 0
    authors = Author.seed_many(all_authors)
    count = Book.seed_many(all_books, authors)
    logger.info("catalog seeded", authors=len(authors), books=count)
    return count
