from flask import render_template, request, redirect, url_for, abort
from . import bp
from .forms import BookForm
from ..model import Author, Book
from ..log import get_logger

logger = get_logger(__name__)

BOOK_NOT_FOUND = "Book not found"


@bp.route("/")
def index():
    return render_template("index.html", title="Home", book_list=Book.list_by_title())


@bp.route("/books")
def book_list():
    return render_template("book_list.html", title="Book List", book_list=Book.list_by_title())


@bp.route("/book/<book_id>")
def book_detail(book_id):
    book = Book.find_populated(book_id)
    if book is None:
        logger.info("book not found", book_id=book_id, view="detail")
        abort(404, description=BOOK_NOT_FOUND)

    return render_template("book_detail.html", title=book.title, book=book)


@bp.route("/book/create", methods=["GET"])
def book_create_get():
    return render_template("book_form.html", title="Create Book", authors=Author.by_family_name())


@bp.route("/book/create", methods=["POST"])
def book_create_post():
    form = BookForm(request.form)
    book = form.make_book()

    if not form.is_valid:
        logger.info("book form rejected", view="create", errors=form.messages)
        return render_template(
            "book_form.html",
            title="Create Book",
            authors=Author.by_family_name(),
            book=book,
            errors=form.errors,
        )

    book.save()
    logger.info("book created", book_id=str(book.id), title=book.title)
    return redirect(book.url)


@bp.route("/book/<book_id>/delete", methods=["GET"])
def book_delete_get(book_id):
    book = Book.find_populated(book_id)
    if book is None:
        logger.info("book not found", book_id=book_id, view="delete")
        return redirect(url_for("books.book_list"))

    return render_template("book_delete.html", title="Delete Book", book=book)


@bp.route("/book/<book_id>/delete", methods=["POST"])
def book_delete_post(book_id):
    # The path id is only checked; the body id is the one deleted.
    if Book.find_populated(book_id) is None:
        logger.info("book not found", book_id=book_id, view="delete")

    target = request.form.get("id")
    deleted = Book.delete_by_id(target)
    logger.info("book deleted", book_id=target, deleted=deleted)
    return redirect(url_for("books.book_list"))


@bp.route("/book/<book_id>/update", methods=["GET"])
def book_update_get(book_id):
    book = Book.find_populated(book_id)
    authors = Author.by_family_name()

    if book is None:
        logger.info("book not found", book_id=book_id, view="update")
        abort(404, description=BOOK_NOT_FOUND)

    return render_template("book_form.html", title="Update Book", authors=authors, book=book)


@bp.route("/book/<book_id>/update", methods=["POST"])
def book_update_post(book_id):
    form = BookForm(request.form)
    # Pin the path id so the stored book keeps its identity.
    book = form.make_book(book_id=book_id)

    if not form.is_valid:
        logger.info("book form rejected", view="update", book_id=book_id, errors=form.messages)
        return render_template(
            "book_form.html",
            title="Update Book",
            authors=Author.by_family_name(),
            book=book,
            errors=form.errors,
        )

    updated = Book.update_fields(
        book_id, title=book.title, author=form.author, summary=book.summary,
    )
    logger.info("book updated", book_id=book_id, updated=updated)
    return redirect(book.url)
