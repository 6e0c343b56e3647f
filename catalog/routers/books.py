"""
Book pages under /catalog/book.

The create and update forms submit one `genre` field per checked genre.
Deleting a book is refused while copies of it exist.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from catalog.config import get_settings
from catalog.dependencies import BookControllerDep
from catalog.routers.responses import respond
from catalog.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/catalog",
    tags=["Books"],
    default_response_class=HTMLResponse,
    responses={
        404: {"description": "Book not found"},
    },
)


@router.get("/books", summary="List books")
async def list_books(request: Request, controller: BookControllerDep):
    return respond(request, await controller.list_all())


@router.get("/book/create", summary="Book create form")
async def create_book_form(request: Request, controller: BookControllerDep):
    return respond(request, await controller.create_get())


@router.post("/book/create", summary="Create a book")
@limiter.limit(settings.rate_limit_write)
async def create_book(request: Request, controller: BookControllerDep):
    form = await request.form()
    return respond(request, await controller.create_post(form))


@router.get("/book/{book_id}", summary="Book detail")
async def get_book(request: Request, book_id: str, controller: BookControllerDep):
    return respond(request, await controller.detail(book_id))


@router.get("/book/{book_id}/update", summary="Book update form")
async def update_book_form(request: Request, book_id: str, controller: BookControllerDep):
    return respond(request, await controller.update_get(book_id))


@router.post("/book/{book_id}/update", summary="Update a book")
@limiter.limit(settings.rate_limit_write)
async def update_book(request: Request, book_id: str, controller: BookControllerDep):
    form = await request.form()
    return respond(request, await controller.update_post(book_id, form))


@router.get("/book/{book_id}/delete", summary="Book delete confirmation")
async def delete_book_form(request: Request, book_id: str, controller: BookControllerDep):
    return respond(request, await controller.delete_get(book_id))


@router.post("/book/{book_id}/delete", summary="Delete a book")
@limiter.limit(settings.rate_limit_write)
async def delete_book(request: Request, book_id: str, controller: BookControllerDep):
    form = await request.form()
    return respond(request, await controller.delete_post(book_id, form))
