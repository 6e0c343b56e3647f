"""
Author pages under /catalog/author.

Deleting an author is refused while any book names them; the POST then
re-renders the confirmation page listing those books.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from catalog.config import get_settings
from catalog.dependencies import AuthorControllerDep
from catalog.routers.responses import respond
from catalog.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/catalog",
    tags=["Authors"],
    default_response_class=HTMLResponse,
    responses={
        404: {"description": "Author not found"},
    },
)


@router.get("/authors", summary="List authors")
async def list_authors(request: Request, controller: AuthorControllerDep):
    return respond(request, await controller.list_all())


@router.get("/author/create", summary="Author create form")
async def create_author_form(request: Request, controller: AuthorControllerDep):
    return respond(request, await controller.create_get())


@router.post("/author/create", summary="Create an author")
@limiter.limit(settings.rate_limit_write)
async def create_author(request: Request, controller: AuthorControllerDep):
    form = await request.form()
    return respond(request, await controller.create_post(form))


@router.get("/author/{author_id}", summary="Author detail")
async def get_author(request: Request, author_id: str, controller: AuthorControllerDep):
    return respond(request, await controller.detail(author_id))


@router.get("/author/{author_id}/update", summary="Author update form")
async def update_author_form(request: Request, author_id: str, controller: AuthorControllerDep):
    return respond(request, await controller.update_get(author_id))


@router.post("/author/{author_id}/update", summary="Update an author")
@limiter.limit(settings.rate_limit_write)
async def update_author(request: Request, author_id: str, controller: AuthorControllerDep):
    form = await request.form()
    return respond(request, await controller.update_post(author_id, form))


@router.get("/author/{author_id}/delete", summary="Author delete confirmation")
async def delete_author_form(request: Request, author_id: str, controller: AuthorControllerDep):
    return respond(request, await controller.delete_get(author_id))


@router.post("/author/{author_id}/delete", summary="Delete an author")
@limiter.limit(settings.rate_limit_write)
async def delete_author(request: Request, author_id: str, controller: AuthorControllerDep):
    form = await request.form()
    return respond(request, await controller.delete_post(author_id, form))
