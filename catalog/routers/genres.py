"""
Genre pages under /catalog/genre.

Creating or renaming a genre to a name that already exists redirects to the
existing genre. Deleting is refused while any book is filed under it.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from catalog.config import get_settings
from catalog.dependencies import GenreControllerDep
from catalog.routers.responses import respond
from catalog.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/catalog",
    tags=["Genres"],
    default_response_class=HTMLResponse,
    responses={
        404: {"description": "Genre not found"},
    },
)


@router.get("/genres", summary="List genres")
async def list_genres(request: Request, controller: GenreControllerDep):
    return respond(request, await controller.list_all())


@router.get("/genre/create", summary="Genre create form")
async def create_genre_form(request: Request, controller: GenreControllerDep):
    return respond(request, await controller.create_get())


@router.post("/genre/create", summary="Create a genre")
@limiter.limit(settings.rate_limit_write)
async def create_genre(request: Request, controller: GenreControllerDep):
    form = await request.form()
    return respond(request, await controller.create_post(form))


@router.get("/genre/{genre_id}", summary="Genre detail")
async def get_genre(request: Request, genre_id: str, controller: GenreControllerDep):
    return respond(request, await controller.detail(genre_id))


@router.get("/genre/{genre_id}/update", summary="Genre update form")
async def update_genre_form(request: Request, genre_id: str, controller: GenreControllerDep):
    return respond(request, await controller.update_get(genre_id))


@router.post("/genre/{genre_id}/update", summary="Update a genre")
@limiter.limit(settings.rate_limit_write)
async def update_genre(request: Request, genre_id: str, controller: GenreControllerDep):
    form = await request.form()
    return respond(request, await controller.update_post(genre_id, form))


@router.get("/genre/{genre_id}/delete", summary="Genre delete confirmation")
async def delete_genre_form(request: Request, genre_id: str, controller: GenreControllerDep):
    return respond(request, await controller.delete_get(genre_id))


@router.post("/genre/{genre_id}/delete", summary="Delete a genre")
@limiter.limit(settings.rate_limit_write)
async def delete_genre(request: Request, genre_id: str, controller: GenreControllerDep):
    form = await request.form()
    return respond(request, await controller.delete_post(genre_id, form))
