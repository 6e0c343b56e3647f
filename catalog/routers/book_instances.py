"""
Book copy pages under /catalog/bookinstance.

Copies have no dependents, so the delete POST always removes the record
named by the `bookinstanceid` form field and returns to the list.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from catalog.config import get_settings
from catalog.dependencies import BookInstanceControllerDep
from catalog.routers.responses import respond
from catalog.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/catalog",
    tags=["BookInstances"],
    default_response_class=HTMLResponse,
    responses={
        404: {"description": "BookInstance not found"},
    },
)


@router.get("/bookinstances", summary="List book instances (copies)")
async def list_book_instances(request: Request, controller: BookInstanceControllerDep):
    return respond(request, await controller.list_all())


@router.get("/bookinstance/create", summary="Book copy create form")
async def create_bookinstance_form(request: Request, controller: BookInstanceControllerDep):
    return respond(request, await controller.create_get())


@router.post("/bookinstance/create", summary="Create a book copy")
@limiter.limit(settings.rate_limit_write)
async def create_bookinstance(request: Request, controller: BookInstanceControllerDep):
    form = await request.form()
    return respond(request, await controller.create_post(form))


@router.get("/bookinstance/{bookinstance_id}", summary="Book copy detail")
async def get_bookinstance(request: Request, bookinstance_id: str, controller: BookInstanceControllerDep):
    return respond(request, await controller.detail(bookinstance_id))


@router.get("/bookinstance/{bookinstance_id}/update", summary="Book copy update form")
async def update_bookinstance_form(request: Request, bookinstance_id: str, controller: BookInstanceControllerDep):
    return respond(request, await controller.update_get(bookinstance_id))


@router.post("/bookinstance/{bookinstance_id}/update", summary="Update a book copy")
@limiter.limit(settings.rate_limit_write)
async def update_bookinstance(request: Request, bookinstance_id: str, controller: BookInstanceControllerDep):
    form = await request.form()
    return respond(request, await controller.update_post(bookinstance_id, form))


@router.get("/bookinstance/{bookinstance_id}/delete", summary="Book copy delete confirmation")
async def delete_bookinstance_form(request: Request, bookinstance_id: str, controller: BookInstanceControllerDep):
    return respond(request, await controller.delete_get(bookinstance_id))


@router.post("/bookinstance/{bookinstance_id}/delete", summary="Delete a book copy")
@limiter.limit(settings.rate_limit_write)
async def delete_bookinstance(request: Request, bookinstance_id: str, controller: BookInstanceControllerDep):
    form = await request.form()
    return respond(request, await controller.delete_post(bookinstance_id, form))
