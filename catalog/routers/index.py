"""
Catalog home page router.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from catalog.dependencies import IndexControllerDep
from catalog.routers.responses import respond

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("", response_class=HTMLResponse, summary="Catalog home page")
async def catalog_home(request: Request, controller: IndexControllerDep):
    """Record counts for every collection."""
    return respond(request, await controller.home())
