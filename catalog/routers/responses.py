"""
Turn controller outcomes into HTTP responses.
"""

from fastapi import Request, status
from fastapi.responses import RedirectResponse, Response

from catalog.controllers import Outcome, Redirect
from catalog.templating import templates


def respond(request: Request, outcome: Outcome) -> Response:
    """
    Render a view or redirect.

    Redirects use 303 See Other so a browser follows a form POST with a GET.
    """
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.url, status_code=status.HTTP_303_SEE_OTHER)
    return templates.TemplateResponse(request, f"{outcome.view}.html", outcome.context)
