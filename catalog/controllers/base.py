"""
Controller outcomes and shared base class.

A controller operation never touches HTTP directly. It returns one of two
outcomes and the router turns it into a response:

- Render(view, context): render a template with a flat data bag
- Redirect(url): send the browser to another page

A missing record is signalled by raising RecordNotFound (404).
"""

from dataclasses import dataclass, field
from typing import Any

from catalog.repository import Catalog


@dataclass
class Render:
    """Render the named view with the given data bag."""

    view: str
    context: dict[str, Any] = field(default_factory=dict)


@dataclass
class Redirect:
    """Redirect to a catalog URL."""

    url: str


Outcome = Render | Redirect


class RecordNotFound(Exception):
    """The requested identity has no matching record."""

    status_code = 404

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RecordController:
    """Base class giving every controller access to the catalog collections."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
