"""
Persistence Service

The controllers talk to storage only through the Repository interface
defined here: create, find-by-id, find-with-filter, distinct values,
update-by-id and delete-by-id over one collection.

SqlAlchemyRepository is the SQLAlchemy implementation. The model class is
passed in at construction time, so one implementation serves all four
collections:

    genres = SqlAlchemyRepository(Genre, SessionLocal)
    genre_id = genres.insert({"name": "Fantasy"})
    genres.find(sort=[("name", "asc")])

Filters are equality matches keyed by attribute name. A filter on a
reference matches by the referenced record's id, and a filter on a to-many
reference (Book.genre) means "contains":

    books.find({"genre": genre_id})

Any SQLAlchemyError raised by the database propagates unchanged.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy import func, inspect, select
from sqlalchemy.orm import Session, load_only, selectinload, sessionmaker

from catalog.models import Author, Book, BookInstance, Genre

logger = logging.getLogger(__name__)

Filter = Mapping[str, Any]
Sort = Sequence[tuple[str, str]]


class Repository(ABC):
    """Abstract persistence service for one collection."""

    @abstractmethod
    def insert(self, values: Mapping[str, Any]) -> str:
        """Store a new record and return its assigned id."""

    @abstractmethod
    def find_by_id(self, entity_id: str, populate: Iterable[str] = ()) -> Any | None:
        """Return the record with this id, or None."""

    @abstractmethod
    def find(
        self,
        filter: Filter | None = None,
        *,
        projection: Sequence[str] | None = None,
        sort: Sort | None = None,
        populate: Iterable[str] = (),
    ) -> list[Any]:
        """Return every record matching the filter."""

    @abstractmethod
    def find_one(self, filter: Filter) -> Any | None:
        """Return the first record matching the filter, or None."""

    @abstractmethod
    def distinct_values(self, field: str) -> list[str]:
        """Return the sorted distinct values stored in a field."""

    @abstractmethod
    def count(self, filter: Filter | None = None) -> int:
        """Return the number of records matching the filter."""

    @abstractmethod
    def update_by_id(self, entity_id: str, values: Mapping[str, Any]) -> Any | None:
        """Apply values to the record with this id; None if it does not exist."""

    @abstractmethod
    def delete_by_id(self, entity_id: str) -> None:
        """Remove the record with this id. Absent ids are ignored."""


class SqlAlchemyRepository(Repository):
    """
    Repository backed by a SQLAlchemy model.

    Every call opens its own session from the factory and closes it before
    returning, so calls can run concurrently from worker threads. Returned
    records are detached: only columns and the references named in
    `populate` are loaded.
    """

    def __init__(self, model: type, session_factory: sessionmaker) -> None:
        self.model = model
        self._session_factory = session_factory
        self._mapper = inspect(model)

    # -------------------------------------------------------------------------
    # Query building
    # -------------------------------------------------------------------------
    def _attribute(self, field: str) -> Any:
        if field not in self._mapper.attrs:
            raise ValueError(f"{self.model.__name__} has no field '{field}'")
        return getattr(self.model, field)

    def _condition(self, field: str, value: Any) -> Any:
        attribute = self._attribute(field)
        relationship = self._mapper.relationships.get(field)
        if relationship is None:
            return attribute == value

        target = relationship.mapper.class_
        if relationship.uselist:
            return attribute.any(target.id == value)
        return attribute.has(target.id == value)

    def _select(
        self,
        filter: Filter | None = None,
        projection: Sequence[str] | None = None,
        sort: Sort | None = None,
        populate: Iterable[str] = (),
    ) -> Any:
        stmt = select(self.model)

        for field, value in (filter or {}).items():
            stmt = stmt.where(self._condition(field, value))

        if projection:
            stmt = stmt.options(
                load_only(*(self._attribute(field) for field in projection))
            )

        for name in populate:
            stmt = stmt.options(selectinload(self._attribute(name)))

        for field, direction in sort or ():
            column = self._attribute(field)
            stmt = stmt.order_by(column.desc() if direction == "desc" else column.asc())

        return stmt

    def _assign(self, session: Session, record: Any, values: Mapping[str, Any]) -> None:
        """Copy values onto a record, resolving reference ids to records."""
        for field, value in values.items():
            self._attribute(field)
            relationship = self._mapper.relationships.get(field)
            if relationship is None:
                setattr(record, field, value)
                continue

            target = relationship.mapper.class_
            if relationship.uselist:
                ids = list(value or [])
                targets = (
                    session.scalars(select(target).where(target.id.in_(ids))).all()
                    if ids
                    else []
                )
                setattr(record, field, list(targets))
            else:
                # An unknown id leaves the reference empty and the NOT NULL
                # constraint rejects the write
                setattr(record, field, session.get(target, value) if value else None)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    def insert(self, values: Mapping[str, Any]) -> str:
        with self._session_factory() as session:
            record = self.model()
            self._assign(session, record, values)
            session.add(record)
            session.commit()
            logger.debug(f"Inserted {self.model.__name__} {record.id}")
            return record.id

    def find_by_id(self, entity_id: str, populate: Iterable[str] = ()) -> Any | None:
        stmt = self._select(populate=populate).where(self.model.id == entity_id)
        with self._session_factory() as session:
            return session.execute(stmt).scalar_one_or_none()

    def find(
        self,
        filter: Filter | None = None,
        *,
        projection: Sequence[str] | None = None,
        sort: Sort | None = None,
        populate: Iterable[str] = (),
    ) -> list[Any]:
        stmt = self._select(filter, projection, sort, populate)
        with self._session_factory() as session:
            return list(session.scalars(stmt).all())

    def find_one(self, filter: Filter) -> Any | None:
        stmt = self._select(filter).limit(1)
        with self._session_factory() as session:
            return session.scalars(stmt).first()

    def distinct_values(self, field: str) -> list[str]:
        column = self._attribute(field)
        stmt = select(column).distinct().where(column.is_not(None)).order_by(column)
        with self._session_factory() as session:
            return list(session.scalars(stmt).all())

    def count(self, filter: Filter | None = None) -> int:
        stmt = select(func.count()).select_from(self.model)
        for field, value in (filter or {}).items():
            stmt = stmt.where(self._condition(field, value))
        with self._session_factory() as session:
            return session.scalar(stmt) or 0

    def update_by_id(self, entity_id: str, values: Mapping[str, Any]) -> Any | None:
        with self._session_factory() as session:
            record = session.get(self.model, entity_id)
            if record is None:
                return None
            self._assign(session, record, values)
            session.commit()
            logger.debug(f"Updated {self.model.__name__} {entity_id}")
            return record

    def delete_by_id(self, entity_id: str) -> None:
        with self._session_factory() as session:
            record = session.get(self.model, entity_id)
            if record is None:
                return
            session.delete(record)
            session.commit()
            logger.debug(f"Deleted {self.model.__name__} {entity_id}")


@dataclass
class Catalog:
    """The four collections the controllers work with."""

    authors: Repository
    genres: Repository
    books: Repository
    book_instances: Repository

    @classmethod
    def from_session_factory(cls, session_factory: sessionmaker) -> "Catalog":
        """Build SQLAlchemy repositories sharing one session factory."""
        return cls(
            authors=SqlAlchemyRepository(Author, session_factory),
            genres=SqlAlchemyRepository(Genre, session_factory),
            books=SqlAlchemyRepository(Book, session_factory),
            book_instances=SqlAlchemyRepository(BookInstance, session_factory),
        )
