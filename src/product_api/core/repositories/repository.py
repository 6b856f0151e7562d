"""Generic data-access layer over SQLModel tables.

A repository translates between a pydantic domain entity and its SQLModel
table row. Mutating calls only stage work on the session; nothing reaches the
database until the owning unit of work commits.
"""

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import ColumnElement
from sqlmodel import Session, SQLModel, select

if TYPE_CHECKING:
    from src.product_api.entities.core import Entity

EntityT = TypeVar("EntityT", bound="Entity")
TableT = TypeVar("TableT", bound=SQLModel)


class EntityNotFoundError(LookupError):
    """Raised when a staged update or delete targets a row that does not exist."""

    def __init__(self, table: type[SQLModel], entity_id: str) -> None:
        super().__init__(f"{table.__name__} with id {entity_id} not found")
        self.entity_id = entity_id


class Repository(Generic[EntityT, TableT]):
    """CRUD access to one entity type, bound to a single session."""

    entity_type: type[EntityT]
    table_type: type[TableT]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)

    def _to_row(self, entity: EntityT) -> TableT:
        return self.table_type.model_validate(entity, from_attributes=True)

    def _get_row(self, entity_id: str) -> TableT:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            raise EntityNotFoundError(self.table_type, entity_id)
        return row

    def get_by_id(self, entity_id: str) -> EntityT | None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def get_all(self) -> list[EntityT]:
        rows = self._session.exec(select(self.table_type)).all()
        return [self._to_entity(row) for row in rows]

    def find(self, *predicates: ColumnElement[bool]) -> list[EntityT]:
        """Return entities matching every predicate.

        Predicates are column expressions evaluated by the database, e.g.
        ``repo.find(ProductTable.is_active == True)``.
        """
        statement = select(self.table_type).where(*predicates)
        rows = self._session.exec(statement).all()
        return [self._to_entity(row) for row in rows]

    def add(self, entity: EntityT) -> EntityT:
        self._session.add(self._to_row(entity))
        return entity

    def update(self, entity: EntityT) -> EntityT:
        row = self._get_row(entity.id)
        # Identity and creation time are fixed once the row exists
        changes: dict[str, Any] = entity.model_dump(exclude={"id", "created_at"})
        row.sqlmodel_update(changes)
        self._session.add(row)
        return entity

    def delete(self, entity: EntityT) -> None:
        self._session.delete(self._get_row(entity.id))
