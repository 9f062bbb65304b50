"""repositories.base
Generic data access for one mapped model.

Repositories only flush. Committing (or rolling back) is the job of the
service method that owns the transaction.
"""

from typing import Iterable, List, Optional
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from utils.pagination import Page, Pageable
from utils.sort import order_by_clauses


class CrudRepository:
    model = None

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def _pk(self):
        return self.model.id

    # ───────────────────────────── look-ups ──────────────────────────
    async def find_all(self, pageable: Pageable, spec=None) -> Page:
        """Return one page of entities matching *spec*, ordered by the pageable's sort."""
        stmt = select(self.model)
        if spec is not None:
            stmt = stmt.where(spec.to_clause(self.model))
        stmt = stmt.order_by(*order_by_clauses(pageable.sort, self.model), self._pk)
        stmt = stmt.offset(pageable.offset).limit(pageable.size)

        result = await self.session.execute(stmt)
        content = list(result.scalars().all())
        total = await self.count(spec)
        return Page(content=content, page=pageable.page, size=pageable.size, total_elements=total)

    async def find_by_id(self, entity_id, *options) -> Optional[object]:
        stmt = select(self.model).where(self._pk == entity_id)
        if options:
            stmt = stmt.options(*options)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all_by_id(self, ids: Iterable) -> List:
        """Entities for the ids that exist; unknown ids are skipped."""
        ids = list(ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(self.model).where(self._pk.in_(ids)).order_by(self._pk)
        )
        return list(result.scalars().all())

    async def exists_by_id(self, entity_id) -> bool:
        result = await self.session.execute(
            select(self._pk).where(self._pk == entity_id).limit(1)
        )
        return result.first() is not None

    async def count(self, spec=None) -> int:
        stmt = select(func.count()).select_from(self.model)
        if spec is not None:
            stmt = stmt.where(spec.to_clause(self.model))
        result = await self.session.execute(stmt)
        return result.scalar_one()

    # ───────────────────────────── writers ──────────────────────────
    async def save(self, entity):
        """Add *entity* to the session and flush so generated keys are populated."""
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def delete(self, entity) -> None:
        await self.session.delete(entity)
        await self.session.flush()
