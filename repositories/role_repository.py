from typing import List, Optional
from sqlalchemy import select
from models import Role
from .base import CrudRepository


class RoleRepository(CrudRepository):
    """Roles are keyed by (film_id, person_id) rather than a single id."""
    model = Role

    @property
    def _pk(self):
        raise TypeError("Roles are keyed by (film_id, person_id); use find_by_film_id or find_by_person_id")

    async def find_by_id(self, film_id: int, person_id: int) -> Optional[Role]:
        return await self.session.get(Role, (film_id, person_id))

    async def exists_by_id(self, film_id: int, person_id: int) -> bool:
        result = await self.session.execute(
            select(Role.film_id)
            .where(Role.film_id == film_id, Role.person_id == person_id)
            .limit(1)
        )
        return result.first() is not None

    async def find_by_film_id(self, film_id: int) -> List[Role]:
        result = await self.session.execute(
            select(Role).where(Role.film_id == film_id).order_by(Role.person_id)
        )
        return list(result.scalars().all())

    async def find_by_person_id(self, person_id: int) -> List[Role]:
        result = await self.session.execute(
            select(Role).where(Role.person_id == person_id).order_by(Role.film_id)
        )
        return list(result.scalars().all())

    async def delete_by_id(self, film_id: int, person_id: int) -> None:
        role = await self.find_by_id(film_id, person_id)
        if role is not None:
            await self.delete(role)

    async def delete_by_person_id(self, person_id: int) -> None:
        for role in await self.find_by_person_id(person_id):
            await self.session.delete(role)
        await self.session.flush()

    async def delete_by_film_id(self, film_id: int) -> None:
        for role in await self.find_by_film_id(film_id):
            await self.session.delete(role)
        await self.session.flush()
