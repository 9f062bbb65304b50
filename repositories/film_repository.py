from typing import List
from sqlalchemy import select
from models import Film, film_directors
from .base import CrudRepository


class FilmRepository(CrudRepository):
    model = Film

    async def find_directed_by(self, person_id: int) -> List[Film]:
        result = await self.session.execute(
            select(Film)
            .join(film_directors, film_directors.c.film_id == Film.id)
            .where(film_directors.c.person_id == person_id)
            .order_by(Film.id)
        )
        return list(result.scalars().all())
