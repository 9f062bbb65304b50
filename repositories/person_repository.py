from typing import List
from sqlalchemy import select
from models import Person, film_directors
from .base import CrudRepository


class PersonRepository(CrudRepository):
    model = Person

    async def find_directors_of(self, film_id: int) -> List[Person]:
        result = await self.session.execute(
            select(Person)
            .join(film_directors, film_directors.c.person_id == Person.id)
            .where(film_directors.c.film_id == film_id)
            .order_by(Person.id)
        )
        return list(result.scalars().all())
