"""
Composable query predicates.

A specification turns into a SQLAlchemy boolean clause for a given model and
can be combined with ``&``, ``|`` and ``~``::

    spec = PersonWithName("joe") & PersonBornAfter(date(1970, 1, 1))
    page = await person_service.search(spec, Pageable.of(0, 10))
"""

from datetime import date
from sqlalchemy import and_, or_, not_, select, true
from models import Film, Person, film_directors


class Specification:
    def to_clause(self, model):
        raise NotImplementedError

    def __and__(self, other):
        return _And(self, other)

    def __or__(self, other):
        return _Or(self, other)

    def __invert__(self):
        return _Not(self)

    @staticmethod
    def where(spec=None) -> "Specification":
        """Wraps *spec*; ``None`` matches everything."""
        return spec if spec is not None else _MatchAll()

    @staticmethod
    def all_of(*specs) -> "Specification":
        result = _MatchAll()
        for spec in specs:
            if spec is not None:
                result = result & spec
        return result


class _MatchAll(Specification):
    def to_clause(self, model):
        return true()

    def __and__(self, other):
        return Specification.where(other)


class _And(Specification):
    def __init__(self, left, right):
        self.left = left
        self.right = right

    def to_clause(self, model):
        return and_(self.left.to_clause(model), self.right.to_clause(model))


class _Or(Specification):
    def __init__(self, left, right):
        self.left = left
        self.right = right

    def to_clause(self, model):
        return or_(self.left.to_clause(model), self.right.to_clause(model))


class _Not(Specification):
    def __init__(self, spec):
        self.spec = spec

    def to_clause(self, model):
        return not_(self.spec.to_clause(model))


def _contains_ignore_case(column, value: str):
    # LIKE wildcards in the value match literally
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return column.ilike(f"%{escaped}%", escape="\\")


# People

class PersonWithName(Specification):
    """Case-insensitive substring match on the person's name."""

    def __init__(self, name: str):
        self.name = name

    def to_clause(self, model=Person):
        return _contains_ignore_case(model.name, self.name)


class PersonBornAfter(Specification):
    def __init__(self, day: date):
        self.day = day

    def to_clause(self, model=Person):
        return model.date_of_birth > self.day


class PersonBornBefore(Specification):
    def __init__(self, day: date):
        self.day = day

    def to_clause(self, model=Person):
        return model.date_of_birth < self.day


# Films

class FilmWithTitle(Specification):
    """Case-insensitive substring match on the film title."""

    def __init__(self, title: str):
        self.title = title

    def to_clause(self, model=Film):
        return _contains_ignore_case(model.title, self.title)


class FilmReleasedAfter(Specification):
    def __init__(self, day: date):
        self.day = day

    def to_clause(self, model=Film):
        return model.release_date > self.day


class FilmReleasedBefore(Specification):
    def __init__(self, day: date):
        self.day = day

    def to_clause(self, model=Film):
        return model.release_date < self.day


class FilmWithDirector(Specification):
    def __init__(self, person_id: int):
        self.person_id = person_id

    def to_clause(self, model=Film):
        directed = select(film_directors.c.film_id).where(
            film_directors.c.person_id == self.person_id
        )
        return model.id.in_(directed)
