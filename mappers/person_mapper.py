from models import Person
from .common import fields_to_copy

PERSON_FIELDS = ("name", "date_of_birth")


def person_info_to_person(info) -> Person:
    return Person(name=info.name, date_of_birth=info.date_of_birth)


def update_person_from_person_info(info, person: Person, partial: bool = False) -> Person:
    """Copies *info* onto *person*; id and relationships are left alone."""
    for name in fields_to_copy(info, PERSON_FIELDS, partial):
        setattr(person, name, getattr(info, name))
    return person
