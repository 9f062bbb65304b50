from .person_mapper import person_info_to_person, update_person_from_person_info
from .film_mapper import film_info_to_film, update_film_from_film_info

__all__ = [
    "person_info_to_person",
    "update_person_from_person_info",
    "film_info_to_film",
    "update_film_from_film_info",
]
