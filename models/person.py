from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from . import Base
from .film import film_directors

class Person(Base):
    __tablename__ = 'people'
    __sortable__ = ('id', 'name', 'date_of_birth')

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    date_of_birth = Column(Date)

    # Relationships
    # Inverse side of Film.directors; don't mutate directly
    films_directed = relationship(
        "Film",
        secondary=film_directors,
        back_populates="directors",
        collection_class=set,
        passive_deletes=True,
    )
    # Services delete role rows explicitly before the parent row
    roles = relationship(
        "Role",
        back_populates="person",
        collection_class=set,
        passive_deletes="all",
    )

    def remove_films_directed(self):
        """Detaches this person from every film they directed, through the owning side."""
        for film in list(self.films_directed):
            film.remove_director(self)

    def add_role(self, role):
        if role is None:
            raise ValueError("Can't add null Role")
        if role.person is not self:
            raise ValueError("Can't add Role that is played by another Person")
        self.roles.add(role)

    def __repr__(self):
        return f"Person(id={self.id!r}, name={self.name!r}, date_of_birth={self.date_of_birth!r})"
