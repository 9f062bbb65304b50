from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey, Table
from sqlalchemy.orm import relationship
from . import Base

# Owned by Film: change it through Film.add_director / Film.remove_director
film_directors = Table(
    'film_directors',
    Base.metadata,
    Column('film_id', Integer, ForeignKey('films.id', ondelete="CASCADE"), primary_key=True),
    Column('person_id', Integer, ForeignKey('people.id', ondelete="CASCADE"), primary_key=True),
)

class Film(Base):
    __tablename__ = 'films'
    __sortable__ = ('id', 'title', 'release_date')

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    release_date = Column(Date, nullable=False)
    synopsis = Column(Text)

    # Relationships
    directors = relationship(
        "Person",
        secondary=film_directors,
        back_populates="films_directed",
        collection_class=set,
        passive_deletes=True,
    )
    # Services delete role rows explicitly before the parent row
    roles = relationship(
        "Role",
        back_populates="film",
        collection_class=set,
        passive_deletes="all",
    )

    def add_director(self, person):
        """Adds a director; the person's films_directed follows through the backref."""
        if person is None:
            raise ValueError("Can't add null director")
        self.directors.add(person)

    def remove_director(self, person):
        self.directors.discard(person)

    def remove_directors(self):
        for person in list(self.directors):
            self.remove_director(person)

    def add_role(self, role):
        if role is None:
            raise ValueError("Can't add null Role")
        if role.film is not self:
            raise ValueError("Can't add Role that belongs to another Film")
        self.roles.add(role)

    def __repr__(self):
        return f"Film(id={self.id!r}, title={self.title!r}, release_date={self.release_date!r})"
