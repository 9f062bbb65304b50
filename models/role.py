from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from . import Base

class Role(Base):
    """One casting assignment: a person playing a character in a film."""
    __tablename__ = 'roles'

    film_id = Column(Integer, ForeignKey('films.id', ondelete="CASCADE"), primary_key=True)
    person_id = Column(Integer, ForeignKey('people.id', ondelete="CASCADE"), primary_key=True)
    character = Column(String(255), nullable=False)

    # Relationships
    film = relationship("Film", back_populates="roles")
    person = relationship("Person", back_populates="roles")

    def __repr__(self):
        return f"Role(film_id={self.film_id!r}, person_id={self.person_id!r}, character={self.character!r})"
