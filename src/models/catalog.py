"""Relational schema and record models for the movie catalog."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Declarative base for all catalog tables."""


class Movie(Base):
    """A movie row. ``year`` is free text and never validated."""

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False, index=True)
    details: Mapped[str] = mapped_column(Text, nullable=False, default="")
    year: Mapped[str] = mapped_column(Text, nullable=False, default="")

    genres: Mapped[List["MovieGenre"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
        order_by="MovieGenre.id",
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}')>"


class Genre(Base):
    """A genre row; ``title`` is the natural key."""

    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False, unique=True)

    movies: Mapped[List["MovieGenre"]] = relationship(
        back_populates="genre",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, title='{self.title}')>"


class MovieGenre(Base):
    """Link between one movie and one genre."""

    __tablename__ = "movie_genres"
    __table_args__ = (
        UniqueConstraint("movie_id", "genre_id", name="uq_movie_genre"),
    )

    # Surrogate key keeps links in insertion order
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"), nullable=False
    )
    genre_id: Mapped[int] = mapped_column(
        ForeignKey("genres.id", ondelete="CASCADE"), nullable=False
    )

    movie: Mapped[Movie] = relationship(back_populates="genres")
    genre: Mapped[Genre] = relationship(back_populates="movies")


class GenreRecord(BaseModel):
    """Snapshot of a genre returned by the store."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    title: str


class MovieRecord(BaseModel):
    """Snapshot of a movie and its linked genres, in link order."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    details: str = ""
    year: str = ""
    genres: List[GenreRecord] = Field(default_factory=list)

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieRecord":
        """Build a record from a loaded ORM movie."""
        return cls(
            id=movie.id,
            title=movie.title,
            details=movie.details,
            year=movie.year,
            genres=[GenreRecord.model_validate(link.genre) for link in movie.genres],
        )

    @property
    def genre_titles(self) -> List[str]:
        return [genre.title for genre in self.genres]

    @property
    def label(self) -> str:
        """Display label used in selection lists."""
        return f"{self.title} ({self.year})"


class MovieCreate(BaseModel):
    """Payload for creating a movie."""

    title: str
    details: str = ""
    year: str = ""
    genre_ids: List[int] = Field(default_factory=list)


class MovieUpdate(BaseModel):
    """Editable movie fields. Details and genre links are not editable."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    year: Optional[str] = None
