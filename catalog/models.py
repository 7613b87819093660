from dataclasses import dataclass
from enum import Enum


UNKNOWN_GENRE = 'Unknown'
ALL_GENRES = 'All'
NOT_AVAILABLE = 'N/A'

IMDB_SOURCE = 'Internet Movie Database'
ROTTEN_TOMATOES_SOURCE = 'Rotten Tomatoes'
METACRITIC_SOURCE = 'Metacritic'

RATING_SOURCES = (IMDB_SOURCE, ROTTEN_TOMATOES_SOURCE, METACRITIC_SOURCE)


class ViewMode(Enum):
    GRID = 'grid'
    LIST = 'list'

    @classmethod
    def parse(cls, value):
        """Parse a query-string value, unknown or empty values mean GRID"""
        try:
            return cls((value or '').strip().lower())
        except ValueError:
            return cls.GRID


@dataclass(frozen=True)
class CatalogEntry:
    identifier: str
    title: str
    year: str
    genres: tuple
    poster_path: str
    primary_rating: str = None
    ratings: tuple = ()
    placeholder: bool = False

    def rating(self, source):
        for name, value in self.ratings:
            if name == source:
                return value
        return NOT_AVAILABLE

    def to_dict(self):
        return {
            'identifier': self.identifier,
            'title': self.title,
            'year': self.year,
            'genres': list(self.genres),
            'poster_path': self.poster_path,
            'primary_rating': self.primary_rating,
            'ratings': {source: self.rating(source) for source in RATING_SOURCES},
            'placeholder': self.placeholder
        }


@dataclass
class FilterState:
    genre: str = ALL_GENRES
    query: str = ''

    def matches(self, entry):
        if self.genre != ALL_GENRES and self.genre not in entry.genres:
            return False
        return self.query.lower() in entry.title.lower()


def normalize_genres(value):
    """
    Turn a record's Genre field into a non-empty tuple

    Lists keep their order, a scalar string is split on ", ".
    """
    if isinstance(value, str):
        value = value.split(', ')

    if not isinstance(value, (list, tuple)):
        return (UNKNOWN_GENRE,)

    genres = tuple(str(g).strip() for g in value if str(g).strip())
    return genres or (UNKNOWN_GENRE,)


def find_rating(record, source):
    """Value of one named rating source, "N/A" when absent"""
    for rating in record.get('Ratings') or []:
        if isinstance(rating, dict) and rating.get('Source') == source:
            return rating.get('Value') or NOT_AVAILABLE
    return NOT_AVAILABLE
