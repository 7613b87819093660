"""Modal detail view for one selected title"""
import logging

from config import Config
from catalog.fetcher import fetch_details
from catalog.models import (
    IMDB_SOURCE, METACRITIC_SOURCE, NOT_AVAILABLE, ROTTEN_TOMATOES_SOURCE,
    UNKNOWN_GENRE, find_rating
)
from metrics import OVERLAY_OPENS

logger = logging.getLogger(__name__)


def genre_text(value):
    if isinstance(value, (list, tuple)):
        return ', '.join(str(g) for g in value) or UNKNOWN_GENRE
    return value or UNKNOWN_GENRE


def build_overlay_view(identifier, record, poster_url, fallback_url, fallback_title=None):
    return {
        'identifier': identifier,
        'title': record.get('Title') or fallback_title or identifier,
        'plot': record.get('Plot') or NOT_AVAILABLE,
        'director': record.get('Director') or NOT_AVAILABLE,
        'actors': record.get('Actors') or NOT_AVAILABLE,
        'year': record.get('Year') or NOT_AVAILABLE,
        'runtime': record.get('Runtime') or NOT_AVAILABLE,
        'source': record.get('Source') or NOT_AVAILABLE,
        'genre': genre_text(record.get('Genre')),
        'ratings': {
            'imdb': find_rating(record, IMDB_SOURCE),
            'rotten_tomatoes': find_rating(record, ROTTEN_TOMATOES_SOURCE),
            'metacritic': find_rating(record, METACRITIC_SOURCE)
        },
        'poster_url': poster_url,
        'fallback_url': fallback_url,
        'external_url': f"{Config.IMDB_TITLE_URL.rstrip('/')}/{identifier}/"
    }


class DetailOverlay:
    """At most one overlay is open at a time"""

    def __init__(self, poster_url=None, fallback_url=None):
        self.poster_url = poster_url or (lambda identifier: f"/poster/{identifier}")
        self.fallback_url = fallback_url or f"/static/{Config.FALLBACK_POSTER}"
        self.current = None

    def show_details(self, entry):
        return self.show_identifier(entry.identifier, fallback_title=entry.title)

    def show_identifier(self, identifier, fallback_title=None):
        """
        Replace any open overlay with a freshly fetched one

        Raises:
            DetailFetchError: the record could not be fetched; no overlay
                stays open in that case
        """
        self.close()

        record = fetch_details(identifier)
        OVERLAY_OPENS.inc()

        self.current = build_overlay_view(
            identifier, record, self.poster_url(identifier), self.fallback_url,
            fallback_title=fallback_title
        )
        logger.info(f"Opened details for {identifier}")
        return self.current

    def close(self):
        self.current = None

    @property
    def is_open(self):
        return self.current is not None
