"""Per-title detail records and catalog assembly"""
import logging
import re
from concurrent.futures import ThreadPoolExecutor

from config import Config
from catalog.models import (
    CatalogEntry, IMDB_SOURCE, UNKNOWN_GENRE, normalize_genres
)
from catalog.resources import ResourceError, read_json
from metrics import DETAIL_FETCH_COUNT, DETAIL_FETCH_FAILURES

logger = logging.getLogger(__name__)

IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z0-9_-]+$')


class DetailFetchError(ResourceError):
    """Detail record for one identifier could not be retrieved"""


def is_valid_identifier(identifier):
    return bool(identifier) and bool(IDENTIFIER_PATTERN.match(identifier))


def details_path(identifier):
    return f"{Config.DATA_FOLDER}/{identifier}/{Config.DETAILS_FILENAME}"


def poster_path(identifier):
    return f"{Config.DATA_FOLDER}/{identifier}/{Config.POSTER_FILENAME}"


def fetch_details(identifier):
    """
    Retrieve the raw detail record for one title

    Every call is a fresh read, nothing is cached.

    Raises:
        DetailFetchError: record missing, unreadable or not a JSON object
    """
    if not is_valid_identifier(identifier):
        raise DetailFetchError(f"Invalid identifier: {identifier!r}")

    DETAIL_FETCH_COUNT.inc()

    try:
        record = read_json(details_path(identifier))
    except ResourceError as e:
        DETAIL_FETCH_FAILURES.inc()
        raise DetailFetchError(str(e)) from e

    if not isinstance(record, dict):
        DETAIL_FETCH_FAILURES.inc()
        raise DetailFetchError(f"Detail record for {identifier} is not an object")

    return record


def entry_from_details(identifier, record):
    ratings = tuple(
        (rating['Source'], rating['Value'])
        for rating in record.get('Ratings') or []
        if isinstance(rating, dict) and rating.get('Source') and rating.get('Value')
    )
    primary = next((value for source, value in ratings if source == IMDB_SOURCE), None)

    return CatalogEntry(
        identifier=identifier,
        title=str(record.get('Title') or identifier),
        year=str(record.get('Year') or ''),
        genres=normalize_genres(record.get('Genre')),
        poster_path=poster_path(identifier),
        primary_rating=primary,
        ratings=ratings
    )


def placeholder_entry(identifier):
    return CatalogEntry(
        identifier=identifier,
        title=identifier,
        year='',
        genres=(UNKNOWN_GENRE,),
        poster_path=poster_path(identifier),
        placeholder=True
    )


def load_entry(identifier):
    try:
        return entry_from_details(identifier, fetch_details(identifier))
    except DetailFetchError as e:
        logger.warning(f"Rendering placeholder for {identifier}: {e}")
        return placeholder_entry(identifier)


def fetch_catalog(identifiers):
    """
    Fetch all detail records concurrently

    Results are paired back by index, so the returned entries follow the
    order of `identifiers` regardless of completion order. A failed fetch
    becomes a placeholder entry instead of aborting the batch.
    """
    identifiers = list(identifiers)
    if not identifiers:
        return []

    workers = max(1, min(Config.FETCH_WORKERS, len(identifiers)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        entries = list(executor.map(load_entry, identifiers))

    logger.info(f"Fetched {len(entries)} catalog entries")
    return entries
