from .models import CatalogEntry, FilterState, ViewMode
from .loader import list_identifiers, load_genre_icons
from .fetcher import DetailFetchError, fetch_catalog, fetch_details

__all__ = [
    'CatalogEntry',
    'FilterState',
    'ViewMode',
    'list_identifiers',
    'load_genre_icons',
    'DetailFetchError',
    'fetch_catalog',
    'fetch_details'
]
