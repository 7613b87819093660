import logging

from config import Config
from catalog.resources import ResourceError, read_json, read_text

logger = logging.getLogger(__name__)

# Columns: title, year, format, source, imdb_id
IDENTIFIER_COLUMN = 4


def parse_index(text):
    """Extract identifiers from the tab-separated index, header row dropped"""
    identifiers = []
    seen = set()

    for line in text.split('\n')[1:]:
        fields = line.rstrip('\r').split('\t')
        if len(fields) <= IDENTIFIER_COLUMN:
            continue

        identifier = fields[IDENTIFIER_COLUMN].strip()
        if not identifier or identifier in seen:
            continue

        seen.add(identifier)
        identifiers.append(identifier)

    return identifiers


def list_identifiers():
    try:
        text = read_text(Config.INDEX_PATH)
    except ResourceError as e:
        logger.warning(f"Catalog index unavailable: {e}")
        return []

    identifiers = parse_index(text)
    logger.info(f"Loaded {len(identifiers)} identifiers from {Config.INDEX_PATH}")
    return identifiers


def load_genre_icons():
    try:
        icons = read_json(Config.GENRE_ICONS_PATH)
    except ResourceError as e:
        logger.warning(f"Genre icons unavailable: {e}")
        return {}

    if not isinstance(icons, dict):
        logger.warning(f"Genre icons in {Config.GENRE_ICONS_PATH} are not a JSON object")
        return {}

    return {str(genre): str(icon) for genre, icon in icons.items()}
