import logging

from catalog.models import ALL_GENRES, FilterState

logger = logging.getLogger(__name__)


class FilterController:
    """
    Toggles element visibility from the active genre and search text

    Both predicates are stored and every change recomputes visibility as
    their conjunction, so selecting a genre never discards the search and
    vice versa. Elements are only shown or hidden, never rebuilt.
    """

    def __init__(self, state=None):
        self.state = state or FilterState()
        self.elements = []

    def attach(self, elements):
        self.elements = elements
        self._apply()

    def select_genre(self, genre):
        self.state.genre = genre or ALL_GENRES
        self._apply()

    def apply_search(self, query):
        self.state.query = query or ''
        self._apply()

    def visible_elements(self):
        return [element for element in self.elements if element.visible]

    def _apply(self):
        for element in self.elements:
            element.visible = self.state.matches(element.entry)

        logger.debug(
            f"Filter genre={self.state.genre!r} query={self.state.query!r}: "
            f"{len(self.visible_elements())}/{len(self.elements)} visible"
        )
