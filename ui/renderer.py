"""Builds display elements and the genre sidebar from catalog entries"""
from dataclasses import dataclass

from config import Config
from catalog.models import ALL_GENRES, ViewMode

DEFAULT_ICON = 'fa-film'


@dataclass
class DisplayElement:
    element_id: str
    entry: object
    layout: str
    poster_url: str
    fallback_url: str
    badge: str = None
    visible: bool = True

    @property
    def genre_label(self):
        return ', '.join(self.entry.genres)


@dataclass(frozen=True)
class SidebarLink:
    genre: str
    icon: str


def build_sidebar(entries, icons):
    """Sidebar links with "All" first, then every distinct genre in lexical order"""
    genres = set()
    for entry in entries:
        genres.update(entry.genres)
    genres.discard(ALL_GENRES)

    links = [SidebarLink(ALL_GENRES, DEFAULT_ICON)]
    for genre in sorted(genres):
        links.append(SidebarLink(genre, icons.get(genre) or DEFAULT_ICON))
    return links


class ViewRenderer:

    def __init__(self, poster_url=None, fallback_url=None):
        self.poster_url = poster_url or (lambda entry: f"/poster/{entry.identifier}")
        self.fallback_url = fallback_url or f"/static/{Config.FALLBACK_POSTER}"
        self.elements = []
        self._by_element = {}
        self._by_identifier = {}

    def render(self, view, entries):
        """
        Rebuild every element from scratch

        Previous elements are discarded, calling it twice with the same
        arguments yields the same elements.
        """
        self.elements = []
        self._by_element = {}
        self._by_identifier = {}

        for index, entry in enumerate(entries):
            layout = 'row' if view is ViewMode.LIST else 'card'

            # Rows show the badge, cards keep it hidden until the view switches
            element = DisplayElement(
                element_id=f"movie-{index}",
                entry=entry,
                layout=layout,
                poster_url=self.poster_url(entry),
                fallback_url=self.fallback_url,
                badge=entry.primary_rating or entry.year or None
            )
            self.elements.append(element)
            self._by_element[element.element_id] = entry
            self._by_identifier.setdefault(entry.identifier, entry)

        return self.elements

    def entry_for_element(self, element_id):
        return self._by_element[element_id]

    def entry_for_identifier(self, identifier):
        return self._by_identifier[identifier]

    def side_table(self):
        """Element id to entry mapping for the in-page filter script"""
        return [
            {
                'element_id': element.element_id,
                'identifier': element.entry.identifier,
                'title': element.entry.title,
                'genres': list(element.entry.genres)
            }
            for element in self.elements
        ]
