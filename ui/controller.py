from catalog.models import FilterState, ViewMode
from ui.filters import FilterController
from ui.overlay import DetailOverlay
from ui.renderer import ViewRenderer, build_sidebar


class CatalogController:
    """
    Owns the view mode and filter state for one page view

    Entries are fetched once by the caller; switching views re-renders from
    them and re-applies the active filter.
    """

    def __init__(self, entries, icons=None, view=ViewMode.GRID, filter_state=None,
                 renderer=None, overlay=None):
        self.entries = list(entries)
        self.icons = icons or {}
        self.view = view
        self.renderer = renderer or ViewRenderer()
        self.filters = FilterController(filter_state or FilterState())
        self.overlay = overlay or DetailOverlay()
        self.sidebar = build_sidebar(self.entries, self.icons)
        self._render()

    @property
    def state(self):
        return self.filters.state

    @property
    def elements(self):
        return self.renderer.elements

    def set_view(self, view):
        self.view = view
        self._render()

    def select_genre(self, genre):
        self.filters.select_genre(genre)

    def apply_search(self, query):
        self.filters.apply_search(query)

    def open_details(self, identifier):
        entry = self.renderer.entry_for_identifier(identifier)
        return self.overlay.show_details(entry)

    def close_details(self):
        self.overlay.close()

    def knows_genre(self, genre):
        return any(link.genre == genre for link in self.sidebar)

    def side_table(self):
        return self.renderer.side_table()

    def to_dict(self):
        return {
            'view': self.view.value,
            'filter': {'genre': self.state.genre, 'query': self.state.query},
            'sidebar': [{'genre': link.genre, 'icon': link.icon} for link in self.sidebar],
            'entries': [
                dict(element.entry.to_dict(), element_id=element.element_id, visible=element.visible)
                for element in self.elements
            ],
            'visible_count': len(self.filters.visible_elements())
        }

    def _render(self):
        self.filters.attach(self.renderer.render(self.view, self.entries))
