from catalog.models import CatalogEntry, ViewMode
from ui.renderer import ViewRenderer, build_sidebar


def entry(identifier, title, genres, rating=None, year='2000'):
    return CatalogEntry(
        identifier=identifier,
        title=title,
        year=year,
        genres=tuple(genres),
        poster_path=f'data/imdb/{identifier}/poster.jpg',
        primary_rating=rating
    )


ENTRIES = [
    entry('tt1', 'Scream', ['Horror']),
    entry('tt2', 'Airplane!', ['Comedy'], rating='7.7/10'),
    entry('tt3', 'Shaun of the Dead', ['Comedy', 'Horror']),
]


def test_sidebar_all_first_then_sorted():
    links = build_sidebar([entry('tt1', 'A', ['Horror', 'Comedy'])], {})
    assert [link.genre for link in links] == ['All', 'Comedy', 'Horror']


def test_sidebar_is_union_of_genres():
    entries = [
        entry('tt1', 'A', ['Drama', 'crime']),
        entry('tt2', 'B', ['Crime', 'Drama']),
        entry('tt3', 'C', ['Unknown']),
    ]
    genres = [link.genre for link in build_sidebar(entries, {})]
    assert genres[0] == 'All'
    assert set(genres[1:]) == {'Drama', 'crime', 'Crime', 'Unknown'}
    assert len(genres) == 5


def test_sidebar_keeps_all_first_when_a_genre_sorts_before_it():
    genres = [link.genre for link in build_sidebar([entry('tt1', 'A', ['Action', 'All'])], {})]
    assert genres == ['All', 'Action']


def test_sidebar_icons_default_when_unmapped():
    links = build_sidebar(ENTRIES, {'Horror': 'fa-ghost'})
    icons = {link.genre: link.icon for link in links}
    assert icons == {'All': 'fa-film', 'Comedy': 'fa-film', 'Horror': 'fa-ghost'}


def test_render_grid_cards():
    renderer = ViewRenderer()
    elements = renderer.render(ViewMode.GRID, ENTRIES)

    assert [e.element_id for e in elements] == ['movie-0', 'movie-1', 'movie-2']
    assert {e.layout for e in elements} == {'card'}
    assert elements[0].poster_url == '/poster/tt1'
    assert elements[0].fallback_url == '/static/fallback.svg'


def test_render_list_rows_with_badge():
    elements = ViewRenderer().render(ViewMode.LIST, ENTRIES)

    assert {e.layout for e in elements} == {'row'}
    assert elements[1].badge == '7.7/10'
    assert elements[0].badge == '2000'


def test_render_rebuilds_from_scratch():
    renderer = ViewRenderer()
    first = renderer.render(ViewMode.GRID, ENTRIES)
    first[0].visible = False

    second = renderer.render(ViewMode.GRID, ENTRIES[:2])
    assert len(second) == 2
    assert all(e.visible for e in second)
    assert [e.entry for e in second] == ENTRIES[:2]


def test_render_side_table_lookup():
    renderer = ViewRenderer()
    renderer.render(ViewMode.GRID, ENTRIES)

    assert renderer.entry_for_element('movie-2') is ENTRIES[2]
    assert renderer.entry_for_identifier('tt2') is ENTRIES[1]


def test_genre_label():
    element = ViewRenderer().render(ViewMode.GRID, ENTRIES)[2]
    assert element.genre_label == 'Comedy, Horror'


def test_badge_is_independent_of_view():
    grid = [e.badge for e in ViewRenderer().render(ViewMode.GRID, ENTRIES)]
    rows = [e.badge for e in ViewRenderer().render(ViewMode.LIST, ENTRIES)]
    assert grid == rows == ['2000', '7.7/10', '2000']


def test_side_table():
    renderer = ViewRenderer()
    renderer.render(ViewMode.LIST, ENTRIES)

    assert renderer.side_table()[2] == {
        'element_id': 'movie-2',
        'identifier': 'tt3',
        'title': 'Shaun of the Dead',
        'genres': ['Comedy', 'Horror']
    }
