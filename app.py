from flask import Flask, jsonify, request, render_template, send_from_directory, url_for, Response
from config import Config
import functools
import logging
import sys

from services.data_check import check_data

from catalog.fetcher import (
    DetailFetchError, fetch_catalog, is_valid_identifier, poster_path
)
from catalog.loader import list_identifiers, load_genre_icons
from catalog.models import ALL_GENRES, ViewMode
from catalog.resources import ResourceError, read_resource
from ui.controller import CatalogController
from ui.overlay import DetailOverlay

from metrics import (
    metrics_endpoint, track_request,
    CATALOG_SIZE, SEARCH_QUERY_COUNT, GENRE_SELECT_COUNT,
    POSTER_FALLBACKS
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = Flask(__name__)
app.config.from_object(Config)


def build_controller(args):
    """
    Load the catalog once per page and apply the initial view, genre and
    search from the query string

    Later view switches and filter changes happen in the page itself
    (static/catalog.js) against the embedded side table.
    """
    identifiers = list_identifiers()
    icons = load_genre_icons()
    entries = fetch_catalog(identifiers)

    CATALOG_SIZE.observe(len(entries))

    controller = CatalogController(
        entries,
        icons,
        view=ViewMode.parse(args.get('view'))
    )

    genre = args.get('genre', '').strip()
    if genre:
        label = genre if controller.knows_genre(genre) else 'other'
        GENRE_SELECT_COUNT.labels(genre=label).inc()
        controller.select_genre(genre)

    query = args.get('q', '').strip()
    if query:
        SEARCH_QUERY_COUNT.inc()
        controller.apply_search(query)

    return controller


def page_url(controller, **changes):
    params = {
        'view': controller.view.value,
        'genre': controller.state.genre,
        'q': controller.state.query
    }
    params.update(changes)

    # Defaults stay out of the URL
    if params['view'] == ViewMode.GRID.value:
        params.pop('view')
    if params['genre'] == ALL_GENRES:
        params.pop('genre')
    params = {key: value for key, value in params.items() if value}

    return url_for('home', **params)


@app.route('/')
@track_request
def home():
    controller = build_controller(request.args)

    movie = request.args.get('movie', '').strip()
    if movie:
        try:
            controller.open_details(movie)
        except KeyError:
            logger.warning(f"Overlay requested for unknown title {movie}")
        except DetailFetchError as e:
            logger.warning(f"Overlay for {movie} unavailable: {e}")

    return render_template(
        'index.html',
        controller=controller,
        overlay=controller.overlay.current,
        page_url=functools.partial(page_url, controller)
    )


@app.route('/api/catalog')
@track_request
def api_catalog():
    controller = build_controller(request.args)
    return jsonify(controller.to_dict())


@app.route('/api/movie/<identifier>')
@track_request
def api_movie(identifier):
    overlay = DetailOverlay()

    try:
        view = overlay.show_identifier(identifier)
    except DetailFetchError as e:
        return jsonify({'error': 'Movie not found', 'details': str(e)}), 404

    return jsonify(view)


@app.route('/poster/<identifier>')
def get_poster(identifier):
    if is_valid_identifier(identifier):
        try:
            image_data = read_resource(poster_path(identifier))
            return Response(image_data, mimetype='image/jpeg')
        except ResourceError as e:
            logger.info(f"Poster fallback for {identifier}: {e}")
    else:
        logger.info(f"Poster fallback for invalid identifier {identifier!r}")

    POSTER_FALLBACKS.inc()
    return send_from_directory(app.static_folder, Config.FALLBACK_POSTER)


@app.route('/info')
def info():
    return jsonify({
        'app_name': 'Movie Shelf',
        'python_version': sys.version.split()[0],
        'data_source': Config.DATA_BASE_URL or Config.DATA_ROOT
    })


@app.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movie-shelf',
        'version': '1.0.0'
    }), 200


@app.route('/check/data')
def check_data_endpoint():
    result = check_data()
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code


@app.route('/metrics')
@track_request
def metrics():
    return metrics_endpoint()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
