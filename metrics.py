from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import time
import functools


REQUEST_COUNT = Counter(
    'catalog_request_count',
    'Total Catalog Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'catalog_request_duration_seconds',
    'Catalog Request Duration',
    ['method', 'endpoint']
)


DETAIL_FETCH_COUNT = Counter(
    'catalog_detail_fetches_total',
    'Total detail record fetches'
)

DETAIL_FETCH_FAILURES = Counter(
    'catalog_detail_fetch_failures_total',
    'Total failed detail record fetches'
)


CATALOG_SIZE = Histogram(
    'catalog_entries',
    'Number of entries rendered per page',
    buckets=(0, 10, 25, 50, 100, 250, 500, 1000)
)

SEARCH_QUERY_COUNT = Counter(
    'catalog_search_queries_total',
    'Total search queries'
)

GENRE_SELECT_COUNT = Counter(
    'catalog_genre_selections_total',
    'Total genre filter selections',
    ['genre']
)


OVERLAY_OPENS = Counter(
    'catalog_overlay_opens_total',
    'Total detail overlay opens'
)

POSTER_FALLBACKS = Counter(
    'catalog_poster_fallbacks_total',
    'Posters served from the fallback image'
)


def response_status(response):
    if isinstance(response, tuple):
        return response[1]
    return getattr(response, 'status_code', 200)


def track_request(f):
    """Count and time a view under its route endpoint and HTTP method"""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        labels = {'method': request.method, 'endpoint': request.endpoint or f.__name__}
        start_time = time.perf_counter()
        status_code = 500

        try:
            response = f(*args, **kwargs)
            status_code = response_status(response)
            return response
        finally:
            REQUEST_COUNT.labels(http_status=status_code, **labels).inc()
            REQUEST_DURATION.labels(**labels).observe(time.perf_counter() - start_time)

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
