import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    FLASK_HOST = os.getenv('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.getenv('FLASK_PORT', '5000'))
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'


    # Local directory holding the catalog resources
    DATA_ROOT = os.getenv('DATA_ROOT', os.path.dirname(os.path.abspath(__file__)))
    # When set, resources are fetched over HTTP instead of DATA_ROOT
    DATA_BASE_URL = os.getenv('DATA_BASE_URL', '')


    DATA_FOLDER = os.getenv('DATA_FOLDER', 'data/imdb')
    INDEX_PATH = os.getenv('INDEX_PATH', 'data/movie_collection.tsv')
    GENRE_ICONS_PATH = os.getenv('GENRE_ICONS_PATH', 'genre-icons.json')
    DETAILS_FILENAME = os.getenv('DETAILS_FILENAME', 'details.json')
    POSTER_FILENAME = os.getenv('POSTER_FILENAME', 'poster.jpg')
    FALLBACK_POSTER = os.getenv('FALLBACK_POSTER', 'fallback.svg')


    FETCH_WORKERS = int(os.getenv('FETCH_WORKERS', '8'))
    REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT')) if os.getenv('REQUEST_TIMEOUT') else None


    IMDB_TITLE_URL = os.getenv('IMDB_TITLE_URL', 'https://www.imdb.com/title/')
