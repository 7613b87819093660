import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import Config


INDEX_HEADER = 'title\tyear\tformat\tsource\timdb_id'


def write_index(root, rows):
    path = root / 'data' / 'movie_collection.tsv'
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [INDEX_HEADER] + ['\t'.join(row) for row in rows]
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')


def write_details(root, identifier, record):
    folder = root / 'data' / 'imdb' / identifier
    folder.mkdir(parents=True, exist_ok=True)
    (folder / 'details.json').write_text(json.dumps(record), encoding='utf-8')


def make_record(title, genres, year='2000', ratings=None, **extra):
    record = {
        'Title': title,
        'Year': year,
        'Genre': genres,
        'Plot': f'{title} plot',
        'Director': 'Someone',
        'Actors': 'A, B',
        'Runtime': '100 min',
        'Source': 'Shelf',
        'Poster': 'N/A'
    }
    if ratings is not None:
        record['Ratings'] = ratings
    record.update(extra)
    return record


@pytest.fixture
def data_root(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, 'DATA_ROOT', str(tmp_path))
    monkeypatch.setattr(Config, 'DATA_BASE_URL', '')
    monkeypatch.setattr(Config, 'DATA_FOLDER', 'data/imdb')
    monkeypatch.setattr(Config, 'INDEX_PATH', 'data/movie_collection.tsv')
    monkeypatch.setattr(Config, 'GENRE_ICONS_PATH', 'genre-icons.json')
    return tmp_path


@pytest.fixture
def catalog(data_root):
    """Three titles plus one index row without an identifier"""
    write_index(data_root, [
        ('Scream', '1996', 'DVD', 'Shelf', 'tt0117571'),
        ('Airplane!', '1980', 'DVD', 'Shelf', 'tt0080339'),
        ('Shaun of the Dead', '2004', 'Blu-ray', 'Shelf', 'tt0365748'),
        ('Lost Tape', '1999', 'VHS', 'Shelf', ''),
    ])
    write_details(data_root, 'tt0117571', make_record(
        'Scream', ['Horror', 'Mystery'], year='1996',
        ratings=[{'Source': 'Internet Movie Database', 'Value': '7.4/10'}]
    ))
    write_details(data_root, 'tt0080339', make_record(
        'Airplane!', ['Comedy'], year='1980',
        ratings=[
            {'Source': 'Internet Movie Database', 'Value': '7.7/10'},
            {'Source': 'Rotten Tomatoes', 'Value': '97%'},
            {'Source': 'Metacritic', 'Value': '78/100'}
        ]
    ))
    write_details(data_root, 'tt0365748', make_record(
        'Shaun of the Dead', ['Comedy', 'Horror'], year='2004'
    ))
    (data_root / 'genre-icons.json').write_text(
        json.dumps({'Horror': 'fa-ghost', 'Comedy': 'fa-face-laugh'}), encoding='utf-8'
    )
    return data_root
