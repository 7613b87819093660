import json

from services.data_check import check_data


def test_data_check_healthy(catalog):
    result = check_data()

    assert result['status'] == 'healthy'
    assert result['service'] == 'data'
    assert result['details']['index']['identifiers'] == 3
    assert result['details']['genre_icons']['count'] == 2
    assert result['details']['sample_record']['title'] == 'Scream'


def test_data_check_missing_index(data_root):
    result = check_data()

    assert 'status' in result
    assert 'message' in result
    assert result['service'] == 'data'
    assert result['status'] == 'unhealthy'


def test_data_check_broken_record(catalog):
    (catalog / 'data' / 'imdb' / 'tt0117571' / 'details.json').write_text('{', encoding='utf-8')
    result = check_data()

    assert result['status'] == 'unhealthy'
    assert result['message'].startswith('Detail record error')


def test_data_check_endpoint(catalog):
    import app as app_module

    with app_module.app.test_client() as client:
        response = client.get('/check/data')
    assert response.status_code == 200
    assert json.loads(response.data)['status'] == 'healthy'
