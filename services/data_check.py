from config import Config
from catalog.fetcher import DetailFetchError, fetch_details
from catalog.loader import parse_index
from catalog.resources import ResourceError, read_json, read_text, resource_location


def check_data():
    try:
        index_text = read_text(Config.INDEX_PATH)
        identifiers = parse_index(index_text)

        icons = read_json(Config.GENRE_ICONS_PATH)
        icon_count = len(icons) if isinstance(icons, dict) else 0

        sample = None
        if identifiers:
            record = fetch_details(identifiers[0])
            sample = {
                'identifier': identifiers[0],
                'title': record.get('Title', 'N/A')
            }

        return {
            'status': 'healthy',
            'service': 'data',
            'message': 'Catalog resources are readable',
            'details': {
                'connection': {
                    'mode': 'http' if Config.DATA_BASE_URL else 'local',
                    'index': resource_location(Config.INDEX_PATH)
                },
                'index': {
                    'identifiers': len(identifiers)
                },
                'genre_icons': {
                    'count': icon_count
                },
                'sample_record': sample
            }
        }

    except DetailFetchError as e:
        return {
            'status': 'unhealthy',
            'service': 'data',
            'message': f'Detail record error: {str(e)}'
        }
    except ResourceError as e:
        return {
            'status': 'unhealthy',
            'service': 'data',
            'message': f'Resource error: {str(e)}'
        }
    except Exception as e:
        return {
            'status': 'unhealthy',
            'service': 'data',
            'message': f'Unexpected error: {str(e)}'
        }
