from .data_check import check_data

__all__ = [
    'check_data'
]
