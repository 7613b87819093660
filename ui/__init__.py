from .controller import CatalogController
from .filters import FilterController
from .overlay import DetailOverlay
from .renderer import ViewRenderer, build_sidebar

__all__ = [
    'CatalogController',
    'FilterController',
    'DetailOverlay',
    'ViewRenderer',
    'build_sidebar'
]
