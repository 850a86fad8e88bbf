from .abstraction_layer import DbAbstractionLayer
from .connector import ComparisonNotSpecifiedError, Connector
from .factory import create_abstraction_layer, load_connector

__all__ = [
    'DbAbstractionLayer',
    'Connector',
    'ComparisonNotSpecifiedError',
    'create_abstraction_layer',
    'load_connector',
]
