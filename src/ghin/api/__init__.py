"""
HTTP layer of the GHIN client.
"""

from .api_utils import encode_query, encode_value
from .base_api import BaseAPI
from .request_client import CLIENT_SOURCE, ENTITY_ENDPOINTS, RequestClient

__all__ = ['BaseAPI', 'CLIENT_SOURCE', 'ENTITY_ENDPOINTS', 'RequestClient', 'encode_query', 'encode_value']
