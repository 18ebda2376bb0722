import logging

import requests
from django.conf import settings

from .base import BasePaginatedSource

logger = logging.getLogger(__name__)


class CommerceApiSource(BasePaginatedSource):
    def __init__(self, base_url=None, api_key=None, page_size=None):
        self.base_url = (base_url or settings.COMMERCE_API_BASE_URL).rstrip('/')
        self.api_key = api_key if api_key is not None else settings.COMMERCE_API_KEY
        self.page_size = page_size or getattr(settings, 'COMMERCE_API_PAGE_SIZE', 200)
        self.session = requests.Session()
        self.session.headers.update({
            'X-Authorization': self.api_key,
            'Accept': 'application/json',
        })

    def fetch_page(self, entity_type, page):
        url = f"{self.base_url}/{entity_type}"
        logger.debug("Fetching %s page %d", entity_type, page)
        response = self.session.get(url, params={'limit': self.page_size, 'page': page})
        response.raise_for_status()
        return response.json()
