import logging
from urllib.parse import quote

import requests
from django.conf import settings
from requests.adapters import HTTPAdapter

from .base import BaseIndexClient

logger = logging.getLogger(__name__)

ALGOLIA_WRITE_URL = 'https://{application_id}.algolia.net/1/indexes'


class AlgoliaClient(BaseIndexClient):
    def __init__(self, application_id, admin_api_key, pool_maxsize=None):
        self.application_id = application_id
        self.admin_api_key = admin_api_key
        # The pool holds one connection per sync worker.
        self.pool_maxsize = pool_maxsize or getattr(settings, 'SYNC_MAX_WORKERS', 32)
        self.base_url = ALGOLIA_WRITE_URL.format(application_id=application_id)
        self.session = self.make_session()

    def make_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            'X-Algolia-Application-Id': self.application_id,
            'X-Algolia-API-Key': self.admin_api_key,
            'Content-Type': 'application/json',
        })
        session.mount('https://', HTTPAdapter(pool_connections=1, pool_maxsize=self.pool_maxsize))
        return session

    def _object_url(self, index_name, object_id):
        return f"{self.base_url}/{quote(str(index_name), safe='')}/{quote(str(object_id), safe='')}"

    def upsert(self, index_name, document):
        object_id = document.get('objectID')
        if object_id is None:
            raise ValueError(f"Document for index {index_name!r} has no objectID")

        response = self.session.put(self._object_url(index_name, object_id), json=document)
        response.raise_for_status()
        result = response.json()
        logger.debug("Saved %s to %s (task %s)", object_id, index_name, result.get('taskID'))
        return {'objectID': result.get('objectID', object_id), 'taskID': result.get('taskID')}

    def delete(self, index_name, object_id):
        response = self.session.delete(self._object_url(index_name, object_id))
        response.raise_for_status()
        logger.debug("Deleted %s from %s", object_id, index_name)
