import json
import logging
from dataclasses import dataclass

from django.conf import settings
from django.utils.module_loading import import_string

from integrator.sync import BulkSyncEngine
from integrator.transforms import transform_category, transform_product

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = (
    'Either the application ID or admin API key is undefined, please check your configuration.'
)
NOTHING_HAPPENED_MESSAGE = 'Nothing happened, might be an unwanted webhook event...'
SYNC_COMPLETED_MESSAGE = 'Sync completed!'

# entity type -> (mapper, config attribute naming the target index)
ENTITY_TYPES = {
    'products': (transform_product, 'products_index'),
    'categories': (transform_category, 'categories_index'),
}

# event -> (entity type, success status)
UPSERT_EVENTS = {
    'products.create': ('products', 201),
    'products.update': ('products', 200),
    'categories.create': ('categories', 201),
    'categories.update': ('categories', 200),
}

DELETE_EVENTS = {
    'products.delete': 'products',
    'categories.delete': 'categories',
}

FULL_SYNC_EVENT = 'integrations.ready'


@dataclass
class WebhookResponse:
    status_code: int
    body: str = ''
    content_type: str = 'text/plain'

    @classmethod
    def from_data(cls, status_code, data):
        return cls(status_code, json.dumps(data, separators=(',', ':')), 'application/json')


class EventDispatcher:
    def __init__(self, config, source=None, client_class=None):
        self.config = config
        self.source = source
        self.client_class = client_class or import_string(settings.SYNC_INDEX_CLIENT_CLASS)

    def dispatch(self, event):
        kind = event.get('event')
        if not self.config.has_credentials:
            logger.error("Index credentials are not configured, refusing %s", kind)
            return WebhookResponse(503, MISSING_CREDENTIALS_MESSAGE)

        client = self.client_class(self.config.application_id, self.config.admin_api_key)

        if kind == FULL_SYNC_EVENT:
            return self._full_sync(client)

        if kind in UPSERT_EVENTS:
            entity_type, status = UPSERT_EVENTS[kind]
            mapper, index_name = self._target(entity_type)
            result = client.upsert(index_name, mapper(event.get('payload') or {}))
            return WebhookResponse.from_data(status, {
                'objectID': result['objectID'],
                'taskID': result['taskID'],
            })

        if kind in DELETE_EVENTS:
            _, index_name = self._target(DELETE_EVENTS[kind])
            client.delete(index_name, event['model_ids'][0])
            return WebhookResponse(204)

        logger.info("Ignoring unhandled event %r", kind)
        return WebhookResponse(200, NOTHING_HAPPENED_MESSAGE)

    def _target(self, entity_type):
        mapper, index_attr = ENTITY_TYPES[entity_type]
        return mapper, getattr(self.config, index_attr)

    def _full_sync(self, client):
        source = self.source or import_string(settings.SYNC_SOURCE_CLASS)()
        engine = BulkSyncEngine(source, client)

        tally = {'message': SYNC_COMPLETED_MESSAGE}
        # Entity types are synced one after the other, never concurrently.
        for entity_type in ('products', 'categories'):
            mapper, index_name = self._target(entity_type)
            tally[entity_type] = engine.run(entity_type, mapper, index_name)

        return WebhookResponse.from_data(201, tally)
