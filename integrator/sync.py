import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from django.conf import settings

logger = logging.getLogger(__name__)


class BulkSyncEngine:
    """Walks every page of one entity type and upserts each record into an index.

    Each page is fanned out over a thread pool and joined before the next page
    is fetched, so at most one page of writes is outstanding at a time. When an
    upsert fails, its siblings on the same page still run to completion and the
    first error is re-raised once the page has settled; writes that already
    landed in the index are not rolled back.
    """

    def __init__(self, source, client, max_workers=None):
        self.source = source
        self.client = client
        self.max_workers = max_workers or getattr(settings, 'SYNC_MAX_WORKERS', 32)

    def run(self, entity_type, mapper, index_name):
        logger.info("Starting %s sync into %s", entity_type, index_name)

        added = 0
        page = 1
        while page >= 1:
            result = self.source.fetch_page(entity_type, page) or {}
            batch = result.get('data')
            if not batch:
                logger.warning("Unable to fetch %s page %d, there might not be any", entity_type, page)
                break

            added += self._sync_page(batch, mapper, index_name)
            logger.debug("Synced %s page %d (%d so far)", entity_type, page, added)

            total_pages = ((result.get('meta') or {}).get('pagination') or {}).get('total_pages')
            if not total_pages or page == total_pages:
                page = 0
            else:
                page += 1

        logger.info("Finished %s sync: %d added", entity_type, added)
        return added

    def _sync_page(self, batch, mapper, index_name):
        synced = 0
        workers = min(len(batch), self.max_workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix='index-sync') as executor:
            futures = [
                executor.submit(self.client.upsert, index_name, mapper(record))
                for record in batch
            ]
            errors = []
            for future in as_completed(futures):
                exc = future.exception()
                if exc is not None:
                    errors.append(exc)
                else:
                    synced += 1

        if errors:
            logger.error("%d of %d upserts into %s failed", len(errors), len(batch), index_name)
            raise errors[0]
        return synced
