import json
import logging

from celery import shared_task

from integrator.config import IntegrationConfig
from integrator.dispatcher import FULL_SYNC_EVENT, EventDispatcher

logger = logging.getLogger(__name__)


@shared_task
def resync_catalog():
    """Re-index every product and category, as on integration activation."""
    result = EventDispatcher(IntegrationConfig.from_settings()).dispatch({'event': FULL_SYNC_EVENT})
    if result.status_code != 201:
        logger.error("Catalog resync did not run: %s", result.body)
        return {'error': result.body}

    tally = json.loads(result.body)
    logger.info("Catalog resync complete: %s", tally)
    return tally
