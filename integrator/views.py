import json
import logging

from django.http import HttpResponse, HttpResponseBadRequest
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from integrator.config import IntegrationConfig
from integrator.dispatcher import EventDispatcher

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
def webhook(request):
    try:
        event = json.loads(request.body)
    except ValueError:
        logger.warning("Rejected webhook with a non-JSON body")
        return HttpResponseBadRequest('Request body must be JSON.')
    if not isinstance(event, dict):
        return HttpResponseBadRequest('Request body must be a JSON object.')

    result = EventDispatcher(IntegrationConfig.from_settings()).dispatch(event)
    return HttpResponse(result.body, status=result.status_code, content_type=result.content_type)
