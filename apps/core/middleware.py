import logging

from django.utils import timezone
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class RequestLogMiddleware(MiddlewareMixin):
    """
    Records every inbound request before any view runs.
    Observation only: never rejects or alters the request.
    """

    def process_request(self, request):
        logger.info(f"{request.method} {request.path} at {timezone.now().isoformat()}")
        return None
