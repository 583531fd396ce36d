"""
Time endpoint.

Mounted under the configured base path (``/localtime`` by default) so the
Ingress rule for ``/localtime`` lands on ``GET /localtime/``.
"""
import logging

from fastapi import APIRouter, Request

from time_service.clock import current_time

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
def localtime(request: Request):
    now = current_time(request.app.state.settings.tzinfo)
    logger.debug("Serving currentTime=%s", now)
    return {"currentTime": now}
