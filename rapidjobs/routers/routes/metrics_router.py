from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST
from prometheus_client import CollectorRegistry
from prometheus_client import REGISTRY
from prometheus_client import generate_latest
from prometheus_client.multiprocess import MultiProcessCollector

import settings

TAG = "Metrics"
router = APIRouter(prefix="/metrics")
router.tags = [TAG]


@router.get("", include_in_schema=False)
async def get_metrics():
    metrics_data = generate_latest(_get_registry())
    return Response(content=metrics_data, media_type=CONTENT_TYPE_LATEST)


def _get_registry() -> CollectorRegistry:
    if settings.PROMETHEUS_MULTIPROC_DIR:
        registry = CollectorRegistry()
        MultiProcessCollector(registry)
    else:
        registry = REGISTRY
    return registry
