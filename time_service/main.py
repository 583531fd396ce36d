"""
FastAPI application for the current-time service deployed on Kubernetes behind Istio.

Features
--------
- Time endpoint (`/localtime/`) returning `{"currentTime": "yyyy-MM-ddTHH:mm:ss"}`.
- Liveness probe (`/livez`) used by Kubernetes to check if the process is alive.
- Readiness probe (`/readyz`) used by Kubernetes to decide if the Pod can receive traffic.
- Prometheus metrics at (`/metrics`) via `prometheus-fastapi-instrumentator`.

Intended Use
------------
This service runs with an injected Istio sidecar (Envoy) and is reached through an
Ingress of class `istio` that routes `/localtime` to the NodePort Service on port 9095.
Health endpoints are wired to Kubernetes probes; metrics can be scraped by Prometheus.

Notes
-----
- The time route's mount point is configurable (`TIME_SERVICE_BASE_PATH`); see `time_service.config`.
- No state is kept between requests. Every other path answers 404.

"""
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator

from time_service.config import Settings, load_settings
from time_service.localtime import router as localtime_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = load_settings()

    app = FastAPI(title="time-service", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings

    app.include_router(localtime_router, prefix=settings.base_path)

    @app.get("/livez")
    def livez():
        return JSONResponse(content={"status": "ok"})

    @app.get("/readyz")
    def readyz():
        return {"ready": True}

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    if settings.metrics_enabled:
        # instrument and expose /metrics, one registry per app
        Instrumentator(registry=CollectorRegistry()).instrument(app).expose(app, endpoint="/metrics")

    return app


app = create_app()
