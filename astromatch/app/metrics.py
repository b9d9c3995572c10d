"""
Métriques Prometheus pour l'application.

Ce module définit les métriques HTTP et métier exposées sur `/metrics`, ainsi que le middleware
qui mesure la latence des requêtes par route.
"""

import time

from fastapi import APIRouter, Request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

metrics_router = APIRouter()

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "route", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "Latency of HTTP requests", ["route"]
)

# Business metrics
COMPATIBILITY_ANALYSES = Counter(
    "compatibility_analyses_total",
    "Total pairwise compatibility analyses served",
    ["tier"],
)
CANDIDATES_RANKED = Counter(
    "candidates_ranked_total",
    "Total candidate profiles scored by ranking requests",
)


def _route_label(request: Request) -> str:
    """Gabarit de la route servie; les chemins inconnus partagent le label `unmatched`."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


@metrics_router.get("/metrics")
def metrics():
    """
    Expose les métriques Prometheus au format texte.

    Returns:
        Response: Réponse HTTP contenant les métriques au format Prometheus.
    """
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware Prometheus pour mesurer les métriques HTTP.

    Collecte les métriques de comptage des requêtes et de latence par route pour l'exposition
    Prometheus.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Traite une requête HTTP et collecte les métriques.

        Args:
            request: Requête HTTP entrante.
            call_next: Fonction pour appeler le middleware suivant.

        Returns:
            Response: Réponse HTTP avec métriques collectées.
        """
        start = time.perf_counter()
        response: Response = await call_next(request)
        route = _route_label(request)
        REQUEST_COUNT.labels(request.method, route, str(response.status_code)).inc()
        REQUEST_LATENCY.labels(route).observe(time.perf_counter() - start)
        return response
