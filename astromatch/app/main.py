"""
Application principale FastAPI.

Ce module assemble les composants de l'application : middlewares, gestion d'erreurs, routes et
métriques de l'API de compatibilité.

Responsabilités du module:
- Initialiser le logging structuré
- Construire l'application FastAPI avec son titre/debug
- Ajouter les middlewares (request id, timing, Prometheus)
- Monter les routers (santé, compatibilité, métriques)
"""

from __future__ import annotations

from fastapi import FastAPI

from astromatch.api.errors import register_error_handlers
from astromatch.api.routes_compatibility import router as compatibility_router
from astromatch.api.routes_health import router as health_router
from astromatch.app.metrics import PrometheusMiddleware, metrics_router
from astromatch.core.container import container
from astromatch.core.logging import setup_logging
from astromatch.middlewares.request_id import RequestIDMiddleware
from astromatch.middlewares.timing import TimingMiddleware


def create_app() -> FastAPI:
    """
    Construit et retourne l'application FastAPI prête à l'usage.

    Étapes:
    - Configure le logging structuré (structlog)
    - Lit les paramètres d'exécution
    - Ajoute les middlewares utiles au debug/traçabilité
    - Publie les routes de santé, de compatibilité et de métriques
    """
    settings = container.settings
    setup_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG)
    register_error_handlers(app)
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(TimingMiddleware)
    # ajouté en dernier: exécuté en premier, l'identifiant couvre les logs de timing
    app.add_middleware(RequestIDMiddleware)
    app.include_router(health_router)
    app.include_router(compatibility_router)
    app.include_router(metrics_router)
    return app


app = create_app()


def run() -> None:
    """Point d'entrée `astromatch-api`: lance uvicorn avec l'hôte/port configurés."""
    import uvicorn  # noqa: PLC0415

    uvicorn.run(app, host=container.settings.APP_HOST, port=container.settings.APP_PORT)
