"""
Endpoint de santé pour vérifier la disponibilité de l'API.

Expose `/health` pour signaler l'état général de l'application et le mode de l'analyseur.
"""


from fastapi import APIRouter

from astromatch.core.container import container

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Vérifie la disponibilité de l'API et indique si les scores sont reproductibles."""
    return {
        "status": "ok",
        "seeded": container.seeded,
    }
