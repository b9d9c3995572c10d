"""
Routes de compatibilité: comparaison d'une paire, classement de candidats et carte de profil.

Les profils sont fournis dans le corps de la requête; l'API ne lit aucun stockage.
"""

from fastapi import APIRouter

from astromatch.api.errors import too_many_candidates
from astromatch.api.schemas import (
    CompatibilityRequest,
    CompatibilityResponse,
    RankRequest,
    RankResponse,
)
from astromatch.app.metrics import CANDIDATES_RANKED, COMPATIBILITY_ANALYSES
from astromatch.core.container import container
from astromatch.domain.compatibility import compatibility_tier
from astromatch.domain.entities import Profile, ProfileSummary

router = APIRouter(tags=["compatibility"])


@router.post("/compatibility", response_model=CompatibilityResponse)
def compare(payload: CompatibilityRequest):
    """
    Compare deux profils.

    Paramètres:
    - payload: `CompatibilityRequest` (user, target).

    Retour: `CompatibilityResponse` (score, insights, pros, cons, sous-scores, tier).
    """
    result = container.compatibility.compare(payload.user, payload.target)
    tier = compatibility_tier(result.score)
    COMPATIBILITY_ANALYSES.labels(tier).inc()
    return CompatibilityResponse(**result.model_dump(), tier=tier)


@router.post("/compatibility/rank", response_model=RankResponse)
def rank(payload: RankRequest):
    """
    Classe des candidats par compatibilité décroissante avec `user`.

    Erreurs:
    - 400 TOO_MANY_CANDIDATES si le lot dépasse `RANK_MAX_CANDIDATES`.
    """
    maximum = container.settings.RANK_MAX_CANDIDATES
    if len(payload.candidates) > maximum:
        raise too_many_candidates(len(payload.candidates), maximum)
    results = container.compatibility.rank_candidates(
        payload.user, payload.candidates, limit=payload.limit
    )
    CANDIDATES_RANKED.inc(len(payload.candidates))
    return RankResponse(results=results)


@router.post("/profiles/describe", response_model=ProfileSummary)
def describe(profile: Profile):
    """Retourne signe, chemin de vie et traits dérivés d'un profil."""
    return container.compatibility.describe_profile(profile)
