# Schémas Pydantic exposés par l'API (requêtes et réponses).

from pydantic import BaseModel, Field

from astromatch.domain.entities import (
    CompatibilityResult,
    CompatibilityTier,
    Profile,
    RankedCandidate,
)


class CompatibilityRequest(BaseModel):
    """Requête de comparaison d'une paire de profils.

    Champs:
    - user: Profile | None (profil de l'utilisateur courant)
    - target: Profile | None (profil consulté)

    Un profil absent donne le résultat de repli (score 0), pas une erreur.
    """

    user: Profile | None = None
    target: Profile | None = None


class CompatibilityResponse(CompatibilityResult):
    """Résultat de compatibilité enrichi du niveau d'affichage (`tier`)."""

    tier: CompatibilityTier


class RankRequest(BaseModel):
    """Requête de classement d'un lot de candidats.

    Champs:
    - user: Profile (profil de référence)
    - candidates: list[Profile]
    - limit: int | None (nombre maximal de résultats)
    """

    user: Profile
    candidates: list[Profile] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=1)


class RankResponse(BaseModel):
    """Candidats triés par score décroissant."""

    results: list[RankedCandidate]
