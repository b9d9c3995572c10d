from collections.abc import Iterable

import structlog

from astromatch.domain.compatibility import CompatibilityAnalyzer, compatibility_tier
from astromatch.domain.entities import (
    CompatibilityResult,
    Profile,
    ProfileSummary,
    RankedCandidate,
)
from astromatch.domain.numerology import life_path_number
from astromatch.domain.traits import personality_traits
from astromatch.domain.zodiac import resolve_zodiac

log = structlog.get_logger(__name__)


class CompatibilityService:
    """Service métier de mise en relation.

    Responsabilités:
    - Comparer un utilisateur à un profil cible via `analyzer`.
    - Classer un lot de candidats par score décroissant.
    - Produire la vue « carte de profil » (signe, chemin de vie, traits).

    Aucun accès au stockage: les profils sont fournis par l'appelant.
    """

    def __init__(self, analyzer: CompatibilityAnalyzer):
        """Initialise le service avec l'analyseur (et donc sa source aléatoire)."""
        self.analyzer = analyzer

    def compare(self, user: Profile | None, target: Profile | None) -> CompatibilityResult:
        """Analyse une paire et journalise le score obtenu."""
        result = self.analyzer.analyze(user, target)
        log.info(
            "compatibility_compared",
            user_id=getattr(user, "id", None),
            target_id=getattr(target, "id", None),
            score=result.score,
            tier=compatibility_tier(result.score),
        )
        return result

    def rank_candidates(
        self, user: Profile, candidates: Iterable[Profile], limit: int | None = None
    ) -> list[RankedCandidate]:
        """Score chaque candidat puis trie par score décroissant.

        Le tri est stable: à score égal, l'ordre d'entrée est conservé.

        Paramètres:
        - user: profil de référence.
        - candidates: profils à comparer.
        - limit: nombre maximal de résultats (None = tous), au moins 1.

        Lève `ValueError` si `limit` est inférieur à 1.
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        ranked = []
        for candidate in candidates:
            result = self.analyzer.analyze(user, candidate)
            ranked.append(
                RankedCandidate(
                    id=candidate.id,
                    name=candidate.name,
                    tier=compatibility_tier(result.score),
                    result=result,
                )
            )
        ranked.sort(key=lambda item: item.result.score, reverse=True)
        if limit is not None:
            ranked = ranked[:limit]
        log.info("candidates_ranked", user_id=user.id, returned=len(ranked))
        return ranked

    def describe_profile(self, profile: Profile) -> ProfileSummary:
        """Dérive signe, chemin de vie et traits d'un profil."""
        sign = resolve_zodiac(profile.birthday)
        life_path = life_path_number(profile.birthday)
        return ProfileSummary(
            id=profile.id,
            zodiac_sign=sign,
            life_path=life_path,
            traits=personality_traits(sign, life_path),
        )
