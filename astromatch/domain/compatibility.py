"""
Moteur de compatibilité entre deux profils.

Le calcul sépare deux étapes:
- la classification déterministe de chaque paire (signe, chemin de vie, carrière) dans un
  « bucket »;
- le tirage d'une amplitude dans la plage du bucket, via un générateur injecté.

Avec un `random.Random` amorcé, le résultat complet est reproductible. Les tables de
compatibilité sont asymétriques: seule la direction utilisateur → cible est consultée.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Any

import structlog

from astromatch.domain.entities import (
    CompatibilityResult,
    CompatibilityTier,
    MatchDetail,
    Profile,
)
from astromatch.domain.numerology import life_path_number
from astromatch.domain.zodiac import ZodiacSign, resolve_zodiac

log = structlog.get_logger(__name__)

INCOMPLETE_INSIGHT = "Profiles incomplete. Unable to determine compatibility."

BASELINE_RANGE = (65, 84)
PRO_THRESHOLD = 75
CON_THRESHOLD = 40
CAREER_LITE_THRESHOLD = 50

_Z = ZodiacSign

COMPATIBLE_SIGNS: dict[ZodiacSign, tuple[ZodiacSign, ...]] = {
    _Z.ARIES: (_Z.LEO, _Z.SAGITTARIUS, _Z.GEMINI),
    _Z.TAURUS: (_Z.VIRGO, _Z.CAPRICORN, _Z.CANCER),
    _Z.GEMINI: (_Z.LIBRA, _Z.AQUARIUS, _Z.ARIES),
    _Z.CANCER: (_Z.SCORPIO, _Z.PISCES, _Z.TAURUS),
    _Z.LEO: (_Z.ARIES, _Z.SAGITTARIUS, _Z.GEMINI),
    _Z.VIRGO: (_Z.TAURUS, _Z.CAPRICORN, _Z.CANCER),
    _Z.LIBRA: (_Z.GEMINI, _Z.AQUARIUS, _Z.LEO),
    _Z.SCORPIO: (_Z.CANCER, _Z.PISCES, _Z.VIRGO),
    _Z.SAGITTARIUS: (_Z.ARIES, _Z.LEO, _Z.LIBRA),
    _Z.CAPRICORN: (_Z.TAURUS, _Z.VIRGO, _Z.SCORPIO),
    _Z.AQUARIUS: (_Z.GEMINI, _Z.LIBRA, _Z.SAGITTARIUS),
    _Z.PISCES: (_Z.CANCER, _Z.SCORPIO, _Z.CAPRICORN),
}

OPPOSITE_SIGNS: dict[ZodiacSign, ZodiacSign] = {
    _Z.ARIES: _Z.LIBRA,
    _Z.TAURUS: _Z.SCORPIO,
    _Z.GEMINI: _Z.SAGITTARIUS,
    _Z.CANCER: _Z.CAPRICORN,
    _Z.LEO: _Z.AQUARIUS,
    _Z.VIRGO: _Z.PISCES,
    _Z.LIBRA: _Z.ARIES,
    _Z.SCORPIO: _Z.TAURUS,
    _Z.SAGITTARIUS: _Z.GEMINI,
    _Z.CAPRICORN: _Z.CANCER,
    _Z.AQUARIUS: _Z.LEO,
    _Z.PISCES: _Z.VIRGO,
}

COMPATIBLE_LIFE_PATHS: dict[int, tuple[int, ...]] = {
    1: (3, 5, 7),
    2: (4, 6, 8),
    3: (1, 5, 9),
    4: (2, 8, 22),
    5: (1, 3, 7),
    6: (2, 9),
    7: (1, 5),
    8: (2, 4),
    9: (3, 6),
    11: (11, 22, 33),
    22: (4, 11, 22, 33),
    33: (11, 22, 33),
}


class ZodiacBucket(str, Enum):
    SAME = "same"
    COMPATIBLE = "compatible"
    OPPOSITE = "opposite"
    OTHER = "other"


class LifePathBucket(str, Enum):
    SAME = "same"
    COMPATIBLE = "compatible"
    OTHER = "other"


class CareerBucket(str, Enum):
    ALIGNED = "aligned"
    RELATED = "related"
    DIVERSE = "diverse"


# Plages inclusives [min, max] des sous-scores par bucket
ZODIAC_RANGES = {
    ZodiacBucket.SAME: (70, 84),
    ZodiacBucket.COMPATIBLE: (80, 94),
    ZodiacBucket.OPPOSITE: (60, 84),
    ZodiacBucket.OTHER: (50, 74),
}
LIFE_PATH_RANGES = {
    LifePathBucket.SAME: (75, 89),
    LifePathBucket.COMPATIBLE: (85, 99),
    LifePathBucket.OTHER: (55, 74),
}
CAREER_RANGES = {
    CareerBucket.ALIGNED: (80, 94),
    CareerBucket.RELATED: (65, 79),
    CareerBucket.DIVERSE: (50, 64),
}

CAREER_INSIGHTS = {
    CareerBucket.ALIGNED: (
        "You share professional interests and experiences, creating a strong foundation."
    ),
    CareerBucket.RELATED: (
        "Your professional backgrounds have enough in common to understand each other's worlds."
    ),
    CareerBucket.DIVERSE: (
        "Your diverse professional backgrounds can bring fresh perspectives to each other."
    ),
}


def classify_zodiac(
    sign_a: ZodiacSign | None, sign_b: ZodiacSign | None
) -> ZodiacBucket | None:
    """Classe une paire de signes; None si l'un des signes est inconnu."""
    if sign_a is None or sign_b is None:
        return None
    if sign_a == sign_b:
        return ZodiacBucket.SAME
    if sign_b in COMPATIBLE_SIGNS[sign_a]:
        return ZodiacBucket.COMPATIBLE
    if OPPOSITE_SIGNS[sign_a] == sign_b:
        return ZodiacBucket.OPPOSITE
    return ZodiacBucket.OTHER


def classify_life_path(path_a: int | None, path_b: int | None) -> LifePathBucket | None:
    """Classe une paire de chemins de vie; None si l'un est inconnu."""
    if path_a is None or path_b is None:
        return None
    if path_a == path_b:
        return LifePathBucket.SAME
    if path_b in COMPATIBLE_LIFE_PATHS.get(path_a, ()):
        return LifePathBucket.COMPATIBLE
    return LifePathBucket.OTHER


def skill_overlap_ratio(skills_a: list[str] | None, skills_b: list[str] | None) -> float:
    """Part des compétences communes rapportée à la plus petite liste (au moins 1)."""
    skills_a = skills_a or []
    skills_b = skills_b or []
    common = [skill for skill in skills_a if skill in skills_b]
    return len(common) / max(1, min(len(skills_a), len(skills_b)))


def same_industry(title_a: str | None, title_b: str | None) -> bool:
    """Vrai si l'un des intitulés de poste contient l'autre (insensible à la casse)."""
    if not title_a or not title_b:
        return False
    a, b = title_a.lower(), title_b.lower()
    return b in a or a in b


def classify_career(profile_a: Profile, profile_b: Profile) -> CareerBucket:
    """Classe la proximité professionnelle de deux profils."""
    ratio = skill_overlap_ratio(profile_a.skills, profile_b.skills)
    if ratio > 0.5 or same_industry(profile_a.job_title, profile_b.job_title):
        return CareerBucket.ALIGNED
    if ratio > 0.2:
        return CareerBucket.RELATED
    return CareerBucket.DIVERSE


def compatibility_tier(score: int) -> CompatibilityTier:
    """Niveau d'affichage du score (badge de la carte de profil)."""
    if score >= 80:
        return "high"
    if score >= 60:
        return "medium"
    return "low"


def _blend(score: int, sub_score: int) -> int:
    # moyenne arrondie au demi supérieur
    return (score + sub_score + 1) // 2


def _clamp(score: int) -> int:
    return max(0, min(100, score))


def _zodiac_description(bucket: ZodiacBucket, a: ZodiacSign, b: ZodiacSign) -> str:
    if bucket is ZodiacBucket.SAME:
        return f"As two {a.value}s, you understand each other deeply, though you may compete at times."
    if bucket is ZodiacBucket.COMPATIBLE:
        return f"{a.value} and {b.value} have a natural harmony that creates a balanced connection."
    if bucket is ZodiacBucket.OPPOSITE:
        return (
            f"{a.value} and {b.value} are astrological opposites, which can create both "
            "intense attraction and challenges."
        )
    return (
        f"{a.value} and {b.value} have differences to navigate, but this can lead to growth "
        "for both of you."
    )


def _life_path_description(bucket: LifePathBucket, a: int, b: int) -> str:
    if bucket is LifePathBucket.SAME:
        return (
            f"You both share Life Path {a}, creating a strong understanding but potential "
            "for competition."
        )
    if bucket is LifePathBucket.COMPATIBLE:
        return f"Life Paths {a} and {b} complement each other beautifully."
    return f"Life Paths {a} and {b} bring different energies that can be balancing with effort."


class CompatibilityAnalyzer:
    """Analyse de compatibilité avec source aléatoire injectable.

    Paramètres:
    - rng: générateur à utiliser (prioritaire sur `seed`).
    - seed: graine pour construire un `random.Random` reproductible.
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        self._rng = rng if rng is not None else random.Random(seed)

    def _draw(self, bounds: tuple[int, int]) -> int:
        low, high = bounds
        return self._rng.randint(low, high)

    def zodiac_match(
        self, sign_a: ZodiacSign | None, sign_b: ZodiacSign | None
    ) -> MatchDetail | None:
        bucket = classify_zodiac(sign_a, sign_b)
        if bucket is None:
            return None
        return MatchDetail(
            score=self._draw(ZODIAC_RANGES[bucket]),
            description=_zodiac_description(bucket, sign_a, sign_b),
        )

    def life_path_match(self, path_a: int | None, path_b: int | None) -> MatchDetail | None:
        bucket = classify_life_path(path_a, path_b)
        if bucket is None:
            return None
        return MatchDetail(
            score=self._draw(LIFE_PATH_RANGES[bucket]),
            description=_life_path_description(bucket, path_a, path_b),
        )

    def career_match(self, profile_a: Profile, profile_b: Profile) -> MatchDetail:
        bucket = classify_career(profile_a, profile_b)
        return MatchDetail(score=self._draw(CAREER_RANGES[bucket]), description=CAREER_INSIGHTS[bucket])

    def analyze(
        self, user: Profile | None, target: Profile | None
    ) -> CompatibilityResult:
        """Calcule le score, les explications et les points forts/faibles d'une paire.

        Ordre des tirages aléatoires: base, zodiaque (si calculé), chemin de vie (si calculé),
        carrière, puis trait de personnalité.
        """
        if user is None or target is None:
            return CompatibilityResult(score=0, insights=[INCOMPLETE_INSIGHT])

        insights: list[str] = []
        pros: list[str] = []
        cons: list[str] = []

        score = self._draw(BASELINE_RANGE)

        zodiac = self.zodiac_match(resolve_zodiac(user.birthday), resolve_zodiac(target.birthday))
        if zodiac is not None:
            score = _blend(score, zodiac.score)
            insights.append(zodiac.description)
            if zodiac.score >= PRO_THRESHOLD:
                pros.append("Astrologically well-matched")
            elif zodiac.score <= CON_THRESHOLD:
                cons.append("Astrological challenges may arise")

        life_path = self.life_path_match(
            life_path_number(user.birthday), life_path_number(target.birthday)
        )
        if life_path is not None:
            score = _blend(score, life_path.score)
            insights.append(life_path.description)
            if life_path.score >= PRO_THRESHOLD:
                pros.append("Life paths complement each other well")
            elif life_path.score <= CON_THRESHOLD:
                cons.append("May have differing life approaches")

        career = self.career_match(user, target)
        score = _blend(score, career.score)
        insights.append(career.description)
        if career.score >= PRO_THRESHOLD:
            pros.append("Strong career alignment")
            pros.append("Professional goals highly compatible")
        elif career.score >= CAREER_LITE_THRESHOLD:
            pros.append("Can learn from each other's professional experiences")
        else:
            cons.append("Career paths may create tension")

        # trait de personnalité: sans effet sur le score
        if self._rng.random() > 0.5:
            pros.append("Natural personality alignment")
            insights.append("Your communication styles appear to complement each other")
        else:
            cons.append("May need to work on communication")
            insights.append(
                "Different communication styles could be challenging but growth-oriented"
            )

        score = _clamp(score)
        log.debug(
            "compatibility_analyzed",
            user_id=user.id,
            target_id=target.id,
            score=score,
            zodiac=zodiac is not None,
            life_path=life_path is not None,
        )
        return CompatibilityResult(
            score=score,
            insights=insights,
            pros=pros,
            cons=cons,
            zodiac_match=zodiac,
            life_path_match=life_path,
        )


def analyze_compatibility(
    user: Profile | dict[str, Any] | None,
    target: Profile | dict[str, Any] | None,
    rng: random.Random | None = None,
) -> CompatibilityResult:
    """Raccourci fonctionnel: accepte aussi des dicts bruts issus du stockage."""
    if isinstance(user, dict):
        user = Profile.model_validate(user)
    if isinstance(target, dict):
        target = Profile.model_validate(target)
    return CompatibilityAnalyzer(rng=rng).analyze(user, target)
