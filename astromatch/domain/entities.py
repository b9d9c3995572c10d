"""
Entités du domaine métier.

Ce module définit les modèles de données échangés avec le moteur de compatibilité: le profil lu
(jamais modifié) et le résultat produit pour l'affichage.
"""

from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from astromatch.domain.zodiac import ZodiacSign

CompatibilityTier = Literal["high", "medium", "low"]


class Profile(BaseModel):
    """Profil utilisateur tel que fourni par l'appelant.

    Seuls `birthday`, `job_title` et `skills` participent au calcul; les autres champs du
    profil distant sont ignorés.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | int | None = None
    name: str | None = None
    birthday: date | str | None = None  # YYYY-MM-DD, validé paresseusement
    job_title: str | None = None
    skills: list[str] | None = None

    @field_validator("birthday", mode="before")
    @classmethod
    def _lenient_birthday(cls, value: Any) -> date | str | None:
        # une date inexploitable équivaut à une date absente
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, (date, str)):
            return value
        return None


class MatchDetail(BaseModel):
    """Sous-score d'une dimension (zodiaque ou chemin de vie) et sa description."""

    score: int = Field(ge=0, le=100)
    description: str


class CompatibilityResult(BaseModel):
    """Résultat de l'analyse de compatibilité entre deux profils."""

    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(ge=0, le=100)
    insights: list[str] = Field(default_factory=list)
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    zodiac_match: MatchDetail | None = Field(default=None, alias="zodiacMatch")
    life_path_match: MatchDetail | None = Field(default=None, alias="lifePathMatch")


class ProfileSummary(BaseModel):
    """Vue « carte de profil »: signe, chemin de vie et traits dérivés."""

    id: str | int | None = None
    zodiac_sign: ZodiacSign | None = None
    life_path: int | None = None
    traits: list[str] = Field(default_factory=list)


class RankedCandidate(BaseModel):
    """Candidat classé par score de compatibilité décroissant."""

    id: str | int | None = None
    name: str | None = None
    tier: CompatibilityTier
    result: CompatibilityResult
