"""
Détermination du signe zodiacal à partir d'une date de naissance.

Seuls le mois et le jour comptent; l'année et le fuseau horaire sont ignorés. L'appelant
fournit une date déjà ramenée au jour calendaire local voulu.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any


class ZodiacSign(str, Enum):
    """Les douze signes, valeurs en anglais comme dans les profils stockés."""

    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"


# (signe, (mois, jour) de début, (mois, jour) de fin), bornes incluses
ZODIAC_RANGES: tuple[tuple[ZodiacSign, tuple[int, int], tuple[int, int]], ...] = (
    (ZodiacSign.ARIES, (3, 21), (4, 19)),
    (ZodiacSign.TAURUS, (4, 20), (5, 20)),
    (ZodiacSign.GEMINI, (5, 21), (6, 20)),
    (ZodiacSign.CANCER, (6, 21), (7, 22)),
    (ZodiacSign.LEO, (7, 23), (8, 22)),
    (ZodiacSign.VIRGO, (8, 23), (9, 22)),
    (ZodiacSign.LIBRA, (9, 23), (10, 22)),
    (ZodiacSign.SCORPIO, (10, 23), (11, 21)),
    (ZodiacSign.SAGITTARIUS, (11, 22), (12, 21)),
    (ZodiacSign.CAPRICORN, (12, 22), (1, 19)),
    (ZodiacSign.AQUARIUS, (1, 20), (2, 18)),
    (ZodiacSign.PISCES, (2, 19), (3, 20)),
)


def coerce_date(value: Any) -> date | None:
    """Convertit une date de naissance brute en `date`, ou None si inexploitable.

    Accepte `date`, `datetime` (partie date uniquement) et les chaînes ISO-8601. Une erreur
    d'analyse n'est jamais propagée.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    raw = value.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def resolve_zodiac(birthday: Any) -> ZodiacSign | None:
    """Retourne le signe correspondant à `birthday`, None si la date est absente ou invalide."""
    d = coerce_date(birthday)
    if d is None:
        return None
    md = (d.month, d.day)
    # Capricorne chevauche le changement d'année: testé avant les plages simples
    if md >= (12, 22) or md <= (1, 19):
        return ZodiacSign.CAPRICORN
    for sign, start, end in ZODIAC_RANGES:
        if sign is ZodiacSign.CAPRICORN:
            continue
        if start <= md <= end:
            return sign
    return None
