"""Traits de personnalité associés au signe et au chemin de vie."""

from astromatch.domain.numerology import reduce_number
from astromatch.domain.zodiac import ZodiacSign

ZODIAC_TRAITS: dict[ZodiacSign, list[str]] = {
    ZodiacSign.ARIES: ["Bold", "Passionate", "Confident", "Impulsive"],
    ZodiacSign.TAURUS: ["Reliable", "Patient", "Practical", "Stubborn"],
    ZodiacSign.GEMINI: ["Versatile", "Curious", "Adaptable", "Inconsistent"],
    ZodiacSign.CANCER: ["Nurturing", "Intuitive", "Emotional", "Protective"],
    ZodiacSign.LEO: ["Charismatic", "Warm", "Dominant", "Theatrical"],
    ZodiacSign.VIRGO: ["Analytical", "Practical", "Diligent", "Perfectionist"],
    ZodiacSign.LIBRA: ["Diplomatic", "Fair", "Social", "Indecisive"],
    ZodiacSign.SCORPIO: ["Intense", "Passionate", "Strategic", "Secretive"],
    ZodiacSign.SAGITTARIUS: ["Optimistic", "Adventurous", "Honest", "Restless"],
    ZodiacSign.CAPRICORN: ["Ambitious", "Disciplined", "Practical", "Reserved"],
    ZodiacSign.AQUARIUS: ["Progressive", "Original", "Independent", "Aloof"],
    ZodiacSign.PISCES: ["Compassionate", "Artistic", "Intuitive", "Escapist"],
}

LIFE_PATH_TRAITS: dict[int, list[str]] = {
    1: ["Leader", "Independent", "Innovative", "Ambitious"],
    2: ["Cooperative", "Diplomatic", "Sensitive", "Peacemaker"],
    3: ["Creative", "Optimistic", "Inspirational", "Expressive"],
    4: ["Practical", "Trustworthy", "Organized", "Detail-oriented"],
    5: ["Adventurous", "Versatile", "Freedom-loving", "Curious"],
    6: ["Responsible", "Nurturing", "Harmonious", "Compassionate"],
    7: ["Analytical", "Introspective", "Perfectionist", "Spiritual"],
    8: ["Ambitious", "Goal-oriented", "Status-conscious", "Resilient"],
    9: ["Humanitarian", "Compassionate", "Selfless", "Artistic"],
}


def personality_traits(sign: ZodiacSign | None, life_path: int | None) -> list[str]:
    """Traits du signe suivis de ceux du chemin de vie.

    Les nombres maîtres utilisent les traits de leur chiffre racine (11 → 2, 22 → 4, 33 → 6).
    Une donnée absente ne contribue aucun trait.
    """
    traits: list[str] = []
    if sign is not None:
        traits.extend(ZODIAC_TRAITS[sign])
    if life_path is not None:
        traits.extend(LIFE_PATH_TRAITS.get(reduce_number(life_path, masters=()), []))
    return traits
