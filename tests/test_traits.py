"""Tests pour les traits de personnalité dérivés du signe et du chemin de vie."""

from __future__ import annotations

from astromatch.domain.traits import LIFE_PATH_TRAITS, ZODIAC_TRAITS, personality_traits
from astromatch.domain.zodiac import ZodiacSign

# Constantes pour éviter les erreurs PLR2004 (Magic values)
TRAITS_PER_SOURCE = 4


def test_personality_traits_combines_sign_then_life_path() -> None:
    """Teste l'ordre: traits du signe puis du chemin de vie."""
    traits = personality_traits(ZodiacSign.LEO, 1)
    assert traits == ZODIAC_TRAITS[ZodiacSign.LEO] + LIFE_PATH_TRAITS[1]


def test_personality_traits_master_numbers_use_root_digit() -> None:
    """Teste que 11, 22 et 33 reprennent les traits de 2, 4 et 6."""
    assert personality_traits(None, 11) == LIFE_PATH_TRAITS[2]
    assert personality_traits(None, 22) == LIFE_PATH_TRAITS[4]
    assert personality_traits(None, 33) == LIFE_PATH_TRAITS[6]


def test_personality_traits_missing_inputs() -> None:
    """Teste qu'une donnée absente ne contribue aucun trait."""
    assert personality_traits(None, None) == []
    assert len(personality_traits(ZodiacSign.PISCES, None)) == TRAITS_PER_SOURCE


def test_every_sign_has_traits() -> None:
    """Teste que la table couvre les douze signes."""
    assert set(ZODIAC_TRAITS) == set(ZodiacSign)
