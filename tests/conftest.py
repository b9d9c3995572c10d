"""Configuration de test pour pytest avec gestion des chemins.

Ce module ajoute la racine du projet au sys.path (imports `astromatch...`) et fournit des profils
et un analyseur amorcé réutilisables.
"""

import os
import sys

import pytest

# Ensure project root is on sys.path so that
# imports like `from astromatch...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from astromatch.domain.compatibility import CompatibilityAnalyzer  # noqa: E402
from astromatch.domain.entities import Profile  # noqa: E402


class BoundRandom:
    """Générateur factice: tire toujours la borne basse (ou haute) des plages.

    `coin` est la valeur renvoyée par `random()` pour le tirage de personnalité.
    """

    def __init__(self, pick_high: bool = False, coin: float = 0.9):
        self.pick_high = pick_high
        self.coin = coin

    def randint(self, a: int, b: int) -> int:
        return b if self.pick_high else a

    def random(self) -> float:
        return self.coin


@pytest.fixture
def low_analyzer() -> CompatibilityAnalyzer:
    """Analyseur tirant la borne basse de chaque plage, personnalité favorable."""
    return CompatibilityAnalyzer(rng=BoundRandom(pick_high=False, coin=0.9))


@pytest.fixture
def high_analyzer() -> CompatibilityAnalyzer:
    """Analyseur tirant la borne haute de chaque plage, personnalité défavorable."""
    return CompatibilityAnalyzer(rng=BoundRandom(pick_high=True, coin=0.1))


@pytest.fixture
def taurus_engineer() -> Profile:
    """Taureau, chemin de vie 3, ingénieur logiciel."""
    return Profile(
        id="u-1",
        name="Alex",
        birthday="1990-05-15",
        job_title="Software Engineer",
        skills=["Python", "SQL", "Docker"],
    )


@pytest.fixture
def libra_chef() -> Profile:
    """Balance, métier et compétences sans rapport avec l'ingénieur."""
    return Profile(
        id="u-2",
        name="Sam",
        birthday="1992-10-05",
        job_title="Pastry Chef",
        skills=["Baking", "Plating"],
    )


@pytest.fixture
def make_analyzer():
    """Fabrique d'analyseurs à bornes fixes: `make_analyzer(pick_high, coin)`."""

    def _make(pick_high: bool = False, coin: float = 0.9) -> CompatibilityAnalyzer:
        return CompatibilityAnalyzer(rng=BoundRandom(pick_high=pick_high, coin=coin))

    return _make
