"""
Numérologie: calcul du « chemin de vie » d'une date de naissance.

Ordre des opérations: somme des chiffres de l'année, du mois et du jour séparément, réduction de
chaque composante (11 et 22 conservés), addition, puis réduction du total (11, 22 et 33
conservés). Changer cet ordre modifie les résultats.
"""

from typing import Any

from astromatch.domain.zodiac import coerce_date

COMPONENT_MASTERS = (11, 22)
TOTAL_MASTERS = (11, 22, 33)
LIFE_PATH_NUMBERS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 11, 22, 33)


def sum_digits(number: int) -> int:
    """Somme des chiffres en base 10 (une seule passe)."""
    total = 0
    number = abs(number)
    while number > 0:
        total += number % 10
        number //= 10
    return total


def reduce_number(number: int, masters: tuple[int, ...] = COMPONENT_MASTERS) -> int:
    """Réduit à un chiffre, sauf si une valeur intermédiaire est un nombre maître."""
    while number > 9 and number not in masters:
        number = sum_digits(number)
    return number


def life_path_number(birthday: Any) -> int | None:
    """Calcule le chemin de vie, None si la date est absente ou invalide.

    Exemple: 1990-05-15 → 1 + 5 + 6 = 12 → 3.
    """
    d = coerce_date(birthday)
    if d is None:
        return None
    year = reduce_number(sum_digits(d.year))
    month = reduce_number(sum_digits(d.month))
    day = reduce_number(sum_digits(d.day))
    return reduce_number(year + month + day, TOTAL_MASTERS)
