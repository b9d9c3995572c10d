"""
Conteneur d'injection de dépendances et configuration application.

Instancie les composants centraux (settings, analyseur de compatibilité, service métier)
et expose un singleton `container` utilisé par le reste de l'application.
"""

from astromatch.core.settings import get_settings
from astromatch.domain.compatibility import CompatibilityAnalyzer
from astromatch.domain.services import CompatibilityService


class Container:
    def __init__(self):
        self.settings = get_settings()
        # Une graine fixe rend les scores reproductibles d'un appel à l'autre
        self.analyzer = CompatibilityAnalyzer(seed=self.settings.COMPAT_SEED)
        self.compatibility = CompatibilityService(self.analyzer)

    @property
    def seeded(self) -> bool:
        return self.settings.COMPAT_SEED is not None


container = Container()
