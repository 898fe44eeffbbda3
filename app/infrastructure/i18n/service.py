"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import Locale, TranslationBundle
from infrastructure.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    Thin facade over a TranslationLoader: loads bundles and wraps them in
    Translators.

    Usage:
        # Via dependency injection
        from infrastructure.services import TranslationServiceDep

        @router.get("/{locale}/")
        async def landing(locale: Locale, translation: TranslationServiceDep):
            t = await translation.get_translator(locale)
            return {"title": t("hero.title")}
    """

    def __init__(self, loader: TranslationLoader):
        """Initialize translation service.

        Args:
            loader: TranslationLoader bundles are loaded through.
        """
        self._loader = loader

    async def get_bundle(self, locale: Locale) -> TranslationBundle:
        return await self._loader.load(locale)

    async def get_translator(self, locale: Locale) -> Translator:
        """Load the bundle for locale and wrap it in a Translator.

        Args:
            locale: Locale to translate to.

        Returns:
            Translator over the best available bundle for locale.
        """
        bundle = await self._loader.load(locale)
        return Translator(bundle, locale=locale)

    async def translate(
        self,
        key: str,
        locale: Locale,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Translate one key for locale.

        Args:
            key: Dotted key path.
            locale: Locale to translate to.
            params: Optional values for {name} placeholders.

        Returns:
            Translated message, or the key if it is missing.
        """
        translator = await self.get_translator(locale)
        return translator.t(key, params)

    async def preload(
        self, locales: Optional[Iterable[Locale]] = None
    ) -> Dict[Locale, TranslationBundle]:
        return await self._loader.preload(locales)

    @property
    def loader(self) -> TranslationLoader:
        """Access the underlying TranslationLoader."""
        return self._loader
