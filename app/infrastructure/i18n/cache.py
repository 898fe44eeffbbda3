"""Process-wide translation bundle cache."""

from typing import Dict, Optional

from infrastructure.i18n.models import Locale, TranslationBundle


class TranslationCache:
    """In-memory cache of loaded translation bundles, keyed by locale.

    Writes are append-only: ``put`` keeps the first bundle stored for a
    locale, so concurrent first-time loads of the same locale settle on one
    value without locking. Bundles are shared and must not be mutated.
    """

    def __init__(self):
        self._bundles: Dict[Locale, TranslationBundle] = {}

    def get(self, locale: Locale) -> Optional[TranslationBundle]:
        return self._bundles.get(locale)

    def put(self, locale: Locale, bundle: TranslationBundle) -> TranslationBundle:
        """Store bundle for locale unless one is already cached.

        Returns:
            The bundle now cached for locale.
        """
        return self._bundles.setdefault(locale, bundle)

    def clear(self) -> None:
        self._bundles.clear()

    def __contains__(self, locale: object) -> bool:
        return locale in self._bundles

    def __len__(self) -> int:
        return len(self._bundles)
