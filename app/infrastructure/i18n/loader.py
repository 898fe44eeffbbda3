"""Translation bundle loading.

Bundles come from an injected BundleSource and are cached per process by
the TranslationLoader, which walks the fallback chain when a locale's
bundle is unavailable.
"""

import asyncio
import inspect
from abc import ABC, abstractmethod
from pathlib import Path
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Union,
)

import yaml

import structlog
from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.models import Locale, TranslationBundle
from infrastructure.i18n.registry import DEFAULT_LOCALE, LANGUAGE_FALLBACKS
from infrastructure.operations import OperationResult

logger = structlog.get_logger().bind(component="i18n.loader")

BundleLoader = Union[
    Mapping[str, Any],
    Callable[[], Mapping[str, Any]],
    Callable[[], Awaitable[Mapping[str, Any]]],
]


class BundleSource(ABC):
    """Abstract source of translation bundles, addressed by locale."""

    @abstractmethod
    async def fetch(self, locale: Locale) -> OperationResult:
        """Fetch the bundle for a locale.

        Args:
            locale: Locale to fetch.

        Returns:
            OperationResult whose data is the bundle on success, NOT_FOUND
            when the source has no bundle for locale, or an error status.
        """

    def available_locales(self) -> List[Locale]:
        """Locales this source can provide, when it can tell."""
        return []


class YAMLBundleSource(BundleSource):
    """Source reading YAML translation files from a directory.

    Expects files named ``<locale>.yml`` or ``<namespace>.<locale>.yml``.
    Top-level keys of all files for a locale are merged into one bundle;
    mapping namespaces present in several files are merged key by key.

    Attributes:
        translations_dir: Path to directory containing YAML files.
    """

    def __init__(self, translations_dir: Path):
        """Initialize YAML bundle source.

        Args:
            translations_dir: Path to directory with YAML translation files.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_bundle_source",
            translations_dir=str(self.translations_dir),
        )

    def files_for(self, locale: Locale) -> List[Path]:
        """Return the YAML files holding translations for locale."""
        files = []
        base_file = self.translations_dir / f"{locale.value}.yml"
        if base_file.is_file():
            files.append(base_file)
        files.extend(sorted(self.translations_dir.glob(f"*.{locale.value}.yml")))
        return files

    def available_locales(self) -> List[Locale]:
        found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "common.fr.yml" -> "fr", "fr.yml" -> "fr"
            locale = Locale.parse(yaml_file.stem.split(".")[-1])
            if locale is not None:
                found.add(locale)
        return sorted(found, key=lambda locale: locale.value)

    async def fetch(self, locale: Locale) -> OperationResult:
        return await asyncio.to_thread(self._read, locale)

    def _read(self, locale: Locale) -> OperationResult:
        yaml_files = self.files_for(locale)
        if not yaml_files:
            return OperationResult.not_found(
                f"No translation files found for locale {locale.value} in {self.translations_dir}",
                error_code="BUNDLE_NOT_FOUND",
            )

        bundle: TranslationBundle = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                return OperationResult.permanent_error(
                    f"Failed to parse {yaml_file}: {e}",
                    error_code="INVALID_YAML",
                )

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.error(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                return OperationResult.permanent_error(
                    f"Translation file {yaml_file} is not a mapping",
                    error_code="INVALID_BUNDLE",
                )
            _merge_namespaces(bundle, data)

        logger.debug(
            "read_translation_files",
            locale=locale.value,
            file_count=len(yaml_files),
            namespace_count=len(bundle),
        )
        return OperationResult.success(data=bundle)


def _merge_namespaces(bundle: TranslationBundle, data: Mapping[str, Any]) -> None:
    for namespace, messages in data.items():
        existing = bundle.get(namespace)
        if isinstance(existing, dict) and isinstance(messages, dict):
            existing.update(messages)
        elif isinstance(messages, dict):
            bundle[str(namespace)] = dict(messages)
        else:
            bundle[str(namespace)] = messages


class MappingBundleSource(BundleSource):
    """Source backed by an explicit locale -> loader registry.

    A loader is either a bundle, a function returning one, or a coroutine
    function returning one.
    """

    def __init__(self, loaders: Mapping[Locale, BundleLoader]):
        self.loaders = dict(loaders)

    def available_locales(self) -> List[Locale]:
        return list(self.loaders)

    async def fetch(self, locale: Locale) -> OperationResult:
        loader = self.loaders.get(locale)
        if loader is None:
            return OperationResult.not_found(
                f"No bundle loader registered for locale {locale.value}",
                error_code="BUNDLE_NOT_FOUND",
            )

        try:
            bundle = loader() if callable(loader) else loader
            if inspect.isawaitable(bundle):
                bundle = await bundle
        except Exception as e:  # pylint: disable=broad-except
            logger.warning(
                "bundle_loader_failed", locale=locale.value, error=str(e)
            )
            return OperationResult.transient_error(
                f"Bundle loader for {locale.value} failed: {e}",
                error_code="BUNDLE_LOADER_FAILED",
            )

        if not isinstance(bundle, Mapping):
            return OperationResult.permanent_error(
                f"Bundle loader for {locale.value} did not return a mapping",
                error_code="INVALID_BUNDLE",
            )
        return OperationResult.success(data=dict(bundle))


class TranslationLoader:
    """Loads translation bundles with caching and fallback.

    Resolution for ``load(locale)``:
    1. Cached bundle for locale.
    2. Bundle for locale from the source, cached under locale.
    3. Bundle of the locale's fallback language, cached under locale.
    4. Bundle of the default locale, returned but not cached under locale.
    5. An empty bundle.

    Never raises: source errors and exceptions count as a failed attempt.

    Attributes:
        source: BundleSource bundles are fetched from.
        cache: TranslationCache shared by every loader of the process.
        fallbacks: Locale -> fallback locale.
        default_locale: Last-resort locale.
    """

    def __init__(
        self,
        source: BundleSource,
        cache: Optional[TranslationCache] = None,
        fallbacks: Mapping[Locale, Locale] = LANGUAGE_FALLBACKS,
        default_locale: Locale = DEFAULT_LOCALE,
    ):
        self.source = source
        self.cache = cache if cache is not None else TranslationCache()
        self.fallbacks = fallbacks
        self.default_locale = default_locale

    async def load(self, locale: Locale) -> TranslationBundle:
        """Load the translation bundle for locale.

        Args:
            locale: Locale to load.

        Returns:
            The best available bundle, possibly empty.
        """
        cached = self.cache.get(locale)
        if cached is not None:
            return cached

        bundle = await self._fetch(locale)
        if bundle is not None:
            return self.cache.put(locale, bundle)

        fallback = self.fallbacks.get(locale)
        if fallback is not None:
            bundle = await self._fetch(fallback)
            if bundle is not None:
                logger.info(
                    "translation_fallback_used",
                    locale=locale.value,
                    fallback_locale=fallback.value,
                )
                return self.cache.put(locale, bundle)

        if locale != self.default_locale:
            # The default bundle is reused from its own slot, never stored
            # under the requested locale
            bundle = self.cache.get(self.default_locale)
            if bundle is None:
                bundle = await self._fetch(self.default_locale)
            if bundle is not None:
                logger.warning(
                    "translation_default_used",
                    locale=locale.value,
                    default_locale=self.default_locale.value,
                )
                return bundle

        logger.error("translation_bundle_unavailable", locale=locale.value)
        return {}

    async def preload(
        self, locales: Optional[Iterable[Locale]] = None
    ) -> Dict[Locale, TranslationBundle]:
        """Load several locales concurrently.

        Args:
            locales: Locales to load (default: every locale the source
                reports as available).

        Returns:
            Dict mapping each locale to its loaded bundle.
        """
        targets = list(locales) if locales is not None else self.source.available_locales()
        bundles = await asyncio.gather(*(self.load(locale) for locale in targets))
        logger.info(
            "preloaded_translations",
            locales=[locale.value for locale in targets],
            locale_count=len(targets),
        )
        return dict(zip(targets, bundles))

    async def _fetch(self, locale: Locale) -> Optional[TranslationBundle]:
        try:
            result = await self.source.fetch(locale)
        except Exception:  # pylint: disable=broad-except
            logger.exception("translation_source_failed", locale=locale.value)
            return None

        if not result.is_success:
            logger.warning(
                "translation_fetch_failed",
                locale=locale.value,
                status=result.status.value,
                message=result.message,
                error_code=result.error_code,
            )
            return None
        return result.data
