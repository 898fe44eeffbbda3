"""Feature-level fixtures for i18n system tests.

Provides YAML translation directories and bundle sources for locale
resolution and translation loading scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import Locale, TranslationCache, TranslationLoader
from tests.factories.i18n import make_bundle, make_bundle_source


def _write_yaml(path, data):
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, allow_unicode=True)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - en.yml
    - pricing.en.yml
    - es.yml
    - fr.yml
    """
    _write_yaml(
        tmp_path / "en.yml",
        {
            "hero": {"title": "Grow your portfolio", "greeting": "Hi {name}"},
            "nav": {"language": "Language"},
        },
    )
    _write_yaml(
        tmp_path / "pricing.en.yml",
        {"pricing": {"title": "Pricing", "monthly": "{amount} per month"}},
    )
    _write_yaml(
        tmp_path / "es.yml",
        {
            "hero": {"title": "Haz crecer tu cartera", "greeting": "Hola {name}"},
            "nav": {"language": "Idioma"},
        },
    )
    _write_yaml(
        tmp_path / "fr.yml",
        {"hero": {"title": "Faites croître votre portefeuille"}},
    )
    return tmp_path


@pytest.fixture
def bundle_source():
    """MappingBundleSource with English and Spanish bundles only."""
    return make_bundle_source()


@pytest.fixture
def translation_cache():
    return TranslationCache()


@pytest.fixture
def translation_loader(bundle_source, translation_cache):
    """TranslationLoader over the English/Spanish mapping source."""
    return TranslationLoader(source=bundle_source, cache=translation_cache)


@pytest.fixture
def english_bundle():
    return make_bundle(title="Hello")


@pytest.fixture
def all_locales():
    return list(Locale)
