"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_bundle,
    make_bundle_source,
    make_geo_signal,
    make_locale_context,
)

__all__ = [
    "make_bundle",
    "make_bundle_source",
    "make_geo_signal",
    "make_locale_context",
]
