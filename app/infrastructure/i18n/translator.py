"""Translation key lookup and message interpolation."""

import re
from typing import Any, Mapping, Optional

from infrastructure.i18n.models import Locale, TranslationBundle
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def get_value(bundle: Mapping[str, Any], key: str) -> Optional[str]:
    """Look up a dotted key path in a translation bundle.

    Args:
        bundle: Nested translation mapping.
        key: Dotted key path (e.g., "hero.title").

    Returns:
        The string at key, or None if the path is missing or does not end
        at a string.
    """
    current: Any = bundle
    for part in key.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return None
        current = current[part]
    return current if isinstance(current, str) else None


def interpolate(message: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Replace {name} placeholders with values from params.

    Placeholders without a matching param are left as they are.
    """
    if not params:
        return message

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        return str(params[name]) if name in params else match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, message)


class Translator:
    """Renders messages from one loaded translation bundle.

    Attributes:
        bundle: The bundle messages are read from.
        locale: Locale the bundle was loaded for, if known.
    """

    def __init__(self, bundle: TranslationBundle, locale: Optional[Locale] = None):
        self.bundle = bundle
        self.locale = locale

    def t(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate key, interpolating params.

        Args:
            key: Dotted key path.
            params: Optional values for {name} placeholders.

        Returns:
            The interpolated message, or key itself when it is missing.
        """
        message = get_value(self.bundle, key)
        if message is None:
            logger.warning(
                "missing_translation",
                key=key,
                locale=self.locale.value if self.locale else None,
            )
            return key
        return interpolate(message, params)

    def __call__(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return self.t(key, params)
