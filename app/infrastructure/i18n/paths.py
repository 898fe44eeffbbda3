"""Locale prefixes in URL paths.

Every user-facing path starts with a locale segment ("/fr/pricing"). These
helpers read, replace and strip that segment.
"""

from typing import List, Optional, Union
from urllib.parse import urlsplit

from infrastructure.i18n.models import Locale


def _segments(path: str) -> List[str]:
    return [segment for segment in path.split("/") if segment]


class PathLocaleCodec:
    """Extracts and injects the locale prefix of a URL path."""

    @staticmethod
    def extract_locale(path: str) -> Optional[Locale]:
        """Return the locale named by the first path segment, if supported.

        Args:
            path: URL path (e.g., "/fr/pricing").

        Returns:
            Locale of the first segment, or None.
        """
        segments = _segments(path)
        if not segments:
            return None
        return Locale.parse(segments[0])

    @staticmethod
    def with_locale(url: Union[str, object], new_locale: Locale) -> str:
        """Return the path and query of url under new_locale.

        An existing locale prefix is replaced; otherwise new_locale is
        prepended. The query string is kept unchanged.

        Args:
            url: A path with optional query ("/en/about?x=1"), an absolute
                URL, or an object with ``path`` and ``query`` attributes
                such as ``starlette.datastructures.URL``.
            new_locale: Locale to put in front of the path.

        Returns:
            Path plus query, always starting with "/".
        """
        if isinstance(url, str):
            parts = urlsplit(url)
            path, query = parts.path, parts.query
        else:
            path, query = getattr(url, "path"), getattr(url, "query")

        segments = _segments(path)
        if segments and Locale.parse(segments[0]) is not None:
            segments[0] = new_locale.value
        else:
            segments.insert(0, new_locale.value)

        localized = "/" + "/".join(segments)
        if query:
            localized += f"?{query}"
        return localized

    @staticmethod
    def without_locale(path: str) -> str:
        """Strip a leading locale segment from path.

        Args:
            path: URL path.

        Returns:
            The path without its locale prefix ("/" if nothing remains).
            Paths without a locale prefix are returned unchanged.
        """
        segments = _segments(path)
        if segments and Locale.parse(segments[0]) is not None:
            return "/" + "/".join(segments[1:])
        return path
