"""MaxMind GeoIP2 client for infrastructure layer.

Public API (Package Level):
- MaxMindClient: Client for GeoIP2 City database lookups
- GeoLocationData: Dataclass for geolocation results

Application code obtains the client through
``infrastructure.services.get_maxmind_client``.
"""

from infrastructure.clients.maxmind.client import GeoLocationData, MaxMindClient

__all__ = [
    "MaxMindClient",
    "GeoLocationData",
]
