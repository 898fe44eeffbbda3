from fastapi import APIRouter

from infrastructure.services import MaxMindClientDep, SettingsDep

router = APIRouter(tags=["System"])


@router.get("/version")
def get_version(settings: SettingsDep):
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
def get_health(settings: SettingsDep, maxmind: MaxMindClientDep):
    """Healthcheck endpoint.

    Reports the GeoIP database state when IP geolocation is enabled.
    """
    health: dict = {"status": "ok"}
    if settings.i18n.I18N_GEOIP_LOOKUP_ENABLED:
        result = maxmind.healthcheck()
        health["geoip"] = "ok" if result.is_success else "unavailable"
    return health
