from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.locale_middleware import LocaleMiddleware
from server.request_context_middleware import RequestContextMiddleware

settings = get_settings()


handler = FastAPI(title="Growfolio i18n", lifespan=lifespan)


allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
handler.add_middleware(LocaleMiddleware)
# Added last so it wraps the locale redirects too
handler.add_middleware(RequestContextMiddleware)


handler.include_router(api_router)
