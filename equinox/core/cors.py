from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from equinox.core.settings import get_settings


def add_cors_middleware(app: FastAPI):
    """Allow the dashboard front end (dev server and preview deployments).

    Credentials are allowed because login state lives in a cookie.
    """
    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_origin_regex=settings.cors_origin_regex or None,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
