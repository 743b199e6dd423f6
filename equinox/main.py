import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from sqladmin import Admin

from equinox.admin.auth import AdminAuth
from equinox.admin.views import ADMIN_VIEWS
from equinox.auth.router import router as auth_router
from equinox.core.constants import ADMIN_MOUNT_PATH
from equinox.core.cors import add_cors_middleware
from equinox.core.exception_handlers import register_exception_handlers
from equinox.core.logging import configure_logging
from equinox.core.request_logging import add_request_logging_middleware
from equinox.core.sessions import add_session_middleware
from equinox.core.settings import get_settings
from equinox.db.engine import engine
from equinox.health.router import router as health_router
from equinox.ping.router import router as ping_router
from equinox.user.router import router as user_router

configure_logging()

logger = logging.getLogger("equinox")


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("Equinox API starting (env=%s)", get_settings().env_name)
    yield
    # Release pooled database connections on shutdown.
    engine.dispose()


app = FastAPI(title="Equinox Fleet API", version="0.1.0", lifespan=lifespan)

api_router = APIRouter()
api_router.include_router(ping_router)
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(user_router)

app.include_router(api_router)


@app.get("/", include_in_schema=False)
def root():
    return {"message": "Equinox Fleet API Running"}


add_session_middleware(app)
add_request_logging_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)

admin = Admin(
    app=app,
    engine=engine,
    base_url=ADMIN_MOUNT_PATH,
    authentication_backend=AdminAuth(),
    title="Equinox Admin",
)
for view in ADMIN_VIEWS:
    admin.add_view(view)
