from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from order_ledger import __version__, crud
from order_ledger.api.router import api_router
from order_ledger.api.routes import health
from order_ledger.core.config import get_settings
from order_ledger.db.session import init_db, session_scope
from order_ledger.errors import register_error_handlers
from order_ledger.menu_seed import DEFAULT_MENU

settings = get_settings()


def create_application() -> FastAPI:
    application = FastAPI(title=settings.app_name, version=__version__)
    if settings.cors_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
            allow_credentials=True,
        )
    register_error_handlers(application)
    application.include_router(health.router)
    application.include_router(api_router, prefix=settings.api_prefix)

    @application.on_event("startup")
    def on_startup() -> None:
        init_db()
        if settings.enable_seed_data:
            with session_scope() as session:
                crud.seed_menu_items(session, DEFAULT_MENU)

    return application


app = create_application()
