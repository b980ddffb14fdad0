# src/batch_sort/api/main.py
from fastapi import FastAPI

from batch_sort.core.config import Settings, get_settings
from batch_sort.core.errors import install_error_handlers
from batch_sort.core.logging import configure_logging
from batch_sort.core.registry import load_module_routers


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Batch Sort", version=settings.VERSION, debug=settings.DEBUG)
    configure_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)
    install_error_handlers(app)

    # Route table is fixed here for the life of the process
    for r in load_module_routers():
        app.include_router(r)

    return app


app = create_app()
