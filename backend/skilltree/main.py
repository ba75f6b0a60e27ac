import logging
from typing import Any, Dict

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .layout_routes import router as layout_router
from .logging_config import configure_logging
from .presets import create_layout_registry


configure_logging()
logger = logging.getLogger(__name__)
app = FastAPI(title="Skill Tree Layout Backend", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

settings_snapshot = get_settings()
app.state.layout_registry = create_layout_registry(settings_snapshot.default_layout_id)
logger.info(
    "Backend starting with layouts: %s (default %s)",
    ", ".join(preset.id for preset in app.state.layout_registry.list()),
    app.state.layout_registry.default_id,
)
logger.info("Medal catalog configured: %s", bool(settings_snapshot.medal_catalog_path))

app.include_router(layout_router)


@app.get("/healthz")
def health(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {
        "status": "ok",
        "catalog_configured": bool(settings.medal_catalog_path),
        "default_layout": app.state.layout_registry.default_id,
    }
