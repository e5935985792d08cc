from __future__ import annotations
from typing import Optional
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from . import __version__
from .extensions import merge_values
from .logging_setup import get_logger
from .models import MergeRequest, MergeResult, PropertiesBody, PropertyValue
from .properties import PropertyResolver
from .settings import Settings

log = get_logger("plugconf.api")


class ActionResult(BaseModel):
    ok: bool
    detail: str | None = None
    data: dict | None = None


def create_app(settings: Settings, resolver: Optional[PropertyResolver] = None) -> FastAPI:
    app = FastAPI(title="plugconf API", version=__version__)
    if resolver is None:
        resolver = PropertyResolver(settings=settings)

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.get("/properties")
    def list_properties():
        return dict(resolver.get_properties())

    @app.get("/properties/{key}", response_model=PropertyValue)
    def get_property(key: str):
        value = resolver.get(key)
        if value is None:
            raise HTTPException(status_code=404, detail="property_not_found")
        return PropertyValue(key=key, value=value)

    @app.put("/properties", response_model=ActionResult)
    def add_properties(body: PropertiesBody):
        resolver.add_properties(body.properties)
        log.info("Added %d properties via API", len(body.properties))
        return ActionResult(ok=True, detail="merged", data={"count": len(body.properties)})

    @app.post("/merge", response_model=MergeResult)
    def merge(req: MergeRequest):
        return MergeResult(names=merge_values(req.requested, req.defaults, req.extension_exists))

    return app
