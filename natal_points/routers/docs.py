from __future__ import annotations

import yaml
from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse, Response

from natal_points.config import Settings, get_settings

router = APIRouter(tags=["docs"], include_in_schema=False)

def servers_for(settings: Settings) -> list[dict] | None:
    """Server-Liste für die OpenAPI-Doku; nur wenn eine öffentliche URL bekannt ist."""
    base = settings.runtime_base_url
    if not base:
        return None
    return [
        {"url": base, "description": "Render (production)"},
        {"url": f"http://localhost:{settings.port}", "description": "Local (dev)"},
    ]

@router.get("/")
def root():
    return RedirectResponse(url="/docs")

@router.get("/openapi.yaml")
def openapi_yaml(request: Request, settings: Settings = Depends(get_settings)):
    spec = dict(request.app.openapi())
    servers = servers_for(settings)
    if servers:
        spec["servers"] = servers
    text = yaml.safe_dump(spec, sort_keys=False, allow_unicode=True)
    return Response(content=text, media_type="application/yaml")
