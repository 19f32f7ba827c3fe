# profile_api/api/docs.py
"""
Per-API OpenAPI documents and a Swagger UI that switches between them.

Each document is cut from the application's combined schema: only the
operations tagged with its API name, plus the component schemas they
reference, so the UI shows "api1" and "api2" as separate definitions.
"""

import html
import json
from typing import Any, Dict, Iterator, List

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse

from profile_api.core.config import Settings

# (name, document url) in display order
API_DOCS: List[tuple] = [
    ("api1", "/api-doc/openapi1.json"),
    ("api2", "/api-doc/openapi2.json"),
]
PRIMARY_API = "api2"
SWAGGER_UI_PATH = "/swagger-ui/"
SWAGGER_UI_CDN = "https://cdn.jsdelivr.net/npm/swagger-ui-dist@5"

SCHEMA_REF_PREFIX = "#/components/schemas/"

# The standalone preset provides StandaloneLayout and the top bar that
# selects between the documents in "urls".
SWAGGER_UI_HTML = """<!DOCTYPE html>
<html>
<head>
<link type="text/css" rel="stylesheet" href="{cdn}/swagger-ui.css">
<title>{title}</title>
</head>
<body>
<div id="swagger-ui"></div>
<script src="{cdn}/swagger-ui-bundle.js"></script>
<script src="{cdn}/swagger-ui-standalone-preset.js"></script>
<script>
const ui = SwaggerUIBundle(Object.assign({config}, {{
    presets: [SwaggerUIBundle.presets.apis, SwaggerUIStandalonePreset],
    plugins: [SwaggerUIBundle.plugins.DownloadUrl],
}}));
</script>
</body>
</html>
"""

router = APIRouter(include_in_schema=False)


def _schema_refs(node: Any) -> Iterator[str]:
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith(SCHEMA_REF_PREFIX):
            yield ref[len(SCHEMA_REF_PREFIX):]
        for value in node.values():
            yield from _schema_refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from _schema_refs(item)


def build_api_document(app: FastAPI, settings: Settings, api_name: str) -> Dict[str, Any]:
    combined = app.openapi()

    paths: Dict[str, Any] = {}
    for path, path_item in combined.get("paths", {}).items():
        operations = {
            method: operation
            for method, operation in path_item.items()
            if isinstance(operation, dict) and api_name in operation.get("tags", [])
        }
        if operations:
            paths[path] = operations

    # follow $refs transitively, e.g. HTTPValidationError -> ValidationError
    all_schemas = combined.get("components", {}).get("schemas", {})
    needed = set()
    pending = list(_schema_refs(paths))
    while pending:
        name = pending.pop()
        if name in needed or name not in all_schemas:
            continue
        needed.add(name)
        pending.extend(_schema_refs(all_schemas[name]))

    document: Dict[str, Any] = {
        "openapi": combined["openapi"],
        "info": {"title": f"{settings.app_name} - {api_name}", "version": settings.app_version},
        "paths": paths,
    }
    if needed:
        document["components"] = {"schemas": {name: all_schemas[name] for name in sorted(needed)}}
    return document


@router.get("/api-doc/openapi{index:int}.json")
def api_document(index: int, request: Request) -> Dict[str, Any]:
    if not 1 <= index <= len(API_DOCS):
        raise HTTPException(status_code=404, detail="API document not found")

    api_name, _ = API_DOCS[index - 1]
    return build_api_document(request.app, request.app.state.settings, api_name)


@router.get(SWAGGER_UI_PATH, response_class=HTMLResponse)
def swagger_ui(request: Request) -> HTMLResponse:
    settings: Settings = request.app.state.settings
    config = {
        "dom_id": "#swagger-ui",
        "deepLinking": True,
        "layout": "StandaloneLayout",
        "urls": [{"name": name, "url": url} for name, url in API_DOCS],
        "urls.primaryName": PRIMARY_API,
    }

    return HTMLResponse(
        SWAGGER_UI_HTML.format(
            cdn=SWAGGER_UI_CDN,
            title=html.escape(f"{settings.app_name} - Swagger UI"),
            config=json.dumps(config),
        )
    )
