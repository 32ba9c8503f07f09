"""polycontent read-only API (FastAPI).

Endpoints:
- GET /api/health -> liveness
- GET /api/languages -> display names of the configured languages
- GET /api/posts -> one entry per post in display order, with URL and prev/next
- GET /api/posts/{canonical_id} -> variant for ?lang= or Accept-Language, plus translations
- GET /api/tags -> tag index
- GET /api/categories -> category index
- GET /api/spec/{canonical_id} -> specification page variant, plus translations
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from polycontent import __version__
from polycontent.catalog import POSTS, SPEC, ContentCatalog, UnknownCollectionError
from polycontent.config import defaults
from polycontent.language import (
    browser_language_candidates,
    get_language_display_name,
    list_display_languages,
    parse_accept_language,
)
from polycontent.providers import ContentLoadError
from polycontent.variants import Document, VariantGroup, variant_language_key

logger = logging.getLogger(__name__)


class TranslationRef(BaseModel):
    id: str
    lang: str
    name: str


class VariantResp(BaseModel):
    canonical_id: str
    id: str
    lang: str
    data: Dict[str, Any]
    body: str
    translations: List[TranslationRef]


def _get_catalog(request: Request) -> ContentCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        catalog = ContentCatalog.from_settings()
        request.app.state.catalog = catalog
    return catalog


def _pick_variant(
    catalog: ContentCatalog, group: VariantGroup, lang: Optional[str], accept_language: Optional[str]
) -> Document:
    """Explicit ?lang= wins, then the first Accept-Language match, then the site default."""
    if lang:
        return catalog.select_variant(group, lang)
    available = {variant_language_key(doc) for doc in group.variants}
    for candidate in browser_language_candidates(parse_accept_language(accept_language)):
        if candidate in available:
            return catalog.select_variant(group, candidate)
    return catalog.select_variant(group)


def _variant_resp(group: VariantGroup, doc: Document) -> VariantResp:
    translations = []
    for variant in group.variants:
        if variant.id == doc.id:
            continue
        key = variant_language_key(variant)
        translations.append(
            TranslationRef(id=variant.id, lang=key, name=get_language_display_name(key))
        )
    return VariantResp(
        canonical_id=group.canonical_id,
        id=doc.id,
        lang=variant_language_key(doc),
        data=doc.data.model_dump(mode="json", by_alias=True),
        body=doc.body,
        translations=translations,
    )


async def _variant_for(
    request: Request, collection: str, canonical_id: str, lang: Optional[str]
) -> VariantResp:
    catalog = _get_catalog(request)
    group = await catalog.find_group_by_canonical_id(collection, canonical_id.strip("/"))
    if group is None:
        raise HTTPException(status_code=404, detail="Not found")
    doc = _pick_variant(catalog, group, lang, request.headers.get("accept-language"))
    return _variant_resp(group, doc)


def create_app(catalog: Optional[ContentCatalog] = None) -> FastAPI:
    """Build the API app; without a catalog one is built from PC_* settings on first use."""
    app = FastAPI(title="polycontent API", version=__version__)
    app.state.catalog = catalog

    if defaults.SITE.dev_mode:
        # Dev servers for the site run on another origin
        app.add_middleware(
            CORSMiddleware,
            allow_origins=defaults.RT.allowed_origins,
            allow_methods=["GET", "HEAD"],
            allow_headers=["*"],
        )

    @app.exception_handler(ContentLoadError)
    async def content_load_error_handler(request: Request, exc: ContentLoadError):
        logger.error("Content load failed on %s: %s", getattr(request.url, "path", "?"), exc)
        return JSONResponse(status_code=503, content={"detail": "Content unavailable"})

    # Global safety net: log exceptions, return generic 500 without internals
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s: %s", getattr(request.url, "path", "?"), exc, exc_info=True
        )
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})

    @app.get("/api/health")
    async def api_health() -> Dict[str, Any]:
        return {"status": "ok", "version": __version__}

    @app.head("/api/health")
    async def api_health_head() -> Response:
        return Response(status_code=200)

    @app.get("/api/languages")
    async def languages() -> List[Dict[str, str]]:
        return [{"code": code, "name": name} for code, name in list_display_languages()]

    @app.get("/api/posts")
    async def posts(request: Request) -> List[Dict[str, Any]]:
        catalog = _get_catalog(request)
        return [item.to_dict() for item in await catalog.list_default_entries_with_urls(POSTS)]

    @app.get("/api/posts/{canonical_id:path}", response_model=VariantResp)
    async def post_detail(request: Request, canonical_id: str, lang: Optional[str] = None):
        return await _variant_for(request, POSTS, canonical_id, lang)

    @app.get("/api/tags")
    async def tags(request: Request) -> List[Dict[str, Any]]:
        return [tag.to_dict() for tag in await _get_catalog(request).list_tags()]

    @app.get("/api/categories")
    async def categories(request: Request) -> List[Dict[str, Any]]:
        return [c.to_dict() for c in await _get_catalog(request).list_categories()]

    @app.get("/api/spec/{canonical_id:path}", response_model=VariantResp)
    async def spec_detail(request: Request, canonical_id: str, lang: Optional[str] = None):
        try:
            return await _variant_for(request, SPEC, canonical_id, lang)
        except UnknownCollectionError:
            raise HTTPException(status_code=404, detail="Not found")

    return app


app = create_app()


def main() -> None:
    # Entry point for `python -m polycontent.api.server`
    import uvicorn

    uvicorn.run("polycontent.api.server:app", host="127.0.0.1", port=defaults.RT.api_port, reload=False)


if __name__ == "__main__":
    main()
