"""Server-rendered HTML pages.

Each page is a body fragment under ``hoopdex/pages`` wrapped in the shared
``layout.html``. The pages talk to the JSON API from the browser.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from string import Template

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

PAGES_DIR = Path(__file__).resolve().parent.parent / "pages"

PAGE_TITLES: dict[str, str] = {
    "landing": "Hoopdex",
    "players": "Search Players",
    "teams": "Search Teams",
    "favorites": "My Favorites",
}

router = APIRouter()


@lru_cache(maxsize=None)
def render_page(name: str) -> str:
    """Return the full HTML document for page ``name``."""

    if name not in PAGE_TITLES:
        raise KeyError(f"Unknown page: {name}")
    layout = Template((PAGES_DIR / "layout.html").read_text(encoding="utf-8"))
    content = (PAGES_DIR / f"{name}.html").read_text(encoding="utf-8")
    return layout.safe_substitute(title=PAGE_TITLES[name], content=content)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def landing_page() -> HTMLResponse:
    return HTMLResponse(render_page("landing"))


@router.get("/players", response_class=HTMLResponse, include_in_schema=False)
async def players_page() -> HTMLResponse:
    return HTMLResponse(render_page("players"))


@router.get("/teams", response_class=HTMLResponse, include_in_schema=False)
async def teams_page() -> HTMLResponse:
    return HTMLResponse(render_page("teams"))


@router.get("/favorites", response_class=HTMLResponse, include_in_schema=False)
async def favorites_page() -> HTMLResponse:
    return HTMLResponse(render_page("favorites"))
