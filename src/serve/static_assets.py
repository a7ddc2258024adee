"""Packaged static asset lookup.

Assets ship inside the ``serve/static`` directory. Only files that
resolve inside that directory and carry a known extension are served.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import STATIC_ROUTE_PREFIX
from core.errors import InxiDashAssetError

STATIC_ROOT = Path(__file__).resolve().parent / "static"

_CONTENT_TYPES = {
    ".css": "text/css; charset=utf-8",
    ".js": "application/javascript; charset=utf-8",
    ".png": "image/png",
    ".svg": "image/svg+xml",
}


def load_asset(relative_path: str) -> tuple[str, bytes]:
    """Load one packaged asset.

    Args:
        relative_path: Path below the static root, e.g. ``css/app.css``.

    Returns:
        Content type and raw file bytes.

    Raises:
        InxiDashAssetError: If the path is unknown or escapes the root.
    """
    asset_path = _resolve_asset_path(relative_path)
    content_type = _CONTENT_TYPES.get(asset_path.suffix.lower())
    if content_type is None or not asset_path.is_file():
        raise InxiDashAssetError(f"asset not found: {_route_for(relative_path)}")
    return content_type, asset_path.read_bytes()


def load_text_asset(relative_path: str) -> str:
    """Load a packaged text asset for inlining into exported pages."""
    content_type, payload = load_asset(relative_path)
    if not content_type.endswith("charset=utf-8"):
        raise InxiDashAssetError(f"asset not found: {_route_for(relative_path)}")
    return payload.decode("utf-8")


def _resolve_asset_path(relative_path: str) -> Path:
    normalized_path = relative_path.strip().lstrip("/")
    candidate = (STATIC_ROOT / normalized_path).resolve()
    if not normalized_path or not candidate.is_relative_to(STATIC_ROOT):
        raise InxiDashAssetError(f"asset not found: {_route_for(relative_path)}")
    return candidate


def _route_for(relative_path: str) -> str:
    return f"{STATIC_ROUTE_PREFIX}/{relative_path.strip().lstrip('/')}"
