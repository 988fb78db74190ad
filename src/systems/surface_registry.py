"""Lookup of drawable surfaces by id."""
from typing import Any, Dict, Optional


class SurfaceRegistry:
    """Maps opaque string ids to surfaces owned by the host application."""

    def __init__(self) -> None:
        self._surfaces: Dict[str, Any] = {}

    def register(self, surface_id: str, surface: Any) -> None:
        self._surfaces[surface_id] = surface

    def unregister(self, surface_id: str) -> None:
        self._surfaces.pop(surface_id, None)

    def resolve(self, surface_id: str) -> Optional[Any]:
        """Return the surface registered under ``surface_id``, or None."""
        if not isinstance(surface_id, str):
            return None
        return self._surfaces.get(surface_id)
