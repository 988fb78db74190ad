"""Styling and projection configuration for the frame renderer."""
import argparse
import json
from dataclasses import dataclass, field
from typing import Optional

from pygame import Color

from config.display_constants import BACKGROUND_COLOR, NEAR_COLOR, FAR_COLOR
from geometry.hypercube import VERTEX_RADIUS
from geometry.projection import check_focal_margin


@dataclass
class RenderConfig:
    """Colors, stroke geometry and focal distances used to draw a frame.

    Edge width is ``thickness_base + (depth + depth_offset) * thickness_depth_factor``
    and vertex radius is ``max(radius_min, radius_base + (depth + depth_offset) * radius_depth_factor)``.
    """
    background: Color = field(default_factory=lambda: Color(BACKGROUND_COLOR))
    near_color: Color = field(default_factory=lambda: Color(NEAR_COLOR))
    far_color: Color = field(default_factory=lambda: Color(FAR_COLOR))
    thickness_base: float = 1.0
    thickness_depth_factor: float = 0.7
    radius_base: float = 2.2
    radius_depth_factor: float = 0.5
    radius_min: float = 1.2
    depth_offset: float = 2.0
    focal_w: float = 4.0
    focal_z: float = 4.0
    screen_scale: float = 0.22
    focal_margin: float = 0.5

    @classmethod
    def from_json(cls, json_str: str) -> Optional['RenderConfig']:
        """Create RenderConfig from JSON string.

        Args:
            json_str: JSON object; color values are any string pygame.Color accepts

        Returns:
            RenderConfig instance, or None if json_str is empty/None

        Raises:
            json.JSONDecodeError: If json_str is invalid JSON
            ValueError: If a color string cannot be parsed
        """
        if not json_str or json_str.strip() == "":
            return None

        data = json.loads(json_str)
        defaults = cls()
        kwargs = {}
        for name in ("background", "near_color", "far_color"):
            kwargs[name] = Color(data[name]) if name in data else getattr(defaults, name)
        for name in ("thickness_base", "thickness_depth_factor", "radius_base",
                     "radius_depth_factor", "radius_min", "depth_offset",
                     "focal_w", "focal_z", "screen_scale", "focal_margin"):
            kwargs[name] = float(data.get(name, getattr(defaults, name)))
        return cls(**kwargs)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'RenderConfig':
        """Create RenderConfig from argparse Namespace.

        Reads ``args.config`` (a path to a JSON file) when set, otherwise
        returns the defaults.
        """
        config_path = getattr(args, "config", None)
        if config_path:
            with open(config_path, "r") as f:
                config = cls.from_json(f.read())
            if config is not None:
                return config
        return cls()

    def validate(self) -> None:
        """Raise ValueError if the focal distances are too close to the geometry."""
        check_focal_margin(self.focal_w, self.focal_z, VERTEX_RADIUS, self.focal_margin)

    def __str__(self) -> str:
        return (f"RenderConfig(focal_w={self.focal_w}, focal_z={self.focal_z}, "
                f"scale={self.screen_scale}, margin={self.focal_margin})")
