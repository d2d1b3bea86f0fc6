"""User-adjustable render settings and the per-frame rendering context built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Callable, Tuple

import numpy as np

from raitrace.geometry import SkyBox, Vec3

_LIMITS = {
    "max_bounces": (1, 32),
    "rays_per_pixel": (1, 1000),
    "diverge_strength": (0.0, 200.0),
    "defocus_strength": (0.0, 200.0),
    "focus_distance": (0.0, 20.0),
    "exposure": (0.1, 10.0),
    "gamma": (1.0, 3.0),
}

_SKY_LIMITS = {
    "sun_focus": (0.0, 1024.0),
    "sun_intensity": (0.0, 500.0),
    "brightness": (0.0, 10.0),
}


def _clamp(value, bounds):
    lo, hi = bounds
    return min(max(value, lo), hi)


def _default_sky_box() -> SkyBox:
    x, y, z = 1.0, 1.0, -1.0
    length = math.sqrt(x * x + y * y + z * z)
    return SkyBox(
        is_hidden=False,
        ground_color=(0.9, 0.9, 0.9),
        zenith_color=(0.1, 0.2, 0.8),
        horizon_color=(1.0, 1.0, 1.0),
        sun_focus=400.0,
        sun_intensity=4.0,
        sun_direction=(x / length, y / length, z / length),
        brightness=1.0,
    )


@dataclass
class RenderSettings:
    """Settings the user tweaks between frames."""

    is_rendering: bool = False
    max_bounces: int = 8
    rays_per_pixel: int = 40
    diverge_strength: float = 2.0
    defocus_strength: float = 0.0
    focus_distance: float = 5.0
    sky_box: SkyBox = field(default_factory=_default_sky_box)
    exposure: float = 1.0
    gamma: float = 2.2

    def toggle_rendering(self, on_stop: Callable[[], None]) -> bool:
        """Start or stop accumulation; ``on_stop`` runs when rendering stops."""
        self.is_rendering = not self.is_rendering
        if not self.is_rendering:
            on_stop()
        return self.is_rendering

    def clamp(self) -> None:
        """Bring every bounded setting back into its allowed range."""
        for name, bounds in _LIMITS.items():
            setattr(self, name, _clamp(getattr(self, name), bounds))
        self.sky_box = replace(
            self.sky_box,
            **{name: _clamp(getattr(self.sky_box, name), b) for name, b in _SKY_LIMITS.items()},
        )


def default_render_settings() -> RenderSettings:
    """Settings the application starts with."""
    return RenderSettings()


@dataclass(frozen=True, eq=False)
class RenderingContext:
    """Everything the renderer needs for one frame."""

    camera_position: Vec3
    inverse_view_matrix: np.ndarray
    inverse_projection_matrix: np.ndarray
    max_bounces: int
    rays_per_pixel: int
    diverge_strength: float
    defocus_strength: float
    focus_distance: float
    sky_box: SkyBox
    exposure: float
    gamma: float


def rendering_context(camera, settings: RenderSettings) -> RenderingContext:
    """Combine the camera's current state with the render settings."""
    position: Tuple[float, float, float] = camera.position
    return RenderingContext(
        camera_position=position,
        inverse_view_matrix=camera.inverse_view_matrix,
        inverse_projection_matrix=camera.inverse_projection_matrix,
        max_bounces=settings.max_bounces,
        rays_per_pixel=settings.rays_per_pixel,
        diverge_strength=settings.diverge_strength,
        defocus_strength=settings.defocus_strength,
        focus_distance=settings.focus_distance,
        sky_box=settings.sky_box,
        exposure=settings.exposure,
        gamma=settings.gamma,
    )