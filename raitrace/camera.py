"""Fly-through perspective camera driven by a snapshot of keyboard and mouse state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import FrozenSet, Optional, Sequence, Tuple

import numpy as np

UP = (0.0, 1.0, 0.0)


class Key(IntEnum):
    """Keys the camera responds to, numbered with the usual GLFW key codes."""

    SPACE = 32
    A = 65
    D = 68
    S = 83
    W = 87
    LEFT_SHIFT = 340


@dataclass(frozen=True)
class InputState:
    """Keyboard and mouse state for one frame."""

    pressed_keys: FrozenSet[int] = field(default_factory=frozenset)
    mouse_position: Tuple[float, float] = (0.0, 0.0)
    secondary_button_pressed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "pressed_keys", frozenset(self.pressed_keys))
        x, y = self.mouse_position
        object.__setattr__(self, "mouse_position", (float(x), float(y)))

    def is_key_pressed(self, key: int) -> bool:
        """Return True if the key is held down this frame."""
        return key in self.pressed_keys


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye_v = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye_v)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -float(np.dot(s, eye_v))],
            [u[0], u[1], u[2], -float(np.dot(u, eye_v))],
            [-f[0], -f[1], -f[2], float(np.dot(f, eye_v))],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1]; ``fovy`` in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def angle_axis(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Quaternion (w, x, y, z) rotating by ``angle`` radians about ``axis``."""
    half = angle * 0.5
    s = math.sin(half)
    ax = np.asarray(axis, dtype=float)
    return np.array([math.cos(half), ax[0] * s, ax[1] * s, ax[2] * s])


def _quat_mul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    w1, x1, y1, z1 = a
    w2, x2, y2, z2 = b
    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2,
            w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2,
        ]
    )


def _quat_rotate(q: np.ndarray, v: np.ndarray) -> np.ndarray:
    qv = q[1:]
    uv = np.cross(qv, v)
    uuv = np.cross(qv, uv)
    return v + (uv * q[0] + uuv) * 2.0


class Camera:
    """Perspective camera that moves with WASD, Space and Shift and turns with the right mouse button."""

    def __init__(self, near_plane, far_plane, fov, aspect, position, direction, speed, sensitivity):
        self.near_plane = float(near_plane)
        self.far_plane = float(far_plane)
        self.fov = float(fov)
        self.aspect = float(aspect)
        self._position = np.asarray(position, dtype=float).copy()
        self._direction = np.asarray(direction, dtype=float).copy()
        self.speed = float(speed)
        self.sensitivity = float(sensitivity)
        self._last_mouse_position: Optional[np.ndarray] = None
        self._up = np.asarray(UP, dtype=float)
        self._inverse_view = np.eye(4)
        self._inverse_projection = np.eye(4)
        self._update_inverse_projection_matrix()
        self._update_inverse_view_matrix()

    @property
    def position(self) -> Tuple[float, float, float]:
        return tuple(float(c) for c in self._position)

    @property
    def direction(self) -> Tuple[float, float, float]:
        return tuple(float(c) for c in self._direction)

    @property
    def inverse_view_matrix(self) -> np.ndarray:
        return self._inverse_view.copy()

    @property
    def inverse_projection_matrix(self) -> np.ndarray:
        return self._inverse_projection.copy()

    def update(self, delta_time: float, input_state: InputState) -> bool:
        """Apply one frame of input; return True if the camera moved or turned."""
        mouse_pos = np.asarray(input_state.mouse_position, dtype=float)
        right = np.cross(self._direction, self._up)
        step = self.speed * delta_time

        moves = (
            (Key.D, right),
            (Key.A, -right),
            (Key.W, self._direction),
            (Key.S, -self._direction),
            (Key.SPACE, self._up),
            (Key.LEFT_SHIFT, -self._up),
        )
        is_dirty = False
        for key, offset in moves:
            if input_state.is_key_pressed(key):
                self._position = self._position + offset * step
                is_dirty = True

        if input_state.secondary_button_pressed:
            last = self._last_mouse_position
            delta = mouse_pos - last if last is not None else np.zeros(2)
            pitch_delta = delta[1] * self.sensitivity
            yaw_delta = delta[0] * self.sensitivity
            rotation = _quat_mul(angle_axis(-pitch_delta, right), angle_axis(-yaw_delta, self._up))
            rotation = rotation / np.linalg.norm(rotation)
            self._direction = _quat_rotate(rotation, self._direction)
            is_dirty = True

        self._last_mouse_position = mouse_pos

        if is_dirty:
            self._update_inverse_view_matrix()
        return is_dirty

    def _update_inverse_view_matrix(self) -> None:
        view = look_at(self._position, self._position + self._direction, self._up)
        self._inverse_view = np.linalg.inv(view)

    def _update_inverse_projection_matrix(self) -> None:
        projection = perspective(math.radians(self.fov), self.aspect, self.near_plane, self.far_plane)
        self._inverse_projection = np.linalg.inv(projection)