"""Choice of the OpenGL renderer backend and checks of the GL context it gets."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Mapping, Protocol

log = logging.getLogger(__name__)


class Renderer(IntEnum):
    """Available renderer backends; DEFAULT marks the end of the list."""

    OPENGL1 = 1
    OPENGL3 = 2
    DEFAULT = 3


PREFERRED = Renderer.OPENGL3

# Context version requested from the windowing layer for each backend.
REQUESTED_GL_VERSION = {Renderer.OPENGL1: (1, 1), Renderer.OPENGL3: (3, 2)}
MINIMUM_GL_VERSION = dict(REQUESTED_GL_VERSION)
GLSL_VERSION = "#version 150"

# Tesla-generation cards on nouveau misbehave with the GL3 backend.
_NOUVEAU_VENDOR = "nouveau"
_BROKEN_NOUVEAU_PREFIXES = ("NV5", "NV8", "NV9", "NVA")


@dataclass(frozen=True)
class GLInfo:
    """What the created OpenGL context reports about itself."""

    major: int
    minor: int
    vendor: str = ""
    renderer: str = ""

    @property
    def version(self) -> tuple[int, int]:
        return (self.major, self.minor)


class RendererBackend(Protocol):
    """A renderer instance that can try to initialise itself."""

    def init(self) -> bool: ...


RendererFactory = Callable[[], RendererBackend]


def next_renderer(renderer: Renderer) -> Renderer:
    """The renderer to try after ``renderer``, wrapping past DEFAULT."""
    if renderer is Renderer.DEFAULT:
        return Renderer.OPENGL1
    return Renderer(renderer + 1)


def get_renderer(number: int) -> Renderer:
    """The renderer with the given number; numbers past the list give DEFAULT.

    Raises ValueError for numbers below the first renderer.
    """
    if number > Renderer.DEFAULT:
        print(f"Unknown renderer specified: {number}", file=sys.stderr)
        return Renderer.DEFAULT
    return Renderer(number)


def _check_minimum(info: GLInfo, renderer: Renderer) -> bool:
    minimum = MINIMUM_GL_VERSION[renderer]
    if info.version < minimum:
        log.error(
            "Minimal OpenGL version required is %d.%d. Got %d.%d.",
            *minimum, info.major, info.minor,
        )
        return False
    return True


def check_gl1(info: GLInfo) -> bool:
    """Tell whether the context is good enough for the OpenGL 1 backend."""
    return _check_minimum(info, Renderer.OPENGL1)


def check_gl3(info: GLInfo) -> bool:
    """Tell whether the context is good enough for the OpenGL 3 backend."""
    if not _check_minimum(info, Renderer.OPENGL3):
        return False
    if info.vendor == _NOUVEAU_VENDOR and info.renderer.startswith(_BROKEN_NOUVEAU_PREFIXES):
        log.error("OpenGL3 renderer not supported on %s %s", info.vendor, info.renderer)
        return False
    return True


def _new_instance(
    renderer: Renderer, factories: Mapping[Renderer, RendererFactory]
) -> RendererBackend | None:
    if renderer is Renderer.DEFAULT:
        return None
    factory = factories.get(renderer)
    if factory is None:
        log.error("No or unknown renderer specified.")
        return None
    return factory()


def init_best_renderer(
    preferred: Renderer, factories: Mapping[Renderer, RendererFactory]
) -> RendererBackend | None:
    """Initialise the preferred renderer, falling back on the others in turn.

    Returns the first instance whose ``init`` succeeds, or None if none does.
    """
    candidate = preferred
    while True:
        instance = _new_instance(candidate, factories)
        initialized = instance is not None and bool(instance.init())
        candidate = next_renderer(candidate)
        if initialized or candidate == preferred:
            break
    return instance if initialized else None