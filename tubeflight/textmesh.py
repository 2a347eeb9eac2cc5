"""Glyph atlases and laying out text as textured quads."""

from __future__ import annotations

from dataclasses import dataclass, field

FALLBACK_GLYPH = 127


def _pair(value) -> tuple[float, float]:
    x, y = value
    return float(x), float(y)


@dataclass(frozen=True)
class Glyph:
    """Metrics of one character and its place in the atlas (normalised)."""

    advance: tuple[float, float]
    size: tuple[float, float]
    bearing: tuple[float, float]
    uv: tuple[float, float]

    def __post_init__(self) -> None:
        for name in ("advance", "size", "bearing", "uv"):
            object.__setattr__(self, name, _pair(getattr(self, name)))


@dataclass
class FontAtlas:
    """A square glyph texture: its size, line height and glyphs by code point."""

    width: int
    height: int
    metrics: int
    glyphs: dict[int, Glyph] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("atlas dimensions must be positive")


@dataclass(frozen=True)
class TextQuad:
    """Two triangles for one character, each vertex as ``(x, y, u, v)``."""

    character: str
    vertices: tuple[tuple[float, float, float, float], ...]


def _glyph_for(font: FontAtlas, character: str) -> Glyph:
    glyph = font.glyphs.get(ord(character))
    if glyph is not None:
        return glyph
    try:
        return font.glyphs[FALLBACK_GLYPH]
    except KeyError:
        raise KeyError(f"no glyph for {character!r} and no fallback glyph") from None


def layout_text(font: FontAtlas, text: str, x: float, y: float, scale: float) -> list[TextQuad]:
    """Place ``text`` with its baseline starting at ``(x, y)``.

    A newline returns to ``x`` and moves down by the font's line height.
    Characters without a glyph use the fallback glyph.
    """
    quads: list[TextQuad] = []
    initial_x = x

    for character in text:
        if character == "\n":
            x = initial_x
            y -= font.metrics
            continue

        glyph = _glyph_for(font, character)
        size_x, size_y = glyph.size
        bearing_x, bearing_y = glyph.bearing
        tx, ty = glyph.uv

        px = x + bearing_x * scale
        py = y - (size_y - bearing_y) * scale
        ox = size_x / font.width
        oy = size_y / font.height
        w = size_x * scale
        h = size_y * scale

        quads.append(
            TextQuad(
                character,
                (
                    (px, py + h, tx, ty),
                    (px, py, tx, ty + oy),
                    (px + w, py, tx + ox, ty + oy),
                    (px, py + h, tx, ty),
                    (px + w, py, tx + ox, ty + oy),
                    (px + w, py + h, tx + ox, ty),
                ),
            )
        )

        x += glyph.advance[0] * scale

    return quads