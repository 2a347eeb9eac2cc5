import pytest

from tubeflight.textmesh import FontAtlas, Glyph, TextQuad, layout_text

SIZE = (8.0, 12.0)
ADVANCE = (10.0, 0.0)


def _font(with_fallback=True):
    glyphs = {
        ord("A"): Glyph(ADVANCE, SIZE, (0.0, 12.0), (0.25, 0.5)),
        ord("B"): Glyph(ADVANCE, SIZE, (1.0, 10.0), (0.5, 0.5)),
    }
    if with_fallback:
        glyphs[127] = Glyph(ADVANCE, SIZE, (2.0, 9.0), (0.75, 0.0))
    return FontAtlas(width=64, height=64, metrics=16, glyphs=glyphs)


def _xs(quad):
    return [v[0] for v in quad.vertices]


def _ys(quad):
    return [v[1] for v in quad.vertices]


def _us(quad):
    return [v[2] for v in quad.vertices]


def _vs(quad):
    return [v[3] for v in quad.vertices]


def test_glyph_sitting_on_baseline_starts_at_origin():
    (quad,) = layout_text(_font(), "A", 0.0, 0.0, 1.0)
    assert isinstance(quad, TextQuad)
    assert quad.character == "A"
    assert min(_xs(quad)) == 0.0
    assert min(_ys(quad)) == 0.0


def test_quad_dimensions_follow_glyph_size_and_scale():
    scale = 2.0
    font = _font()
    (quad,) = layout_text(font, "B", 5.0, 7.0, scale)
    assert max(_xs(quad)) - min(_xs(quad)) == pytest.approx(SIZE[0] * scale)
    assert max(_ys(quad)) - min(_ys(quad)) == pytest.approx(SIZE[1] * scale)
    assert max(_us(quad)) - min(_us(quad)) == pytest.approx(SIZE[0] / font.width)
    assert max(_vs(quad)) - min(_vs(quad)) == pytest.approx(SIZE[1] / font.height)
    assert min(_us(quad)) == pytest.approx(font.glyphs[ord("B")].uv[0])


def test_each_quad_is_two_triangles_sharing_a_diagonal():
    (quad,) = layout_text(_font(), "B", 0.0, 0.0, 1.0)
    assert len(quad.vertices) == 6
    assert quad.vertices[0] == quad.vertices[3]
    assert quad.vertices[2] == quad.vertices[4]


def test_characters_advance_by_scaled_advance():
    scale = 1.5
    first, second = layout_text(_font(), "AA", 3.0, 4.0, scale)
    assert min(_xs(second)) - min(_xs(first)) == pytest.approx(ADVANCE[0] * scale)
    assert _ys(first) == _ys(second)


def test_newline_returns_to_start_and_moves_down():
    font = _font()
    first, second = layout_text(font, "A\nA", 20.0, 50.0, 1.0)
    assert _xs(first) == _xs(second)
    assert [a - b for a, b in zip(_ys(first), _ys(second))] == [font.metrics] * 6


def test_newlines_produce_no_quads():
    quads = layout_text(_font(), "AB\nBA\n", 0.0, 0.0, 1.0)
    assert [q.character for q in quads] == ["A", "B", "B", "A"]


def test_unknown_character_uses_fallback_glyph():
    font = _font()
    (unknown,) = layout_text(font, "z", 1.0, 2.0, 1.0)
    (fallback,) = layout_text(font, chr(127), 1.0, 2.0, 1.0)
    assert unknown.vertices == fallback.vertices
    assert unknown.character == "z"


def test_unknown_character_without_fallback_raises():
    with pytest.raises(KeyError):
        layout_text(_font(with_fallback=False), "z", 0.0, 0.0, 1.0)


def test_empty_text_gives_no_quads():
    assert layout_text(_font(), "", 0.0, 0.0, 1.0) == []


def test_atlas_requires_positive_size():
    with pytest.raises(ValueError):
        FontAtlas(width=0, height=64, metrics=16)


def test_glyph_fields_become_float_pairs():
    glyph = Glyph([10, 0], [8, 12], [1, 10], [0, 1])
    assert glyph.size == (8.0, 12.0)
    assert glyph.uv == (0.0, 1.0)