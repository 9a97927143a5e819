from storyexport.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.page.size == "a4"
    assert cfg.page.margin == 20
    assert cfg.page.page_bottom == 270
    assert cfg.fonts.family == "helvetica"
    assert cfg.fonts.title_size == 24
    assert cfg.fonts.heading_size == 14
    assert cfg.spacing.body_line_height == 6
    assert cfg.spacing.block_gap == 4
    assert cfg.colors.byline == 100
    assert cfg.text.bullet == "•"
    assert cfg.output.directory == "."
    assert cfg.output.default_stem == "story"


def test_default_geometry_is_a4_portrait() -> None:
    geometry = load_config(env={}).page.geometry()
    assert (geometry.width, geometry.height) == (210.0, 297.0)
    assert geometry.content_width == 170.0
    assert geometry.top == 20.0
