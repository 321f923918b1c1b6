"""Smoke test: packages import."""


def test_import_world():
    import world
    assert world.MaterialId.EMPTY == 0
    assert callable(world.step)


def test_import_config():
    import config
    assert "pixel_size" in config._default_config()
