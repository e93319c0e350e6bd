import pytest

from fenrir.core.config import GameConfig


def test_defaults() -> None:
    config = GameConfig()

    assert (config.map_width, config.map_height) == (8, 8)
    assert config.starting_scan_charges == 3
    assert config.flee_chance == 0.5
    assert (config.trap_damage_min, config.trap_damage_max) == (10, 25)


def test_config_is_frozen() -> None:
    config = GameConfig()
    with pytest.raises(AttributeError):
        config.map_width = 12  # type: ignore[misc]


def test_rejects_tiny_map() -> None:
    with pytest.raises(ValueError):
        GameConfig(map_width=3)


def test_rejects_inverted_trap_range() -> None:
    with pytest.raises(ValueError):
        GameConfig(trap_damage_min=30, trap_damage_max=20)
