from fenrir.domain.world import TileKind
from fenrir.presentation.cli import render
from fenrir.services.events import NarrationEvent
from fenrir.services.world_service import MapViewEvent


def _view(cells, position=(0, 0)) -> MapViewEvent:
    return MapViewEvent(width=3, height=2, position=position, cells=cells)


def test_format_map_marks_player_and_unknown_cells() -> None:
    view = _view({(0, 0): TileKind.EMPTY, (1, 0): TileKind.BOSS, (2, 1): TileKind.OASIS})

    assert render.format_map(view) == ["@ B ?", "? ? O"]


def test_every_tile_kind_has_a_symbol() -> None:
    assert set(render.TILE_SYMBOLS) == set(TileKind)
    assert len(set(render.TILE_SYMBOLS.values())) == len(TileKind)


def test_debug_enabled_requires_exact_flag(monkeypatch) -> None:
    monkeypatch.setenv("FENRIR_DEBUG", "1")
    assert render.debug_enabled()
    monkeypatch.setenv("FENRIR_DEBUG", "yes")
    assert not render.debug_enabled()


def test_render_events_prints_descriptions(capsys) -> None:
    render.render_events([NarrationEvent("Sand everywhere."), _view({}, position=(1, 1))])

    output = capsys.readouterr().out
    assert "Sand everywhere." in output
    assert "=== Map ===" in output
    assert "? ? ?" in output


def test_render_menu_numbers_options(capsys) -> None:
    render.render_menu("Choose your class", ["Wojownik", "Technik"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[-3:] == ["=== Choose your class ===", "1. Wojownik", "2. Technik"]
