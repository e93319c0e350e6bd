import pytest

from fenrir.presentation.cli.commands import is_decline, normalize, parse_battle_action, parse_command


@pytest.mark.parametrize(
    ("raw", "kind", "argument"),
    [
        ("idź północ", "move", "north"),
        ("idz pd", "move", "south"),
        ("go east", "move", "east"),
        ("IDZ zachód", "move", "west"),
        ("eksploruj", "explore", ""),
        ("ekwipunek", "inventory", ""),
        ("użyj Mały medykit", "use", "Mały medykit"),
        ("skanuj", "scan", ""),
        ("mapa", "map", ""),
        ("pomoc", "help", ""),
        ("wyjdź", "quit", ""),
        ("  status  ", "status", ""),
    ],
)
def test_parse_command_aliases(raw: str, kind: str, argument: str) -> None:
    command = parse_command(raw)

    assert command is not None
    assert (command.kind, command.argument) == (kind, argument)


def test_parse_command_unknown_verb() -> None:
    assert parse_command("taniec") is None
    assert parse_command("") is None


def test_unknown_direction_is_passed_through() -> None:
    command = parse_command("idz gora")

    assert command.argument == "gora"


@pytest.mark.parametrize(
    ("raw", "action"),
    [
        ("atakuj", "attack"),
        ("a", "attack"),
        ("lecz", "heal"),
        ("uciekaj", "flee"),
        ("run", "flee"),
        ("blokuj", "block"),
        ("specjalna", "special"),
        ("umiejętność", "special"),
        ("SKILL", "special"),
    ],
)
def test_parse_battle_action_aliases(raw: str, action: str) -> None:
    assert parse_battle_action(raw) == action


def test_parse_battle_action_unknown_token_is_cleaned() -> None:
    assert parse_battle_action("  Taniec ") == "taniec"


def test_normalize_strips_polish_diacritics() -> None:
    assert normalize(" ŁĄKA Źdźbło ") == "laka zdzblo"


def test_is_decline() -> None:
    assert is_decline("")
    assert is_decline("nie")
    assert not is_decline("Suchary")
