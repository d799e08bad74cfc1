"""Play whole games through the console front end.

Each game feeds a scripted stdin: the first line answers the "press Enter"
banner, then navigation commands, then the accused name.
"""

import io

import pytest

from detective.app import run_console
from detective.engine.verdict import Verdict
from detective.session import DetectiveSession


def _play(script: str) -> tuple[Verdict, str, tuple[list[str], list[str]]]:
    """Run a full game; return the verdict, the output and the clues."""
    stdout = io.StringIO()
    with DetectiveSession.start() as game:
        verdict = run_console(game, io.StringIO(script), stdout)
        clues = game.sorted_clues()
        collected = list(game.state.collected)
    assert game.closed
    return verdict, stdout.getvalue(), (clues, collected)


def test_single_clue_is_not_enough():
    """e, s collects one Carlos clue: rejected."""
    verdict, output, (clues, collected) = _play("\ne\ns\nCarlos\n")
    assert clues == ["pegada no tapete"]
    assert collected == ["pegada no tapete"]
    assert verdict == Verdict("Carlos", 1)
    assert not verdict.accepted
    assert "Pistas coletadas (ordenadas):\n- pegada no tapete\n" in output
    assert "Pistas que apontam para Carlos: 1" in output
    assert "Acusação rejeitada" in output


def test_two_clues_convict():
    """e, e, s collects two Carlos clues: accepted."""
    verdict, output, (clues, collected) = _play("\ne\ne\ns\nCarlos\n")
    assert collected == ["pegada no tapete", "faca com digitais"]
    assert clues == ["faca com digitais", "pegada no tapete"]
    assert verdict.count == 2
    assert verdict.accepted
    assert "- faca com digitais\n- pegada no tapete\n" in output
    assert "Parabéns, Detetive!" in output


def test_staying_in_a_room_collects_once():
    """Every step in a room resubmits its clue but it only counts once."""
    verdict, output, (clues, collected) = _play("\ne\nx\ne\nd\ns\nCarlos\n")
    assert collected == ["pegada no tapete", "faca com digitais"]
    assert output.count('Pista coletada: "pegada no tapete"') == 1
    assert output.count('Pista já coletada anteriormente: "pegada no tapete"') == 1
    assert output.count('Pista já coletada anteriormente: "faca com digitais"') == 1
    assert "Comando inválido" in output
    assert "Não há caminho à direita." in output
    assert verdict.count == 2


def test_leaf_does_not_end_exploration():
    verdict, output, _ = _play("\ne\ne\ne\ns\nCarlos\n")
    assert "Esta sala não tem caminhos" in output
    assert "Não há caminho à esquerda." in output
    assert "Saindo da exploração..." in output
    assert verdict.count == 2


def test_nothing_collected():
    verdict, output, (clues, _) = _play("\ns\nLuisa\n")
    assert clues == []
    assert "Nenhuma pista coletada." in output
    assert verdict == Verdict("Luisa", 0)


def test_end_of_input_during_exploration():
    """Closing input leaves the mansion and accuses nobody."""
    verdict, output, (clues, _) = _play("\nd\nd\n")
    assert clues == ["bilhete rasgado", "página arrancada do livro"]
    assert "Saindo da exploração" not in output
    assert verdict == Verdict("", 0)
    assert "Pistas que apontam para : 0" in output


def test_empty_input():
    verdict, output, (clues, _) = _play("")
    assert output.startswith("Bem-vindo a Detective Quest!")
    assert "Hall de Entrada" in output
    assert clues == []
    assert not verdict.accepted


@pytest.mark.parametrize(
    "script, accused, count",
    [
        ("\nd\nd\nd\ns\n", "Mariana", 2),
        ("\nd\ne\ns\n", "Luisa", 1),
        ("\ne\nd\ne\ns\n", "Carlos", 2),
        ("\nd\ne\ns\n", "Mariana", 1),
    ],
)
def test_routes(script, accused, count):
    verdict, _, _ = _play(script + accused + "\n")
    assert verdict.count == count
    assert verdict.accepted == (count >= 2)


def test_luisa_across_both_wings():
    """Luisa's clues sit in different wings; one route can't reach both."""
    verdict, _, (_, collected) = _play("\nd\nd\nd\ns\nLuisa\n")
    assert "chave perdida" in collected
    assert "vidro quebrado" not in collected
    assert verdict.count == 1


def test_accused_name_keeps_trailing_spaces():
    verdict, output, _ = _play("\ne\ne\ns\nCarlos \n")
    assert verdict.accused == "Carlos "
    assert verdict.count == 0


def test_windows_line_endings():
    verdict, _, _ = _play("\r\ne\r\ne\r\ns\r\nCarlos\r\n")
    assert verdict.count == 2


def test_padded_commands_go_nowhere():
    """Commands with stray spaces are rejected, so no clue is collected."""
    verdict, output, (clues, _) = _play("\n e\ne \ns\nCarlos\n")
    assert output.count("Comando inválido") == 2
    assert clues == []
    assert verdict == Verdict("Carlos", 0)
    assert "Acusação rejeitada" in output
