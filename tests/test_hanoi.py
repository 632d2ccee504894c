import pytest

from algokit.hanoi import Move, hanoi_moves, main


def _play(disks, moves, source="A", target="C", spare="B"):
    pegs = {source: list(range(disks, 0, -1)), target: [], spare: []}
    for move in moves:
        stack = pegs[move.source]
        assert stack and stack[-1] == move.disk
        destination = pegs[move.target]
        assert not destination or destination[-1] > move.disk
        destination.append(stack.pop())
    return pegs


@pytest.mark.parametrize("disks", range(0, 9))
def test_moves_are_legal_and_complete(disks):
    moves = list(hanoi_moves(disks, "A", "C", "B"))
    assert len(moves) == 2**disks - 1
    pegs = _play(disks, moves)
    assert pegs["C"] == list(range(disks, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_custom_tower_names():
    moves = list(hanoi_moves(3, "left", "right", "middle"))
    pegs = _play(3, moves, "left", "right", "middle")
    assert pegs["right"] == [3, 2, 1]


def test_single_disk():
    assert list(hanoi_moves(1, "A", "C", "B")) == [Move(1, "A", "C")]


def test_largest_disk_moves_once_in_the_middle():
    moves = list(hanoi_moves(5, "A", "C", "B"))
    largest = [i for i, move in enumerate(moves) if move.disk == 5]
    assert largest == [len(moves) // 2]
    assert moves[len(moves) // 2] == Move(5, "A", "C")


def test_negative_disks():
    with pytest.raises(ValueError):
        list(hanoi_moves(-1, "A", "C", "B"))


def test_move_text():
    assert str(Move(1, "A", "C")) == "Move disk 1 from peg A to peg C"


def test_main_prints_moves(capsys):
    assert main(["2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(move) for move in hanoi_moves(2, "A", "C", "B")]
    assert len(lines) == 3


def test_main_negative(capsys):
    assert main(["--", "-2"]) == 1
    assert "Error!" in capsys.readouterr().err