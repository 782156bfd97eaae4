import pytest

from rustlings.lessons.messages import (
    ChangeColor,
    Echo,
    MessageState,
    Move,
    Point,
    Quit,
)


def test_match_message_call(capsys):
    state = MessageState(quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_defaults():
    state = MessageState()
    assert state.color == (0, 0, 0)
    assert state.position == Point(0, 0)
    assert state.quit is False


def test_unknown_message_rejected():
    with pytest.raises(TypeError):
        MessageState().process("jump")


def test_point_range_checked():
    with pytest.raises(ValueError):
        Point(256, 0)


def test_color_range_checked():
    with pytest.raises(ValueError):
        ChangeColor(0, -1, 0)