import pytest

from simulator.tape import Movement, Tape


def walk(cursor, offset):
    for _ in range(abs(offset)):
        if offset > 0:
            cursor.move_right()
        else:
            cursor.move_left()
    return cursor


def test_fresh_tape_is_blank_everywhere():
    tape = Tape()
    for offset in range(-50, 51):
        cursor = walk(tape.origin(), offset)
        assert cursor.read() is None
    assert tape.contents() == {}


def test_write_then_read_round_trip():
    tape = Tape()
    head = tape.origin()

    assert head.write('a') is None
    assert head.read() == 'a'

    assert head.write(None) == 'a'
    assert head.read() is None
    assert tape.contents() == {}


def test_move_right_then_left_returns_to_same_cell():
    tape = Tape()
    head = tape.origin()
    head.write('x')
    start = head.clone()

    head.move_right()
    assert head != start
    head.move_left()

    assert head == start
    assert head.read() == 'x'


def test_move_left_then_right_returns_to_same_cell():
    tape = Tape()
    head = tape.origin()
    start = head.clone()

    head.move_left()
    head.move_right()

    assert head == start
    assert len(tape) == 2


def test_moves_return_departed_symbol():
    tape = Tape()
    head = tape.origin()
    head.write(7)

    assert head.move_right() == 7
    assert head.move_left() is None
    assert head.move(Movement.STAY) == 7
    assert head.position == 0


def test_clone_shares_the_cell():
    tape = Tape()
    head = tape.origin()
    alias = head.clone()

    head.write('x')
    assert alias.read() == 'x'

    alias.write('y')
    assert head.read() == 'y'


def test_clone_moves_independently():
    tape = Tape()
    head = tape.origin()
    alias = head.clone()

    alias.move_right()
    alias.write('r')

    assert head.read() is None
    assert head.position == 0
    assert alias.position == 1
    head.move_right()
    assert head == alias
    assert head.read() == 'r'


def test_cursors_reaching_a_cell_by_different_paths_are_equal():
    tape = Tape()
    direct = walk(tape.origin(), 1)
    detour = walk(tape.origin(), -3)
    walk(detour, 4)

    assert direct == detour


def test_cursors_are_not_hashable():
    with pytest.raises(TypeError):
        {Tape().origin()}


def test_cursors_on_different_tapes_are_not_equal():
    assert Tape().origin() != Tape().origin()


def test_cursor_from_other_tape_is_rejected():
    tape, other = Tape(), Tape()
    with pytest.raises(ValueError):
        tape.read(other.origin())


@pytest.mark.parametrize("offset", [1, 5, 100, -1, -5, -100])
def test_lazy_extension_materializes_one_cell_per_move(offset):
    tape = Tape()
    assert len(tape) == 1

    cursor = walk(tape.origin(), offset)
    cursor.write('z')
    assert cursor.read() == 'z'
    assert len(tape) == abs(offset) + 1

    # Walking back over existing cells allocates nothing.
    walk(cursor, -offset)
    assert len(tape) == abs(offset) + 1


def test_window_does_not_materialize_cells():
    tape = Tape()
    head = tape.origin()
    head.write('a')

    assert head.window(2, 3) == [None, None, 'a', None, None]
    assert len(tape) == 1


def test_window_is_left_to_right():
    tape = Tape()
    head = tape.origin()
    for symbol in "abcde":
        head.write(symbol)
        head.move_right()
    walk(head, -3)  # on 'c'

    assert head.read() == 'c'
    assert head.window(2, 3) == ['a', 'b', 'c', 'd', 'e']
    assert head.window(0, 1) == ['c']
    assert head.window(3, 0) == [None, 'a', 'b']
    assert head.window(0, 0) == []


def test_window_rejects_negative_extents():
    with pytest.raises(ValueError):
        Tape().origin().window(-1, 2)


def test_iter_from_in_both_directions():
    tape = Tape()
    head = tape.origin()
    for value in range(5):
        head.write(value)
        head.move_right()

    forward = tape.iter_from(tape.origin())
    assert [next(forward) for _ in range(6)] == [0, 1, 2, 3, 4, None]

    backward = tape.iter_from(head, reverse=True)
    assert [next(backward) for _ in range(7)] == [None, 4, 3, 2, 1, 0, None]


def test_contents_reports_positions():
    tape = Tape()
    head = tape.origin()
    head.move_left()
    head.write('l')
    walk(head, 3)
    head.write('r')
    head.move_left()
    head.write(None)

    assert tape.contents() == {-1: 'l', 2: 'r'}
