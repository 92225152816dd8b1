import pytest

from simulator import machine as tm
from simulator.errors import StepAfterHalt, UnhandledInput
from simulator.machine import HALTED, Running
from simulator.programs import copy_and_erase, prepare_tape
from simulator.table import HALT, Action, TransitionTable
from simulator.tape import Movement, Tape


def test_new_machine_is_running():
    machine = tm.new('A')
    assert machine == Running('A')
    assert not machine.halted
    assert HALTED.halted


def test_step_writes_before_moving():
    table = TransitionTable({(None, 'A'): Action('x', Movement.RIGHT, 'B')})
    tape = Tape()
    head = tape.origin()

    machine = tm.step(tm.new('A'), table, head)

    assert machine == Running('B')
    assert head.position == 1
    assert tape.contents() == {0: 'x'}


def test_halt_entry_halts_in_one_step():
    table = TransitionTable({(None, 'A'): Action(None, Movement.STAY, HALT)})
    head = Tape().origin()

    assert tm.step(tm.new('A'), table, head) is HALTED
    assert head.position == 0


def test_step_after_halt_is_a_no_op_by_default():
    tape = Tape()
    head = tape.origin()
    table = TransitionTable({})

    assert tm.step(HALTED, table, head) is HALTED
    assert len(tape) == 1
    assert head.position == 0


def test_step_after_halt_raises_in_strict_mode():
    with pytest.raises(StepAfterHalt):
        tm.step(HALTED, TransitionTable({}), Tape().origin(), strict=True)


def test_unhandled_input_leaves_tape_untouched():
    table = TransitionTable({('a', 'A'): Action('b', Movement.LEFT, 'B')})
    tape = Tape()
    head = tape.origin()
    head.write('q')

    with pytest.raises(UnhandledInput) as excinfo:
        tm.step(tm.new('A'), table, head)

    assert excinfo.value.observed == ('q', 'A')
    assert head.read() == 'q'
    assert head.position == 0
    assert len(tape) == 1


def trace(program):
    tape, head = prepare_tape(program)
    machine = tm.new(program.initial_state)
    states = [machine]
    windows = [head.window(2, 3)]
    while not machine.halted:
        machine = tm.step(machine, program.table, head)
        states.append(machine)
        windows.append(head.window(2, 3))
    return states, windows, tape.contents(), head.position


def test_runs_are_deterministic():
    assert trace(copy_and_erase()) == trace(copy_and_erase())


def test_copy_and_erase_scenario():
    states, windows, contents, position = trace(copy_and_erase())

    assert states == [Running('A'), Running('B'), HALTED]
    assert windows == [
        [None, None, 'a', None, None],
        [None, None, None, 'b', None],
        [None, None, 'a', 'b', None],
    ]
    assert contents == {-1: 'a', 0: 'b'}
    assert position == -1
