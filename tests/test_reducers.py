"""
Tests for create_reducer dispatch semantics and handler-map helpers.
"""

import pytest

from pysauce import (
    InvalidArgumentError,
    combine_handlers,
    create_actions,
    create_reducer,
    on,
)


@pytest.fixture
def counter_reducer():
    return create_reducer(0, {"INCREMENT": lambda s, a: s + a["amount"]})


def test_missing_state_and_action_returns_initial_state(counter_reducer):
    assert counter_reducer() == 0
    assert counter_reducer(None, None) == 0


def test_unknown_action_type_returns_state(counter_reducer):
    assert counter_reducer(5, {"type": "UNKNOWN"}) == 5


def test_handler_is_invoked(counter_reducer):
    assert counter_reducer(5, {"type": "INCREMENT", "amount": 3}) == 8


def test_action_without_type_returns_state(counter_reducer):
    assert counter_reducer(5, {}) == 5
    assert counter_reducer(5, object()) == 5


def test_none_state_uses_initial_state(counter_reducer):
    assert counter_reducer(None, {"type": "INCREMENT", "amount": 2}) == 2


def test_unhashable_type_returns_state(counter_reducer):
    assert counter_reducer(5, {"type": ["INCREMENT"]}) == 5


def test_attribute_style_actions_are_dispatched():
    class Increment:
        type = "INCREMENT"
        amount = 4

    reducer = create_reducer(0, {"INCREMENT": lambda s, a: s + a.amount})

    assert reducer(1, Increment()) == 5


def test_same_reference_is_preserved():
    state = {"todos": []}
    reducer = create_reducer(state, {"NOOP": lambda s, a: s})

    assert reducer(state, {"type": "NOOP"}) is state
    assert reducer(state, {"type": "UNKNOWN"}) is state


def test_handler_result_is_returned_without_merging():
    reducer = create_reducer({"a": 1, "b": 2}, {"REPLACE": lambda s, a: {"c": 3}})

    assert reducer(None, {"type": "REPLACE"}) == {"c": 3}


def test_handler_exceptions_propagate():
    def boom(state, action):
        raise RuntimeError("boom")

    reducer = create_reducer(0, {"BOOM": boom})

    with pytest.raises(RuntimeError, match="boom"):
        reducer(0, {"type": "BOOM"})


def test_falsy_initial_states_are_accepted():
    for initial in (0, "", [], {}, False):
        assert create_reducer(initial, {})() == initial


def test_initial_state_is_required():
    with pytest.raises(InvalidArgumentError, match="initial state is required"):
        create_reducer(None, {})


@pytest.mark.parametrize("handlers", [None, [], "INCREMENT", 3])
def test_handlers_must_be_a_mapping(handlers):
    with pytest.raises(InvalidArgumentError, match="handlers must be an object"):
        create_reducer(0, handlers)


def test_reducer_exposes_initial_state_and_handlers():
    handlers = {"INCREMENT": lambda s, a: s + 1}
    reducer = create_reducer(0, handlers)

    assert reducer.initial_state == 0
    assert reducer.handlers is handlers


def test_handler_map_is_held_by_reference():
    handlers = {}
    reducer = create_reducer(0, handlers)
    handlers["INCREMENT"] = lambda s, a: s + 1

    assert reducer(0, {"type": "INCREMENT"}) == 1


def test_reducer_with_generated_creators():
    types, creators = create_actions({"addTodo": ["text"], "clearTodos": None})
    reducer = create_reducer((), {
        types.addTodo: lambda s, a: s + (a.text,),
        types.clearTodos: lambda s, a: (),
    })

    state = reducer(None, creators.addTodo("buy milk"))
    state = reducer(state, creators.addTodo("walk dog"))

    assert state == ("buy milk", "walk dog")
    assert reducer(state, creators.clearTodos()) == ()


def test_on_accepts_type_or_creator():
    _, creators = create_actions({"addTodo": ["text"]})

    def handler(state, action):
        return state

    assert on("ADD_TODO", handler) == {"ADD_TODO": handler}
    assert on(creators.addTodo, handler) == {"ADD_TODO": handler}


def test_on_rejects_custom_creator_without_type():
    with pytest.raises(InvalidArgumentError):
        on(lambda: {"type": "X"}, lambda s, a: s)


def test_on_rejects_non_callable_handler():
    with pytest.raises(InvalidArgumentError):
        on("X", "not a handler")


def test_combine_handlers_merges_tuples_and_mappings():
    _, creators = create_actions({"increment": None, "decrement": None})

    def first(state, action):
        return state + 1

    def second(state, action):
        return state + 100

    handlers = combine_handlers(
        on(creators.increment, first),
        (creators.decrement, lambda s, a: s - 1),
        ("INCREMENT", second),
    )
    reducer = create_reducer(0, handlers)

    assert list(handlers) == ["INCREMENT", "DECREMENT"]
    assert reducer(0, creators.increment()) == 100
    assert reducer(0, creators.decrement()) == -1


def test_combine_handlers_rejects_unknown_parts():
    with pytest.raises(InvalidArgumentError):
        combine_handlers(["INCREMENT"])
