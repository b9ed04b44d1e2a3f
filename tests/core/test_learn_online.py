#!filepath: tests/core/test_learn_online.py
import itertools

import pytest

from learning_strategies import (
    InfiniteNothing,
    LearningStrategy,
    MaxIter,
    learn,
    strategy,
)


@pytest.mark.parametrize("n", range(1, 11))
def test_maxiter_counter_exact(n, counter):
    learn(None, strategy(MaxIter(n), counter), itertools.count())
    assert counter.n == n


def test_exhaustion_stop_without_finished(make_recorder, calls):
    rec = make_recorder("A")
    learn("model", rec, [1, 2, 3])

    assert rec.items == [1, 2, 3]
    assert [op for _, op, _ in calls].count("update") == 3
    # finished 每轮都被调用，但从未返回 True
    assert [i for _, op, i in calls if op == "finished"] == [1, 2, 3]


def test_call_sequence_per_iteration(make_recorder, calls):
    learn(None, strategy(make_recorder("A"), make_recorder("B", stop_at=2)), "xyz")

    assert calls == [
        ("A", "setup", None), ("B", "setup", None),
        ("A", "update", 1), ("B", "update", 1),
        ("A", "hook", 1), ("B", "hook", 1),
        ("A", "finished", 1), ("B", "finished", 1),
        ("A", "update", 2), ("B", "update", 2),
        ("A", "hook", 2), ("B", "hook", 2),
        ("A", "finished", 2), ("B", "finished", 2),
        ("A", "cleanup", None), ("B", "cleanup", None),
    ]


@pytest.mark.parametrize("data, stop_at", [
    ([1, 2, 3], None),     # exhaustion
    (itertools.count(), 4),  # finished
    ([], None),            # empty data
])
def test_setup_and_cleanup_bracket_run(make_recorder, calls, data, stop_at):
    learn(None, make_recorder("A", stop_at=stop_at), data)

    ops = [op for _, op, _ in calls]
    assert ops.count("setup") == 1
    assert ops.count("cleanup") == 1
    assert ops[0] == "setup"
    assert ops[-1] == "cleanup"


def test_empty_data_runs_no_iterations(make_recorder, calls):
    learn(None, make_recorder("A"), [])
    assert calls == [("A", "setup", None), ("A", "cleanup", None)]


def test_returns_same_model_object():
    class Append(LearningStrategy):
        def update(self, model, i, item):
            model.append(item * 10)

    model = []
    out = learn(model, Append(), [1, 2])

    assert out is model
    assert model == [10, 20]


def test_hook_and_finished_receive_data_source():
    seen = []

    class Spy(LearningStrategy):
        def hook(self, model, data, i):
            seen.append(data)

    data = [5, 6]
    learn(None, Spy(), data)
    assert seen == [data, data]
    assert all(d is data for d in seen)


def test_no_data_form_uses_infinite_nothing():
    items = []

    class Collect(LearningStrategy):
        def setup(self, model, data):
            assert isinstance(data, InfiniteNothing)

        def update(self, model, i, item):
            items.append(item)

    learn(None, strategy(Collect(), MaxIter(5)))
    assert items == [None] * 5


def test_infinite_nothing_is_restartable():
    src = InfiniteNothing()
    assert list(itertools.islice(src, 3)) == [None, None, None]
    assert list(itertools.islice(src, 2)) == [None, None]


def test_mode_string_accepted(counter):
    learn(None, strategy(MaxIter(2), counter), [1, 2, 3], "online")
    assert counter.n == 2


def test_unknown_mode_raises_before_setup(make_recorder, calls):
    with pytest.raises(ValueError):
        learn(None, make_recorder("A"), [1], "batch")
    assert calls == []


def test_callback_error_propagates_without_cleanup(make_recorder, calls):
    class Boom(LearningStrategy):
        def hook(self, model, data, i):
            if i == 2:
                raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        learn(None, strategy(make_recorder("A"), Boom()), [1, 2, 3])

    ops = [op for _, op, _ in calls]
    assert "cleanup" not in ops
    assert ops.count("update") == 2


def test_debug_log_on_entry_and_exit(log_messages):
    learn(None, MaxIter(2), [1, 2, 3])

    assert any("[learn] start mode=online" in m for m in log_messages)
    assert any("iterations=2 reason=finished" in m for m in log_messages)
