"""Tests for the fault barrier."""
from content_editor.boundary import Fallback, FaultBarrier


def boom():
    raise RuntimeError("render exploded")


def test_renders_child_normally():
    barrier = FaultBarrier()
    assert barrier.render(lambda x: x * 2, 21) == 42
    assert barrier.has_error is False


def test_fault_returns_fallback_with_message():
    barrier = FaultBarrier()
    result = barrier.render(boom)
    assert isinstance(result, Fallback)
    assert result.message == "render exploded"
    assert result.title == "Something went wrong"


def test_fallback_until_reset():
    calls = []
    barrier = FaultBarrier()
    barrier.render(boom)
    result = barrier.render(lambda: calls.append(1) or "ok")
    assert isinstance(result, Fallback)
    assert calls == []


def test_reset_returns_to_children_and_calls_hook_once():
    resets = []
    barrier = FaultBarrier(on_reset=lambda: resets.append(1))
    barrier.render(boom)
    barrier.reset()
    assert resets == [1]
    assert barrier.render(lambda: "ok") == "ok"
    barrier.render(boom)
    barrier.reset()
    assert resets == [1, 1]


def test_empty_message_falls_back_to_unknown():
    def fail():
        raise ValueError()

    assert FaultBarrier().render(fail).message == "Unknown Error"


def test_fault_is_logged(caplog):
    FaultBarrier().render(boom)
    assert "Uncaught error while rendering" in caplog.text


def test_reload_uses_hook():
    reloads = []
    FaultBarrier(reload=lambda: reloads.append(1)).reload()
    assert reloads == [1]
