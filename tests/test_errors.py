from towerdefense.errors import EngineError


def test_message_is_kept():
    err = EngineError("failed to create display")
    assert str(err) == "failed to create display"


def test_is_runtime_error():
    err = EngineError("failed to reserve samples")
    assert isinstance(err, RuntimeError)
    assert err.args == ("failed to reserve samples",)