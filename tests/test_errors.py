import pytest

from decision_playground import (
    ConfigurationError,
    DimensionError,
    LifecycleError,
    PlaygroundError,
)


@pytest.mark.parametrize("error, builtin", [
    (ConfigurationError, ValueError),
    (DimensionError, ValueError),
    (LifecycleError, RuntimeError),
])
def test_error_hierarchy(error, builtin):
    assert issubclass(error, PlaygroundError)
    assert issubclass(error, builtin)
    with pytest.raises(PlaygroundError):
        raise error("boom")
