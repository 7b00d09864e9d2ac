import pytest

import windows


@pytest.fixture(params=sorted(windows.WINDOW_REGISTRY))
def window_cls(request):
    """Every registered window implementation."""
    return windows.WINDOW_REGISTRY[request.param]


@pytest.fixture
def sample_stream():
    return [1, 3, -1, -3, 5, 3, 6, 7]
