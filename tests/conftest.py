import pytest
from fastapi.testclient import TestClient

from batch_sort.api.main import create_app
from batch_sort.core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; drop the cache around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture(params=["/process-single", "/process-concurrent"])
def endpoint(request):
    """Both routes share one contract; run contract tests against each."""
    return request.param
