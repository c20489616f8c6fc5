import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.api.deps import get_llm_client
from app.core.errors import UpstreamOther


@pytest.fixture(autouse=True)
def reset_app_state():
    # no remote credential unless a test injects one
    app.state.llm_client = None
    app.dependency_overrides.clear()
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def use_llm():
    def _install(fake):
        app.dependency_overrides[get_llm_client] = lambda: fake
        return fake
    return _install


@pytest.fixture()
def no_remote_calls(monkeypatch):
    async def boom(*args, **kwargs):
        raise UpstreamOther("remote path must not be used")
    monkeypatch.setattr("app.llm.assessor.assess", boom)
    monkeypatch.setattr("app.llm.composer.compose", boom)
