"""Shared pytest fixtures.

Unit tests build small forests by hand. API tests run the real FastAPI app
against a throwaway SQLite database per test.
"""

import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from manualkit.core.schemas import FaqItem

from helpers import ADMIN_PASSWORD, ADMIN_USERNAME, FakeLLM, login, make_page

# LiteLLM is chatty at import time and on retries.
logging.getLogger("LiteLLM").setLevel(logging.WARNING)


@pytest.fixture
def sample_forest():
    """Two-level forest with the pinned pages at the end."""
    return [
        make_page("inicio", "Início", ["Bem-vindo ao manual."]),
        make_page(
            "diretrizes",
            "Diretrizes",
            category=True,
            children=[
                make_page("etica", "Ética", ["Agir com respeito.", "Proteger dados sensíveis."]),
                make_page("riscos", "Riscos", ["Mapear cenários de risco."]),
            ],
        ),
        make_page("faq", "FAQ", category=True),
        make_page("contato", "Contato", category=True),
    ]


@pytest.fixture
def sample_faqs():
    return [
        FaqItem(id="faq1", question="Como cadastrar um cliente?", answer="Use o Pedido de Venda."),
        FaqItem(id="faq2", question="Quem emite notas?", answer="O setor fiscal cuida do cadastro."),
    ]


@pytest.fixture
def fake_llm():
    return FakeLLM()


# ---------------------------------------------------------------------------
# Database and application
# ---------------------------------------------------------------------------

@pytest.fixture
def session_factory(tmp_path, monkeypatch):
    """Point ``manualkit.db.session`` at a fresh SQLite file."""
    from manualkit.db import session as db_session

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "async_session", factory)
    return factory


@pytest.fixture
def app(session_factory, tmp_path, monkeypatch, fake_llm):
    from manualkit.api.app import create_app
    from manualkit.api.deps import get_llm

    monkeypatch.setenv("MANUAL_STORAGE_PATH", str(tmp_path / "storage"))
    monkeypatch.delenv("MANUAL_ADMIN_PASSWORD", raising=False)

    application = create_app()
    application.dependency_overrides[get_llm] = lambda: fake_llm
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    return login(client, ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def user_headers(client, admin_headers):
    response = client.post(
        "/api/users/",
        json={"username": "maria", "password": "segredo1"},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return login(client, "maria", "segredo1")
