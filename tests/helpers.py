"""Builders and test doubles shared by the unit and API tests."""

from manualkit.core.schemas import ContentBlock, LLMResponse, Page


def make_page(page_id, title=None, blocks=None, children=None, category=False):
    """Build a page; content pages get one paragraph block per text given."""
    content = None
    if not category:
        content = [
            ContentBlock(id=f"{page_id}-b{i}", type="p", content=text)
            for i, text in enumerate(blocks or [])
        ]
    return Page(
        id=page_id,
        title=title or page_id.title(),
        content=content,
        children=children,
    )


class FakeLLM:
    """Stands in for LLMClient; records every call and returns a canned answer."""

    def __init__(self, answer="Resposta de teste.", error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    async def acomplete(self, prompt, model=None, system_prompt=None, chat_history=None, **kwargs):
        self.calls.append({
            "prompt": prompt,
            "system_prompt": system_prompt,
            "chat_history": list(chat_history or []),
        })
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.answer, model="fake-model")


ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


def login(client, username, password):
    """Log in and return bearer headers; the session cookie is discarded."""
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
