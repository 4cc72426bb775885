"""Unit tests for manualkit.tree.search."""

import re

import pytest

from manualkit.core.schemas import ContentBlock, FaqItem, Page
from manualkit.tree import search
from manualkit.tree.search import (
    QUESTION_MATCH_SNIPPET,
    TITLE_MATCH_SNIPPET,
    highlight,
    make_snippet,
)

from helpers import make_page


def pattern(text):
    return re.compile(re.escape(text), re.IGNORECASE)


class TestHighlight:
    """Test cases for highlight and make_snippet."""

    def test_wraps_every_match(self):
        assert highlight("Risco e risco", pattern("risco")) == "<mark>Risco</mark> e <mark>risco</mark>"

    def test_escapes_surrounding_html(self):
        assert highlight("<b>nota</b>", pattern("nota")) == "&lt;b&gt;<mark>nota</mark>&lt;/b&gt;"

    def test_short_text_has_no_ellipsis(self):
        assert make_snippet("Emitir nota fiscal", pattern("nota")) == "Emitir <mark>nota</mark> fiscal"

    def test_long_text_is_clipped_both_sides(self):
        text = "a" * 80 + "alvo" + "b" * 80

        snippet = make_snippet(text, pattern("alvo"))

        assert snippet == "..." + "a" * 50 + "<mark>alvo</mark>" + "b" * 50 + "..."

    def test_no_match_is_empty(self):
        assert make_snippet("nada aqui", pattern("zzz")) == ""


class TestSearch:
    """Test cases for search over pages and FAQs."""

    def test_empty_query(self, sample_forest, sample_faqs):
        assert search(sample_forest, sample_faqs, "") == []

    def test_no_match(self, sample_forest, sample_faqs):
        assert search(sample_forest, sample_faqs, "inexistente") == []

    def test_title_match(self, sample_forest):
        results = search(sample_forest, [], "riscos")

        assert len(results) == 1
        hit = results[0]
        assert hit.type == "Page"
        assert hit.id == "riscos"
        assert hit.title == "<mark>Riscos</mark>"
        assert hit.snippet == TITLE_MATCH_SNIPPET
        assert hit.path == ["diretrizes", "riscos"]
        assert hit.path_titles == ["Diretrizes", "Riscos"]

    def test_title_and_content_match_yields_one_result(self):
        forest = [make_page("risco", "Risco", ["Todo risco deve ser mapeado."])]

        results = search(forest, [], "risco")

        assert len(results) == 1
        assert results[0].snippet == TITLE_MATCH_SNIPPET

    def test_content_match_uses_first_matching_block(self, sample_forest):
        results = search(sample_forest, [], "dados")

        assert len(results) == 1
        assert results[0].id == "etica"
        assert results[0].title == "Ética"
        assert results[0].snippet == "Proteger <mark>dados</mark> sensíveis."

    def test_case_insensitive(self, sample_forest):
        assert [r.id for r in search(sample_forest, [], "BEM-VINDO")] == ["inicio"]

    def test_query_is_literal(self):
        forest = [make_page("p", "P", ["Custo (R$) total."])]

        assert len(search(forest, [], "(R$)")) == 1
        assert search(forest, [], "R.") == []

    def test_list_blocks_are_searched(self):
        page = Page(
            id="p", title="P",
            content=[ContentBlock(id="l", type="ul", content=["Primeiro", "Segundo item"])],
        )

        results = search([page], [], "segundo")

        assert results[0].snippet == "Primeiro <mark>Segundo</mark> item"

    def test_image_blocks_are_skipped(self):
        page = Page(
            id="p", title="P",
            content=[ContentBlock(id="i", type="image", content="data:image/png;base64,logo")],
        )

        assert search([page], [], "logo") == []

    def test_pages_come_before_faqs(self, sample_forest, sample_faqs):
        forest = sample_forest + [make_page("vendas", "Vendas", ["Cadastro de clientes."])]

        results = search(forest, sample_faqs, "cadastr")

        assert [(r.type, r.id) for r in results] == [
            ("Page", "vendas"),
            ("FAQ", "faq1"),
            ("FAQ", "faq2"),
        ]

    def test_faq_question_match(self, sample_faqs):
        results = search([], sample_faqs, "emite")

        assert len(results) == 1
        hit = results[0]
        assert hit.type == "FAQ"
        assert hit.title == "Quem <mark>emite</mark> notas?"
        assert hit.snippet == QUESTION_MATCH_SNIPPET
        assert hit.path == ["faq"]
        assert hit.path_titles == ["FAQ"]

    def test_faq_answer_match_gets_snippet(self, sample_faqs):
        results = search([], sample_faqs, "fiscal")

        assert results[0].id == "faq2"
        assert results[0].title == "Quem emite notas?"
        assert results[0].snippet == "O setor <mark>fiscal</mark> cuida do cadastro."

    def test_faq_matched_twice_appears_once(self):
        faqs = [FaqItem(id="f", question="Nota?", answer="Nota fiscal.")]

        results = search([], faqs, "nota")

        assert len(results) == 1
        assert results[0].snippet == "<mark>Nota</mark> fiscal."

    @pytest.mark.parametrize("query", ["<script>", "&"])
    def test_markup_in_content_is_escaped(self, query):
        forest = [make_page("p", "P", [f"texto {query} texto"])]

        snippet = search(forest, [], query)[0].snippet

        assert "<script>" not in snippet.replace("<mark>", "").replace("</mark>", "")
