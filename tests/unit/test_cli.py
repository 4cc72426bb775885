"""Tests for the run_manualkit command line (init, export, import, version)."""

import asyncio
import json

import pytest

import run_manualkit
from manualkit.core.exceptions import DuplicatePageError
from manualkit.core.schemas import dump_pages
from manualkit.version import __version__

from helpers import make_page


@pytest.fixture
def payload():
    return {
        "pages": dump_pages([
            make_page("inicio", "Início", ["Bem-vindo."]),
            make_page(
                "diretrizes",
                "Diretrizes",
                category=True,
                children=[make_page("etica", "Ética", ["Agir com respeito."])],
            ),
        ]),
        "faqs": [{"id": "faq1", "question": "Onde fica o RH?", "answer": "No 2º andar."}],
    }


@pytest.fixture
def duplicate_payload():
    return {
        "pages": [
            {"id": "diretrizes", "title": "Diretrizes", "children": [
                {"id": "etica", "title": "Ética", "content": []},
                {"id": "etica", "title": "Ética (cópia)", "content": []},
            ]},
        ],
        "faqs": [],
    }


class TestExportImport:

    def test_export_after_init_has_seed_content(self, session_factory):
        asyncio.run(run_manualkit._init())

        data = asyncio.run(run_manualkit._export())

        assert [p["id"] for p in data["pages"]][-2:] == ["faq", "contato"]
        assert [f["id"] for f in data["faqs"]] == ["faq1", "faq2", "faq3"]

    def test_import_then_export_round_trip(self, session_factory, payload):
        asyncio.run(run_manualkit._import(payload))

        assert asyncio.run(run_manualkit._export()) == payload

    def test_import_replaces_existing_content(self, session_factory, payload):
        asyncio.run(run_manualkit._init())

        asyncio.run(run_manualkit._import(payload))

        assert [p["id"] for p in asyncio.run(run_manualkit._export())["pages"]] == ["inicio", "diretrizes"]

    def test_duplicate_sibling_ids_rejected(self, session_factory, payload, duplicate_payload):
        asyncio.run(run_manualkit._import(payload))

        with pytest.raises(DuplicatePageError):
            asyncio.run(run_manualkit._import(duplicate_payload))

        assert asyncio.run(run_manualkit._export()) == payload


class TestCommands:

    def test_export_writes_file(self, session_factory, payload, tmp_path):
        asyncio.run(run_manualkit._import(payload))
        output = tmp_path / "out" / "manual.json"

        run_manualkit.main(["export", "--output", str(output)])

        assert json.loads(output.read_text(encoding="utf-8")) == payload

    def test_import_command_exits_on_duplicates(self, session_factory, duplicate_payload, tmp_path, capsys):
        source = tmp_path / "manual.json"
        source.write_text(json.dumps(duplicate_payload), encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            run_manualkit.main(["import", "--file", str(source)])

        assert exc_info.value.code == 1
        assert "etica" in capsys.readouterr().out

    def test_import_missing_file(self, session_factory, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            run_manualkit.main(["import", "--file", str(tmp_path / "nada.json")])

        assert exc_info.value.code == 1

    def test_version(self, capsys):
        run_manualkit.main(["version"])

        assert capsys.readouterr().out.strip() == f"Manual Kit v{__version__}"
