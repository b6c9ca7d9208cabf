"""
Tests for the command-line driver and the rich console front end.
"""
import json

import pytest
from rich.console import Console

import cli_app
import SearchServer.main as main_module
import SearchServer.tfidf_search.search_server as search_server_module
from SearchServer.main import DEMO_DOCUMENTS, format_document, load_documents, main, run_demo
from SearchServer.preprocessing import Document, DocumentStatus


@pytest.fixture
def documents_file(tmp_path):
    path = tmp_path / "documents.json"
    path.write_text(json.dumps(DEMO_DOCUMENTS, ensure_ascii=False), encoding="utf-8")
    return str(path)


def test_format_document():
    assert format_document(Document(4, 0.3054302439580517, 9)) == \
        "{ document_id = 4, relevance = 0.30543, rating = 9 }"


def test_load_documents(documents_file):
    documents = load_documents(documents_file)

    assert len(documents) == 5
    assert documents[4]["status"] == "BANNED"


def test_load_documents_requires_list(tmp_path):
    path = tmp_path / "documents.json"
    path.write_text('{"id": 1}', encoding="utf-8")

    with pytest.raises(ValueError):
        load_documents(str(path))


def test_demo(capsys):
    assert run_demo()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "ACTUAL by default:"
    assert lines[1].startswith("{ document_id = 1,")
    assert "BANNED:" in lines
    banned_results = lines[lines.index("BANNED:") + 1]
    assert banned_results.startswith("{ document_id = 4,")
    assert sum(1 for line in lines if line.startswith("Error: ")) == 5


def test_main_query(documents_file, capsys):
    exit_code = main(["--documents", documents_file, "--query", "пушистый ухоженный кот", "--status", "BANNED"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "{ document_id = 4, relevance = 0.30543, rating = 9 }" in out


def test_main_match(documents_file, capsys):
    exit_code = main(["--documents", documents_file, "--query", "пушистый -кот", "--match", "1"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "{ document_id = 1, status = ACTUAL, words =  }" in out


def test_main_bad_query(documents_file, capsys):
    exit_code = main(["--documents", documents_file, "--query", "кот --пёс"])

    assert exit_code == 1
    assert "Error: " in capsys.readouterr().out


def test_main_missing_documents_file(tmp_path, capsys):
    exit_code = main(["--documents", str(tmp_path / "missing.json"), "--query", "кот"])

    assert exit_code == 1
    assert "Error: " in capsys.readouterr().out


def make_cli():
    output = Console(record=True, width=120)
    return cli_app.SearchServerCLI(config={"stop_words": []}, output=output), output


def test_cli_sample_search():
    app, output = make_cli()
    assert app.load_sample()

    results = app.search("пушистый ухоженный кот")
    app.display_results(results)

    assert [document.id for document in results] == [1, 3, 2, 0]
    text = output.export_text()
    assert "Indexed 5 documents" in text
    assert "Top 4 document(s) ranked by relevance" in text


def test_cli_rejects_bad_query():
    app, output = make_cli()
    app.load_sample()

    assert app.search("кот -") is None
    assert "Invalid query" in output.export_text()


def test_cli_match_and_list():
    app, output = make_cli()
    app.load_sample()

    assert app.match("пушистый кот", 1)
    assert not app.match("кот", 42)
    app.list_documents()

    text = output.export_text()
    assert "кот пушистый" in text
    assert "not found" in text
    assert DocumentStatus.BANNED.name in text


def test_cli_without_documents():
    app, output = make_cli()

    assert app.search("кот") is None
    assert "No documents indexed" in output.export_text()


def test_cli_load_documents(documents_file):
    app, output = make_cli()

    assert app.load_documents(documents_file)
    assert app.server.get_document_count() == 5


def test_main_log_level_is_case_insensitive(documents_file, capsys):
    exit_code = main(["--documents", documents_file, "--query", "кот", "--log-level", "debug"])

    assert exit_code == 0
    assert "document_id = 1" in capsys.readouterr().out


def test_main_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "LOUD"])

    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_main_loads_config_once(documents_file, monkeypatch):
    calls = []
    original = main_module.load_config

    def counting_load_config(config_path=None):
        calls.append(config_path)
        return original(config_path)

    monkeypatch.setattr(main_module, "load_config", counting_load_config)
    monkeypatch.setattr(search_server_module, "load_config", counting_load_config)

    assert main(["--documents", documents_file, "--query", "кот"]) == 0
    assert calls == [None]


def test_main_ignores_unknown_log_level_in_config(documents_file, tmp_path, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"logging": {"level": "NOPE"}}), encoding="utf-8")

    exit_code = main(["--config", str(config_path), "--documents", documents_file, "--query", "кот"])

    assert exit_code == 0
    assert "document_id = 1" in capsys.readouterr().out
