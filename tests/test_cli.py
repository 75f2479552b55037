import io

import pytest

from invindex.cli import main


@pytest.fixture
def collection(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    docs = tmp_path / "pocs"
    docs.mkdir()
    (docs / "a.txt").write_text("casa casa azul\n", encoding="utf-8")
    (docs / "b.txt").write_text("verde azul\n", encoding="utf-8")
    (tmp_path / "lista.txt").write_text("2\na.txt\nb.txt\n", encoding="utf-8")
    return tmp_path


def _run(monkeypatch, text, argv=None):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main(argv if argv is not None else ["--seed", "1"])


def test_full_session(collection, monkeypatch, capsys):
    code = _run(monkeypatch, "1\nlista.txt\n2\n3\n4\ncasa\ncasa\n0\n")
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("'a.txt' (arquivo1.txt): relev.: 1.000") == 2
    assert "--- Indice Invertido da Hash ---" in out
    assert "--- Indice Invertido da Patricia ---" in out
    assert (collection / "arquivosTratados" / "arquivo2.txt").exists()


def test_search_without_matches(collection, monkeypatch, capsys):
    _run(monkeypatch, "1\nlista.txt\n2\n4\nnada\nnada\n0\n")
    out = capsys.readouterr().out
    assert out.count("Nenhum documento corresponde a pesquisa") == 2


def test_invalid_option(collection, monkeypatch, capsys):
    _run(monkeypatch, "9\nabc\n0\n")
    out = capsys.readouterr().out
    assert out.count("Entrada invalida.") == 2


def test_failed_read(collection, monkeypatch, capsys):
    _run(monkeypatch, "1\nsumiu.txt\n0\n")
    out = capsys.readouterr().out
    assert "Erro ao abrir o arquivo" in out
    assert "Leitura sem sucesso" in out


def test_show_before_build(collection, monkeypatch, capsys):
    _run(monkeypatch, "3\n0\n")
    out = capsys.readouterr().out
    assert "Dicionário está vazio." in out


def test_end_of_input_exits(collection, monkeypatch, capsys):
    assert _run(monkeypatch, "") == 0
    assert "--- Menu ---" in capsys.readouterr().out


def test_custom_directories(tmp_path, monkeypatch, capsys):
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "a.txt").write_text("casa\n", encoding="utf-8")
    listing = tmp_path / "lista.txt"
    listing.write_text("1\na.txt\n", encoding="utf-8")
    out_dir = tmp_path / "proc"
    argv = ["--docs-dir", str(docs), "--output-dir", str(out_dir), "--seed", "2"]
    monkeypatch.chdir(tmp_path)
    code = _run(monkeypatch, "1\nlista.txt\n0\n", argv)
    assert code == 0
    assert (out_dir / "arquivo1.txt").read_text(encoding="utf-8") == "casa\n"