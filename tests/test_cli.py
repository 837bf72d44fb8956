import json
from unittest.mock import patch

from remote_export import cli
from tests.helpers import make_response


def _write(path, data):
    path.write_text(json.dumps(data))
    return str(path)


def test_check_prints_identifier_schema(tmp_path, capsys):
    config = _write(tmp_path / "config.json", {"url_property": "url"})

    assert cli.main(["check", "--config", config]) == 0

    out = capsys.readouterr().out
    assert '"id"' in out
    assert "Configuration is valid!" in out


def test_check_reports_missing_url_property(tmp_path, capsys):
    config = _write(tmp_path / "config.json", {"format": "json"})

    assert cli.main(["check", "--config", config]) == 1
    assert "url_property" in capsys.readouterr().err


def test_run_exports_rows_and_writes_result(tmp_path):
    config = _write(tmp_path / "config.json", {
        "migration_id": "orders",
        "url_property": "url",
        "format": "json",
        "ids": {"id": {"type": "string"}},
    })
    rows = _write(tmp_path / "rows.json", [{"id": "r1", "url": "https://x.test/o", "sku": "A"}])
    output = tmp_path / "result.json"

    with patch("requests.Session.post", return_value=make_response(201, body={"id": "d1"})) as post:
        code = cli.main(["run", "--config", config, "--input", rows, "--output", str(output)])

    assert code == 0
    assert post.call_args.kwargs == {"json": {"id": "r1", "sku": "A"}}
    assert json.loads(output.read_text())["id_map"] == {"r1": {"id": "d1"}}


def test_run_returns_error_code_on_failed_rows(tmp_path):
    config = _write(tmp_path / "config.json", {"url_property": "url"})
    rows = _write(tmp_path / "rows.json", {"id": "r1", "url": "https://x.test/o"})

    with patch("requests.Session.post", return_value=make_response(502)):
        assert cli.main(["run", "--config", config, "--input", rows]) == 1


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 2
