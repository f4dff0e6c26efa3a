import json

from optkit import cli, const


def _schema(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(
        json.dumps(
            {
                "v": {"type": "count"},
                "tag": {"type": "list", "description": "Tags to apply"},
                "t": {"type": "alias", "target": "tag"},
            }
        )
    )
    return str(path)


def test_version(capsys):
    assert cli.main(["--version"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == f"optkit v{const.VERSION_STR}"


def test_parse_to_json(tmp_path, capsys):
    path = _schema(tmp_path)
    args = ["-c", path, "--", "-vv", "-t", "a,b", "CC=gcc", "main.c", "--", "-v"]
    assert cli.main(args) == 0
    out = capsys.readouterr().out
    assert json.loads(out) == {
        "options": {"v": 2, "tag": ["a", "b"]},
        "parameters": {"CC": "gcc"},
        "operands": ["main.c", "-v"],
    }


def test_indent(tmp_path, capsys):
    path = _schema(tmp_path)
    assert cli.main([f"--config={path}", "--indent=0", "--", "-v"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("{\n\"options\"")


def test_missing_schema(capsys):
    assert cli.main(["--", "-v"]) == 1
    err = capsys.readouterr().err
    assert "no schema given" in err
    assert "Usage: optkit" in err


def test_user_error(tmp_path, capsys):
    path = _schema(tmp_path)
    assert cli.main(["-c", path, "--", "--nope"]) == 1
    err = capsys.readouterr().err
    assert "unknown option 'nope'" in err


def test_own_option_error(capsys):
    assert cli.main(["--config"]) == 1
    err = capsys.readouterr().err
    assert "option 'config' must take an argument" in err


def test_help(tmp_path, capsys):
    path = _schema(tmp_path)
    assert cli.main(["-h", "-c", path]) == 0
    out = capsys.readouterr().out
    assert "Usage" in out
    assert "--config" in out
    assert "[-t, --tag=<list>]" in out
    assert "Tags to apply" in out


def test_extra_args_from_env(tmp_path, capsys, monkeypatch):
    path = _schema(tmp_path)
    monkeypatch.setenv(const.EXTRA_ARGS_ENV, f"--config={path}")
    assert cli.main(["--", "-v"]) == 0
    out = capsys.readouterr().out
    assert json.loads(out)["options"] == {"v": 1}


def test_parameters_are_not_forwarded(tmp_path, capsys):
    path = _schema(tmp_path)
    assert cli.main(["-c", path, "X=1", "--", "a"]) == 0
    captured = capsys.readouterr()
    assert "ignoring parameter 'X'" in captured.err
    assert json.loads(captured.out)["parameters"] == {}

