import io

from weathermap.app import main, run
from weathermap.cities import load_city_locations
from weathermap.grid import render_grid

CITY_LINES = ["[1, 1]-3-Big_City", "[2, 7]-2-Mid_City", "[7, 7]-1-Small_City"]


def _setup(tmp_path, with_city_file=True):
    city_path = tmp_path / "citylocation.txt"
    if with_city_file:
        city_path.write_text("\n".join(CITY_LINES) + "\n", encoding="utf-8")
    lines = [
        "// config",
        "",
        "GridX_IdxRange=0-8",
        "",
        "",
        "",
        "GridY_IdxRange=0-8",
        "",
        "",
        str(city_path),
    ]
    config_path = tmp_path / "config.txt"
    config_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return config_path, city_path, lines


def test_run_draws_map(tmp_path):
    config_path, city_path, lines = _setup(tmp_path)
    out = io.StringIO()
    assert run(config_path, out) == 0
    text = out.getvalue()
    assert text.startswith("\n".join(lines) + "\n")
    assert "Third line: GridX_IdxRange=0-8\n" in text
    assert f"Tenth line: {city_path}\n" in text
    assert "x_idxRange: 8\n" in text
    assert "y_idxRange: 8\n" in text
    assert text.endswith(render_grid(8, 8, load_city_locations(city_path)))


def test_run_missing_city_file(tmp_path, capsys):
    config_path, _, _ = _setup(tmp_path, with_city_file=False)
    out = io.StringIO()
    assert run(config_path, out) == 1
    assert "Cannot open the file!" in capsys.readouterr().err
    assert "#" not in out.getvalue()


def test_main_with_argument(tmp_path, capsys):
    config_path, city_path, _ = _setup(tmp_path)
    assert main([str(config_path)]) == 0
    out = capsys.readouterr().out
    assert out.endswith(render_grid(8, 8, load_city_locations(city_path)))


def test_main_prompts_for_path(tmp_path, monkeypatch, capsys):
    config_path, city_path, _ = _setup(tmp_path)
    monkeypatch.setattr("builtins.input", lambda prompt="": f"{config_path} ignored")
    assert main([]) == 0
    assert capsys.readouterr().out.endswith(
        render_grid(8, 8, load_city_locations(city_path))
    )


def test_main_empty_prompt_answer(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "   ")
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_missing_config(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_main_short_config(tmp_path, capsys):
    path = tmp_path / "short.txt"
    path.write_text("only\nthree\nlines\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "error" in capsys.readouterr().err