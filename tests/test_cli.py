import pytest

from pokerrank.cli import main

ROYAL_VS_NOTHING = "AH TH JH QH KH 2C 3C 4C 5C 7C"


def _write(tmp_path, *lines):
    path = tmp_path / "rounds.txt"
    path.write_text("\n".join(lines) + "\n")
    return str(path)


def test_prints_wins_per_player(tmp_path, capsys):
    rc = main([_write(tmp_path, ROYAL_VS_NOTHING)])
    out = capsys.readouterr().out
    assert rc == 0
    assert out.splitlines() == ["Player 1: 1", "Player 2: 0"]


def test_ties_and_skips_are_reported(tmp_path, capsys):
    path = _write(
        tmp_path,
        ROYAL_VS_NOTHING,
        "9H TD JC QS KH 9C TC JD QH KS",
        "AH TH JH QH KH 2C 3C",
    )
    rc = main([path, "--on-error", "skip"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Ties: 1" in out
    assert "Skipped: 1" in out


def test_malformed_line_fails_under_abort(tmp_path, capsys):
    rc = main([_write(tmp_path, "AH TH JH QH KH 2C 3C 4C 5C ZZ")])
    assert rc == 1
    assert capsys.readouterr().out == ""


def test_missing_file_fails(tmp_path):
    assert main([str(tmp_path / "nope.txt")]) == 1


def test_config_labels_and_policy(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("on_error: skip\nlabels: [Alice, Bob]\n")
    path = _write(tmp_path, ROYAL_VS_NOTHING, "garbage")
    rc = main([path, "--config", str(cfg)])
    out = capsys.readouterr().out
    assert rc == 0
    assert out.splitlines()[:2] == ["Alice: 1", "Bob: 0"]


def test_bad_config_exits_with_usage_error(tmp_path):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("on_error: retry\n")
    with pytest.raises(SystemExit) as exc:
        main([_write(tmp_path, ROYAL_VS_NOTHING), "--config", str(cfg)])
    assert exc.value.code == 2


def test_unknown_log_level_exits_with_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([_write(tmp_path, ROYAL_VS_NOTHING), "--log-level", "LOUD"])
    assert exc.value.code == 2
