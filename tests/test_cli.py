import pytest

from hangul_analyzer.app.cli import MISSING_TEXT_MESSAGE, main


def test_inline_text_prints_all_sections(capsys):
    assert main(["-t", "산간만 한글"]) == 0

    out = capsys.readouterr().out
    assert "음절: 5" in out
    assert "받침: 5/5 (100.0%)" in out
    assert "운율:" in out
    assert "[ㅏㄴ] 산 간 만 한 (4)" in out
    assert "구조:" in out
    assert "CVC CVC CVC CVC CVC" in out


def test_fingerprint_only(capsys):
    assert main(["--fingerprint", "-t", "가나다라마바사"]) == 0

    out = capsys.readouterr().out
    assert "무게: 0 (가벼움)" in out
    assert "밝기: +1 (양성)" in out
    assert "구조:" not in out
    assert "받침:" not in out


def test_rhymes_only(capsys):
    assert main(["-r", "-t", "산간만"]) == 0

    out = capsys.readouterr().out
    assert "[ㅏㄴ] 산 간 만 (3)" in out
    assert "음절:" not in out


def test_structure_only(capsys):
    assert main(["-s", "-t", "한글\n사랑"]) == 0

    out = capsys.readouterr().out
    assert "[ 2] 한글" in out
    assert "CVC CVC" in out
    assert "CV CVC" in out
    assert "음절:" not in out


def test_text_without_syllables_reports_absence(capsys):
    assert main(["-t", "Hello"]) == 0

    assert "No Korean syllables found." in capsys.readouterr().out


def test_reads_file_argument(tmp_path, capsys):
    source = tmp_path / "poem.txt"
    source.write_text("하늘\n바다\n", encoding="utf-8")

    assert main([str(source)]) == 0

    assert "음절: 4" in capsys.readouterr().out


def test_inline_text_wins_over_file(tmp_path, capsys):
    source = tmp_path / "poem.txt"
    source.write_text("하늘 바다 구름", encoding="utf-8")

    assert main([str(source), "-t", "한글"]) == 0

    assert "음절: 2" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [[], ["-t", ""], ["-f"]])
def test_missing_text_exits_with_error(argv, capsys):
    assert main(argv) == 1

    captured = capsys.readouterr()
    assert MISSING_TEXT_MESSAGE in captured.err
    assert captured.out == ""


def test_empty_file_exits_with_error(tmp_path, capsys):
    source = tmp_path / "empty.txt"
    source.write_text("", encoding="utf-8")

    assert main([str(source)]) == 1
    assert MISSING_TEXT_MESSAGE in capsys.readouterr().err


def test_unreadable_file_exits_with_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Could not read" in capsys.readouterr().err


def test_mode_flags_are_mutually_exclusive():
    with pytest.raises(SystemExit) as excinfo:
        main(["-f", "-r", "-t", "한글"])

    assert excinfo.value.code == 2
