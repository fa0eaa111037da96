from gfgen import GaloisField
from gfgen.cli import format_add_table, main


def test_format_add_table():
    text = format_add_table(GaloisField(3, 0b1011))
    lines = text.split("\n")
    assert lines[0] == "i\\j\t|0\t1\t2\t3\t4\t5\t6"
    assert lines[1] == "-" * 64
    assert lines[2] == "0\t|-1\t3\t6\t1\t5\t4\t2"
    assert len(lines) == 2 + 7


def test_main_default_field(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "GF(2^3) addition table, p(X) = 1 + X + X^3" in out
    assert "0\t|-1\t3\t6\t1\t5\t4\t2" in out


def test_main_with_polynomial(capsys):
    assert main(["3", "0,2,3"]) == 0
    out = capsys.readouterr().out
    assert "p(X) = 1 + X^2 + X^3" in out


def test_main_default_polynomial_for_m(capsys):
    assert main(["4"]) == 0
    out = capsys.readouterr().out
    assert "GF(2^4)" in out
    assert "14\t|" in out


def test_main_help(capsys):
    assert main(["--help"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_main_rejects_bad_arguments(capsys):
    assert main(["three"]) == 1
    assert "Invalid argument" in capsys.readouterr().out
    assert main(["3", "1011", "extra"]) == 1
    assert "Too many arguments" in capsys.readouterr().out


def test_main_reports_construction_errors(capsys):
    assert main(["3", "1111"]) == 1
    assert "not primitive" in capsys.readouterr().out
    assert main(["64", "0b1"]) == 1
    assert "Too big field size" in capsys.readouterr().out
    assert main(["20"]) == 1
    assert "No default primitive polynomial" in capsys.readouterr().out
