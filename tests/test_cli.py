import pytest

from PyLinComp.__main__ import main


EXPECTED_1011 = (
    "Input Sequence:\t[1, 0, 1, 1]\n"
    "\tResult:\tx^2 + x^1 + 1\n"
    "\tLength:\t2\n"
)

@pytest.mark.parametrize("argv", [
    ["1", "0", "1", "1"],
    ["1011"],
    ["--dense", "1011"],
])
def test_output(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == EXPECTED_1011

def test_empty_sequence(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Input Sequence:\t[]" in out
    assert "\tResult:\t1\n\tLength:\t0" in out

def test_profile(capsys):
    main(["--profile", "110011"])
    out = capsys.readouterr().out
    assert "\tn = 0:\tL = 1\n\tn = 2:\tL = 2\n\tn = 4:\tL = 3\n" in out

def test_invalid_bit(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["1", "2", "0"])
    assert excinfo.value.code == 2
    assert "not a bit" in capsys.readouterr().err

@pytest.mark.parametrize("bits,result,length", [
    ("1", "x^1 + 1", 1),
    ("0001", "x^4 + 1", 4),
])
def test_dense_degree_n_answers(bits, result, length, capsys):
    for argv in (["--dense", bits], [bits]):
        assert main(argv) == 0
        out = capsys.readouterr().out
        assert f"\tResult:\t{result}\n\tLength:\t{length}\n" in out
