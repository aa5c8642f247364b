import io

import pytest

from verveling.modpow import MOD, binpow, main


@pytest.mark.parametrize(
    "a, b",
    [(2, 10), (3, 1), (10, 18), (123456789, 987654321), (MOD - 1, 2), (MOD + 5, 3)],
)
def test_binpow_matches_builtin_pow(a, b):
    assert binpow(a, b) == pow(a, b, MOD)


def test_zero_exponent_gives_one():
    assert binpow(5, 0) == 1


def test_custom_modulus():
    assert binpow(3, 200, 97) == pow(3, 200, 97)


def test_result_is_reduced():
    for a in range(0, 2000, 37):
        assert 0 <= binpow(a, a + 11) < MOD


def test_invalid_modulus():
    with pytest.raises(ValueError):
        binpow(2, 3, 0)


def test_main_answers_each_query(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n2 10\n7 0\n123456789 987654321\n"))
    assert main([]) == 0
    expected = "".join(
        f"{pow(a, b, MOD)}\n" for a, b in [(2, 10), (7, 0), (123456789, 987654321)]
    )
    assert capsys.readouterr().out == expected


def test_main_with_custom_modulus(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 3 200"))
    assert main(["--mod", "97"]) == 0
    assert capsys.readouterr().out == f"{pow(3, 200, 97)}\n"


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n2 10\n"))
    with pytest.raises(SystemExit):
        main([])


def test_main_rejects_non_integers(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nx 2\n"))
    with pytest.raises(SystemExit):
        main([])