import pytest

from traktboxd.utils.config import get_bool, get_int, get_required, get_str


def test_get_required_returns_value(monkeypatch):
    monkeypatch.setenv("TRAKTBOXD_TEST_KEY", "value")
    assert get_required("TRAKTBOXD_TEST_KEY") == "value"


def test_get_required_exits_when_missing(monkeypatch, capsys):
    monkeypatch.delenv("TRAKTBOXD_TEST_KEY", raising=False)
    with pytest.raises(SystemExit) as exc:
        get_required("TRAKTBOXD_TEST_KEY")
    assert exc.value.code == 1
    assert "[CONFIG ERROR]" in capsys.readouterr().out


def test_get_int(monkeypatch):
    monkeypatch.setenv("TRAKTBOXD_TEST_INT", "12")
    assert get_int("TRAKTBOXD_TEST_INT", 3) == 12
    monkeypatch.delenv("TRAKTBOXD_TEST_INT")
    assert get_int("TRAKTBOXD_TEST_INT", 3) == 3


def test_get_int_exits_on_garbage(monkeypatch):
    monkeypatch.setenv("TRAKTBOXD_TEST_INT", "douze")
    with pytest.raises(SystemExit):
        get_int("TRAKTBOXD_TEST_INT")


@pytest.mark.parametrize(("raw", "expected"), [("true", True), ("1", True), ("YES", True), ("no", False), ("", False)])
def test_get_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("TRAKTBOXD_TEST_BOOL", raw)
    assert get_bool("TRAKTBOXD_TEST_BOOL") is expected


def test_get_str_default(monkeypatch):
    monkeypatch.delenv("TRAKTBOXD_TEST_STR", raising=False)
    assert get_str("TRAKTBOXD_TEST_STR", "fallback") == "fallback"
