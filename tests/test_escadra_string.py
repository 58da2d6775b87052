import copy

import pytest

from highfleet.escadra_string import EscadraString

SHORT = "Banana"
LONG = "Banana Banana Banana Banana"


def test_set_string_then_read_below_16_chars():
    es = EscadraString()
    es.set_string(SHORT)
    assert str(es) == SHORT


def test_set_string_below_16_chars_twice():
    es = EscadraString()
    es.set_string(SHORT)
    assert str(es) == SHORT
    es.set_string(SHORT)
    assert str(es) == SHORT


def test_set_string_then_read_above_16_chars():
    es = EscadraString()
    es.set_string(LONG)
    assert str(es) == LONG


def test_set_string_above_16_chars_twice():
    es = EscadraString()
    es.set_string(LONG)
    assert str(es) == LONG
    es.set_string(LONG)
    assert str(es) == LONG


def test_set_large_then_set_small_then_read():
    es = EscadraString()
    es.set_string(LONG)
    es.set_string(SHORT)
    assert str(es) == SHORT


def test_set_16_len_string_then_read():
    es = EscadraString()
    es.set_string("BananBananBanana")
    assert str(es) == "BananBananBanana"
    assert es.max_length == 31
    assert not es.is_inline


def test_set_15_len_string_then_read():
    es = EscadraString()
    es.set_string("BananBananBanan")
    assert str(es) == "BananBananBanan"
    assert es.max_length == 15
    assert es.is_inline


def test_pointer_is_null_terminated():
    es = EscadraString()
    string = "Banana Banana Banana"
    es.set_string(string)
    assert es.raw[len(string)] == 0
    es.set_string(SHORT)
    assert not es.is_inline
    assert es.raw[len(SHORT)] == 0


def test_char_array_is_null_terminated():
    es = EscadraString()
    es.set_string(SHORT)
    assert es.raw[len(SHORT)] == 0
    es.set_string("Ban")
    assert es.raw[3] == 0
    assert len(es.raw) == 16


def test_new_is_empty():
    es = EscadraString()
    assert str(es) == ""
    assert es.length == 0
    assert es.max_length == 15
    assert es.raw == bytes(16)


def test_constructor_sets_value():
    es = EscadraString(LONG)
    assert str(es) == LONG
    assert es.length == len(LONG)
    assert es.max_length == 31


def test_capacity_keeps_doubling():
    es = EscadraString("x" * 40)
    assert es.max_length == 63
    assert len(es.raw) == 64


def test_capacity_never_shrinks():
    es = EscadraString("x" * 40)
    es.set_string("y")
    assert es.max_length == 63
    assert str(es) == "y"


def test_length_counts_utf8_bytes():
    es = EscadraString("é")
    assert es.length == 2
    assert str(es) == "é"


def test_equality_ignores_capacity():
    grown = EscadraString(LONG)
    grown.set_string(SHORT)
    assert grown == EscadraString(SHORT)
    assert hash(grown) == hash(EscadraString(SHORT))


def test_ordering_follows_text():
    assert EscadraString("apple") < EscadraString("banana")
    assert sorted([EscadraString("b"), EscadraString("a")]) == [
        EscadraString("a"),
        EscadraString("b"),
    ]


def test_comparison_with_other_types_is_unsupported():
    with pytest.raises(TypeError):
        _ = EscadraString("a") < "b"
    assert (EscadraString("a") == "a") is False


def test_copy_resets_capacity():
    grown = EscadraString(LONG)
    grown.set_string(SHORT)
    clone = copy.copy(grown)
    assert clone == grown
    assert clone.max_length == 15


def test_repr_shows_fields():
    assert repr(EscadraString(SHORT)) == (
        'EscadraString { string: "Banana", length: 6, max_length: 15 }'
    )