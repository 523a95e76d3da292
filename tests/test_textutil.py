import pytest

from akui.textutil import binary_find, format_string, unicode_to_local_string


def units(text):
    return [ord(c) for c in text]


def test_ascii_round_trip():
    text = "Player One"
    assert unicode_to_local_string(units(text), len(text)).decode("utf-8") == text


def test_two_and_three_byte_characters_round_trip():
    text = "é\u4e2d\u6587"
    result = unicode_to_local_string(units(text), len(text))
    assert result == text.encode("utf-8")
    assert len(result) == 2 + 3 + 3


def test_stops_at_zero_unit():
    data = units("ab") + [0] + units("cd")
    assert unicode_to_local_string(data, len(data)) == b"ab"


def test_respects_length():
    data = units("abcdef")
    assert unicode_to_local_string(data, 3) == b"abc"
    assert unicode_to_local_string(data, 0) == b""


def test_surrogate_unit_encoded_alone():
    result = unicode_to_local_string([0xD800], 1)
    assert len(result) == 3
    assert result.decode("utf-8", "surrogatepass") == "\ud800"


def test_format_string():
    assert format_string("%s valid %d x=%d", "pic", 1, 4) == "pic valid 1 x=4"


def test_format_string_argument_mismatch():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_binary_find_present_values():
    seq = [1, 3, 3, 5, 9]
    for value in seq:
        index = binary_find(seq, value)
        assert seq[index] == value
    assert binary_find(seq, 3) == seq.index(3)


@pytest.mark.parametrize("value", [0, 2, 4, 10])
def test_binary_find_missing(value):
    assert binary_find([1, 3, 5, 9], value) is None


def test_binary_find_empty():
    assert binary_find([], 1) is None


def test_binary_find_custom_order():
    seq = ["bb", "a", "ccc"]
    seq.sort(key=len)
    index = binary_find(seq, "xx", lambda a, b: len(a) < len(b))
    assert seq[index] == "bb"