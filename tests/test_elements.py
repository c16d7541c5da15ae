import pytest

from estruturas.elements import ElementType


@pytest.mark.parametrize(
    ("element_type", "value", "expected"),
    [
        (ElementType.INT, 5, True),
        (ElementType.INT, 5.0, False),
        (ElementType.INT, "5", False),
        (ElementType.INT, True, False),
        (ElementType.FLOAT, 2.5, True),
        (ElementType.FLOAT, 2, True),
        (ElementType.FLOAT, "2.5", False),
        (ElementType.STRING, "abc", True),
        (ElementType.STRING, 3, False),
    ],
)
def test_accepts(element_type, value, expected):
    assert element_type.accepts(value) is expected


def test_format_int():
    assert ElementType.INT.format(42) == "42"


def test_format_float_uses_two_decimals():
    assert ElementType.FLOAT.format(1.5) == "1.50"


def test_format_string_is_unchanged():
    assert ElementType.STRING.format("hello") == "hello"


def test_format_int_rejects_float():
    with pytest.raises(ValueError):
        ElementType.INT.format(1.5)