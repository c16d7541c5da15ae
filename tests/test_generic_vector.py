import pytest

from estruturas.elements import ElementType
from estruturas.generic_vector import Vector, main


@pytest.fixture
def ints():
    return Vector(ElementType.INT)


def test_new_vector_is_empty(ints):
    assert ints.is_empty()
    assert len(ints) == 0
    assert ints.capacity() == 0


def test_push_back_and_front(ints):
    for x in (1, 3, 5):
        ints.push_back(x)
    ints.push_front(99)
    assert list(ints) == [99, 1, 3, 5]
    assert ints.front() == 99
    assert ints.back() == 5


def test_capacity_is_power_of_two_and_covers_length(ints):
    for x in range(20):
        ints.push_back(x)
        cap = ints.capacity()
        assert cap >= len(ints)
        assert cap & (cap - 1) == 0


def test_reserve_below_length_ignored(ints):
    for x in range(3):
        ints.push_back(x)
    before = ints.capacity()
    ints.reserve(1)
    assert ints.capacity() == before
    ints.reserve(50)
    assert ints.capacity() == 50


def test_insert_positions(ints):
    for x in (1, 2, 3):
        ints.push_back(x)
    ints.insert(1, 100)
    ints.insert(len(ints), 7)
    ints.insert(0, 0)
    assert list(ints) == [0, 1, 100, 2, 3, 7]


@pytest.mark.parametrize("pos", [-1, 4])
def test_insert_invalid_position(ints, pos):
    for x in (1, 2, 3):
        ints.push_back(x)
    with pytest.raises(IndexError, match="invalid insert position"):
        ints.insert(pos, 9)
    assert list(ints) == [1, 2, 3]


def test_at(ints):
    ints.push_back(4)
    ints.push_back(8)
    assert ints.at(1) == 8
    with pytest.raises(IndexError, match="index out of bounds"):
        ints.at(2)
    with pytest.raises(IndexError):
        ints.at(-1)


def test_front_back_on_empty(ints):
    with pytest.raises(IndexError, match="empty vector"):
        ints.front()
    with pytest.raises(IndexError, match="empty vector"):
        ints.back()


def test_clear(ints):
    for x in range(4):
        ints.push_back(x)
    ints.clear()
    assert ints.is_empty()
    ints.push_back(1)
    assert list(ints) == [1]


def test_wrong_type_rejected(ints):
    with pytest.raises(TypeError):
        ints.push_back("a")


def test_format(ints):
    assert ints.format() == "[ ]"
    ints.push_back(1)
    ints.push_back(2)
    assert ints.format() == "[ 1, 2 ]"


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "antes: [ 99, 1, 3, 5, 7, 9 ]\n6depois: [ 99, 100, 1, 3, 5, 7, 9 ]\nfalse\n"
    )