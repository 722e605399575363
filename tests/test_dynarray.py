import pytest

from dirtree.dynarray import DynArray


def cmp(a, b):
    return (a > b) - (a < b)


def make(*items):
    array = DynArray(0)
    for item in items:
        array.add(item)
    return array


def test_new_array_has_requested_length_of_none():
    array = DynArray(5)
    assert len(array) == 5
    assert array.to_list() == [None] * 5


def test_empty_array():
    array = DynArray(0)
    assert len(array) == 0
    assert list(array) == []


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        DynArray(-1)


def test_add_appends_in_order():
    array = make("a", "b", "c")
    assert array.to_list() == ["a", "b", "c"]
    assert len(array) == 3


def test_add_beyond_initial_capacity():
    array = DynArray(0)
    for value in range(100):
        array.add(value)
    assert array.to_list() == list(range(100))


def test_get_and_set():
    array = make("a", "b")
    array[1] = "z"
    assert array[1] == "z"
    assert array[0] == "a"


def test_get_out_of_range():
    array = make("a")
    with pytest.raises(IndexError):
        array[1]
    with pytest.raises(IndexError):
        array[-1]
    assert array.to_list() == ["a"]


def test_set_out_of_range():
    array = DynArray(2)
    with pytest.raises(IndexError):
        array[2] = "x"
    assert array.to_list() == [None, None]
    assert len(array) == 2


def test_add_at_positions():
    array = make("a", "c")
    array.add_at(1, "b")
    array.add_at(0, "start")
    array.add_at(4, "end")
    assert array.to_list() == ["start", "a", "b", "c", "end"]


def test_add_at_out_of_range():
    array = make("a")
    with pytest.raises(IndexError):
        array.add_at(2, "x")
    assert array.to_list() == ["a"]


def test_remove_at_returns_element_and_shifts():
    array = make("a", "b", "c")
    assert array.remove_at(1) == "b"
    assert array.to_list() == ["a", "c"]
    assert array.remove_at(0) == "a"
    assert array.to_list() == ["c"]


def test_remove_at_out_of_range():
    array = DynArray(0)
    with pytest.raises(IndexError):
        array.remove_at(0)
    assert len(array) == 0


def test_to_list_is_a_copy():
    array = make(1, 2)
    copy = array.to_list()
    copy.append(3)
    assert len(array) == 2


def test_map_passes_extra():
    array = make("x", "y")
    seen = []
    array.map(lambda element, extra: extra.append(element), seen)
    assert seen == ["x", "y"]


def test_map_accumulates():
    array = make("ab", "cde")
    total = [0]

    def accumulate(element, acc):
        acc[0] += len(element) + 1

    array.map(accumulate, total)
    assert total[0] == 7


def test_sort_orders_elements():
    array = make(5, 3, 9, 1, 7, 3, 0)
    array.sort(cmp)
    assert array.to_list() == [0, 1, 3, 3, 5, 7, 9]


def test_sort_short_arrays():
    array = make(1)
    array.sort(cmp)
    assert array.to_list() == [1]


def test_search_finds_first_match():
    array = make("a", "b", "b", "c")
    assert array.search("b", cmp) == 1
    assert array.search("z", cmp) is None


def test_bsearch_found():
    values = ["a", "c", "e", "g"]
    array = make(*values)
    for value in values:
        found, index = array.bsearch(value, cmp)
        assert found
        assert array[index] == value


def test_bsearch_empty_array():
    assert DynArray(0).bsearch("x", cmp) == (False, 0)


@pytest.mark.parametrize(
    "sought, expected", [("0", 0), ("b", 1), ("d", 2), ("f", 3), ("z", 4)]
)
def test_bsearch_insertion_point_keeps_order(sought, expected):
    array = make("a", "c", "e", "g")
    found, index = array.bsearch(sought, cmp)
    assert not found
    assert index == expected
    array.add_at(index, sought)
    assert array.to_list() == sorted(array.to_list())
    assert array[index] == sought


def test_bsearch_with_mixed_comparator():
    array = make(("x", 1), ("y", 2))

    def by_name(element, name):
        return cmp(element[0], name)

    found, index = array.bsearch("y", by_name)
    assert found
    assert array[index] == ("y", 2)