import math
import suite
from datagen import from_schema
from keyq import (
    min_or_default, max_or_default, distinct_by, except_by, intersect_by, union_by,
    contains_by, concat_one, partition, take_with_ellipsis, null_if_empty,
    is_null_or_empty, string_join, InvalidArgumentError, DEFAULT_PART_SIZE
)

case = suite.case
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- test data schemas ---
person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 5}),
    'name': 'first_name',
    'city': {'choice': ['ny', 'la', 'chi']},
}


class _Counting:
    """iterable that records how many items were read."""
    def __init__(self, items):
        self.items = list(items)
        self.read = 0

    def __iter__(self):
        for item in self.items:
            self.read += 1
            yield item


# --- min / max ---

@case("min and max return default on empty input")
def test_min_max_empty():
    assert_that(min_or_default([], default=-1) == -1, "min default")
    assert_that(max_or_default([], default=-1) == -1, "max default")
    assert_that(min_or_default([]) is None, "default default is None")


@case("min and max pick extremes")
def test_min_max_values():
    assert_that(min_or_default([3, 1, 2], default=99) == 1, "min of values")
    assert_that(max_or_default([3, 1, 2], default=-99) == 3, "max of values")


@case("min and max project with a selector")
def test_min_max_selector():
    words = ["ccc", "a", "bb"]
    assert_that(min_or_default(words, len) == 1, "shortest length")
    assert_that(max_or_default(words, len, default=0) == 3, "longest length")
    assert_that(max_or_default([], len, default=0) == 0, "empty with selector gives default")


@case("min and max skip None values")
def test_min_max_none():
    assert_that(min_or_default([None, 4, 2]) == 2, "None ignored for min")
    assert_that(max_or_default([4, None, 9]) == 9, "None ignored for max")
    assert_that(min_or_default([None], default=5) is None, "only None gives None, not default")


@case("min requires a source")
def test_min_none_source():
    assert_raises(InvalidArgumentError, min_or_default, None)
    assert_raises(InvalidArgumentError, max_or_default, None)


# --- distinct ---

@case("distinct keeps the first element per key")
def test_distinct():
    result = list(distinct_by(["a", "aa", "aaa", "b", "bb", "bbb"], len))
    assert_that(result == ["a", "aa", "aaa"], f"got {result}")


@case("distinct on generated records keeps one per city")
def test_distinct_records():
    people = from_schema(person_schema, seed=42).take(30).to.list()
    unique = list(distinct_by(people, lambda p: p['city']))
    cities = [p['city'] for p in unique]
    assert_that(len(cities) == len(set(cities)), "each city should appear once")
    expected = list(dict.fromkeys(p['city'] for p in people))
    assert_that(cities == expected, "cities should appear in first-seen order")
    assert_that(all(unique[i] is next(p for p in people if p['city'] == c) for i, c in enumerate(cities)),
                "the first record per city should be kept")


@case("distinct tolerates None elements")
def test_distinct_none_elements():
    result = list(distinct_by([None, "a", None, "b"], len))
    assert_that(result == [None, "a"], f"got {result}")


# --- except ---

@case("except removes elements whose key is in second")
def test_except():
    result = list(except_by(["a", "aa", "aaa", "aaaa"], ["dd", "eeee"], len))
    assert_that(result == ["a", "aaa"], f"got {result}")


@case("except collapses duplicate keys in first")
def test_except_dedup():
    result = list(except_by(["a", "b", "cc", "d"], ["zzz"], len))
    assert_that(result == ["a", "cc"], f"got {result}")


@case("except requires both sequences at call time")
def test_except_none():
    assert_raises(InvalidArgumentError, except_by, None, [], len)
    error = assert_raises(InvalidArgumentError, except_by, [], None, len)
    assert_that(error.name == 'second', "error should name the missing sequence")


@case("except requires a selector")
def test_except_no_selector():
    assert_raises(InvalidArgumentError, except_by, [], [], None)


# --- intersect ---

@case("intersect keeps elements whose key is in second")
def test_intersect():
    result = list(intersect_by(["a", "aa", "aaa", "aaaa"], ["dd", "eeee"], len))
    assert_that(result == ["aa", "aaaa"], f"got {result}")


@case("intersect emits each key once in first order")
def test_intersect_dedup():
    result = list(intersect_by(["bb", "a", "cc", "b"], ["x", "yy", "zz"], len))
    assert_that(result == ["bb", "a"], f"got {result}")


@case("intersect requires both sequences")
def test_intersect_none():
    assert_raises(InvalidArgumentError, intersect_by, None, [], len)
    assert_raises(InvalidArgumentError, intersect_by, [], None, len)


# --- union ---

@case("union keeps first on key collision")
def test_union():
    result = list(union_by(["a", "aa", "aaa"], ["dd", "eee", "ffff"], len))
    assert_that(result == ["a", "aa", "aaa", "ffff"], f"got {result}")


@case("union key set is the union of key sets")
def test_union_keys():
    first = from_schema(person_schema, seed=7).take(10).to.list()
    second = from_schema(person_schema, seed=8).take(10).to.list()
    key = lambda p: p['id']
    result = list(union_by(first, second, key))
    assert_that({key(p) for p in result} == {key(p) for p in first} | {key(p) for p in second},
                "keys should be the union")
    assert_that(len(result) == len({key(p) for p in result}), "each key once")
    for person in result:
        owner = next((p for p in first if key(p) == key(person)), None)
        if owner is not None:
            assert_that(owner is person, "first sequence wins on collision")


@case("union requires both sequences")
def test_union_none():
    assert_raises(InvalidArgumentError, union_by, None, [], len)
    assert_raises(InvalidArgumentError, union_by, [], None, len)


# --- contains ---

@case("contains matches by key")
def test_contains():
    assert_that(contains_by(["a", "aa", "aaa", "aaaa"], "bbb", len), "length 3 is present")
    assert_that(not contains_by(["a", "aa"], "bbb", len), "length 3 is absent")
    assert_raises(InvalidArgumentError, contains_by, None, "a", len)


# --- concat one ---

@case("concat_one appends a single item")
def test_concat_one():
    assert_that(list(concat_one([1, 2], 3)) == [1, 2, 3], "item should be last")
    assert_that(list(concat_one([], None)) == [None], "None is a valid item")
    assert_raises(InvalidArgumentError, concat_one, None, 1)


# --- partition ---

@case("partition of empty input yields nothing")
def test_partition_empty():
    for size in (-1, 0, 1, DEFAULT_PART_SIZE):
        parts = partition([], size)
        assert_that(parts is not None, "result should never be None")
        assert_that(list(parts) == [], f"no chunks for size {size}")


@case("partition of None or non-positive size yields nothing")
def test_partition_degenerate():
    assert_that(list(partition(None)) == [], "None source")
    assert_that(list(partition([1, 2, 3], 0)) == [], "zero size")
    assert_that(list(partition([1, 2, 3], -4)) == [], "negative size")


@case("partition splits a string into equal chunks")
def test_partition_string():
    parts = ["".join(part) for part in partition("a" * 64, 8)]
    assert_that(len(parts) == 8, f"expected 8 chunks, got {len(parts)}")
    assert_that(all(part == "aaaaaaaa" for part in parts), "every chunk has eight letters")


@case("partition chunk sizes and order")
def test_partition_sizes():
    data = list(range(23))
    for size in (1, 4, 5, 23, 30):
        parts = list(partition(data, size))
        assert_that(len(parts) == math.ceil(len(data) / size), f"chunk count for size {size}")
        assert_that(all(len(part) == size for part in parts[:-1]), "all but the last are full")
        assert_that([x for part in parts for x in part] == data, "chunks rebuild the input")


@case("partition defaults to 64 elements")
def test_partition_default():
    parts = list(partition(range(130)))
    assert_that([len(p) for p in parts] == [64, 64, 2], f"got {[len(p) for p in parts]}")


@case("partition is lazy")
def test_partition_lazy():
    source = _Counting(range(100))
    parts = partition(source, 10)
    assert_that(source.read == 0, "nothing read before iteration")
    first = next(parts)
    assert_that(first == list(range(10)), "first chunk")
    assert_that(source.read == 10, f"only the first chunk should be read, read {source.read}")


# --- take with ellipsis ---

@case("take_with_ellipsis ends with the marker on overflow")
def test_take_with_ellipsis_overflow():
    result = list(take_with_ellipsis(["a", "b", "c", "d", "e"], 3))
    assert_that(result == ["a", "b", "..."], f"got {result}")


@case("take_with_ellipsis keeps short input intact")
def test_take_with_ellipsis_short():
    assert_that(list(take_with_ellipsis(["a", "b"], 3)) == ["a", "b"], "fewer than count")
    assert_that(list(take_with_ellipsis(["a", "b", "c"], 3)) == ["a", "b", "c"], "exactly count")


@case("take_with_ellipsis custom marker and non-positive count")
def test_take_with_ellipsis_marker():
    assert_that(list(take_with_ellipsis(["a", "b"], 1, "…")) == ["…"], "custom marker")
    assert_that(list(take_with_ellipsis(["a", "b"], 0)) == [], "zero count")
    assert_that(list(take_with_ellipsis(["a", "b"], -2)) == [], "negative count")


@case("take_with_ellipsis requires a source at call time")
def test_take_with_ellipsis_none():
    assert_raises(InvalidArgumentError, take_with_ellipsis, None, 3)


@case("take_with_ellipsis reads at most one item past count")
def test_take_with_ellipsis_lazy():
    source = _Counting(str(i) for i in range(1000))
    result = list(take_with_ellipsis(source, 5))
    assert_that(result == ["0", "1", "2", "3", "..."], f"got {result}")
    assert_that(source.read == 6, f"read {source.read} items")


# --- absent vs empty ---

@case("null_if_empty distinguishes absent from empty")
def test_null_if_empty():
    data = [1, 2]
    assert_that(null_if_empty(data) is data, "non-empty returns the same object")
    assert_that(null_if_empty([]) is None, "empty gives None")
    assert_that(null_if_empty(None) is None, "None stays None")
    assert_that(null_if_empty(iter([3])) == [3], "iterators are materialized")
    assert_that(null_if_empty(iter([])) is None, "empty iterator gives None")


@case("is_null_or_empty")
def test_is_null_or_empty():
    assert_that(is_null_or_empty(None), "None")
    assert_that(is_null_or_empty([]), "empty list")
    assert_that(is_null_or_empty(iter(())), "empty iterator")
    assert_that(not is_null_or_empty([0]), "list with a falsy item")
    assert_that(not is_null_or_empty(x for x in [1]), "non-empty generator")


# --- string join ---

@case("string_join joins with separator")
def test_string_join():
    assert_that(string_join(["a", "b", "c"], ", ") == "a, b, c", "plain join")
    assert_that(string_join(iter(["x"]), "-") == "x", "single element")


@case("string_join degenerate inputs give empty strings")
def test_string_join_degenerate():
    assert_that(string_join(None, ",") == "", "None source")
    assert_that(string_join([], ",") == "", "empty source")
    assert_that(string_join(["a", None, "b"], "|") == "a||b", "None items are empty")
    assert_that(string_join(["a", "b"], None) == "ab", "None separator is empty")


if __name__ == "__main__":
    suite.main(title="keyq sequence helpers test")
