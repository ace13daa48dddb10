import itertools
import suite
from mocks import RecordingSource, CountingForever
from pullq import (
    PullIterator, Producible, EXHAUSTED, ArraySource, MappingSource, IterableSource,
    iterate, from_list, from_mapping, from_iterable, from_range, repeat, empty, generate, P
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


# --- exhaustion signal ---

@test("EXHAUSTED is a falsy singleton")
def test_exhausted_singleton():
    assert_that(not EXHAUSTED, "should be falsy")
    assert_that(type(EXHAUSTED)() is EXHAUSTED, "constructing again should return the same object")
    assert_equal(repr(EXHAUSTED), "EXHAUSTED")


# --- producible contract ---

@test("objects with pull_next count as producible")
def test_structural_producible():
    assert_that(isinstance(RecordingSource([]), Producible), "duck-typed source should be producible")
    assert_that(isinstance(ArraySource([1]), Producible), "array source should be producible")
    assert_that(not isinstance([1, 2], Producible), "a list is not producible")


@test("Producible cannot be instantiated without pull_next")
def test_producible_is_abstract():
    class Incomplete(Producible):
        pass

    assert_raises(TypeError, Incomplete)


@test("wrapping a value without pull_next raises TypeError")
def test_wrap_rejects_non_producible():
    error = assert_raises(TypeError, PullIterator, [1, 2, 3])
    assert_that("pull_next" in str(error), f"message should name pull_next: {error}")
    assert_raises(TypeError, iterate, object())


# --- array source ---

@test("array source yields in order then reports exhaustion")
def test_array_source_order():
    source = ArraySource([1, 2, 3])
    pulled = [source.pull_next() for _ in range(3)]
    assert_equal(pulled, [1, 2, 3])
    assert_that(source.pull_next() is EXHAUSTED, "fourth pull should be exhausted")
    assert_that(source.pull_next() is EXHAUSTED, "exhaustion should be permanent")


@test("array source owns a copy of its data")
def test_array_source_copies():
    data = [1, 2, 3]
    it = from_list(data)
    data.append(4)
    assert_equal(it.collect(), [1, 2, 3], "later changes should not be seen")


@test("array source keeps None and falsy values as elements")
def test_array_source_falsy_elements():
    assert_equal(from_list([None, 0, False, ""]).collect(), [None, 0, False, ""])
    assert_equal(from_list([None, None]).count(), 2)


@test("array source accepts any iterable")
def test_array_source_from_generator():
    assert_equal(from_list(x * x for x in range(4)).collect(), [0, 1, 4, 9])


# --- mapping source ---

@test("mapping source yields every value")
def test_mapping_source_values():
    values = from_mapping({'a': 1, 'b': 2, 'c': 3}).collect()
    assert_equal(sorted(values), [1, 2, 3], "values should match as a multiset")


@test("mapping source keeps duplicate values")
def test_mapping_source_duplicates():
    values = from_mapping({'x': 7, 'y': 7, 'z': 1}).collect()
    assert_equal(sorted(values), [1, 7, 7])


@test("mapping source order follows the key snapshot")
def test_mapping_source_snapshot_order():
    data = {'c': 3, 'a': 1, 'b': 2}
    expected = [data[k] for k in list(data.keys())]
    assert_equal(from_mapping(data).collect(), expected)


@test("mapping source on an empty mapping is immediately exhausted")
def test_mapping_source_empty():
    source = MappingSource({})
    assert_that(source.pull_next() is EXHAUSTED, "should be exhausted")


# --- iterable source ---

@test("iterable source adapts generators lazily")
def test_iterable_source_lazy():
    seen = []

    def numbers():
        for n in range(5):
            seen.append(n)
            yield n

    it = from_iterable(numbers())
    assert_equal(seen, [], "nothing should be pulled before use")
    assert_equal(it.take(2).collect(), [0, 1])
    assert_equal(seen, [0, 1], "only two elements should have been generated")


@test("iterable source latches StopIteration as exhaustion")
def test_iterable_source_latches():
    source = IterableSource(iter([1]))
    assert_equal(source.pull_next(), 1)
    assert_that(source.pull_next() is EXHAUSTED, "second pull should be exhausted")
    assert_that(source.pull_next() is EXHAUSTED, "and stay exhausted")


@test("iterable source works on infinite iterators with take")
def test_iterable_source_infinite():
    assert_equal(from_iterable(itertools.count(10)).take(3).collect(), [10, 11, 12])


# --- factories ---

@test("from_range builds consecutive integers")
def test_from_range():
    assert_equal(from_range(10, 5).collect(), [10, 11, 12, 13, 14])
    assert_equal(from_range(0, 0).collect(), [])


@test("repeat with a count is finite")
def test_repeat_finite():
    assert_equal(repeat('a', 3).collect(), ['a', 'a', 'a'])


@test("repeat without a count is unbounded")
def test_repeat_unbounded():
    assert_equal(repeat(1).take(4).collect(), [1, 1, 1, 1])


@test("empty has nothing to pull")
def test_empty():
    it = empty()
    assert_equal(it.count(), 0)
    assert_that(it.exhausted, "should be spent after the count")


@test("generate calls the function once per pull")
def test_generate():
    calls = []

    def next_value():
        calls.append(1)
        return len(calls)

    assert_equal(generate(next_value, 3).collect(), [1, 2, 3])
    calls.clear()
    assert_equal(generate(next_value).take(2).collect(), [1, 2])
    assert_equal(len(calls), 2, "an unbounded generate should only run as often as pulled")


@test("P is an alias for from_list")
def test_alias():
    assert_equal(P([3, 2, 1]).collect(), [3, 2, 1])


@test("iterate wraps a custom unbounded source")
def test_iterate_custom_source():
    source = CountingForever()
    assert_equal(iterate(source).take(3).collect(), [0, 1, 2])
    assert_equal(source.pulls, 3)


if __name__ == "__main__":
    suite.main(title="pullq sources and factories test suite")
