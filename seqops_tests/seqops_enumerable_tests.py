import numpy as np
import pandas as pd

import suite
from dgen import from_schema
from seqops import (
    S, from_iterable, from_range, count_from, repeat, empty, generate, memoize,
    Enumerable, NotFoundError, MultipleMatchesError, IndexOutOfRangeError, CaseInsensitiveComparer
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- test data ---
numbers = S([1, 2, 3, 4, 5, 5])
names = S(["Alice", "Bob", "Charlie", "Alice"])

product_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 50}),
    'name': 'word',
    'price': ('pyfloat', {'min_value': 5.0, 'max_value': 500.0}),
    'category': {'_qen_provider': 'choice', 'from': ['electronics', 'books', 'clothing']}
}


# --- factories ---

@test("factory functions create enumerables correctly")
def test_factories():
    assert_that(from_iterable([1, 2, 3]).to.list() == [1, 2, 3], "from_iterable")
    assert_that(from_range(5, 3).to.list() == [5, 6, 7], "from_range")
    assert_that(repeat('x', 3).to.list() == ['x', 'x', 'x'], "finite repeat")
    assert_that(repeat('x').take(2).to.list() == ['x', 'x'], "infinite repeat")
    assert_that(empty().to.list() == [], "empty")
    assert_that(count_from(10, 5).take(3).to.list() == [10, 15, 20], "count_from")

    counter = iter(range(100))
    assert_that(generate(lambda: next(counter), 3).to.list() == [0, 1, 2], "finite generate")
    assert_that(generate(lambda: 7).take(2).to.list() == [7, 7], "infinite generate")


@test("enumerables over collections are re-iterable, over generators single-pass")
def test_reiteration():
    evens = from_range(0, 10).where(lambda n: n % 2 == 0)
    assert_that(evens.to.list() == evens.to.list() == [0, 2, 4, 6, 8], "each pass re-evaluates")

    one_shot = from_iterable(n for n in range(3))
    assert_that(one_shot.to.list() == [0, 1, 2], "first pass sees the data")
    assert_that(one_shot.to.list() == [], "second pass finds the generator exhausted")

    replayable = memoize(n for n in range(3))
    assert_that(replayable.to.list() == replayable.to.list() == [0, 1, 2], "memoize replays")
    assert_that(S(n for n in range(3)).memoize().to.sequence_equal([0, 1, 2]), "chained memoize")


# --- chaining ---

@test("chained operators evaluate lazily")
def test_chaining_is_lazy():
    pulled = []
    source = Enumerable(lambda: (pulled.append(n) or n for n in range(100)))
    query = source.where(lambda n: n % 2 == 1).skip_while(lambda n: n < 5).take(2)
    assert_that(pulled == [], "building the query reads nothing")
    assert_that(query.to.list() == [5, 7], "odd numbers from 5")
    assert_that(pulled == list(range(8)), f"only the needed prefix is read, read {pulled}")


@test("chaining works over infinite sequences")
def test_chaining_infinite():
    result = count_from(1).where(lambda n: n % 3 == 0).select(lambda n: n * 10).take(4).to.list()
    assert_that(result == [30, 60, 90, 120], "multiples of three, scaled")
    assert_that(count_from(0).set.distinct(lambda n: n % 4).take(4).to.list() == [0, 1, 2, 3], "distinct keys")


@test("core slicing and concatenation methods")
def test_core_methods():
    assert_that(numbers.skip(4).to.list() == [5, 5], "skip")
    assert_that(numbers.take(0).to.list() == [], "take zero")
    assert_that(numbers.take_while(lambda n: n < 3).to.list() == [1, 2], "take_while")
    assert_that(numbers.skip_while(lambda n: n < 3).to.list() == [3, 4, 5, 5], "skip_while")
    assert_that(S([1]).concat([2, 3]).append(4).prepend(0).to.list() == [0, 1, 2, 3, 4], "concat/append/prepend")
    assert_that(names.select(len).to.list() == [5, 3, 7, 5], "select")


# --- set accessor ---

@test("set accessor reproduces the reference scenario")
def test_set_accessor():
    other = [4, 5, 6]
    assert_that(numbers.set.distinct().to.list() == [1, 2, 3, 4, 5], "distinct")
    assert_that(numbers.set.except_(other).to.list() == [1, 2, 3], "except")
    assert_that(numbers.set.intersect(other).to.list() == [4, 5], "intersect")
    assert_that(numbers.set.union(other).to.list() == [1, 2, 3, 4, 5, 6], "union")
    assert_that(names.set.except_(["bob", "eve"], CaseInsensitiveComparer()).to.list() == ["Alice", "Charlie"],
                "comparer passes through")


@test("boolean set checks")
def test_set_checks():
    assert_that(S([1, 2]).set.is_subset_of([1, 2, 3]), "subset")
    assert_that(not S([1, 4]).set.is_subset_of([1, 2, 3]), "not a subset")
    assert_that(S([1, 2, 3, 3]).set.is_superset_of([3, 1]), "superset")
    assert_that(S([1, 2]).set.is_disjoint_with([3, 4]), "disjoint")
    assert_that(not S([1, 2]).set.is_disjoint_with([2, 4]), "overlapping")
    assert_that(names.set.is_subset_of(["alice", "BOB", "charlie"], CaseInsensitiveComparer()), "comparer subset")
    assert_that(count_from(0).set.is_disjoint_with([5]) is False, "disjoint check stops at the first shared element")


# --- terminal accessor ---

@test("terminal quantifiers and search")
def test_terminal_search():
    assert_that(numbers.to.all(lambda n: n > 0), "all positive")
    assert_that(numbers.to.any(lambda n: n > 4) and numbers.to.any(), "any")
    assert_that(numbers.to.contains(3) and not numbers.to.contains(9), "contains")
    assert_that(names.to.contains("bob", CaseInsensitiveComparer()), "contains with comparer")
    assert_that(numbers.to.first(lambda n: n > 2) == 3, "first")
    assert_that(numbers.to.last(lambda n: n % 2 == 0) == 4, "last")
    assert_that(numbers.to.single(lambda n: n == 4) == 4, "single")
    assert_that(numbers.to.element_at(2) == 3, "element_at")
    assert_that(numbers.to.count(lambda n: n > 2) == 4 and numbers.to.count() == 6, "count")
    assert_that(numbers.to.sequence_equal(numbers), "sequence_equal reflexive")
    assert_that(count_from(0).to.first(lambda n: n > 1000) == 1001, "first over an infinite sequence")

    assert_raises(NotFoundError, numbers.to.first, lambda n: n > 10)
    assert_raises(NotFoundError, empty().to.last)
    assert_raises(MultipleMatchesError, numbers.to.single, lambda n: n > 3)
    assert_raises(IndexOutOfRangeError, numbers.to.element_at, 6)


@test("terminal conversions")
def test_terminal_conversions():
    assert_that(numbers.to.set() == {1, 2, 3, 4, 5}, "set")
    assert_that(names.to.dict(lambda s: s, len) == {"Alice": 5, "Bob": 3, "Charlie": 7}, "dict")

    arr = numbers.to.array()
    assert_that(isinstance(arr, np.ndarray) and arr.tolist() == [1, 2, 3, 4, 5, 5], "numpy array")

    series = numbers.set.distinct().to.pandas()
    assert_that(isinstance(series, pd.Series) and int(series.sum()) == 15, "pandas series")

    products = from_schema(product_schema, seed=5).take(12)
    frame = products.where(lambda p: p['price'] > 100).to.df()
    expected = products.to.count(lambda p: p['price'] > 100)
    assert_that(isinstance(frame, pd.DataFrame) and len(frame) == expected, "dataframe from filtered dicts")
    if expected:
        assert_that(set(frame.columns) == {'id', 'name', 'price', 'category'}, "dataframe columns")


if __name__ == "__main__":
    suite.run(title="seqops enumerable tests")
