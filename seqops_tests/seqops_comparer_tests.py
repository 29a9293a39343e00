import numpy as np

import suite
from seqops import (
    contains, distinct, sequence_equal, union,
    EqualityComparer, DefaultEqualityComparer, KeyEqualityComparer,
    CaseInsensitiveComparer, ArrayEqualityComparer, default_comparer
)
from seqops.comparers import resolve_comparer

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


class _ModuloComparer(EqualityComparer):
    """integers equal when congruent modulo n"""

    def __init__(self, n):
        self.n = n

    def equals(self, x, y):
        return x % self.n == y % self.n

    def hash(self, value):
        return hash(value % self.n)


# --- resolution ---

@test("comparer arguments resolve to a comparer instance")
def test_resolve_comparer():
    assert_that(resolve_comparer(None) is default_comparer, "none means natural equality")
    assert_that(isinstance(default_comparer, DefaultEqualityComparer), "default comparer type")
    ci = CaseInsensitiveComparer()
    assert_that(resolve_comparer(ci) is ci, "comparers pass through")
    assert_that(isinstance(resolve_comparer(len), KeyEqualityComparer), "callables become key comparers")
    assert_raises(TypeError, resolve_comparer, 42)


@test("default comparer uses natural equality and hash")
def test_default_comparer():
    assert_that(default_comparer.equals(1, 1.0), "1 == 1.0")
    assert_that(default_comparer.hash(1) == default_comparer.hash(1.0), "hash is consistent with equality")
    assert_that(default_comparer.key("a") == "a", "natural keys are not wrapped")
    assert_that(list(distinct([1, 1.0, True, 2])) == [1, 2], "1, 1.0 and True are one value")


# --- custom comparers ---

@test("user comparers drive both equality scans and hash-based operators")
def test_custom_comparer():
    mod3 = _ModuloComparer(3)
    assert_that(contains([1, 2], 5, mod3), "5 is congruent to 2")
    assert_that(list(distinct([0, 1, 3, 4, 2, 5], mod3)) == [0, 1, 2], "one value per residue")
    assert_that(list(union([0, 1], [3, 4, 5], mod3)) == [0, 1, 5], "union by residue")
    assert_that(sequence_equal([1, 2, 3], [4, 5, 6], mod3), "pairwise congruent")


@test("key comparer projects before comparing")
def test_key_comparer():
    people = [{'name': 'Ann', 'age': 30}, {'name': 'ann', 'age': 31}, {'name': 'Bo', 'age': 30}]
    by_age = KeyEqualityComparer(lambda p: p['age'])
    assert_that([p['name'] for p in distinct(people, by_age)] == ['Ann', 'ann'], "distinct by age")

    by_name = KeyEqualityComparer(lambda p: p['name'], CaseInsensitiveComparer())
    assert_that([p['name'] for p in distinct(people, by_name)] == ['Ann', 'Bo'], "distinct by folded name")
    assert_that(by_name.hash(people[0]) == by_name.hash(people[1]), "equal keys hash alike")


@test("case-insensitive comparer folds case")
def test_case_insensitive():
    ci = CaseInsensitiveComparer()
    assert_that(ci.equals("Straße", "STRASSE"), "casefold handles sharp s")
    assert_that(ci.hash("Bob") == ci.hash("bOB"), "hash folds case")
    assert_that(not sequence_equal(["a", "B"], ["A", "c"], ci), "different strings stay different")


# --- numpy arrays ---

@test("array comparer compares shape, dtype and contents")
def test_array_comparer():
    cmp = ArrayEqualityComparer()
    a = np.array([1, 2, 3])
    assert_that(cmp.equals(a, np.array([1, 2, 3])), "same contents")
    assert_that(not cmp.equals(a, np.array([3, 2, 1])), "different order")
    assert_that(not cmp.equals(a, np.array([[1, 2, 3]])), "different shape")
    assert_that(not cmp.equals(a, a.astype(np.float64)), "different dtype")
    assert_that(cmp.equals(np.array([0.0]), np.array([-0.0])), "signed zeros are equal")
    assert_that(cmp.hash(np.array([0.0])) == cmp.hash(np.array([-0.0])), "signed zeros hash alike")

    arrays = [np.array([1, 2]), np.array([1, 2]), np.array([2, 1]), np.array([1, 2])]
    unique = list(distinct(arrays, cmp))
    assert_that(len(unique) == 2 and unique[0] is arrays[0], "arrays deduplicated by content")
    assert_that(contains(arrays, np.array([2, 1]), cmp), "array membership")


@test("array comparer can treat nan as equal")
def test_array_comparer_nan():
    left, right = np.array([1.0, np.nan]), np.array([1.0, np.nan])
    assert_that(not ArrayEqualityComparer().equals(left, right), "nan differs by default")
    nan_equal = ArrayEqualityComparer(equal_nan=True)
    assert_that(nan_equal.equals(left, right), "nan equal when requested")
    assert_that(nan_equal.hash(left) == nan_equal.hash(right), "nan arrays hash alike")
    assert_that(len(list(distinct([left, right], nan_equal))) == 1, "nan arrays deduplicated")


@test("nan-aware comparison rejects object arrays")
def test_array_comparer_object_dtype():
    nan_equal = ArrayEqualityComparer(equal_nan=True)
    objects = np.array([float("nan"), "a"], dtype=object)
    assert_raises(TypeError, nan_equal.equals, objects, objects)
    assert_raises(TypeError, nan_equal.hash, objects)

    plain = ArrayEqualityComparer()
    words = [np.array(["a", 1], dtype=object), np.array(["a", 1], dtype=object)]
    assert_that(plain.equals(*words), "object arrays compare without nan handling")
    assert_that(plain.hash(words[0]) == plain.hash(words[1]), "equal object arrays hash alike")


if __name__ == "__main__":
    suite.run(title="seqops comparer tests")
