import copy
from fractions import Fraction
import numpy as np
import pandas as pd
import suite
from faker import Faker
from zpipe import (
    ifrom, irepeat, irange, to_vector, StdEnum, IterEnum, RepeatEnum, RangeEnum,
    PreconditionViolation, ContractViolation
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

Faker.seed(7)
fake = Faker()

sample_numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
sample_words = fake.words(6, unique=True)


# ifrom() over sequences

@test("ifrom reproduces a list in order")
def test_ifrom_list():
    result = ifrom(sample_numbers) | to_vector
    assert_that(result == sample_numbers, f"list not reproduced: {result}")


@test("ifrom reproduces generated words")
def test_ifrom_words():
    result = ifrom(sample_words) | to_vector
    assert_that(result == sample_words, f"words not reproduced: {result}")


@test("ifrom over tuples and ranges")
def test_ifrom_tuple_and_range():
    assert_that((ifrom((3, 1, 2)) | to_vector) == [3, 1, 2], "tuple order lost")
    assert_that((ifrom(range(4)) | to_vector) == [0, 1, 2, 3], "range not reproduced")


@test("empty source is over before any advance")
def test_ifrom_empty():
    e = ifrom([])
    assert_that(e.over(), "empty list should be over immediately")
    assert_that((e | to_vector) == [], "empty list should drain to []")


@test("ifrom with a window")
def test_ifrom_window():
    result = ifrom(sample_numbers, 2, 5) | to_vector
    assert_that(result == [3, 4, 5], f"window [2, 5) incorrect: {result}")


@test("window bounds are clamped like slices")
def test_ifrom_window_clamped():
    assert_that((ifrom([1, 2, 3], 1, 99) | to_vector) == [2, 3], "end past the sequence should clamp")
    assert_that((ifrom([1, 2, 3], -2) | to_vector) == [2, 3], "negative begin counts from the end")
    assert_that((ifrom([1, 2, 3], 2, 1) | to_vector) == [], "begin past end is empty")


@test("ifrom borrows instead of copying")
def test_ifrom_borrows():
    data = [1, 2, 3]
    e = ifrom(data)
    data[1] = 20
    assert_that((e | to_vector) == [1, 20, 3], "changes to the source should be visible")


# text sources

@test("text yields its characters")
def test_ifrom_text():
    result = ifrom("hello") | to_vector
    assert_that(result == ['h', 'e', 'l', 'l', 'o'], f"characters incorrect: {result}")


@test("text stops at the first nul")
def test_ifrom_text_nul():
    result = ifrom("abc\0def") | to_vector
    assert_that(result == ['a', 'b', 'c'], f"should stop before nul: {result}")


@test("text window starts at begin and still stops at nul")
def test_ifrom_text_window():
    assert_that((ifrom("abc\0def", 4) | to_vector) == ['d', 'e', 'f'], "should read after the nul")
    assert_that((ifrom("abcdef", 1, 3) | to_vector) == ['b', 'c'], "explicit end should bound the text")


@test("bytes yield integers up to nul")
def test_ifrom_bytes():
    result = ifrom(b"ab\0c") | to_vector
    assert_that(result == [97, 98], f"bytes incorrect: {result}")


# non-indexable and third-party sources

@test("sets and generators use a look-ahead cursor")
def test_ifrom_iterables():
    e = ifrom(x * 2 for x in range(3))
    assert_that(isinstance(e, IterEnum), f"generator should become IterEnum: {type(e)}")
    assert_that((e | to_vector) == [0, 2, 4], "generator not reproduced")
    assert_that(sorted(ifrom({3, 1, 2}) | to_vector) == [1, 2, 3], "set elements missing")


@test("a generator is not pulled until the enumerator is used")
def test_iterenum_lazy_head():
    pulled = []

    def numbers():
        for i in range(3):
            pulled.append(i)
            yield i

    e = ifrom(numbers())
    assert_that(pulled == [], f"construction should not pull: {pulled}")
    assert_that(e.current() == 0 and pulled == [0], f"current should pull one element: {pulled}")
    e.advance()
    assert_that(pulled == [0], f"advance alone should not pull: {pulled}")
    assert_that((e | to_vector) == [1, 2], "remaining elements incorrect")


@test("copying an unread IterEnum keeps both sides whole")
def test_iterenum_copy_unread():
    e = ifrom(iter("xyz"))
    clone = e.copy()
    assert_that((e | to_vector) == ['x', 'y', 'z'], "original incorrect")
    assert_that((clone | to_vector) == ['x', 'y', 'z'], "copy incorrect")


@test("window on a non-indexable source is rejected")
def test_ifrom_iterable_window():
    assert_raises(PreconditionViolation, lambda: ifrom({1, 2}, 0, 1))


@test("copies of an IterEnum are independent")
def test_iterenum_copy():
    e = ifrom(iter([1, 2, 3]))
    e.advance()
    clone = e.copy()
    assert_that((e | to_vector) == [2, 3], "original should resume at 2")
    assert_that((clone | to_vector) == [2, 3], "copy should also resume at 2")


@test("numpy arrays and pandas series are read in place")
def test_ifrom_numpy_pandas():
    arr = np.array([1.5, 2.5])
    assert_that((ifrom(arr) | to_vector) == [1.5, 2.5], "numpy array not reproduced")
    series = pd.Series([10, 20, 30], index=['a', 'b', 'c'])
    assert_that((ifrom(series) | to_vector) == [10, 20, 30], "series should be read by position")


@test("ifrom on an enumerator copies it")
def test_ifrom_enum():
    e = ifrom([1, 2])
    again = ifrom(e)
    assert_that((again | to_vector) == [1, 2], "copy should drain fully")
    assert_that(not e.over(), "original should be untouched")


# irepeat()

@test("irepeat yields the value n times")
def test_irepeat():
    result = irepeat('x', 3) | to_vector
    assert_that(result == ['x', 'x', 'x'], f"repeat incorrect: {result}")


@test("irepeat defaults to an empty sequence")
def test_irepeat_default():
    e = irepeat(42)
    assert_that(isinstance(e, RepeatEnum), "should be a RepeatEnum")
    assert_that(e.over(), "default count is zero")


@test("irepeat rejects a negative count")
def test_irepeat_negative():
    error = assert_raises(PreconditionViolation, lambda: irepeat(1, -1))
    assert_that(error.values == {'n': -1}, f"offending value should be attached: {error.values}")


# irange()

@test("irange with step 1")
def test_irange_step_one():
    result = irange(0, 10, 1) | to_vector
    assert_that(result == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9], f"range incorrect: {result}")


@test("irange terminates when the span is not a multiple of the step")
def test_irange_uneven_step():
    result = irange(0, 10, 3) | to_vector
    assert_that(result == [0, 3, 6, 9], f"uneven range incorrect: {result}")


@test("irange counts down with a negative step")
def test_irange_negative_step():
    assert_that((irange(10, 0, -4) | to_vector) == [10, 6, 2], "descending range incorrect")
    assert_that((irange(3, 0) | to_vector) == [3, 2, 1], "inferred -1 step incorrect")


@test("irange with only an end starts at zero")
def test_irange_end_only():
    assert_that((irange(4) | to_vector) == [0, 1, 2, 3], "irange(end) incorrect")
    assert_that((irange(0) | to_vector) == [], "irange(0) should be empty")


@test("irange rejects a step pointing away from end")
def test_irange_precondition():
    error = assert_raises(PreconditionViolation, lambda: irange(0, 10, -1))
    assert_that(error.values == {'begin': 0, 'end': 10, 'step': -1}, f"values missing: {error.values}")
    assert_that('step=-1' in str(error), f"message should name the step: {error}")


@test("irange rejects a zero step")
def test_irange_zero_step():
    assert_raises(PreconditionViolation, lambda: irange(0, 5, 0))
    assert_raises(PreconditionViolation, lambda: irange(5, 5, 0))


@test("irange accepts numpy integers")
def test_irange_numpy_ints():
    result = irange(np.int64(1), np.int64(8), np.int64(3)) | to_vector
    assert_that(result == [1, 4, 7], f"numpy range incorrect: {result}")


@test("float ranges stop at the first value past end")
def test_irange_floats():
    result = irange(0.0, 1.0, 0.25) | to_vector
    assert_that(result == [0.0, 0.25, 0.5, 0.75], f"float range incorrect: {result}")
    down = irange(1.0, 0.0, -0.5) | to_vector
    assert_that(down == [1.0, 0.5], f"descending float range incorrect: {down}")


@test("float ranges with an inexact step do not gain an element")
def test_irange_inexact_float_step():
    result = irange(0.0, 1.0, 0.1) | to_vector
    assert_that(len(result) == 10, f"should yield 10 values: {result}")
    assert_that(abs(result[-1] - 0.9) < 1e-9, f"last value should be 0.9: {result[-1]}")
    assert_that(len(irange(0.0, 1.0, 0.1) | to_vector) == len(np.arange(0.0, 1.0, 0.1)), "should agree with numpy")
    down = irange(1.0, 0.0, -0.1) | to_vector
    assert_that(len(down) == 10, f"descending inexact range should yield 10 values: {down}")


@test("fraction ranges are exact")
def test_irange_fractions():
    result = irange(Fraction(0), Fraction(1), Fraction(1, 3)) | to_vector
    assert_that(result == [Fraction(0), Fraction(1, 3), Fraction(2, 3)], f"fraction range incorrect: {result}")


# protocol contract

@test("current and advance fail on an exhausted enumerator")
def test_contract_violation():
    for e in (ifrom([]), irepeat(1), irange(0), ifrom(iter([]))):
        assert_raises(ContractViolation, e.current, f"{type(e).__name__}.current should fail")
        assert_raises(ContractViolation, e.advance, f"{type(e).__name__}.advance should fail")


@test("contract violation is an IndexError")
def test_contract_violation_type():
    error = assert_raises(IndexError, lambda: ifrom([]).current())
    assert_that('StdEnum' in str(error), f"message should name the variant: {error}")


@test("draining the same instance twice only yields once")
def test_single_pass():
    e = irange(5)
    first = e | to_vector
    second = e | to_vector
    assert_that(first == [0, 1, 2, 3, 4], f"first drain incorrect: {first}")
    assert_that(second == [], f"second drain should be empty: {second}")


@test("independent enumerators over one source agree")
def test_independent_enumerators():
    assert_that((ifrom(sample_words) | to_vector) == (ifrom(sample_words) | to_vector), "drains should agree")


@test("copy.copy gives an independent cursor")
def test_copy_independent():
    for e in (ifrom([1, 2, 3]), irepeat('a', 3), irange(1, 4)):
        e.advance()
        clone = copy.copy(e)
        clone.advance()
        assert_that(len(e | to_vector) == 2, f"{type(e).__name__} original moved with its copy")
        assert_that(len(clone | to_vector) == 1, f"{type(e).__name__} copy incorrect")


@test("source variants are what the factories say")
def test_factory_types():
    assert_that(isinstance(ifrom([1]), StdEnum), "list should give StdEnum")
    assert_that(isinstance(ifrom("a"), StdEnum), "text should give StdEnum")
    assert_that(isinstance(irange(3), RangeEnum), "irange should give RangeEnum")


if __name__ == "__main__":
    suite.run(title="zpipe source enumerators test suite")
