import operator

import pytest
import eagerseq
from helpers import Bang, alph, num


class TestReduce:
    """Test reduce()"""

    def test_empty_without_initial_raises(self):
        with pytest.raises(eagerseq.EmptySequenceError):
            eagerseq.reduce([], lambda a, e: a + e)

    def test_empty_sequence_error_is_a_value_error(self):
        with pytest.raises(ValueError, match="No elements to reduce"):
            eagerseq.reduce(iter(()), operator.add)

    def test_empty_with_initial_returns_initial(self, bang):
        assert eagerseq.reduce([], bang, "a") == "a"

    def test_none_is_a_valid_initial_value(self):
        result = eagerseq.reduce([1, 2], lambda a, e: (a, e), None)
        assert result == ((None, 1), 2)

    def test_reduce_without_initial(self):
        assert eagerseq.reduce(num(5), lambda a, e: a + e) == 10

    def test_reduce_with_initial(self):
        assert eagerseq.reduce(num(5), lambda a, e: a + e, 10) == 20

    def test_single_element_without_initial(self, bang):
        assert eagerseq.reduce([42], bang) == 42

    def test_builtin_reducer(self):
        assert eagerseq.reduce([1, 2, 3, 4], operator.mul) == 24

    def test_index_starts_at_one_without_initial(self):
        indices = []

        def reducer(acc, e, i):
            indices.append(i)
            return acc + e

        eagerseq.reduce(alph(4), reducer)
        assert indices == [1, 2, 3], f"Unexpected indices: {indices}"

    def test_index_starts_at_zero_with_initial(self):
        result = eagerseq.reduce(alph(3), lambda a, e, i: a + e + str(i), "X")
        assert result == "Xa0b1c2"

    def test_reduce_is_eager(self, temperamental):
        with pytest.raises(Bang):
            eagerseq.reduce(temperamental(num(3)), operator.add)

    def test_reducer_errors_propagate(self):
        with pytest.raises(ZeroDivisionError):
            eagerseq.reduce([1, 0], operator.truediv)


class TestScan:
    """Test scan()"""

    def test_empty_without_initial(self, bang):
        assert eagerseq.scan([], bang) == []

    def test_empty_with_initial_does_not_emit_initial(self, bang):
        assert eagerseq.scan([], bang, "a") == []

    def test_first_value_is_emitted_unchanged(self, bang):
        assert eagerseq.scan(["a"], bang) == ["a"]

    def test_running_sum(self):
        assert eagerseq.scan([1, 2, 3, 4], lambda a, e: a + e) == [1, 3, 6, 10]

    def test_running_total_with_initial(self):
        result = eagerseq.scan(["foo", "bar", "baz"], lambda a, e: a + len(e), 0)
        assert result == [3, 6, 9], f"Unexpected result: {result}"

    def test_accumulates_strings(self):
        result = eagerseq.scan(alph(4), lambda a, e: a + e)
        assert result == ["a", "ab", "abc", "abcd"]

    def test_accumulator_takes_an_index(self):
        result = eagerseq.scan(alph(4), lambda a, e, i: a + e + str(i))
        assert result == ["a", "ab1", "ab1c2", "ab1c2d3"]

    def test_index_adjusted_for_initial(self):
        result = eagerseq.scan(alph(4), lambda a, e, i: a + e + str(i), "X")
        assert result == ["Xa0", "Xa0b1", "Xa0b1c2", "Xa0b1c2d3"]

    def test_last_value_matches_reduce(self):
        data = [3, 1, 4, 1, 5, 9]
        assert eagerseq.scan(data, operator.add)[-1] == eagerseq.reduce(data, operator.add)

    def test_scan_is_eager(self, temperamental):
        with pytest.raises(Bang):
            eagerseq.scan(temperamental(num(3)), operator.add)
