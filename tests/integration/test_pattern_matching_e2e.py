#!/usr/bin/env python3
"""
End-to-end pattern matching: pattern text compiled and evaluated against
Python values.
"""

from collections import deque
from collections.abc import Sequence

import numpy as np
import pytest
from tests.test_utils import assert_matches, assert_no_match, compile_ok
from casematch import NoMatchError, compile_pattern


class _IndexOnlySequence(Sequence):
    """Sequence that supports integer subscripts only"""

    def __init__(self, items):
        self._items = list(items)

    def __getitem__(self, index):
        if not isinstance(index, int):
            raise TypeError("integer subscripts only")
        return self._items[index]

    def __len__(self):
        return len(self._items)


class TestEmptyArray:
    """[] matches only the empty sequence"""

    def test_matches_empty(self, compiler):
        assert_matches(compile_ok("[]", compiler), [], {})

    @pytest.mark.parametrize("candidate", [[1], [[]], None, "", 0])
    def test_rejects_everything_else(self, compiler, candidate):
        assert_no_match(compile_ok("[]", compiler), candidate)

    def test_empty_tuple_and_array(self, compiler):
        pattern = compile_ok("[]", compiler)
        assert pattern.defined_at(())
        assert pattern.defined_at(np.array([]))


class TestFixedArrays:
    """Literal and identifier elements with exact arity"""

    def test_literal_pair(self, compiler):
        pattern = compile_ok("[1, 2]", compiler)
        assert_matches(pattern, [1, 2], {})
        assert_no_match(pattern, [1, 2, 3])
        assert_no_match(pattern, [2, 1])
        assert_no_match(pattern, [1])

    def test_positional_bindings(self, compiler):
        assert_matches(compile_ok("[a, b]", compiler), [10, 20], {"a": 10, "b": 20})

    def test_arity_is_exact(self, compiler):
        pattern = compile_ok("[a, b]", compiler)
        assert_no_match(pattern, [1])
        assert_no_match(pattern, [1, 2, 3])

    def test_mixed_literals_and_names(self, compiler):
        pattern = compile_ok('["add", x, y]', compiler)
        assert_matches(pattern, ["add", 1, 2], {"x": 1, "y": 2})
        assert_no_match(pattern, ["sub", 1, 2])

    def test_single_element(self, compiler):
        pattern = compile_ok("[only]", compiler)
        assert_matches(pattern, ["x"], {"only": "x"})
        assert_no_match(pattern, [])
        assert_no_match(pattern, ["x", "y"])

    def test_identifier_captures_nested_value(self, compiler):
        assert_matches(compile_ok("[a, b]", compiler), [[1], {"k": 2}], {"a": [1], "b": {"k": 2}})


class TestSplats:
    """Trailing splats capture the remainder"""

    def test_head_tail(self, compiler):
        pattern = compile_ok("[head, *tail]", compiler)
        assert_matches(pattern, [1, 2, 3], {"head": 1, "tail": [2, 3]})
        assert_matches(pattern, [1], {"head": 1, "tail": []})
        assert_no_match(pattern, [])

    def test_anonymous_splat_any_length(self, compiler):
        pattern = compile_ok("[*_]", compiler)
        for candidate in ([], [1], [1, 2, 3], ()):
            assert_matches(pattern, candidate, {})

    def test_lone_named_splat_binds_everything(self, compiler):
        assert_matches(compile_ok("[*xs]", compiler), [1, 2], {"xs": [1, 2]})
        assert_matches(compile_ok("[*xs]", compiler), [], {"xs": []})

    def test_prefix_then_splat(self, compiler):
        pattern = compile_ok("[1, 2, *rest]", compiler)
        assert_matches(pattern, [1, 2], {"rest": []})
        assert_matches(pattern, [1, 2, 3, 4], {"rest": [3, 4]})
        assert_no_match(pattern, [1])
        assert_no_match(pattern, [1, 3, 4])

    def test_suffix_is_a_copy(self, compiler):
        candidate = [1, 2, 3]
        tail = compile_ok("[_, *tail]", compiler).bindings(candidate)["tail"]
        tail.append(99)
        assert candidate == [1, 2, 3]


class TestLiterals:
    """Scalar patterns and the numeric equality rule"""

    def test_integer_matches_equal_float(self, compiler):
        assert_matches(compile_ok("1", compiler), 1.0, {})
        assert_matches(compile_ok("[1]", compiler), [1.0], {})

    def test_float_matches_equal_integer(self, compiler):
        assert_matches(compile_ok("2.0", compiler), 2, {})

    def test_booleans_are_not_numbers(self, compiler):
        assert_no_match(compile_ok("1", compiler), True)
        assert_no_match(compile_ok("[0]", compiler), [False])

    def test_strings_do_not_coerce(self, compiler):
        assert_no_match(compile_ok("1", compiler), "1")
        assert_no_match(compile_ok('"1"', compiler), 1)
        assert_matches(compile_ok("'1'", compiler), "1", {})

    def test_scientific_notation(self, compiler):
        assert_matches(compile_ok("[1e2]", compiler), [100], {})

    def test_negative_numbers(self, compiler):
        assert_matches(compile_ok("[-1, x]", compiler), [-1, 5], {"x": 5})

    def test_strings_are_not_sequences(self, compiler):
        assert_no_match(compile_ok("[a, b]", compiler), "ab")


class TestNesting:

    def test_nested_arrays(self, compiler):
        pattern = compile_ok("[[x, y], *rest]", compiler)
        assert_matches(pattern, [[1, 2], 3], {"x": 1, "y": 2, "rest": [3]})
        assert_no_match(pattern, [[1], 3])
        assert_no_match(pattern, [1, 2])

    def test_deep_nesting(self, compiler):
        pattern = compile_ok("[op, [lhs, *_], [[deep]]]", compiler)
        assert_matches(pattern, ["+", [1, 2, 3], [["d"]]], {"op": "+", "lhs": 1, "deep": "d"})

    def test_nested_empty(self, compiler):
        assert_matches(compile_ok("[[], x]", compiler), [[], 1], {"x": 1})
        assert_no_match(compile_ok("[[], x]", compiler), [[0], 1])


class TestCandidateKinds:
    """Tuples, ranges and numpy arrays are sequences"""

    def test_tuple_suffix_stays_tuple(self, compiler):
        assert_matches(compile_ok("[a, *rest]", compiler), (1, 2, 3), {"a": 1, "rest": (2, 3)})

    def test_range(self, compiler):
        bindings = compile_ok("[first, *rest]", compiler).bindings(range(3))
        assert bindings["first"] == 0
        assert list(bindings["rest"]) == [1, 2]

    def test_numpy_vector(self, compiler):
        pattern = compile_ok("[1, x, *rest]", compiler)
        bindings = pattern.bindings(np.array([1, 2, 3, 4]))
        assert bindings["x"] == 2
        assert isinstance(bindings["rest"], np.ndarray)
        np.testing.assert_array_equal(bindings["rest"], np.array([3, 4]))

    def test_numpy_float_elements(self, compiler):
        assert compile_ok("[1, 2.5]", compiler).defined_at(np.array([1.0, 2.5]))

    def test_numpy_matrix_rows(self, compiler):
        pattern = compile_ok("[[a, b], *_]", compiler)
        bindings = pattern.bindings(np.array([[1, 2], [3, 4]]))
        assert bindings == {"a": 1, "b": 2}

    def test_zero_dim_array_is_scalar(self, compiler):
        assert not compile_ok("[*_]", compiler).defined_at(np.array(5))
        assert compile_ok("5", compiler).defined_at(np.array(5).item())

    def test_deque(self, compiler):
        assert_matches(compile_ok("[*_]", compiler), deque([1]), {})
        assert_matches(compile_ok("[a, *rest]", compiler), deque([1, 2, 3]), {"a": 1, "rest": [2, 3]})
        assert_no_match(compile_ok("[a, b, *_]", compiler), deque([1]))

    def test_sequence_without_slicing(self, compiler):
        candidate = _IndexOnlySequence(["x", "y", "z"])
        assert_matches(compile_ok("[*_]", compiler), candidate, {})
        assert_matches(compile_ok("[first, *rest]", compiler), candidate, {"first": "x", "rest": ["y", "z"]})
        assert_matches(compile_ok('["x", "y", *rest]', compiler), candidate, {"rest": ["z"]})

    def test_dict_is_not_a_sequence(self, compiler):
        assert_no_match(compile_ok("[*_]", compiler), {0: "a"})


class TestCompiledPatternApi:

    def test_bindings_without_match_raises(self, compiler):
        pattern = compile_ok("[a]", compiler)
        with pytest.raises(NoMatchError) as exc_info:
            pattern.bindings([])
        assert exc_info.value.value == []
        assert "[a]\n^" in str(exc_info.value)

    def test_match_returns_none_or_dict(self, compiler):
        pattern = compile_ok("[a, *_]", compiler)
        assert pattern.match([]) is None
        assert pattern.match([7, 8]) == {"a": 7}

    def test_fresh_binding_map_per_call(self, compiler):
        pattern = compile_ok("[a]", compiler)
        first = pattern.bindings([1])
        first["a"] = "mutated"
        assert pattern.bindings([1]) == {"a": 1}

    def test_show_position_of_whole_pattern(self, compiler):
        assert compile_ok("[x]", compiler).show_position() == "[x]\n^"

    def test_compile_pattern_is_cached(self):
        assert compile_pattern("[cached, *_]") is compile_pattern("[cached, *_]")

    def test_independent_compiles_behave_identically(self, compiler):
        first = compile_ok("[a, [1, *b]]", compiler)
        second = compile_ok("[a, [1, *b]]", compiler)
        candidates = [[0, [1]], [0, [1, 2, 3]], [0, [2]], [0], "x", [0, [1], 2]]
        for candidate in candidates:
            assert first.defined_at(candidate) == second.defined_at(candidate)
            assert first.match(candidate) == second.match(candidate)

    def test_source_name_in_diagnostics(self, compiler):
        result = compiler.compile("[a, a]", source_name="routes.cfg")
        assert "routes.cfg:1:5" in result.get_errors()[0]
