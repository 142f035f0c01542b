import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.brackets import is_balanced


@pytest.mark.parametrize(
    "expression",
    ["", "()", "[]", "{}", "{[()]}", "([]{})", "a + (b * [c - d])", "no brackets"],
)
def test_balanced(expression):
    assert is_balanced(expression) is True


@pytest.mark.parametrize(
    "expression",
    ["(", ")", "(]", "([)]", "{[}", "())", "(()", "}{", "a + (b"],
)
def test_unbalanced(expression):
    assert is_balanced(expression) is False


@given(st.text(alphabet="()[]{}", max_size=6))
def test_wrapping_balanced_stays_balanced(inner):
    if is_balanced(inner):
        assert is_balanced("(" + inner + ")")
        assert is_balanced("[" + inner + "]" + inner)


@given(st.text(alphabet="()[]{}ab", max_size=12))
def test_ignores_non_bracket_characters(text):
    stripped = "".join(c for c in text if c in "()[]{}")
    assert is_balanced(text) == is_balanced(stripped)


@given(st.text(alphabet="([{", min_size=1, max_size=8))
def test_only_openers_is_unbalanced(text):
    assert is_balanced(text) is False