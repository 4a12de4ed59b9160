"""
Tests for the Literal Extractor.

These tests verify:
    - Each literal kind is recognised from its lexical shape
    - Bracket escapes are stripped and carry no meaning
    - Patterns are anchored (50% is never a NUMBER)
    - Caller-supplied kind order is respected
"""

import pytest
from twanimate.literals import Literal, LiteralKind, extract_literal


class TestLiteralKinds:
    """Test classification of each literal shape."""

    @pytest.mark.parametrize("text", ["50", "0", "0.5", ".5", "12.25"])
    def test_number(self, text):
        """Integers and decimals are NUMBER."""
        lit = extract_literal(text)
        assert lit.kind == LiteralKind.NUMBER
        assert lit.value == text

    def test_percentage(self):
        """Number followed by % is PERCENTAGE."""
        lit = extract_literal("50%")
        assert lit == Literal(LiteralKind.PERCENTAGE, "50%")

    def test_ratio(self):
        """int/int is RATIO."""
        lit = extract_literal("1/2")
        assert lit == Literal(LiteralKind.RATIO, "1/2")

    def test_degree(self):
        """Number followed by deg is DEGREE."""
        lit = extract_literal("45deg")
        assert lit == Literal(LiteralKind.DEGREE, "45deg")

    def test_decimal_degree(self):
        """Decimal degrees are accepted."""
        assert extract_literal("22.5deg").kind == LiteralKind.DEGREE

    @pytest.mark.parametrize("text", ["abc", "", "50px", "-5", "1/", "/2", "50%%", "deg", "1.2.3"])
    def test_unrecognised(self, text):
        """Anything else is no match."""
        assert extract_literal(text) is None


class TestAnchoring:
    """Test that shapes never match a prefix of the input."""

    def test_percentage_is_not_number(self):
        """50% must not be classified as NUMBER."""
        assert extract_literal("50%", [LiteralKind.NUMBER]) is None

    def test_degree_is_not_number(self):
        """45deg must not be classified as NUMBER."""
        assert extract_literal("45deg", [LiteralKind.NUMBER]) is None

    def test_ratio_is_not_number(self):
        """1/2 must not be classified as NUMBER."""
        assert extract_literal("1/2", [LiteralKind.NUMBER]) is None


class TestBrackets:
    """Test bracket-escaped literals."""

    @pytest.mark.parametrize("bare", ["50", "50%", "1/2", "45deg", ".5"])
    def test_bracket_strips_to_same_payload(self, bare):
        """[x] decodes to the same kind and value as x."""
        plain = extract_literal(bare)
        wrapped = extract_literal(f"[{bare}]")
        assert wrapped.kind == plain.kind
        assert wrapped.value == plain.value

    def test_bracket_flag(self):
        """Bracketed literals remember the escape."""
        assert extract_literal("[50]").bracketed is True
        assert extract_literal("50").bracketed is False

    @pytest.mark.parametrize("text", ["[50", "50]", "[[50]]", "[]"])
    def test_unbalanced_brackets_rejected(self, text):
        """Brackets must wrap the whole literal exactly once."""
        assert extract_literal(text) is None


class TestKindOrder:
    """Test the caller-supplied kind list."""

    def test_restricted_kinds(self):
        """Kinds outside the list are not recognised."""
        assert extract_literal("45deg", [LiteralKind.NUMBER, LiteralKind.PERCENTAGE]) is None

    def test_empty_kinds(self):
        """No kinds means no match."""
        assert extract_literal("50", []) is None

    def test_literal_immutable(self):
        """Literals should be immutable."""
        lit = extract_literal("50")
        with pytest.raises(AttributeError):
            lit.value = "60"


class TestStrictInput:
    """Test inputs that only look like literals."""

    @pytest.mark.parametrize("text", ["٥٠", "５０", "[٥٠]", "٥٠%", "١/٢", "٤٥deg"])
    def test_non_ascii_digits_rejected(self, text):
        """Only ASCII 0-9 count as digits."""
        assert extract_literal(text) is None

    @pytest.mark.parametrize("text", ["50\n", "[50]\n", "50%\n", "1/2\n", "45deg\n"])
    def test_trailing_newline_rejected(self, text):
        """A trailing newline is not part of the literal."""
        assert extract_literal(text) is None
