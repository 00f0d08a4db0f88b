"""
Unit tests for validation rules.

Includes property-based testing with hypothesis for validators.
"""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from coi.core.validators import (
    CustomValidator,
    FailureKind,
    FormatValidator,
    LengthRangeValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NumberValidator,
    PatternValidator,
    RangeValidator,
    RegexValidator,
    RequiredFieldValidator,
    RuleParameterError,
    coerce_number,
)


class TestRequiredFieldValidator:
    """Tests for RequiredFieldValidator"""

    @pytest.mark.parametrize("value", ["John Doe", 0, False, [0], {"a": 1}, 0.0])
    def test_present_values_pass(self, value):
        """Test validation passes for present, non-empty values"""
        assert RequiredFieldValidator().evaluate(value).passed

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n", [], (), {}, set()])
    def test_empty_values_fail(self, value):
        """Test validation fails for None, blank text and empty collections"""
        outcome = RequiredFieldValidator().evaluate(value)

        assert outcome.passed is False
        assert outcome.message == "cannot be empty"
        assert outcome.kind is FailureKind.RULE

    def test_custom_message(self):
        """Test override message replaces the default"""
        outcome = RequiredFieldValidator("is required").evaluate(None)
        assert outcome.message == "is required"

    @given(st.text(min_size=1).filter(lambda s: s.strip() != ""))
    def test_property_any_nonblank_string_passes(self, value):
        """Property test: any non-empty, non-whitespace string should pass"""
        assert RequiredFieldValidator().evaluate(value).passed


class TestLengthValidators:
    """Tests for min_length, max_length and length_range"""

    def test_min_length(self):
        """Test minimum length boundary"""
        validator = MinLengthValidator(3)

        assert validator.evaluate("abc").passed
        outcome = validator.evaluate("ab")
        assert outcome.passed is False
        assert outcome.message == "cannot be less than 3"

    def test_max_length_on_sequence(self):
        """Test max length counts list elements"""
        validator = MaxLengthValidator(2)

        assert validator.evaluate([1, 2]).passed
        assert validator.evaluate([1, 2, 3]).message == "cannot be more than 2"

    def test_length_range(self):
        """Test inclusive length range"""
        validator = LengthRangeValidator(3, 5)

        assert validator.evaluate("abc").passed
        assert validator.evaluate("abcde").passed
        assert validator.evaluate("ab").message == "length must be between 3-5"
        assert validator.evaluate("abcdef").passed is False

    def test_counts_characters_not_bytes(self):
        """Test text length is a character count"""
        assert MaxLengthValidator(2).evaluate("中文").passed

    def test_float_length_renders_without_fraction(self):
        """Test integral float lengths render as integers in default messages"""
        assert MaxLengthValidator(3.0).evaluate("abcd").message == "cannot be more than 3"
        assert LengthRangeValidator(2.0, 4.0).evaluate("a").message == "length must be between 2-4"

    def test_none_is_type_mismatch(self):
        """Test None fails before bounds are checked"""
        outcome = MinLengthValidator(1).evaluate(None)

        assert outcome.message == "data cannot be empty"
        assert outcome.kind is FailureKind.TYPE_MISMATCH

    @pytest.mark.parametrize("value", [123, 4.5, True, {"a": 1}, {1, 2}])
    def test_values_without_length_fail(self, value):
        """Test numbers, mappings and sets have no length"""
        outcome = MaxLengthValidator(10).evaluate(value)

        assert outcome.message == "data must have a length property"
        assert outcome.kind is FailureKind.TYPE_MISMATCH

    @pytest.mark.parametrize("bound", ["3", None, True, float("nan"), [3]])
    def test_invalid_length_parameter(self, bound):
        """Test non-numeric bounds raise RuleParameterError"""
        with pytest.raises(RuleParameterError) as exc_info:
            MinLengthValidator(bound)

        assert exc_info.value.message == "length parameter must be a number"
        assert exc_info.value.rule_type == "min_length"

    def test_invalid_range_parameters(self):
        """Test each range bound is checked with its own message"""
        with pytest.raises(RuleParameterError) as exc_info:
            LengthRangeValidator("1", 5)
        assert exc_info.value.message == "minimum length parameter must be a number"

        with pytest.raises(RuleParameterError) as exc_info:
            LengthRangeValidator(1, None)
        assert exc_info.value.message == "maximum length parameter must be a number"


class TestNumberCoercion:
    """Tests for coerce_number and NumberValidator"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (5, 5),
            (2.5, 2.5),
            ("42", 42.0),
            (" -3.5 ", -3.5),
            ("+7", 7.0),
            (".5", 0.5),
            ("1.", 1.0),
            ("1e3", 1000.0),
            ("0x1A", 26),
            ("0b101", 5),
            ("0o17", 15),
            (True, 1),
            (False, 0),
        ],
    )
    def test_coercible_values(self, value, expected):
        """Test numbers, bools and numeric text coerce"""
        assert coerce_number(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n", [], ()])
    def test_blank_values_coerce_to_zero(self, value):
        """Test None, blank text and empty sequences become 0"""
        assert coerce_number(value) == 0

    def test_infinity_text(self):
        """Test only the spelled-out Infinity form is accepted"""
        assert coerce_number("Infinity") == float("inf")
        assert coerce_number("-Infinity") == float("-inf")

    def test_single_element_sequence(self):
        """Test a one-element list coerces its element"""
        assert coerce_number(["5"]) == 5.0
        assert coerce_number([7]) == 7
        assert coerce_number([None]) == 0

    @pytest.mark.parametrize(
        "value",
        ["abc", "nan", "NaN", "inf", "infinity", "1_000", "1,000", "-0x10", "12abc", [1, 2], [True], float("nan")],
    )
    def test_unparseable_values_raise_value_error(self, value):
        """Test non-numeric text, separators, loose infinity spellings and NaN are rejected"""
        with pytest.raises(ValueError):
            coerce_number(value)

    @pytest.mark.parametrize("value", [{"a": 1}, {1}, b"1", object()])
    def test_uncoercible_types_raise_type_error(self, value):
        """Test other types are rejected"""
        with pytest.raises(TypeError):
            coerce_number(value)

    def test_number_validator(self):
        """Test NumberValidator reports coercion failure as a rule failure"""
        assert NumberValidator().evaluate("3.14").passed

        outcome = NumberValidator().evaluate("three")
        assert outcome.message == "must be a valid number"
        assert outcome.kind is FailureKind.RULE

    @given(st.floats(allow_nan=False, allow_infinity=False))
    def test_property_all_floats_valid(self, value):
        """Property test: all finite floats and their text form are numbers"""
        assert NumberValidator().evaluate(value).passed
        assert NumberValidator().evaluate(repr(value)).passed


class TestRangeValidator:
    """Tests for RangeValidator"""

    def test_value_within_range(self):
        """Test value within range passes"""
        assert RangeValidator(1, 100).evaluate(50).passed

    def test_boundaries_are_inclusive(self):
        """Test values at both boundaries pass"""
        validator = RangeValidator(1, 100)
        assert validator.evaluate(1).passed
        assert validator.evaluate(100).passed

    def test_value_above_max(self):
        """Test value above maximum fails with range message"""
        outcome = RangeValidator(1, 100).evaluate(150)
        assert outcome.message == "value must be between 1-100"

    def test_integral_float_bounds_render_without_fraction(self):
        """Test 1.0 and 100.0 render as 1 and 100 in the default message"""
        assert RangeValidator(1.0, 100.0).evaluate(150).message == "value must be between 1-100"
        assert RangeValidator(0.5, 2.5).evaluate(3).message == "value must be between 0.5-2.5"

    def test_blank_value_coerces_to_zero(self):
        """Test blank text and None are compared as 0"""
        assert RangeValidator(0, 10).evaluate("").passed
        assert RangeValidator(0, 10).evaluate(None).passed
        assert RangeValidator(1, 10).evaluate("  ").message == "value must be between 1-10"

    def test_numeric_string_is_coerced(self):
        """Test numeric text is compared as a number"""
        assert RangeValidator(0, 10).evaluate("7.5").passed

    def test_non_numeric_value_fails(self):
        """Test non-numeric value fails with number message"""
        outcome = RangeValidator(1, 100).evaluate("abc")

        assert outcome.message == "must be a valid number"
        assert outcome.kind is FailureKind.RULE

    def test_invalid_bounds(self):
        """Test non-numeric bounds raise RuleParameterError"""
        with pytest.raises(RuleParameterError) as exc_info:
            RangeValidator("1", 100)
        assert exc_info.value.message == "minimum value parameter must be a number"

        with pytest.raises(RuleParameterError) as exc_info:
            RangeValidator(1, float("nan"))
        assert exc_info.value.message == "maximum value parameter must be a number"

    @given(st.floats(min_value=0, max_value=100, allow_nan=False, allow_infinity=False))
    def test_property_values_in_range_pass(self, value):
        """Property test: all values in range should pass"""
        assert RangeValidator(0, 100).evaluate(value).passed

    @given(st.floats(max_value=-0.01, allow_nan=False, allow_infinity=False))
    def test_property_values_below_range_fail(self, value):
        """Property test: all values below range should fail"""
        assert RangeValidator(0, 100).evaluate(value).passed is False


class TestFormatValidator:
    """Tests for FormatValidator"""

    def test_letters_and_numbers(self):
        """Test combined letter and number tokens"""
        validator = FormatValidator(["letter", "number"])

        assert validator.evaluate("abc123").passed
        assert validator.evaluate("abc123!").message == "invalid format"

    def test_chinese_token(self):
        """Test chinese token accepts CJK ideographs only"""
        validator = FormatValidator(["chinese"])

        assert validator.evaluate("中文").passed
        assert validator.evaluate("中文a").passed is False

    def test_unknown_tokens_ignored(self):
        """Test unknown tokens are ignored when a known one remains"""
        assert FormatValidator(["emoji", "number"]).evaluate("123").passed

    def test_empty_string_passes(self):
        """Test the empty string has no disallowed characters"""
        assert FormatValidator(["number"]).evaluate("").passed

    def test_tuple_accepted(self):
        """Test tuples work like lists"""
        assert FormatValidator(("letter",)).evaluate("abc").passed

    @pytest.mark.parametrize("formats", ["letter", None, {"letter"}])
    def test_non_list_parameter(self, formats):
        """Test formats must be a list"""
        with pytest.raises(RuleParameterError) as exc_info:
            FormatValidator(formats)
        assert exc_info.value.message == "format parameter must be a list"

    def test_no_known_tokens(self):
        """Test a list with no known token is a parameter error"""
        with pytest.raises(RuleParameterError) as exc_info:
            FormatValidator(["emoji"])
        assert exc_info.value.message == "invalid format parameter"

    def test_non_text_value(self):
        """Test non-string value is a type mismatch"""
        outcome = FormatValidator(["number"]).evaluate(123)

        assert outcome.message == "must be text"
        assert outcome.kind is FailureKind.TYPE_MISMATCH


class TestPatternValidator:
    """Tests for PatternValidator"""

    def test_default_messages(self):
        """Test each pattern reports its own default message"""
        assert PatternValidator("email").evaluate("nope").message == "invalid email"
        assert PatternValidator("url").evaluate("nope").message == "invalid URL"
        assert PatternValidator("phone").evaluate("nope").message == "invalid phone number"
        assert PatternValidator("id_card").evaluate("nope").message == "invalid ID number"
        assert PatternValidator("positive_integer").evaluate("nope").message == "must be a positive integer"
        assert PatternValidator("chinese").evaluate("nope").message == "must be Chinese text"

    def test_non_text_value(self):
        """Test numbers are not matched against text patterns"""
        outcome = PatternValidator("phone").evaluate(13800138000)

        assert outcome.message == "must be text"
        assert outcome.kind is FailureKind.TYPE_MISMATCH

    def test_unsupported_pattern(self):
        """Test unknown pattern names are rejected"""
        with pytest.raises(ValueError):
            PatternValidator("zipcode")

    @given(st.from_regex(r"1[3-9][0-9]{9}", fullmatch=True))
    def test_property_generated_phones_match(self, value):
        """Property test: values generated from the phone shape should match"""
        assert PatternValidator("phone").evaluate(value).passed


class TestRegexValidator:
    """Tests for RegexValidator"""

    def test_search_semantics(self):
        """Test pattern may match anywhere in the value"""
        assert RegexValidator(re.compile(r"\d+")).evaluate("abc123").passed

    def test_anchored_pattern(self):
        """Test anchored pattern requires a full match"""
        validator = RegexValidator(re.compile(r"^TXN[0-9]{10}$"))

        assert validator.evaluate("TXN0001234567").passed
        assert validator.evaluate("TXN123").message == "invalid format"

    def test_non_string_value_converted(self):
        """Test non-string values are converted to string"""
        assert RegexValidator(re.compile(r"^\d+$")).evaluate(12345).passed

    def test_case_insensitive_pattern(self):
        """Test pattern flags are honored"""
        validator = RegexValidator(re.compile(r"^(active|inactive)$", re.IGNORECASE))
        assert validator.evaluate("ACTIVE").passed

    @pytest.mark.parametrize("pattern", [r"\d+", None, 123])
    def test_uncompiled_pattern_rejected(self, pattern):
        """Test only compiled patterns are accepted"""
        with pytest.raises(RuleParameterError) as exc_info:
            RegexValidator(pattern)
        assert exc_info.value.message == "invalid regular expression parameter"

    def test_bytes_pattern_fails(self):
        """Test a bytes pattern cannot match text"""
        outcome = RegexValidator(re.compile(rb"abc")).evaluate("abc")
        assert outcome.passed is False


class TestCustomValidator:
    """Tests for CustomValidator"""

    def test_truthy_result_passes(self):
        """Test predicate returning truthy passes"""
        assert CustomValidator(lambda v: v % 2 == 0).evaluate(42).passed

    def test_falsy_result_fails(self):
        """Test predicate returning falsy fails with default message"""
        outcome = CustomValidator(lambda v: v % 2 == 0).evaluate(43)

        assert outcome.message == "validation failed"
        assert outcome.kind is FailureKind.RULE

    def test_custom_error_message(self):
        """Test override message"""
        outcome = CustomValidator(lambda v: None, "must be even").evaluate(1)
        assert outcome.message == "must be even"

    def test_exception_becomes_execution_failure(self):
        """Test predicate exceptions are converted, not raised"""
        def boom(value):
            raise RuntimeError("predicate crashed")

        outcome = CustomValidator(boom, "ignored").evaluate("x")

        assert outcome.passed is False
        assert outcome.message == "validator execution failed"
        assert outcome.kind is FailureKind.EXECUTION

    def test_not_callable_raises_parameter_error(self):
        """Test that a non-callable predicate is rejected"""
        with pytest.raises(RuleParameterError) as exc_info:
            CustomValidator("not_callable")

        assert exc_info.value.message == "validator must be callable"
        assert exc_info.value.rule_type == "custom"
