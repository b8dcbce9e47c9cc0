import pytest

from app.errors import InvalidAge, InvalidEmailFormat, InvalidId, MissingField
from app.validation import is_valid_email, normalize_email, parse_user_id, validate_new_user


def test_email_pattern_requires_full_match():
    assert is_valid_email("ann@x.com")
    assert is_valid_email("a.b+c@sub.example.org")
    assert not is_valid_email("ann@x.com\n")
    assert not is_valid_email("ann@@x.com")
    assert not is_valid_email("")


def test_normalize_email_trims_and_lowercases():
    assert normalize_email("  Ann@X.Com ") == "ann@x.com"


def test_integral_float_age_is_stored_as_int():
    new_user = validate_new_user(name="Ann", email="ann@x.com", age=30.0)
    assert new_user.age == 30
    assert isinstance(new_user.age, int)


def test_non_string_name_counts_as_missing():
    with pytest.raises(MissingField):
        validate_new_user(name=42, email="ann@x.com")


def test_missing_fields_checked_before_age():
    with pytest.raises(MissingField):
        validate_new_user(name="", email="ann@x.com", age=-1)


def test_nan_age_is_rejected():
    with pytest.raises(InvalidAge):
        validate_new_user(name="Ann", email="ann@x.com", age=float("nan"))


@pytest.mark.parametrize(
    "raw, expected",
    [("1", 1), ("42", 42), ("12abc", 12), ("  7", 7), ("+3", 3), ("1e3", 1), ("007", 7)],
)
def test_lenient_id_parsing(raw, expected):
    assert parse_user_id(raw) == expected


@pytest.mark.parametrize("raw", ["0", "-5", "abc", "", "0x10", " ", None])
def test_lenient_id_parsing_rejects(raw):
    with pytest.raises(InvalidId):
        parse_user_id(raw)


@pytest.mark.parametrize("raw", ["12abc", " 7", "+3", "1e3"])
def test_strict_id_parsing_rejects_non_digits(raw):
    with pytest.raises(InvalidId):
        parse_user_id(raw, strict=True)


def test_strict_id_parsing_accepts_plain_digits():
    assert parse_user_id("15", strict=True) == 15


def test_absent_age_is_none_but_explicit_none_is_rejected():
    assert validate_new_user(name="Ann", email="ann@x.com").age is None
    with pytest.raises(InvalidAge):
        validate_new_user(name="Ann", email="ann@x.com", age=None)


@pytest.mark.parametrize("email", [123, 4.5, True, ["ann@x.com"]])
def test_non_string_email_is_a_format_error(email):
    with pytest.raises(InvalidEmailFormat):
        validate_new_user(name="Ann", email=email)


@pytest.mark.parametrize("email", [None, False, 0, "", "   "])
def test_falsy_email_counts_as_missing(email):
    with pytest.raises(MissingField):
        validate_new_user(name="Ann", email=email)
