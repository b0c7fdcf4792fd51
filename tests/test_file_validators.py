import pytest
from starlette.datastructures import MutableHeaders

from upwave.validations import (
    FileHeader,
    FileTypeValidator,
    MaxFileSizeValidator,
    format_size,
    ValidationErrors,
    generate_key,
    parse_int,
    validate,
)


def _header(content_type="image/png", content_length=None):
    headers = {"Content-Type": content_type}
    if content_length is not None:
        headers["Content-Length"] = content_length
    return FileHeader(filename="photo.png", headers=MutableHeaders(headers))


@pytest.mark.parametrize(
    "field, expected",
    [("File", "file"), ("AvatarImage", "avatar_image"), ("user-photo", "user_photo"), ("HTMLFile", "html_file")],
)
def test_generate_key(field, expected):
    assert generate_key(field) == expected


def test_file_type_allowed_adds_nothing():
    errors = ValidationErrors()
    FileTypeValidator("File", {"image/png", "image/jpeg"}, _header("image/png")).is_valid(errors)
    assert not errors.has_any()


def test_file_type_not_allowed_adds_one_error():
    errors = ValidationErrors()
    FileTypeValidator("File", {"image/png"}, _header("application/pdf")).is_valid(errors)
    assert errors.to_dict() == {"file": ["not an allowed type"]}


def test_file_type_is_exact_match():
    errors = ValidationErrors()
    FileTypeValidator("File", {"image/png"}, _header("image/png; charset=binary")).is_valid(errors)
    assert errors.get("file") == ["not an allowed type"]


def test_max_size_at_limit_is_valid():
    errors = ValidationErrors()
    MaxFileSizeValidator("File", 5000, _header(content_length="5000")).is_valid(errors)
    assert not errors.has_any()


def test_max_size_over_limit_reports_human_size():
    errors = ValidationErrors()
    MaxFileSizeValidator("File", 5_000_000, _header(content_length="10000000")).is_valid(errors)
    assert errors.get("file") == ["is too big 10 MB"]


@pytest.mark.parametrize("raw", ["", "abc", "12.5", " 42 ", "1_000"])
def test_max_size_unparseable_length(raw):
    errors = ValidationErrors()
    MaxFileSizeValidator("File", 0, _header(content_length=raw)).is_valid(errors)
    # no size comparison happens, so only one message even with max_size=0
    assert errors.get("file") == ["couldn't parse content length"]


def test_validate_composes_all_messages():
    header = _header("image/jpeg", "10000000")
    errors = validate(
        FileTypeValidator("File", {"image/png"}, header),
        MaxFileSizeValidator("File", 5_000_000, header),
    )
    assert errors.get("file") == ["not an allowed type", "is too big 10 MB"]
    assert errors.count() == 2


def test_validate_with_no_validators_is_empty():
    assert validate() == {}


def test_validation_errors_append_merges_keys():
    a = ValidationErrors()
    a.add("file", "one")
    b = ValidationErrors()
    b.add("file", "two")
    b.add("avatar", "three")
    a.append(b)
    assert a.to_dict() == {"file": ["one", "two"], "avatar": ["three"]}
    assert sorted(a.keys()) == ["avatar", "file"]
    assert len(a) == 2


@pytest.mark.parametrize(
    "size, expected",
    [
        (999, "999 Bytes"),
        (2000, "2.0 kB"),
        (4_200_000, "4.2 MB"),
        (10_000_000, "10 MB"),
        (10 * 1024 * 1024, "10 MB"),
        (250_000_000, "250 MB"),
    ],
)
def test_format_size_drops_decimals_from_ten_units(size, expected):
    assert format_size(size) == expected


def test_max_size_message_for_ten_mebibytes():
    errors = ValidationErrors()
    MaxFileSizeValidator("File", 5_000_000, _header(content_length=str(10 * 1024 * 1024))).is_valid(errors)
    assert errors.get("file") == ["is too big 10 MB"]


@pytest.mark.parametrize("raw, expected", [("42", 42), ("+7", 7), ("-3", -3), ("0010", 10)])
def test_parse_int_accepts_plain_decimals(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw", ["", " 42", "42 ", "1_000", "١٢", "0x10", "1e3"])
def test_parse_int_rejects_what_int_would_tolerate(raw):
    with pytest.raises(ValueError):
        parse_int(raw)
