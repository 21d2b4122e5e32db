import pytest

from shopsys.accounts import (
    UserDetails,
    apply_discount,
    is_email_unique,
    is_valid_email_format,
    load_user_details,
    save_user,
    validate_login,
)

EMAIL = "ann@example.com"


@pytest.fixture
def users_file(tmp_path):
    path = tmp_path / "users.txt"
    save_user(path, EMAIL, "password", "Ann", "c1", "Street")
    return path


def test_apply_discount_at_or_below_threshold():
    assert apply_discount(500) == 500
    assert apply_discount(120.5) == 120.5


def test_apply_discount_above_threshold_lowers_total():
    assert apply_discount(600) < 600


@pytest.mark.parametrize(
    "email",
    ["ann@example.com", "a_b.c1@example.com", "x@y"],
)
def test_valid_email_formats(email):
    assert is_valid_email_format(email) is True


@pytest.mark.parametrize(
    "email",
    ["", "Ann@example.com", "@example.com", "ann@", "a@b@example.com",
     "annexample.com", "ann-x@example.com", "ann @example.com"],
)
def test_invalid_email_formats(email):
    assert is_valid_email_format(email) is False


def test_save_user_writes_record(tmp_path):
    path = tmp_path / "users.txt"
    save_user(path, EMAIL, "password", "Ann", "c1", "Street")
    assert path.read_text() == f"{EMAIL} password Ann c1 Street\n"


def test_validate_login(users_file):
    assert validate_login(users_file, EMAIL, "password") is True
    assert validate_login(users_file, EMAIL, "secret") is False
    assert validate_login(users_file, "bob@example.com", "password") is False


def test_is_email_unique(users_file):
    assert is_email_unique(users_file, EMAIL) is False
    assert is_email_unique(users_file, "bob@example.com") is True


def test_load_user_details_round_trip(users_file):
    assert load_user_details(users_file, EMAIL, "password") == UserDetails(
        "Ann", "c1", "Street"
    )
    assert load_user_details(users_file, EMAIL, "secret") is None


def test_missing_file_raises(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(OSError, match="Could not open file"):
        validate_login(missing, EMAIL, "password")
    with pytest.raises(OSError, match="Could not open file"):
        is_email_unique(missing, EMAIL)
    with pytest.raises(OSError, match="Could not open file"):
        load_user_details(missing, EMAIL, "password")


def test_save_user_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError, match="Could not open file to save user"):
        save_user(tmp_path / "no" / "users.txt", EMAIL, "password", "A", "c", "a")