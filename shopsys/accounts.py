"""User accounts kept in whitespace-separated text files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DISCOUNT_THRESHOLD = 500


@dataclass(frozen=True)
class UserDetails:
    """The profile stored with an account."""

    name: str
    contact: str
    address: str


def _read_tokens(path: str | os.PathLike[str]) -> list[str]:
    try:
        return Path(path).read_text(encoding="utf-8").split()
    except OSError as exc:
        raise OSError(f"Could not open file: {os.fspath(path)}") from exc


def _pairs(tokens: list[str]):
    return zip(tokens[0::2], tokens[1::2])


def apply_discount(total: float) -> float:
    """Return the total after the discount for totals above the threshold."""
    if total > DISCOUNT_THRESHOLD:
        discount = total * 10
        return total - discount
    return total


def validate_login(path: str | os.PathLike[str], email: str, password: str) -> bool:
    """Return True if the file pairs this e-mail with this password."""
    return any(
        stored == (email, password) for stored in _pairs(_read_tokens(path))
    )


def is_valid_email_format(email: str) -> bool:
    """Check for one '@', not first or last, among lower-case letters, digits, '.' and '_'."""
    for ch in email:
        if ch == "@":
            continue
        if not ("a" <= ch <= "z" or "0" <= ch <= "9" or ch in "._"):
            return False
    return (
        email.count("@") == 1
        and not email.startswith("@")
        and not email.endswith("@")
    )


def is_email_unique(path: str | os.PathLike[str], email: str) -> bool:
    """Return True if no record in the file holds this e-mail."""
    return all(stored != email for stored, _ in _pairs(_read_tokens(path)))


def save_user(
    path: str | os.PathLike[str],
    email: str,
    password: str,
    name: str,
    contact: str,
    address: str,
) -> None:
    """Append an account record to the file."""
    try:
        with Path(path).open("a", encoding="utf-8") as fout:
            fout.write(f"{email} {password} {name} {contact} {address}\n")
    except OSError as exc:
        raise OSError(f"Could not open file to save user: {os.fspath(path)}") from exc


def load_user_details(
    path: str | os.PathLike[str], email: str, password: str
) -> UserDetails | None:
    """Return the profile stored for these credentials, or None."""
    tokens = iter(_read_tokens(path))
    for stored_email, stored_password, name, contact, address in zip(*[tokens] * 5):
        if stored_email == email and stored_password == password:
            return UserDetails(name, contact, address)
    return None