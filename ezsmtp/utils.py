from email.utils import parseaddr
from os.path import isfile
from numbers import Real
from email_validator import validate_email, EmailNotValidError  # type: ignore
from .errors import InvalidAddressError


TEMPLATE_EXTENSIONS = (".html", ".htm", ".txt", ".j2", ".jinja", ".jinja2")


def validate_path(path: str) -> None:
    """Checks that `path` names an existing regular file.

    Raises:
        ValueError: If `path` is not a non-empty string.
        FileNotFoundError: If the file does not exist.
    """
    if not isinstance(path, str) or not path.strip():
        raise ValueError("Path must be a non-empty string.")
    if not isfile(path):
        raise FileNotFoundError(f"File not found: {path}")


def validate_template(file: str) -> None:
    """Checks that `file` is an existing text or HTML template."""
    validate_path(file)
    if not file.lower().endswith(TEMPLATE_EXTENSIONS):
        raise ValueError(f"Unsupported template file: {file}")


def validate_timeout(timeout) -> None:
    if timeout is None:
        return
    if isinstance(timeout, bool) or not isinstance(timeout, Real) or timeout <= 0:
        raise ValueError("Timeout must be a positive number of seconds or None.")


def read_file(path: str) -> bytes:
    """Reads a whole file as bytes after validating the path."""
    validate_path(path)
    with open(path, "rb") as f:
        return f.read()


def is_valid_address(address: str) -> bool:
    """Returns True when `address` is a syntactically valid email address.

    Only the syntax is checked; no DNS lookup is performed.
    """
    if not isinstance(address, str) or not address.strip():
        return False
    try:
        validate_email(address, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def parse_address(value: str) -> tuple[str, str]:
    """Splits `"Display Name <user@domain>"` into ``(name, address)``.

    A bare address yields an empty name.

    Raises:
        InvalidAddressError: If no address can be extracted.
    """
    name, address = parseaddr(value or "")
    if not address or "@" not in address:
        raise InvalidAddressError(f"Cannot parse address: {value!r}")
    return name, address
