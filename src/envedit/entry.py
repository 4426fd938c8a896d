"""Entry model — one line of an env file."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Union

# Scalar carried by an entry. None means "no value at all".
Value = Union[str, int, bool, None]


def is_blank(value: Value) -> bool:
    """Return True for values that read back as absent.

    Blank is exactly: None, False, numeric zero, the empty string and the
    string "0". A value written to a file as "0" must still read back blank.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value in ("", "0")
    return False


def _format(value: Value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else ""
    return str(value)


@dataclass
class Entry:
    """A key/value line or a blank-line separator.

    ``key`` is the identity of the entry and cannot be reassigned once set;
    the value is changed through :meth:`set_value`.
    """

    key: str
    value: Value = None
    group: int = 0
    index: float = 0
    is_separator: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "key" and "key" in self.__dict__:
            raise AttributeError("Entry.key cannot be reassigned")
        super().__setattr__(name, value)

    # -- Construction ----------------------------------------------------

    @classmethod
    def parse_line(cls, line: str, group: int, index: float) -> Entry:
        """Parse one raw line. A line without ``=`` becomes a separator."""
        parts = line.split("=", 1)
        if len(parts) == 1:
            return cls.make_separator(group, index)
        return cls(parts[0], parts[1], group, index)

    @classmethod
    def make_separator(cls, group: int, index: float) -> Entry:
        return cls("", "", group, index, is_separator=True)

    # -- Accessors -------------------------------------------------------

    def serialize(self) -> str:
        if self.is_separator:
            return ""
        return f"{self.key}={_format(self.value)}"

    def get_value(self, default: Any = None) -> Any:
        """Stored value, or *default* when the value is blank."""
        if is_blank(self.value):
            return default
        return self.value

    def set_value(self, value: Value) -> None:
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
