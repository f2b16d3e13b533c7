import enum

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class CaseInsensitiveEnum(TypeDecorator):
    """Store a ``str`` enum as its lowercase value.

    Rows written by other clients sometimes carry ``"Confirmed"`` or
    ``" pending"``; reads normalise them back into the enum member.
    """

    impl = String
    cache_ok = True

    def __init__(self, enum_cls: type[enum.Enum], length: int = 32, **kwargs):
        self._enum_cls = enum_cls
        super().__init__(length, **kwargs)

    def _coerce(self, value):
        if isinstance(value, self._enum_cls):
            return value
        return self._enum_cls(str(value).strip().lower())

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return self._coerce(value).value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return self._coerce(value)
