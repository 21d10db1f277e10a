"""Decode tables for the load balancer API documents.

Every record declares a ``FIELDS`` table mapping its Python attribute
names to wire keys. ``Record.from_config`` walks that table: unknown keys
are ignored, missing keys become zero values and values are coerced to the
declared kind or rejected with a ``DecodeError``.
"""

from collections.abc import Mapping

from tornadolb.errors import DecodeError


class Vocabulary(str):
    """A string from a documented set that still accepts any other value.

    The API adds values over time, so unknown strings decode unchanged.
    """

    VALUES = ()

    @property
    def is_known(self):
        return self in self.VALUES

    def __repr__(self):
        return "{0}({1})".format(type(self).__name__, str.__repr__(self))


class Field(object):

    def __init__(self, name, key, kind=str, record=None, many=False):
        self.name = name
        self.key = key
        self.kind = kind
        self.record = record
        self.many = many

    def zero(self):
        if self.many:
            return []
        if self.record is not None:
            return self.record()
        return self.kind()

    def decode(self, owner, value):
        if value is None:
            return self.zero()

        if self.many:
            if not isinstance(value, list):
                raise self._error(owner, "a list", value)
            return [self.record.from_config(item) for item in value]

        if self.record is not None:
            if not isinstance(value, Mapping):
                raise self._error(owner, "an object", value)
            return self.record.from_config(value)

        if issubclass(self.kind, bool):
            return self._to_bool(owner, value)
        if issubclass(self.kind, int):
            return self._to_int(owner, value)
        return self._to_str(owner, value)

    def _to_bool(self, owner, value):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        raise self._error(owner, "a boolean", value)

    def _to_int(self, owner, value):
        if isinstance(value, bool):
            raise self._error(owner, "an integer", value)
        if isinstance(value, int):
            return self.kind(value)
        if isinstance(value, float) and value.is_integer():
            return self.kind(value)
        if isinstance(value, str):
            try:
                return self.kind(value.strip(), 10)
            except ValueError:
                pass
        raise self._error(owner, "an integer", value)

    def _to_str(self, owner, value):
        if isinstance(value, bool):
            raise self._error(owner, "a string", value)
        if isinstance(value, (str, int, float)):
            return self.kind(value)
        raise self._error(owner, "a string", value)

    def _error(self, owner, expected, value):
        return DecodeError("{0}.{1} ({2!r}) expected {3}, got {4!r}".format(
            owner.__name__, self.name, self.key, expected, value))


class Record(object):

    FIELDS = ()

    def __init__(self, **attributes):
        for field in self.FIELDS:
            value = attributes.pop(field.name, None)
            setattr(self, field.name, field.zero() if value is None else value)
        if attributes:
            raise TypeError("Unknown {0} attributes: {1}".format(
                type(self).__name__, ", ".join(sorted(attributes))))

    @classmethod
    def from_config(cls, config):
        if not isinstance(config, Mapping):
            raise DecodeError("{0} expected an object, got {1!r}".format(
                cls.__name__, config))
        attributes = {}
        for field in cls.FIELDS:
            attributes[field.name] = field.decode(cls, config.get(field.key))
        return cls(**attributes)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(
            getattr(self, f.name) == getattr(other, f.name)
            for f in self.FIELDS)

    __hash__ = None

    def __repr__(self):
        values = ", ".join(
            "{0}={1!r}".format(f.name, getattr(self, f.name))
            for f in self.FIELDS)
        return "{0}({1})".format(type(self).__name__, values)
