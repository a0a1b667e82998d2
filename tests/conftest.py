"""Shared test fixtures."""

import pytest

from pyjsonattr.record import JSONAttributeMixin, JSONAttributes


class PlainRecord:
    """Record whose JSON attributes are ordinary Python attributes."""

    def __init__(self, **values):
        self.settings = None
        self.plain = None
        for name, value in values.items():
            setattr(self, name, value)


class ProtocolRecord:
    """Record exposing attributes through get_attribute/set_attribute."""

    def __init__(self, **values):
        self._attributes = dict(values)
        self.writes = []

    def get_attribute(self, name):
        return self._attributes.get(name)

    def set_attribute(self, name, value):
        self.writes.append(name)
        self._attributes[name] = value


class Account(JSONAttributeMixin):
    json_attributes = ("settings", "options")

    def __init__(self, settings=None, options=None, plain=None):
        self.settings = settings
        self.options = options
        self.plain = plain


@pytest.fixture
def nested():
    return {
        "level1": {
            "level2": "value",
            "empty": None,
        },
    }


@pytest.fixture
def access():
    return JSONAttributes(["settings"])


@pytest.fixture
def plain_record():
    return PlainRecord()


@pytest.fixture
def protocol_record():
    return ProtocolRecord()


@pytest.fixture
def account():
    return Account()
