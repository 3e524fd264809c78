import re
from typing import Dict

import pytest

import errnote
from errnote import config
from errnote.config import ConfigurationService, ErrnoteSettings
from errnote.interfaces import IWrapper

# Constructor calls in test modules are marked with ``# err: TAG``; expected
# details templates refer to them as ``$TAG$``.
_TAG_MARKER = re.compile(r"#\s*err:\s*(\S+)")
_TAG_REF = re.compile(r"\$([^$]+)\$")


def _tag_lines(path: str) -> Dict[str, int]:
    lines: Dict[str, int] = {}
    with open(path, encoding="utf-8") as fh:
        for lineno, text in enumerate(fh, start=1):
            match = _TAG_MARKER.search(text)
            if match:
                lines[match.group(1)] = lineno
    return lines


@pytest.fixture()
def expand_locations(request):
    """Return a function replacing ``$TAG$`` with ``file:line`` of the tagged line."""
    path = request.module.__file__
    tags = _tag_lines(path)

    def expand(template: str) -> str:
        return _TAG_REF.sub(lambda m: f"{path}:{tags[m.group(1)]}", template)

    return expand


@pytest.fixture()
def check_err(expand_locations):
    """Assert display text, underlying error, cause and details of an error."""

    def check(err, underlying, msg, details_template, cause):
        assert err is not None, "error is unexpectedly None"
        assert str(err) == msg
        if isinstance(err, IWrapper):
            assert err.underlying() is underlying
        else:
            assert underlying is None
        assert errnote.cause(err) is cause
        assert errnote.details(err) == expand_locations(details_template)

    return check


@pytest.fixture()
def configure(monkeypatch):
    """Swap in a configuration service built from keyword overrides."""

    def apply(**overrides) -> ConfigurationService:
        service = ConfigurationService(settings=ErrnoteSettings(**overrides))
        monkeypatch.setattr(config, "config_service", service)
        return service

    return apply


class CustomError(Exception):
    """Foreign error type that forwards every capability to the error it holds."""

    def __init__(self, err: BaseException) -> None:
        super().__init__(err)
        self.err = err

    def __str__(self) -> str:
        return str(self.err)

    def location(self):
        if isinstance(self.err, errnote.ILocationProvider):
            return self.err.location()
        return "", 0

    def underlying(self):
        if isinstance(self.err, IWrapper):
            return self.err.underlying()
        return None

    def message(self) -> str:
        if isinstance(self.err, IWrapper):
            return self.err.message()
        return ""

    def cause(self):
        if isinstance(self.err, errnote.ICauseProvider):
            return self.err.cause()
        return None


@pytest.fixture()
def custom_error():
    return CustomError
