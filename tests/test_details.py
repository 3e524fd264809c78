import pytest

import errnote
from errnote import InconsistentChainError, details, new, note, wrap


def test_details_none():
    assert details(None) == "[]"


def test_details(check_err, custom_error):
    other = RuntimeError("other")
    check_err(other, None, "other", "[\n\t{other}\n]", other)

    err0 = custom_error(new("foo"))  # err: d0
    check_err(err0, None, "foo", "[\n\t{$d0$: foo}\n]", err0)

    err1 = custom_error(note(err0, None, "bar"))  # err: d1
    check_err(err1, err0, "bar: foo", "[\n\t{$d1$: bar}\n\t{$d0$: foo}\n]", err0)

    err2 = wrap(err1)  # err: d2
    check_err(err2, err1, "bar: foo", "[\n\t{$d2$: }\n\t{$d1$: bar}\n\t{$d0$: foo}\n]", err0)


def test_details_uses_own_message_not_display_text(expand_locations):
    err = note(new("inner"), None, "outer")  # err: own_msg
    first = details(err).split("\n")[1]
    assert first == expand_locations("\t{$own_msg$: outer}")


def test_details_is_repeatable():
    err = note(new("inner"), None, "outer")
    assert details(err) == details(err)


class _Wrapping(Exception):
    def __init__(self, msg="x", under=None, loc=("", 0)):
        super().__init__(msg)
        self.msg = msg
        self.under = under
        self.loc = loc

    def message(self):
        return self.msg

    def underlying(self):
        return self.under

    def location(self):
        return self.loc


def test_details_foreign_wrapper_without_location():
    err = _Wrapping("outer", ValueError("inner"))
    assert details(err) == "[\n\t{outer}\n\t{inner}\n]"


def test_details_foreign_location():
    err = _Wrapping("outer", ValueError("inner"), loc=("mod.py", 12))
    assert details(err) == "[\n\t{mod.py:12: outer}\n\t{inner}\n]"


def test_details_underlying_cycle_is_inconsistent():
    err = _Wrapping()
    err.under = err
    with pytest.raises(InconsistentChainError):
        details(err)


def test_details_non_string_message_is_inconsistent():
    err = _Wrapping(42, ValueError("inner"))
    with pytest.raises(InconsistentChainError, match="message"):
        details(err)


def test_details_non_error_underlying_is_inconsistent():
    err = _Wrapping("outer", "inner")
    with pytest.raises(InconsistentChainError, match="underlying"):
        details(err)


def test_details_malformed_location_is_inconsistent():
    err = _Wrapping("outer", ValueError("inner"), loc="nowhere")
    with pytest.raises(InconsistentChainError, match="location"):
        details(err)


def test_details_respects_max_chain_depth(configure):
    configure(max_chain_depth=2)
    with pytest.raises(errnote.ChainDepthError) as info:
        details(wrap(wrap(new("leaf"))))
    assert not isinstance(info.value, InconsistentChainError)
