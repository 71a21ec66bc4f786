import pytest

from bparse.binary.combinators import (
    alternate,
    appended,
    bind,
    fail,
    many,
    map_,
    not_followed_by,
    succeed,
    times,
)
from bparse.binary.cursor import Cursor
from bparse.binary.outcome import Success
from bparse.binary.primitives import any_byte, byte_equal_to, word


def test_map_transforms_value_and_keeps_remainder():
    cur = Cursor.over(b"\x05\x06")
    res = map_(any_byte, lambda b: b * 10)(cur)
    assert res == Success(50, cur.advance())


def test_map_failure_is_anchored_at_input():
    cur = Cursor.over(b"ab")
    res = map_(times(any_byte, 3), len)(cur)
    assert not res.success
    assert res.remainder == cur
    assert res.attempted_at.tell() == 2


def test_bind_projects_both_values():
    pair = bind(any_byte, lambda _a: any_byte, lambda a, b: (a, b))
    res = pair(Cursor.over(b"\x01\x02\x03"))
    assert res.value == (1, 2)
    assert res.remainder.tell() == 2


def test_bind_default_keeps_second_value():
    res = bind(byte_equal_to(1), lambda _: any_byte)(Cursor.over(b"\x01\x09"))
    assert res.value == 9


def test_bind_builds_next_parser_from_value():
    counted = bind(any_byte, lambda n: times(any_byte, n), lambda _n, xs: xs)
    res = counted(Cursor.over(b"\x02ab"))
    assert res.value == (0x61, 0x62)
    assert res.remainder.at_end()


def test_bind_second_step_failure_reports_original_input():
    cur = Cursor.over(b"\x01\x02")
    res = bind(byte_equal_to(1), lambda _: byte_equal_to(9))(cur)
    assert not res.success
    assert res.remainder == cur
    assert res.attempted_at.tell() == 1


def test_alternate_returns_first_success_unchanged():
    cur = Cursor.over(b"\x01")
    first = byte_equal_to(1)
    assert alternate(first, any_byte)(cur) == first(cur)


def test_alternate_restarts_second_branch_at_original_input():
    cur = Cursor.over(b"\x01\x02")
    partial = bind(byte_equal_to(1), lambda _: byte_equal_to(9))
    res = alternate(partial, any_byte)(cur)
    assert res == any_byte(cur)
    assert res.value == 1


def test_alternate_returns_last_branch_outcome_as_is():
    cur = Cursor.over(b"\x03")
    res = alternate(byte_equal_to(1), byte_equal_to(2))(cur)
    assert res == byte_equal_to(2)(cur)

    res = alternate(byte_equal_to(1), byte_equal_to(2), byte_equal_to(3))(cur)
    assert res.value == 3


def test_not_followed_by_never_consumes():
    cur = Cursor.over(b"\x01")
    hit = not_followed_by(byte_equal_to(1))(cur)
    assert not hit.success and hit.remainder == cur

    miss = not_followed_by(byte_equal_to(2))(cur)
    assert miss == Success(None, cur)


def test_many_collects_until_failure():
    cur = Cursor.over(b"\x01\x01\x01\x02")
    res = many(byte_equal_to(1))(cur)
    assert res.value == (1, 1, 1)
    assert res.remainder.tell() == 3


def test_many_never_fails():
    cur = Cursor.over(b"")
    assert many(any_byte)(cur) == Success((), cur)
    assert many(fail())(Cursor.over(b"x")).success


def test_many_stops_on_zero_progress():
    cur = Cursor.over(b"\x01\x01\x02")
    assert many(succeed(7))(cur) == Success((), cur)

    res = many(alternate(byte_equal_to(1), succeed(0)))(cur)
    assert res.value == (1, 1)
    assert res.remainder.tell() == 2


def test_times_exact_count():
    cur = Cursor.over(b"abcd")
    res = times(any_byte, 3)(cur)
    assert res.value == (0x61, 0x62, 0x63)
    assert res.remainder.tell() == 3
    assert times(any_byte, 0)(cur) == Success((), cur)


def test_times_failure_reports_cursor_before_failing_attempt():
    cur = Cursor.over(b"\x00\x01\x02")
    res = times(word, 2)(cur)
    assert not res.success
    assert res.remainder.tell() == 2
    assert res.attempted_at.tell() == 3


def test_times_rejects_negative_count():
    with pytest.raises(ValueError):
        times(any_byte, -1)


def test_parsers_are_referentially_transparent():
    p = bind(many(byte_equal_to(1)), lambda _: any_byte, lambda xs, b: appended(xs, b))
    cur = Cursor.over(b"\x01\x01\x05")
    assert p(cur) == p(cur)
    assert p(cur).value == (1, 1, 5)


def test_appended_builds_new_tuple():
    items = (1, 2)
    assert appended(items, 3) == (1, 2, 3)
    assert items == (1, 2)
    assert appended([], "x") == ("x",)
