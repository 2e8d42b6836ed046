import re
import time

import pytest

from genesis import datetime as gdt
from genesis.datetime import DateTime


@pytest.fixture(autouse=True)
def reset_offset():
    gdt.set_time_zone_offset(0)
    yield
    gdt.set_time_zone_offset(0)


def test_from_sec_holds_milliseconds():
    assert DateTime.from_sec(5).msec == 5000


def test_add_and_sub_with_datetime_and_int():
    a = DateTime(1500)
    b = DateTime(500)
    assert (a + b).msec == 2000
    assert (a - b).msec == 1000
    assert (a + 250).msec == 1750
    assert (a - 250).msec == 1250


def test_augmented_assignment_leaves_original():
    a = DateTime(100)
    original = a
    a += 50
    assert a.msec == 150
    assert original.msec == 100


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        DateTime(1) + 1.5


def test_time_span_is_symmetric():
    a, b = DateTime(1000), DateTime(4000)
    assert a.time_span(b) == b.time_span(a) == 3000


def test_ordering_and_equality():
    assert DateTime(1) < DateTime(2)
    assert DateTime(7) == DateTime(7)
    assert len({DateTime(7), DateTime(7)}) == 1


def test_current_is_close_to_clock():
    before = gdt.current_msec_since_epoch()
    now = DateTime.current()
    after = gdt.current_msec_since_epoch()
    assert before <= now.msec <= after


def test_default_constructor_is_now():
    before = gdt.current_msec_since_epoch()
    now = DateTime()
    assert now.msec >= before


def test_sec_since_epoch_matches_msec():
    msec = gdt.current_msec_since_epoch()
    sec = gdt.current_sec_since_epoch()
    assert abs(sec - msec // 1000) <= 1


def test_str_layout_and_milliseconds():
    text = str(DateTime(1_700_000_000_042))
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}", text)
    assert text.endswith(".042")


def test_format_uses_local_time():
    stamp = 1_700_000_000
    expected = time.strftime("%Y-%m-%d %H", time.localtime(stamp))
    assert DateTime.from_sec(stamp).format("%Y-%m-%d %H") == expected


def test_format_too_long_is_empty():
    assert DateTime(0).format("%Y" * 20) == ""


def test_time_zone_offset_shifts_formatting():
    stamp = DateTime.from_sec(1_700_000_000)
    plain = (stamp - 3_600_000).format("%Y-%m-%d %H:%M")
    assert gdt.set_time_zone_offset(3_600_000) == 3_600_000
    assert stamp.format("%Y-%m-%d %H:%M") == plain


def test_today_is_local_midnight():
    today = DateTime.today()
    assert today.msec % 1000 == 0
    local = time.localtime(today.msec // 1000)
    assert (local.tm_hour, local.tm_min, local.tm_sec) == (0, 0, 0)
    assert today <= DateTime.current()