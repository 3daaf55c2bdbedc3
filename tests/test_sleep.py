from datetime import datetime, timedelta

import pytest

from groupfun.sleep import (
    SleepStore,
    good_morning_text,
    good_night_text,
    is_evening,
    is_morning,
    split_duration,
)


@pytest.fixture
def store(tmp_path):
    with SleepStore(tmp_path / "manage.db") as s:
        yield s


def test_first_sleep_has_no_duration(store):
    position, awake = store.sleep(1, 100, datetime(2023, 1, 5, 22, 0, 0))
    assert position == 1
    assert awake == timedelta(0)


def test_order_within_group(store):
    store.sleep(1, 100, datetime(2023, 1, 5, 22, 0, 0))
    position, _ = store.sleep(1, 200, datetime(2023, 1, 5, 22, 30, 0))
    assert position == 2


def test_groups_are_separate(store):
    store.sleep(1, 100, datetime(2023, 1, 5, 22, 0, 0))
    position, _ = store.sleep(2, 200, datetime(2023, 1, 5, 22, 30, 0))
    assert position == 1


def test_repeat_sleep_reports_time_awake(store):
    store.sleep(1, 100, datetime(2023, 1, 5, 22, 0, 0))
    store.sleep(1, 200, datetime(2023, 1, 5, 22, 30, 0))
    position, awake = store.sleep(1, 100, datetime(2023, 1, 6, 22, 0, 0))
    assert awake == timedelta(days=1)
    assert position == 1


def test_after_midnight_counts_from_previous_evening(store):
    store.sleep(1, 100, datetime(2023, 1, 5, 22, 0, 0))
    position, _ = store.sleep(1, 200, datetime(2023, 1, 6, 2, 0, 0))
    assert position == 2


def test_get_up_reports_sleep_length(store):
    store.sleep(1, 100, datetime(2023, 1, 5, 23, 0, 0))
    position, slept = store.get_up(1, 100, datetime(2023, 1, 6, 7, 0, 0))
    assert slept == timedelta(hours=8)
    assert position == 1
    assert split_duration(slept) == (8, 0, 0)


def test_split_duration():
    assert split_duration(timedelta(hours=8, minutes=5, seconds=3)) == (8, 5, 3)
    assert split_duration(timedelta(0)) == (0, 0, 0)


def test_split_duration_negative_truncates_toward_zero():
    hour, minute, second = split_duration(-timedelta(hours=1, minutes=2, seconds=3))
    assert (hour, minute, second) == (-1, -2, -3)


def test_morning_window():
    assert is_morning(datetime(2023, 1, 1, 6))
    assert is_morning(datetime(2023, 1, 1, 12, 59))
    assert not is_morning(datetime(2023, 1, 1, 5, 59))
    assert not is_morning(datetime(2023, 1, 1, 13))


def test_evening_window():
    assert is_evening(datetime(2023, 1, 1, 21))
    assert is_evening(datetime(2023, 1, 1, 3, 30))
    assert not is_evening(datetime(2023, 1, 1, 4))
    assert not is_evening(datetime(2023, 1, 1, 20, 59))


def test_morning_text_without_duration():
    assert good_morning_text(3, timedelta(0)) == "早安成功！你是今天第3个起床的"


def test_morning_text_over_a_day_hides_duration():
    assert good_morning_text(2, timedelta(days=2)) == "早安成功！你是今天第2个起床的"


def test_night_text_with_duration():
    text = good_night_text(4, timedelta(hours=1, minutes=2, seconds=3))
    assert text == "晚安成功！你的清醒时长为1时2分3秒,你是今天第4个睡觉的"