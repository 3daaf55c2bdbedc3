from datetime import date

import pytest

from groupfun.nativewife import daily_pick, extract_name, group_folder, parse_permission


def test_group_folder_base36():
    assert group_folder(35) == "z"
    assert group_folder(36) == "10"
    assert group_folder(0) == "0"
    assert group_folder(-35) == "-z"


def test_group_folder_roundtrip():
    gid = 123456789
    assert int(group_folder(gid), 36) == gid


def test_extract_name_strips_spaces():
    assert extract_name("添加wife 小 明", "添加wife") == "小明"


def test_extract_name_removes_slashes():
    assert extract_name("删除wife../a\\b", "删除wife") == "..ab"


def test_extract_name_uses_last_command():
    assert extract_name("添加wife添加wifeX", "添加wife") == "X"


def test_extract_name_missing():
    assert extract_name("添加wife", "添加wife") == ""
    assert extract_name("hello", "添加wife") == ""


def test_daily_pick_is_stable():
    names = ["a.png", "b.png", "c.png", "d.png"]
    first = daily_pick(names, "alice", date(2023, 1, 5))
    assert first in names
    assert daily_pick(list(reversed(names)), "alice", date(2023, 1, 5)) == first


def test_daily_pick_single():
    assert daily_pick(["only.jpg"], "bob", date(2023, 1, 5)) == "only.jpg"


def test_daily_pick_empty():
    with pytest.raises(LookupError):
        daily_pick([], "bob", date(2023, 1, 5))


@pytest.mark.parametrize("verb", ["设置", "授予", "让"])
def test_parse_permission_grant(verb):
    assert parse_permission(verb + "所有人均可添加wife") is True


@pytest.mark.parametrize("verb", ["取消", "撤销", "不 让"])
def test_parse_permission_revoke(verb):
    assert parse_permission(verb + "所有人均可添加wife") is False


def test_parse_permission_unknown():
    assert parse_permission("随便所有人均可添加wife") is None
    assert parse_permission("nothing") is None