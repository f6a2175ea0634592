import json

import pytest

from constants import PLATE_REGIONS
from services.region_table import (
    REGION_TABLE,
    ProvinceEntry,
    build_region_table,
    load_region_table,
)


def test_builtin_table_contents():
    assert len(REGION_TABLE) == 33
    assert REGION_TABLE["京"].name == "北京市"
    assert REGION_TABLE["粤"].areas["B"] == "深圳"
    assert REGION_TABLE["使"].name == "使馆车牌"
    assert REGION_TABLE["领"].areas["A"] == "领事馆车辆"


def test_builtin_table_invariants():
    for code, entry in REGION_TABLE.items():
        assert isinstance(entry, ProvinceEntry)
        assert len(code) == 1
        for letter in entry.areas:
            assert len(letter) == 1
            assert "A" <= letter <= "Z"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        REGION_TABLE["测"] = REGION_TABLE["京"]
    with pytest.raises(TypeError):
        REGION_TABLE["京"].areas["Z"] = "测试"
    with pytest.raises(AttributeError):
        REGION_TABLE["京"].name = "测试"


def test_area_for():
    assert REGION_TABLE["晋"].area_for("A") == "太原"
    assert REGION_TABLE["晋"].area_for("G") is None


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"京津": {"province": "北京市", "areas": {"A": "警察部门"}}},
        {"京": {"province": "北京市", "areas": {"a": "警察部门"}}},
        {"京": {"province": "北京市", "areas": {"AB": "警察部门"}}},
        {"京": {"province": "北京市", "areas": {"1": "警察部门"}}},
        {"京": {"province": "", "areas": {"A": "警察部门"}}},
        {"京": {"areas": {"A": "警察部门"}}},
        {"京": {"province": "北京市", "areas": ["A"]}},
        {"京": "北京市"},
    ],
)
def test_build_rejects_malformed_tables(raw):
    with pytest.raises(ValueError):
        build_region_table(raw)


def test_build_does_not_share_input_dicts():
    raw = {"测": {"province": "测试省", "areas": {"A": "测试市"}}}
    table = build_region_table(raw)
    raw["测"]["areas"]["B"] = "另一个市"
    assert "B" not in table["测"].areas


def test_load_default_matches_constants():
    table = load_region_table()
    assert set(table) == set(PLATE_REGIONS)
    assert table["川"].areas == PLATE_REGIONS["川"]["areas"]


def test_load_from_json_file(tmp_path):
    path = tmp_path / "regions.json"
    path.write_text(
        json.dumps(
            {"测": {"province": "测试省", "areas": {"A": "测试市", "B": "样例市"}}},
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )

    table = load_region_table(path)

    assert list(table) == ["测"]
    assert table["测"].name == "测试省"
    assert table["测"].area_for("B") == "样例市"


def test_load_invalid_json_file(tmp_path):
    path = tmp_path / "regions.json"
    path.write_text(json.dumps({"测": {"province": "测试省", "areas": {"x": "?"}}}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_region_table(str(path))
