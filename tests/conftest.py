"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def area_tree():
    """Administrative-area tree carrying ancestry fields at every level."""
    return [
        {
            "id": "110000",
            "name": "北京市",
            "parentIds": [],
            "parentNames": [],
            "fullName": "北京市",
            "children": [
                {
                    "id": "110101",
                    "name": "东城区",
                    "parentIds": ["110000"],
                    "parentNames": ["北京市"],
                    "fullName": "北京市东城区",
                    "children": []
                }
            ]
        },
        {
            "id": "130000",
            "name": "河北省",
            "parentIds": [],
            "parentNames": [],
            "fullName": "河北省",
            "children": [
                {
                    "id": "130100",
                    "name": "石家庄市",
                    "parentIds": ["130000"],
                    "parentNames": ["河北省"],
                    "fullName": "河北省石家庄市",
                    "children": [
                        {
                            "id": "130102",
                            "name": "长安区",
                            "parentIds": ["130000", "130100"],
                            "parentNames": ["河北省", "石家庄市"],
                            "fullName": "河北省石家庄市长安区",
                            "children": []
                        }
                    ]
                }
            ]
        }
    ]


@pytest.fixture
def stripped_area_tree():
    """The area tree with parentIds, parentNames and fullName removed."""
    return [
        {
            "id": "110000",
            "name": "北京市",
            "children": [
                {"id": "110101", "name": "东城区", "children": []}
            ]
        },
        {
            "id": "130000",
            "name": "河北省",
            "children": [
                {
                    "id": "130100",
                    "name": "石家庄市",
                    "children": [
                        {"id": "130102", "name": "长安区", "children": []}
                    ]
                }
            ]
        }
    ]


@pytest.fixture
def area_file(temp_dir, area_tree):
    """Write the area tree to a JSON file and return its path."""
    path = temp_dir / "2023" / "fullData.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(area_tree, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def mixed_document():
    """Document mixing every JSON variant, with forbidden keys at several depths."""
    return {
        "fullName": "root",
        "version": 3,
        "ratio": 0.5,
        "active": True,
        "note": None,
        "tags": ["a", "b", {"parentNames": ["x"], "label": "c"}],
        "nested": {
            "parentIds": [1, 2],
            "matrix": [[{"fullName": "cell", "v": 1}], []],
            "empty": {}
        }
    }


@pytest.fixture
def division_codes():
    """Division-code text covering provinces, municipalities and province-run counties."""
    return "\n".join([
        "2023年中华人民共和国县以上行政区划代码",
        "",
        "北京市 110000",
        "市辖区 110100",
        "东城区 110101",
        "西城区 110102",
        "河北省 130000",
        "石家庄市 130100",
        "130102 长安区",
        "上海市 310000",
        "市辖区 310100",
        "黄浦区 310101",
        "长三角生态绿色一体化发展示范区 310052",
        "湖北省 420000",
        "武汉市 420100",
        "江岸区 420102",
        "仙桃市 429004",
        "重庆市 500000",
        "市辖区 500100",
        "万州区 500101",
        "县 500200",
        "城口县 500229",
    ]) + "\n"


@pytest.fixture
def codes_file(temp_dir, division_codes):
    """Write the division codes to a text file and return its path."""
    path = temp_dir / "codes.txt"
    path.write_text(division_codes, encoding="utf-8")
    return path
