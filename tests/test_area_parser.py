"""Tests for building the area tree from division codes."""

import json
import logging
from field_stripper.area_parser import (
    AreaTreeBuilder,
    enrich,
    is_municipality,
    parse_division_codes
)
from field_stripper.stripper import strip_fields


def _ids(nodes):
    return [node["id"] for node in nodes]


class TestParseDivisionCodes:
    """Tests for turning division-code lines into a tree."""

    def setup_method(self):
        """Set up test fixtures."""
        self.builder = AreaTreeBuilder()

    def test_province_level(self, division_codes):
        """Test every XX0000 code starts a province-level node."""
        tree = self.builder.parse(division_codes)

        assert _ids(tree) == ["110000", "130000", "310000", "420000", "500000"]
        assert tree[1] == {
            "id": "130000",
            "name": "河北省",
            "children": [
                {
                    "id": "130100",
                    "name": "石家庄市",
                    "children": [{"id": "130102", "name": "长安区", "children": []}]
                }
            ]
        }

    def test_code_before_name(self, division_codes):
        """Test a line may give the code first."""
        tree = self.builder.parse(division_codes)

        assert tree[1]["children"][0]["children"][0]["name"] == "长安区"

    def test_municipality_districts_under_city(self, division_codes):
        """Test municipalities skip the 市辖区 level and hold their districts directly."""
        tree = self.builder.parse(division_codes)

        beijing = tree[0]
        assert _ids(beijing["children"]) == ["110101", "110102"]
        assert all(child["children"] == [] for child in beijing["children"])

    def test_shanghai_demonstration_zone(self, division_codes):
        """Test 310052 is filed under Shanghai."""
        tree = self.builder.parse(division_codes)

        assert _ids(tree[2]["children"]) == ["310101", "310052"]

    def test_municipality_county_outside_xx01(self, division_codes):
        """Test a municipality county outside XX01 still belongs to the municipality."""
        tree = self.builder.parse(division_codes)

        chongqing = tree[4]
        assert _ids(chongqing["children"]) == ["500101", "500229"]

    def test_county_run_by_province(self, division_codes):
        """Test a county not matching the current city is attached to the province."""
        tree = self.builder.parse(division_codes)

        hubei = tree[3]
        assert _ids(hubei["children"]) == ["420100", "429004"]
        assert _ids(hubei["children"][0]["children"]) == ["420102"]

    def test_header_and_blank_lines_ignored(self, division_codes):
        """Test lines without a name and code are not counted as skipped."""
        self.builder.parse(division_codes)

        assert self.builder.skipped_lines == []

    def test_mismatched_lines_skipped(self, caplog):
        """Test a city outside its province and a county before any city are reported."""
        text = "河北省 130000\n太原市 140100\n海南省 460000\n五指山市 469001\n海口市 460100\n"

        with caplog.at_level(logging.WARNING):
            tree = self.builder.parse(text)

        assert tree == [
            {"id": "130000", "name": "河北省", "children": []},
            {"id": "460000", "name": "海南省", "children": [
                {"id": "460100", "name": "海口市", "children": []}
            ]},
        ]
        assert self.builder.skipped_lines == ["太原市 140100", "五指山市 469001"]
        assert sum("Skipping division-code line" in record.message for record in caplog.records) == 2

    def test_lines_before_any_province_ignored(self):
        """Test city and county lines before the first province are dropped."""
        assert parse_division_codes("石家庄市 130100\n长安区 130102\n") == []

    def test_is_municipality(self):
        """Test the four municipality prefixes."""
        assert [is_municipality(code) for code in ["110000", "120000", "310000", "500000"]] == [True] * 4
        assert not is_municipality("130000")
        assert not is_municipality("1")


class TestEnrich:
    """Tests for adding ancestry fields."""

    def test_province(self, division_codes):
        """Test province nodes hang off the root id 0."""
        beijing = enrich(parse_division_codes(division_codes))[0]

        assert beijing["parentId"] == "0"
        assert beijing["parentIds"] == "0,"
        assert beijing["parentNames"] == ""
        assert beijing["fullName"] == "北京市"

    def test_municipality_district(self, division_codes):
        """Test a district directly under a municipality."""
        district = enrich(parse_division_codes(division_codes))[0]["children"][0]

        assert district == {
            "id": "110101",
            "name": "东城区",
            "parentId": "110000",
            "parentIds": "0,110000,",
            "parentNames": "北京市",
            "fullName": "北京市 东城区",
            "children": None
        }

    def test_county(self, division_codes):
        """Test a county carries both ancestors."""
        county = enrich(parse_division_codes(division_codes))[1]["children"][0]["children"][0]

        assert county["parentId"] == "130100"
        assert county["parentIds"] == "0,130000,130100,"
        assert county["parentNames"] == "河北省 石家庄市"
        assert county["fullName"] == "河北省 石家庄市 长安区"

    def test_empty_children_become_null(self, division_codes):
        """Test leaves get children None while inner nodes keep lists."""
        hubei = enrich(parse_division_codes(division_codes))[3]

        assert isinstance(hubei["children"], list)
        assert hubei["children"][1]["children"] is None

    def test_index_counts_every_area(self, division_codes):
        """Test the id index covers every node of the tree."""
        _, index = AreaTreeBuilder().enrich(parse_division_codes(division_codes))

        assert len(index) == 16
        assert index["429004"]["fullName"] == "湖北省 仙桃市"

    def test_input_not_modified(self, division_codes):
        """Test enrich builds a new tree."""
        tree = parse_division_codes(division_codes)

        enrich(tree)

        assert set(tree[0]) == {"id", "name", "children"}
        assert tree[0]["children"][0]["children"] == []

    def test_strip_removes_added_ancestry(self, division_codes):
        """Test stripping the enriched tree leaves id, name, parentId and children."""
        stripped = strip_fields(enrich(parse_division_codes(division_codes)))

        assert stripped[1] == {
            "id": "130000",
            "name": "河北省",
            "parentId": "0",
            "children": [
                {
                    "id": "130100",
                    "name": "石家庄市",
                    "parentId": "130000",
                    "children": [
                        {"id": "130102", "name": "长安区", "parentId": "130100", "children": None}
                    ]
                }
            ]
        }


class TestBuildFile:
    """Tests for building the area file."""

    def setup_method(self):
        """Set up test fixtures."""
        self.builder = AreaTreeBuilder()

    def test_build_file(self, codes_file, temp_dir):
        """Test the enriched tree is written as indented JSON."""
        output = temp_dir / "2023" / "fullData.json"

        result = self.builder.build_file(str(codes_file), str(output))

        assert result.success, result.errors
        assert result.province_count == 5
        assert result.area_count == 16
        assert result.skipped_lines == 0
        text = output.read_text(encoding="utf-8")
        assert text.startswith('[\n  {\n    "id": "110000"')
        assert "北京市 东城区" in text
        assert json.loads(text) == result.tree
        assert result.output_size == len(text.encode("utf-8"))

    def test_build_file_missing_input(self, temp_dir):
        """Test a missing code file is reported."""
        result = self.builder.build_file(str(temp_dir / "missing.txt"), str(temp_dir / "out.json"))

        assert not result.success
        assert "Input file not found" in result.errors[0]

    def test_build_file_output_is_directory(self, codes_file, temp_dir):
        """Test writing onto a directory is reported."""
        result = self.builder.build_file(str(codes_file), str(temp_dir))

        assert not result.success
        assert "is a directory" in result.errors[0]
