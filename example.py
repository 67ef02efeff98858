#!/usr/bin/env python3
"""
Example usage of the Field Stripper.

This script builds a small administrative-area tree, writes it to a
temporary 2023/fullData.json and strips the ancestry fields into
2023/data.json.
"""

import json
import logging
import tempfile
from pathlib import Path
from src.field_stripper import FieldStrippingTransformer, StripConfig, strip_fields


def build_area_tree():
    """Province -> city -> county tree with denormalised ancestry fields."""
    county = {
        "id": "130102",
        "name": "长安区",
        "parentIds": ["130000", "130100"],
        "parentNames": ["河北省", "石家庄市"],
        "fullName": "河北省石家庄市长安区",
        "children": []
    }
    city = {
        "id": "130100",
        "name": "石家庄市",
        "parentIds": ["130000"],
        "parentNames": ["河北省"],
        "fullName": "河北省石家庄市",
        "children": [county]
    }
    return [{
        "id": "130000",
        "name": "河北省",
        "parentIds": [],
        "parentNames": [],
        "fullName": "河北省",
        "children": [city]
    }]


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("Field Stripper Example")
    print("=" * 50)

    areas = build_area_tree()

    # In-memory use
    print("In-memory strip of one county:")
    print(json.dumps(strip_fields(areas[0]["children"][0]["children"][0]), ensure_ascii=False, indent=2))

    with tempfile.TemporaryDirectory() as temp_dir:
        source = Path(temp_dir) / "2023" / "fullData.json"
        source.parent.mkdir()
        source.write_text(json.dumps(areas, ensure_ascii=False), encoding="utf-8")

        config = StripConfig(
            input_path=str(source),
            output_path=str(source.parent / "data.json")
        )
        result = FieldStrippingTransformer(config).strip_file()

        if result.success:
            print(f"\n✅ Fields removed, result saved to {result.output_path}")
            print(f"   Removed per field: {result.statistics.removed_by_field}")
            print(f"   Size: {result.input_size} -> {result.output_size} bytes")
            print(f"\nOutput:\n{result.json_string}")
        else:
            print("❌ Strip failed")
            for error in result.errors or []:
                print(f"   Error: {error}")


if __name__ == "__main__":
    main()
