"""Build the administrative-area tree from division-code text."""

import logging
from typing import Any, Dict, List, Optional, Tuple
from .types import BuildResult, ProcessingError
from .models import DEFAULT_INPUT_PATH
from .parser import JSONParser
from .error_handler import ErrorHandler
from .io import FileReader, FileWriter


# Beijing, Tianjin, Shanghai and Chongqing have no prefecture level
MUNICIPALITY_PREFIXES = frozenset({"11", "12", "31", "50"})

DEFAULT_CODES_PATH = "origin/2023年中华人民共和国县以上行政区划代码.txt"

ROOT_ID = "0"


def is_municipality(code: str) -> bool:
    """Return True if a province-level code belongs to a municipality."""
    return len(code) >= 2 and code[:2] in MUNICIPALITY_PREFIXES


class AreaTreeBuilder:
    """
    Turns the published list of county-level-and-above division codes into
    a province -> city -> county tree.

    Each input line holds a name and a six-digit code separated by
    whitespace, in either order. Lines are expected in code order, so a
    province is followed by its cities and each city by its counties.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the builder.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.skipped_lines: List[str] = []

    def parse(self, text: str) -> List[Dict[str, Any]]:
        """
        Parse division-code text into a list of province nodes.

        Args:
            text: Division-code text, one "name code" pair per line

        Returns:
            Province nodes with nested "children" lists
        """
        self.skipped_lines = []
        provinces: List[Dict[str, Any]] = []
        province = None
        city = None

        for line in text.splitlines():
            if not line.strip():
                continue

            entry = self._split_line(line)
            if entry is None:
                self.logger.debug(f"Ignoring line without a name and code: {line.strip()}")
                continue
            name, code = entry
            node = {"id": code, "name": name, "children": []}

            if code.endswith("0000"):
                provinces.append(node)
                province = node
                city = None
            elif code.endswith("00"):
                # Municipalities list their "市辖区" rows at this level; they carry no areas
                if province is None or is_municipality(province["id"]):
                    continue
                if code[:2] == province["id"][:2]:
                    province["children"].append(node)
                    city = node
                else:
                    self._skip(line, f"city outside province {province['id']}")
            elif province is None:
                continue
            elif is_municipality(province["id"]):
                # Districts (XX01xx), the 310052 demonstration zone and counties run by the city itself
                province["children"].append(node)
            elif city is not None:
                if code[:4] == city["id"][:4]:
                    city["children"].append(node)
                else:
                    # County-level area administered directly by the province
                    province["children"].append(node)
            else:
                self._skip(line, f"county before any city of province {province['id']}")

        self.logger.info(f"Parsed {len(provinces)} province-level areas")
        return provinces

    def enrich(self, tree: List[Dict[str, Any]]) -> Tuple[List[Dict[str, Any]], Dict[str, Dict[str, Any]]]:
        """
        Add the denormalised ancestry fields to every node.

        Every node gets parentId, parentIds ("0,110000,"), parentNames
        (space separated) and fullName; an empty children list becomes None.

        Args:
            tree: Province nodes as returned by parse()

        Returns:
            Tuple of (enriched tree, index of enriched nodes by id)
        """
        index: Dict[str, Dict[str, Any]] = {}
        root = {"id": ROOT_ID, "name": "", "parentIds": "", "parentNames": ""}
        enriched = self._enrich_children(tree, root, index)
        self.logger.info(f"Enriched {len(index)} areas")
        return enriched, index

    def _enrich_children(self, children: List[Dict[str, Any]], parent: Dict[str, Any],
                         index: Dict[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
        enriched = []
        for item in children:
            if parent["parentNames"]:
                parent_names = f"{parent['parentNames']} {parent['name']}"
            else:
                parent_names = parent["name"]
            full_name = f"{parent_names} {item['name']}" if parent_names else item["name"]

            node = {
                "id": item["id"],
                "name": item["name"],
                "parentId": parent["id"],
                "parentIds": f"{parent['parentIds']}{parent['id']},",
                "parentNames": parent_names.strip(),
                "fullName": full_name.strip(),
                "children": None,
            }
            index[node["id"]] = node
            if item.get("children"):
                node["children"] = self._enrich_children(item["children"], node, index)
            enriched.append(node)
        return enriched

    def build_file(self, input_path: str = DEFAULT_CODES_PATH,
                   output_path: str = DEFAULT_INPUT_PATH,
                   indent: int = 2, encoding: str = "utf-8") -> BuildResult:
        """
        Read a division-code file and write the enriched tree as JSON.

        Args:
            input_path: Division-code text file
            output_path: JSON file to write
            indent: Spaces per indentation level in the output
            encoding: Text encoding of both files

        Returns:
            BuildResult with operation details
        """
        error_handler = ErrorHandler(self.logger)
        errors = []
        for validation in (error_handler.validate_input_path(input_path),
                           error_handler.validate_output_path(output_path)):
            for warning in validation.warnings:
                self.logger.warning(warning)
            errors.extend(error.message for error in validation.errors)
        if errors:
            for message in errors:
                self.logger.error(message)
            return BuildResult(success=False, output_path=output_path, errors=errors)

        try:
            text = FileReader(self.logger).read_text(input_path, encoding)
            tree, index = self.enrich(self.parse(text))
            json_output = JSONParser(error_handler, self.logger).serialize(tree, indent=indent)
            write_info = FileWriter(self.logger).write_text(output_path, json_output, encoding)
        except ProcessingError as e:
            response = error_handler.handle_processing_error(e)
            return BuildResult(
                success=False,
                output_path=output_path,
                errors=[str(e), response.suggested_action]
            )

        return BuildResult(
            success=True,
            tree=tree,
            output_path=write_info["path"],
            province_count=len(tree),
            area_count=len(index),
            skipped_lines=len(self.skipped_lines),
            output_size=write_info["size"]
        )

    @staticmethod
    def _split_line(line: str) -> Optional[Tuple[str, str]]:
        parts = line.split()
        if len(parts) != 2:
            return None
        name, code = parts
        if name.isdigit():
            name, code = code, name
        if len(code) != 6 or not code.isdigit():
            return None
        return name, code

    def _skip(self, line: str, reason: str) -> None:
        self.logger.warning(f"Skipping division-code line ({reason}): {line.strip()}")
        self.skipped_lines.append(line)


def parse_division_codes(text: str) -> List[Dict[str, Any]]:
    """
    Parse division-code text into a province -> city -> county tree.

    Args:
        text: Division-code text, one "name code" pair per line

    Returns:
        Province nodes with nested "children" lists
    """
    return AreaTreeBuilder().parse(text)


def enrich(tree: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Return a copy of tree with parentId, parentIds, parentNames and fullName set.

    Args:
        tree: Province nodes as returned by parse_division_codes()

    Returns:
        Enriched tree
    """
    enriched, _ = AreaTreeBuilder().enrich(tree)
    return enriched
