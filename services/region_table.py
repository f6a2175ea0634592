import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from config import logger, settings
from constants import PLATE_REGIONS


@dataclass(frozen=True)
class ProvinceEntry:
    name: str
    areas: Mapping[str, str]

    def area_for(self, letter: str) -> Optional[str]:
        return self.areas.get(letter)


def _is_area_letter(key: Any) -> bool:
    return isinstance(key, str) and len(key) == 1 and "A" <= key <= "Z"


def build_region_table(raw: Mapping[str, Any]) -> Mapping[str, ProvinceEntry]:
    """
    Validate a raw prefix table and freeze it.

    Args:
        raw: {code: {"province": name, "areas": {letter: area}}}

    Returns:
        Read-only mapping code -> ProvinceEntry.

    Raises:
        ValueError: a code is not a single character, an area key is not a
            single uppercase ASCII letter, or an entry is malformed.
    """
    if not isinstance(raw, Mapping) or not raw:
        raise ValueError("Region table must be a non-empty mapping.")

    table = {}
    for code, entry in raw.items():
        if not isinstance(code, str) or len(code) != 1:
            raise ValueError(f"Province code must be a single character: {code!r}")
        if not isinstance(entry, Mapping):
            raise ValueError(f"Entry for {code!r} must be a mapping.")

        name = entry.get("province")
        if not isinstance(name, str) or not name:
            raise ValueError(f"Entry for {code!r} has no province name.")

        areas = entry.get("areas") or {}
        if not isinstance(areas, Mapping):
            raise ValueError(f"Areas for {code!r} must be a mapping.")
        for letter, area in areas.items():
            if not _is_area_letter(letter):
                raise ValueError(
                    f"Area key for {code!r} must be one uppercase letter: {letter!r}"
                )
            if not isinstance(area, str):
                raise ValueError(f"Area name for {code}{letter} must be a string.")

        table[code] = ProvinceEntry(name=name, areas=MappingProxyType(dict(areas)))

    return MappingProxyType(table)


def load_region_table(path: Optional[Union[str, Path]] = None) -> Mapping[str, ProvinceEntry]:
    """Load the table from a JSON file, or the built-in data when no path is given."""
    if not path:
        return build_region_table(PLATE_REGIONS)

    path = Path(path)
    raw = json.loads(path.read_text(encoding="utf-8"))
    table = build_region_table(raw)
    logger.info(f"Loaded region table from {path}: {len(table)} provinces")
    return table


REGION_TABLE = load_region_table(settings.region_table_path)
