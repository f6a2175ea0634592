import re
from typing import Mapping, Optional

from config import logger
from constants import (
    NEW_ENERGY_MARKERS,
    PLATE_BODY_CHARS,
    SPECIAL_SUFFIXES,
    UNKNOWN_AREA,
)
from exceptions import FormatError, UnknownProvinceError
from schemas import PlateKind, PlateResolution
from services.region_table import REGION_TABLE, ProvinceEntry


def _char_class(chars) -> str:
    return "[" + "".join(re.escape(c) for c in chars) + "]"


class PlateResolver:
    """
    Classifies Chinese plate strings and resolves their first two characters
    to a province and an issuing area.

    Input is expected upper-cased and stripped by the caller
    (see utils.plate_utils.normalize_plate_input).
    """

    def __init__(self, table: Mapping[str, ProvinceEntry] = REGION_TABLE):
        self.table = table

        province = _char_class(table.keys())
        body = _char_class(PLATE_BODY_CHARS)
        body_letter = _char_class(c for c in PLATE_BODY_CHARS if c.isalpha())
        marker = _char_class(NEW_ENERGY_MARKERS)
        last = _char_class(PLATE_BODY_CHARS + "".join(SPECIAL_SUFFIXES))

        # 粤BD1234 / 粤BD1234A
        self._new_energy_rx = re.compile(
            rf"{province}[A-Z]{marker}{body}{{4}}{body_letter}?"
        )
        # 京A12345 / 京A1234挂
        self._regular_rx = re.compile(rf"{province}[A-Z]{body}{{4}}{last}")

    def classify(self, plate: Optional[str]) -> PlateKind:
        """Return which plate grammar the string matches. Pure, never raises."""
        if not plate:
            return PlateKind.INVALID
        if self._new_energy_rx.fullmatch(plate):
            return PlateKind.NEW_ENERGY
        if self._regular_rx.fullmatch(plate):
            return PlateKind.REGULAR
        return PlateKind.INVALID

    def resolve(self, plate: Optional[str]) -> PlateResolution:
        """
        Resolve a plate to its province and area.

        Args:
            plate: Upper-cased plate string without whitespace.

        Returns:
            PlateResolution. An area letter missing from the province's
            table yields UNKNOWN_AREA instead of an error.

        Raises:
            FormatError: empty input or no grammar matched.
            UnknownProvinceError: leading character is not in the table.
        """
        if not plate:
            raise FormatError.required(plate)

        entry = self.table.get(plate[0])
        if entry is None:
            logger.debug(f"No province for leading character of '{plate}'")
            raise UnknownProvinceError(plate=plate)

        kind = self.classify(plate)
        if kind is PlateKind.INVALID:
            logger.debug(f"Plate '{plate}' does not match any plate format")
            raise FormatError(plate=plate)

        area = entry.area_for(plate[1])
        if area is None:
            logger.debug(f"No area for '{plate[:2]}', using '{UNKNOWN_AREA}'")
            area = UNKNOWN_AREA

        return PlateResolution(
            province=entry.name,
            area=area,
            is_new_energy=kind is PlateKind.NEW_ENERGY,
        )


default_resolver = PlateResolver()


def classify(plate: Optional[str]) -> PlateKind:
    return default_resolver.classify(plate)


def resolve(plate: Optional[str]) -> PlateResolution:
    return default_resolver.resolve(plate)
