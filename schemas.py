# schemas.py
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class PlateKind(str, Enum):
    REGULAR = "regular"
    NEW_ENERGY = "new_energy"
    INVALID = "invalid"


class PlateResolution(BaseModel):
    model_config = ConfigDict(frozen=True)

    province: str = Field(..., description="Province / municipality name")
    area: str = Field(
        ..., description="Issuing area for the series letter, or the unknown-area sentinel"
    )
    is_new_energy: bool = Field(False, description="New-energy (EV/hybrid) plate")


class LookupRequest(BaseModel):
    plate: Optional[str] = Field(None, description="Plate number, e.g. 京A12345")


class LookupResponse(BaseModel):
    plate: str = Field(..., description="Normalized plate that was resolved")
    display: str = Field("", description="Plate with a separator, e.g. 京A·12345")
    kind: PlateKind = Field(..., description="Plate grammar that matched")
    province: str
    area: str
    is_new_energy: bool
    is_favorite: bool = Field(False, description="Plate is in the favorites list")
    processing_time_ms: Optional[float] = Field(
        None, description="Time taken to resolve the plate"
    )


class ClassifyResponse(BaseModel):
    plate: str
    kind: PlateKind
    description: Optional[str] = None


class RegionSummary(BaseModel):
    code: str = Field(..., description="Single-character province code")
    province: str
    area_count: int


class RegionDetail(BaseModel):
    code: str
    province: str
    areas: Dict[str, str] = Field({}, description="Series letter -> area name")


class PlateListResponse(BaseModel):
    plates: List[str] = []


class FavoriteToggleResponse(BaseModel):
    plate: str
    is_favorite: bool
    favorites: List[str] = []


class ErrorResponse(BaseModel):
    detail: str
