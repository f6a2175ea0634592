from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from functools import lru_cache
from typing import List
import logging
import time

from config import settings
from exceptions import FormatError, UnknownProvinceError
from schemas import (
    ClassifyResponse,
    ErrorResponse,
    FavoriteToggleResponse,
    LookupRequest,
    LookupResponse,
    PlateKind,
    PlateListResponse,
    RegionDetail,
    RegionSummary,
)
from constants import PLATE_KINDS
from services.history_store import QueryHistoryStore, create_history_store
from services.plate_resolver import default_resolver
from utils.plate_utils import format_plate, normalize_plate_input

logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level.upper())

app = FastAPI(
    title="Plate Region Lookup API",
    description="Look up the province and issuing area of Chinese license plates",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_history_store() -> QueryHistoryStore:
    return create_history_store()


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )


@app.exception_handler(UnknownProvinceError)
async def unknown_province_handler(request: Request, exc: UnknownProvinceError):
    logger.info(f"Unknown province for plate '{exc.plate}'")
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(FormatError)
async def format_error_handler(request: Request, exc: FormatError):
    logger.info(f"Rejected plate '{exc.plate}': {exc.message}")
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error."},
    )


@app.post(
    "/lookup",
    response_model=LookupResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown province code"},
        422: {"model": ErrorResponse, "description": "Missing or malformed plate"},
    },
)
def lookup_endpoint(
    request: LookupRequest,
    store: QueryHistoryStore = Depends(get_history_store),
):
    """
    Resolve a plate to its province and area. Successful lookups are added to
    the recent-query history.
    """
    start_time = time.perf_counter()
    plate = normalize_plate_input(request.plate)

    resolution = default_resolver.resolve(plate)
    kind = PlateKind.NEW_ENERGY if resolution.is_new_energy else PlateKind.REGULAR
    store.record(plate)

    return LookupResponse(
        plate=plate,
        display=format_plate(plate),
        kind=kind,
        province=resolution.province,
        area=resolution.area,
        is_new_energy=resolution.is_new_energy,
        is_favorite=store.is_favorite(plate),
        processing_time_ms=(time.perf_counter() - start_time) * 1000,
    )


@app.get("/classify/{plate}", response_model=ClassifyResponse)
def classify_endpoint(plate: str):
    """Report which plate grammar matches, without resolving or recording it."""
    plate = normalize_plate_input(plate)
    kind = default_resolver.classify(plate)
    return ClassifyResponse(
        plate=plate,
        kind=kind,
        description=PLATE_KINDS[kind.value]["name"],
    )


@app.get("/regions", response_model=List[RegionSummary])
def list_regions():
    return [
        RegionSummary(code=code, province=entry.name, area_count=len(entry.areas))
        for code, entry in default_resolver.table.items()
    ]


@app.get(
    "/regions/{code}",
    response_model=RegionDetail,
    responses={404: {"model": ErrorResponse, "description": "Unknown province code"}},
)
def get_region(code: str):
    entry = default_resolver.table.get(code)
    if entry is None:
        raise UnknownProvinceError(plate=code)
    return RegionDetail(code=code, province=entry.name, areas=dict(entry.areas))


@app.get("/history", response_model=PlateListResponse)
def get_history(store: QueryHistoryStore = Depends(get_history_store)):
    return PlateListResponse(plates=store.history())


@app.delete("/history", response_model=PlateListResponse)
def clear_history(store: QueryHistoryStore = Depends(get_history_store)):
    store.clear_history()
    return PlateListResponse(plates=[])


@app.get("/favorites", response_model=PlateListResponse)
def get_favorites(store: QueryHistoryStore = Depends(get_history_store)):
    return PlateListResponse(plates=store.favorites())


@app.post(
    "/favorites/{plate}",
    response_model=FavoriteToggleResponse,
    responses={422: {"model": ErrorResponse, "description": "Missing or malformed plate"}},
)
def toggle_favorite(plate: str, store: QueryHistoryStore = Depends(get_history_store)):
    """Add the plate to favorites, or remove it if it is already there."""
    plate = normalize_plate_input(plate)
    if not plate:
        raise FormatError.required(plate)
    # only valid plates can be added; removal always works
    if (
        default_resolver.classify(plate) is PlateKind.INVALID
        and not store.is_favorite(plate)
    ):
        raise FormatError(plate=plate)
    is_favorite = store.toggle_favorite(plate)
    return FavoriteToggleResponse(
        plate=plate, is_favorite=is_favorite, favorites=store.favorites()
    )


@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    if settings.app_name and default_resolver.table:
        return {"status": "ok", "app_name": settings.app_name}
    else:
        raise HTTPException(status_code=503, detail="Service configuration missing")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
    )
