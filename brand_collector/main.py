from fastapi import FastAPI, HTTPException, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
import logging
from brand_collector.agent_client import build_agent_client
from brand_collector.config import settings
from brand_collector.errors import BrandCollectorError
from brand_collector.export import EXPORT_FILENAME, export_csv
from brand_collector.extractor import extract_brands, extract_meta
from brand_collector.input_parser import parse_brand_names
from brand_collector.models import Brand, CollectionResult, ResponseMeta
from brand_collector.presentation import (
    SAMPLE_BRANDS,
    SortField,
    TableState,
    fill_counts,
    reset,
    set_search,
    show_results,
    toggle_row,
    toggle_sort,
    visible_brands,
)
from brand_collector.service import BrandCollector

logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Brand Collector")


class ParseNamesRequest(BaseModel):
    text: str = ""


class CollectRequest(BaseModel):
    brand_names: List[str] = []
    text: Optional[str] = None


class NormalizeResponse(BaseModel):
    brands: List[Brand]
    meta: ResponseMeta


class ExportRequest(BaseModel):
    brands: List[Brand]


class TableAction(BaseModel):
    search: Optional[str] = None
    sort: Optional[SortField] = None
    toggle_row: Optional[int] = None
    show_results: bool = False
    reset: bool = False


class TableViewRequest(BaseModel):
    brands: List[Brand]
    state: TableState = TableState()
    action: Optional[TableAction] = None


class TableViewResponse(BaseModel):
    state: TableState
    brands: List[Brand]


def get_collector() -> BrandCollector:
    return BrandCollector(build_agent_client(settings), settings)


def _raise_http(error: BrandCollectorError):
    raise HTTPException(status_code=error.status_code, detail=error.message)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Something went wrong", "error": str(exc), "reset": "/"},
    )


@app.post("/parse-brand-names")
def parse_names(request: ParseNamesRequest):
    return {"brand_names": parse_brand_names(request.text)}


@app.post("/collect", response_model=CollectionResult)
def collect(request: CollectRequest, collector: BrandCollector = Depends(get_collector)):
    brand_names = [n.strip() for n in request.brand_names if n.strip()]
    if request.text:
        brand_names.extend(parse_brand_names(request.text))
    try:
        return collector.collect(brand_names)
    except BrandCollectorError as e:
        _raise_http(e)


@app.post("/collect/upload", response_model=CollectionResult)
def collect_upload(file: UploadFile = File(...), collector: BrandCollector = Depends(get_collector)):
    content = file.file.read()
    try:
        return collector.collect_from_file(file.filename or "", content)
    except BrandCollectorError as e:
        _raise_http(e)


@app.post("/normalize", response_model=NormalizeResponse)
def normalize(agent_response: Dict[str, Any]):
    brands = extract_brands(agent_response)
    return NormalizeResponse(brands=brands, meta=fill_counts(extract_meta(agent_response), brands))


@app.post("/export")
def export(request: ExportRequest):
    return Response(
        content=export_csv(request.brands),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@app.post("/table-view", response_model=TableViewResponse)
def table_view(request: TableViewRequest):
    state = apply_action(request.state, request.action)
    return TableViewResponse(state=state, brands=visible_brands(request.brands, state))


def apply_action(state: TableState, action: Optional[TableAction]) -> TableState:
    if action is None:
        return state
    if action.reset:
        return reset(state)
    if action.show_results:
        state = show_results(state)
    if action.search is not None:
        state = set_search(state, action.search)
    if action.sort is not None:
        state = toggle_sort(state, action.sort)
    if action.toggle_row is not None:
        state = toggle_row(state, action.toggle_row)
    return state


@app.get("/sample-brands", response_model=List[Brand])
def sample_brands():
    return SAMPLE_BRANDS
