# vidmeta/services/api/routers/metadata.py
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from vidmeta.common.logging import get_logger
from vidmeta.common.settings import get_settings
from vidmeta.domain.dataclasses.items import ExtractOptions
from vidmeta.domain.enums.operation import Operation
from vidmeta.domain.policies.metadata_normalizer import normalize
from vidmeta.services.api.deps import get_extract_service
from vidmeta.services.extract.errors import ItemProcessingError
from vidmeta.services.extract.service import ExtractService
from vidmeta.services.mappers.extract import to_pipeline_items, to_run_response_from_report
from vidmeta.services.schemas.metadata import (
    ExtractRunRequest,
    ExtractRunResponse,
    NormalizeRequest,
)

logger = get_logger()
cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/metadata", tags=["metadata"])


@router.post("/normalize")
def normalize_report(req: NormalizeRequest) -> Dict[str, Any]:
    """Run the normalizer on ffprobe output the caller already has."""
    if req.operation is Operation.extract_metadata:
        return normalize(req.operation, req.raw or {}, include_raw=req.include_raw)
    if req.text is None:
        raise HTTPException(status_code=422, detail=f"'text' is required for {req.operation}")
    return normalize(req.operation, req.text)


@router.post("/run", response_model=ExtractRunResponse)
def run_extract(
    payload: ExtractRunRequest,
    svc: ExtractService = Depends(get_extract_service),
) -> ExtractRunResponse:
    opts: ExtractOptions = svc.default_options(
        operation=payload.operation,
        source=payload.source,
        include_raw=payload.include_raw,
        binary_property=payload.binary_property,
        output_property=payload.output_property,
        url_property=payload.url_property,
        continue_on_fail=payload.continue_on_fail,
    )
    try:
        report = svc.run(to_pipeline_items(payload.items), opts)
    except ItemProcessingError as ex:
        logger.warning("metadata run aborted: %s", ex)
        raise HTTPException(
            status_code=422,
            detail={"message": ex.message, "item_index": ex.item_index},
        ) from ex
    return to_run_response_from_report(report)
