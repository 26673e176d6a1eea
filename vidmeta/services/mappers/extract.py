# vidmeta/services/mappers/extract.py
from __future__ import annotations

import base64
from typing import Any, Dict, List

from vidmeta.domain.dataclasses.items import BinaryPayload, PipelineItem
from vidmeta.domain.dataclasses.reports import ExtractReport
from vidmeta.services.schemas.metadata import (
    BinaryPayloadOut,
    ExtractRunResponse,
    PipelineItemIn,
)


def to_pipeline_items(items: List[PipelineItemIn]) -> List[PipelineItem]:
    return [
        PipelineItem(
            json=dict(it.json_),
            binary={
                name: BinaryPayload(
                    data=p.data,
                    file_name=p.file_name,
                    file_extension=p.file_extension,
                    mime_type=p.mime_type,
                )
                for name, p in it.binary.items()
            },
        )
        for it in items
    ]


def _payload_out(p: BinaryPayload) -> Dict[str, Any]:
    return BinaryPayloadOut(
        data=base64.b64encode(p.data).decode("ascii"),
        file_name=p.file_name,
        file_extension=p.file_extension,
        mime_type=p.mime_type,
    ).model_dump()


def to_run_response_from_report(report: ExtractReport) -> ExtractRunResponse:
    items: List[dict] = []
    for out in report.output_items():
        if "binary" in out:
            out = {**out, "binary": {k: _payload_out(v) for k, v in out["binary"].items()}}
        items.append(out)
    return ExtractRunResponse(
        ok=report.ok,
        started_at=report.started_at,
        finished_at=report.finished_at,
        error_details=[f"{subject}: {msg}" for subject, msg in report.error_details],
        items=items,
    )
