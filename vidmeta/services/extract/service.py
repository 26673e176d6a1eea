# vidmeta/services/extract/service.py
from __future__ import annotations

from typing import Iterable, Optional

from vidmeta.common.logging import get_logger
from vidmeta.common.settings import get_settings
from vidmeta.domain.dataclasses.items import ExtractOptions, PipelineItem
from vidmeta.domain.dataclasses.reports import ExtractReport, ItemOutcome
from vidmeta.services.extract.errors import ItemProcessingError
from vidmeta.services.extract.worker import ExtractWorker

logger = get_logger()


class ExtractService:
    """
    Runs ExtractWorker over an ordered collection of items, one at a time.

    With `continue_on_fail` a failing item is recorded as an error outcome and
    the rest still run; otherwise the first failure aborts with
    ItemProcessingError (chained to the original exception).
    """

    def __init__(self, worker: Optional[ExtractWorker] = None):
        self.cfg = get_settings()
        self.worker = worker or ExtractWorker()

    def default_options(self, **overrides) -> ExtractOptions:
        p = self.cfg.pipeline
        base = dict(
            binary_property=p.binary_property,
            output_property=p.output_property,
            url_property=p.url_property,
            continue_on_fail=p.continue_on_fail,
        )
        base.update({k: v for k, v in overrides.items() if v is not None})
        return ExtractOptions(**base)

    def run(self, items: Iterable[PipelineItem], options: Optional[ExtractOptions] = None) -> ExtractReport:
        opts = options or self.default_options()
        rpt = ExtractReport()
        rpt.start()

        for idx, item in enumerate(items):
            rpt.planned += 1
            outcome = ItemOutcome(index=idx, item=item, output_property=opts.output_property)
            try:
                outcome.result = self.worker.process_one(item, opts)
            except Exception as ex:
                if not opts.continue_on_fail:
                    rpt.stop()
                    raise ItemProcessingError(str(ex) or type(ex).__name__, item_index=idx) from ex
                logger.warning("ExtractService: item %d failed: %s", idx, ex)
                outcome.error = str(ex) or type(ex).__name__
            rpt.record(outcome)

        rpt.stop()
        return rpt
