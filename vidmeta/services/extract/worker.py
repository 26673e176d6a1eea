# vidmeta/services/extract/worker.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Optional

from vidmeta.common.logging import get_logger
from vidmeta.common.settings import get_settings
from vidmeta.domain.dataclasses.items import BinaryPayload, ExtractOptions, PipelineItem
from vidmeta.domain.enums.operation import Operation
from vidmeta.domain.enums.source_kind import SourceKind
from vidmeta.domain.policies import metadata_normalizer as normalizer
from vidmeta.domain.ports.fetch import RemoteSourcePort
from vidmeta.domain.ports.probe import MediaProbePort
from vidmeta.services.extract.errors import MissingPayloadError
from vidmeta.services.fetch.http_fetcher import HttpFetcher
from vidmeta.services.filesystem.scratch import scratch_file
from vidmeta.services.probe.ffprobe_adapter import FFprobeAdapter  # default adapter

logger = get_logger()


class ExtractWorker:
    """
    Processes one item: resolve its payload, copy it to a scratch file, probe
    it, and normalize the probe output for the requested operation.
    """

    def __init__(
        self,
        *,
        prober: Optional[Callable[[], MediaProbePort]] = None,
        fetcher: Optional[Callable[[], RemoteSourcePort]] = None,
        scratch_root: Optional[Path] = None,
    ) -> None:
        self.cfg = get_settings()
        # factories so that ffprobe / HTTP sessions are only set up when used
        self.prober: Callable[[], MediaProbePort] = prober or (lambda: FFprobeAdapter())
        self.fetcher: Callable[[], RemoteSourcePort] = fetcher or (lambda: HttpFetcher())
        self.scratch_root = scratch_root

    def resolve_payload(self, item: PipelineItem, options: ExtractOptions) -> BinaryPayload:
        if options.source == SourceKind.url:
            url = item.json.get(options.url_property)
            if not url:
                raise MissingPayloadError(
                    f'Item has no URL in field "{options.url_property}"',
                    property_name=options.url_property,
                )
            return self.fetcher().fetch(str(url))

        payload = item.binary.get(options.binary_property)
        if payload is None:
            raise MissingPayloadError(
                f'Item has no binary property "{options.binary_property}"',
                property_name=options.binary_property,
            )
        return payload

    def probe_and_normalize(self, path: Path, options: ExtractOptions) -> Dict[str, Any]:
        try:
            op = Operation(options.operation)
        except ValueError as e:
            raise ValueError(f'Operation "{options.operation}" is not supported') from e
        prober = self.prober()
        if op is Operation.extract_metadata:
            raw = prober.probe_full(path)
            return normalizer.extract_metadata(raw, include_raw=options.include_raw).as_dict()
        if op is Operation.get_duration:
            return normalizer.extract_duration(prober.probe_duration(path)).as_dict()
        return normalizer.extract_resolution(prober.probe_resolution(path)).as_dict()

    def process_one(self, item: PipelineItem, options: ExtractOptions) -> Dict[str, Any]:
        payload = self.resolve_payload(item, options)
        suffix = payload.suffix(self.cfg.pipeline.default_extension)
        with scratch_file(payload.data, suffix, root=self.scratch_root) as path:
            logger.debug("%s on %s (%d bytes)", options.operation, path.name, len(payload.data))
            return self.probe_and_normalize(path, options)
