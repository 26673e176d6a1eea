from vidmeta.domain.dataclasses.items import BinaryPayload, PipelineItem
from vidmeta.domain.dataclasses.reports import ExtractReport, ItemOutcome


def _item(n: int) -> PipelineItem:
    return PipelineItem(json={"n": n}, binary={"data": BinaryPayload(data=b"x", file_extension="mov")})


def test_report_accumulates_in_order():
    rpt = ExtractReport()
    rpt.start()
    rpt.record(ItemOutcome(index=0, item=_item(0), output_property="metadata", result={"a": 1}))
    rpt.record(ItemOutcome(index=1, item=_item(1), output_property="metadata", error="boom"))
    rpt.record(ItemOutcome(index=2, item=_item(2), output_property="metadata", result={"a": 3}))
    rpt.stop()

    assert rpt.succeeded == 2
    assert rpt.errors == 1
    assert not rpt.ok
    assert rpt.error_details == [("item[1]", "boom")]
    assert rpt.started_at is not None and rpt.finished_at >= rpt.started_at

    outs = rpt.output_items()
    assert [o["json"]["n"] for o in outs] == [0, 1, 2]
    assert outs[0]["json"]["metadata"] == {"a": 1}
    assert "binary" in outs[0]
    # failed item: error annotation, payload dropped
    assert outs[1]["json"] == {"n": 1, "error": "boom"}
    assert "binary" not in outs[1]


def test_outcome_does_not_mutate_item_json():
    it = _item(5)
    ItemOutcome(index=0, item=it, output_property="meta", result={}).to_output()
    assert it.json == {"n": 5}


def test_binary_payload_suffix():
    assert BinaryPayload(data=b"", file_extension="mov").suffix() == ".mov"
    assert BinaryPayload(data=b"", file_extension=".mkv").suffix() == ".mkv"
    assert BinaryPayload(data=b"").suffix() == ".mp4"
    assert BinaryPayload(data=b"").suffix(".webm") == ".webm"
