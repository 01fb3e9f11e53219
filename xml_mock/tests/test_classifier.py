import re

import pytest

from xml_mock.core.classifier import classify
from xml_mock.core.extraction import extract_fields
from xml_mock.core.models import ExtractedFields, ResponseKind
from xml_mock.core.order_ids import TimestampOrderIdGenerator, resolve_order_id
from xml_mock.core.xml_document import parse_xml


@pytest.mark.parametrize("store_type", ["3d", "3D", "3d_pay", "3D_PAY", "3D_pay"])
def test_three_d_store_types_win(store_type):
    fields = ExtractedFields(store_type=store_type, maxi_puan_sorgu="MAXIPUANSORGU")

    assert classify(fields) == ResponseKind.THREE_D_SECURE


def test_loyalty_query_requires_exact_flag():
    assert classify(ExtractedFields(maxi_puan_sorgu="MAXIPUANSORGU")) == ResponseKind.LOYALTY_POINTS_QUERY
    assert classify(ExtractedFields(maxi_puan_sorgu="maxipuansorgu")) == ResponseKind.STANDARD_PAYMENT
    assert classify(ExtractedFields(maxi_puan_sorgu="")) == ResponseKind.STANDARD_PAYMENT


@pytest.mark.parametrize("store_type", [None, "", "pay_hosting", "3d_oos_pay", "3dpay"])
def test_other_store_types_fall_through(store_type):
    assert classify(ExtractedFields(store_type=store_type)) == ResponseKind.STANDARD_PAYMENT


def test_disabled_three_d_branch_falls_through_to_next_rule():
    fields = ExtractedFields(store_type="3d", maxi_puan_sorgu="MAXIPUANSORGU")

    assert classify(fields, three_d_secure_enabled=False) == ResponseKind.LOYALTY_POINTS_QUERY
    assert (
        classify(ExtractedFields(store_type="3D_PAY"), three_d_secure_enabled=False)
        == ResponseKind.STANDARD_PAYMENT
    )


def test_classification_is_repeatable():
    fields = ExtractedFields(order_id="X", store_type="3d_pay")

    assert classify(fields) == classify(fields)


def test_extract_fields_reads_nested_values():
    document = parse_xml(
        "<CC5Request><OrderId>T1</OrderId><Extra>"
        "<STORETYPE>3d</STORETYPE><MAXIPUANSORGU>MAXIPUANSORGU</MAXIPUANSORGU>"
        "</Extra></CC5Request>"
    )

    assert extract_fields(document) == ExtractedFields(
        order_id="T1", store_type="3d", maxi_puan_sorgu="MAXIPUANSORGU"
    )


@pytest.mark.parametrize(
    "body",
    [
        "",
        "<Other/>",
        "<CC5Request/>",
        "<CC5Request><OrderId></OrderId><Extra/></CC5Request>",
        "<CC5Request><Extra>text only</Extra></CC5Request>",
    ],
)
def test_extract_fields_is_null_safe(body):
    assert extract_fields(parse_xml(body)) == ExtractedFields()


def test_resolve_order_id_passthrough(fake_order_ids):
    assert resolve_order_id("ABC123", fake_order_ids) == "ABC123"
    assert fake_order_ids.generated == []


def test_resolve_order_id_synthesizes_when_missing(fake_order_ids):
    assert resolve_order_id(None, fake_order_ids) == fake_order_ids.generated[0]
    assert resolve_order_id("", fake_order_ids) == fake_order_ids.generated[1]


def test_timestamp_generator_format():
    generator = TimestampOrderIdGenerator(clock_ms=lambda: 1732446936000, choice=lambda alphabet: "z")

    assert generator.generate() == "ORDER-1732446936000zzzzzzzzz"


def test_default_generator_is_unique_and_well_formed():
    generator = TimestampOrderIdGenerator()
    values = {generator.generate() for _ in range(50)}

    assert len(values) == 50
    for value in values:
        assert re.fullmatch(r"ORDER-\d+[a-z0-9]{9}", value)
