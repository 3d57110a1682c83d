import pytest

from extraction import (
    CodeSource,
    ExtractionPolicy,
    PatternId,
    enhance_name,
    enhance_record,
    enhance_records,
    extract_product_code,
)
from extraction.models import NOT_FOUND, Found
from models import ProductRecord

PHILLIP_LIM_BOOTS = "3.1 Phillip Lim・3.1 Phillip Lim ブーツ ゴールド 2020324D0039・ブーツその他・ゴールド・EU38(24.5cm位)"
PRADA_BAG = "PRADA・PRADA ハンドバッグ・ハンドバッグ・レッド・ONE SIZE"


def _record(**overrides) -> ProductRecord:
    fields = {
        "item_id": "123",
        "translated_name": "Test Product",
        "original_name": PRADA_BAG,
        "description": None,
        "collection_name": "test",
        "shopee_id": "456",
    }
    fields.update(overrides)
    return ProductRecord(**fields)


# --- record resolution ---


def test_original_name_wins_over_description():
    record = _record(original_name=PHILLIP_LIM_BOOTS, description="【型番】4M00160")
    result = extract_product_code(record)

    assert result.code == "2020324D0039"
    assert result.source is CodeSource.ORIGINAL_NAME
    assert result.pattern is PatternId.AFTER_COLOR


def test_falls_back_to_description():
    result = extract_product_code(_record(description="【型番】2VH131"))

    assert result.code == "2VH131"
    assert result.source is CodeSource.DESCRIPTION
    assert result.pattern is PatternId.DESCRIPTION_LABEL


@pytest.mark.parametrize("description", [None, "", "【ブランド】PRADA\n【カラー】レッド"])
def test_no_code_in_either_field(description):
    assert extract_product_code(_record(description=description)) == NOT_FOUND


def test_loose_policy_ignores_description():
    record = _record(description="【型番】2VH131")

    assert not extract_product_code(record, ExtractionPolicy.LOOSE).found


def test_loose_policy_by_name():
    result = extract_product_code(_record(original_name=PHILLIP_LIM_BOOTS), "loose")

    assert result.code == "2020324D0039"
    assert result.pattern is PatternId.LOOSE


def test_resolution_is_deterministic():
    record = _record(original_name=PHILLIP_LIM_BOOTS)

    assert {extract_product_code(record) for _ in range(5)} == {extract_product_code(record)}


# --- name enhancement ---


def test_enhance_name_appends_code():
    found = Found(code="2020324D0039", source=CodeSource.ORIGINAL_NAME, pattern=PatternId.AFTER_COLOR)

    assert enhance_name("Boots", found) == "Boots - 2020324D0039"


@pytest.mark.parametrize("name", ["X - 2020324D0039", "X 2020324D0039 gold", "2020324D0039"])
def test_enhance_name_keeps_existing_code(name):
    found = Found(code="2020324D0039", source=CodeSource.ORIGINAL_NAME, pattern=PatternId.AFTER_COLOR)

    assert enhance_name(name, found) == name


def test_enhance_name_without_code():
    assert enhance_name("Boots", NOT_FOUND) == "Boots"


@pytest.mark.parametrize(
    "record, expected",
    [
        (
            _record(
                item_id="115076683",
                translated_name="3.1 Phillip Lim gold 靴子 金 二手",
                original_name=PHILLIP_LIM_BOOTS,
            ),
            "3.1 Phillip Lim gold 靴子 金 二手 - 2020324D0039",
        ),
        (
            _record(
                item_id="107517682",
                translated_name="3.1 Phillip Lim 手拿包 二手",
                original_name="3.1 Phillip Lim・3.1 Phillip Lim クラッチバッグ - 2020324A0037・クラッチバッグ・-",
            ),
            "3.1 Phillip Lim 手拿包 二手 - 2020324A0037",
        ),
        (
            _record(
                item_id="122917618",
                translated_name="BALLY bal 跟鞋 海軍藍 二手",
                original_name="BALLY・BALLY バリー パンプス 紺 EU37(23.5cm位) 4104125G0002・パンプス・紺・EU37(23.5cm位)",
            ),
            "BALLY bal 跟鞋 海軍藍 二手 - 4104125G0002",
        ),
        (
            _record(
                item_id="999",
                translated_name="MONCLER TRAILGRIP 運動鞋 二手",
                original_name="MONCLER・MONCLER スニーカー・スニーカー・ピンクベージュ・ONE SIZE",
                description="【型番】4M00160\n【表記サイズ】36",
            ),
            "MONCLER TRAILGRIP 運動鞋 二手 - 4M00160",
        ),
        (
            _record(
                translated_name="3.1 Phillip Lim gold 靴子 金 二手 - 2020324D0039",
                original_name=PHILLIP_LIM_BOOTS,
            ),
            "3.1 Phillip Lim gold 靴子 金 二手 - 2020324D0039",
        ),
        (
            _record(translated_name="PRADA 手提包 黑色 二手"),
            "PRADA 手提包 黑色 二手",
        ),
    ],
)
def test_enhance_record(record, expected):
    enhanced = enhance_record(record)

    assert enhanced.enhanced_name == expected
    assert enhanced.translated_name == record.translated_name
    assert enhanced.item_id == record.item_id
    assert enhanced.shopee_id == record.shopee_id
    if enhanced.extracted_code is None:
        assert enhanced.enhanced_name == record.translated_name
        assert enhanced.code_source == ""
        assert enhanced.pattern == 0
    else:
        assert enhanced.extracted_code in enhanced.enhanced_name


def test_enhance_record_tags_result():
    enhanced = enhance_record(_record(description="【型番】2VH131"))

    assert enhanced.extracted_code == "2VH131"
    assert enhanced.code_source == "description"
    assert enhanced.pattern == 4


@pytest.mark.parametrize(
    "record",
    [
        _record(original_name=PHILLIP_LIM_BOOTS),
        _record(description="【型番】4M00160"),
        _record(),
        _record(translated_name="", original_name=""),
    ],
)
def test_enhancement_is_idempotent(record):
    once = enhance_record(record)
    twice = enhance_record(once.as_product_record())

    assert twice.enhanced_name == once.enhanced_name
    assert twice.extracted_code == once.extracted_code


# --- batches ---


def test_enhance_records_keeps_order():
    records = [
        _record(item_id=str(i), original_name=PHILLIP_LIM_BOOTS if i % 2 else PRADA_BAG)
        for i in range(20)
    ]

    sequential = enhance_records(records)
    threaded = enhance_records(records, workers=4)

    assert [r.item_id for r in sequential] == [str(i) for i in range(20)]
    assert threaded == sequential
    assert sum(r.has_code for r in sequential) == 10


def test_enhance_records_empty():
    assert enhance_records([]) == []
    assert enhance_records([], workers=4) == []
