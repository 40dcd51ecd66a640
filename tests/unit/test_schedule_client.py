"""Unit tests for the rate schedule client"""

import httpx
import pytest
from visa_fee_gateway.domain.exceptions import InvalidScheduleDataError, ScheduleSourceError
from visa_fee_gateway.infrastructure.clients.schedule import (
    ScheduleClient,
    record_from_raw,
    records_from_payload,
)

SOURCE_URL = "https://rates.example.test/visas/.json"

STORE_PAYLOAD = {
    "-Nx1": {
        "Visa Subclass": "Student Visa (Subclass 500)",
        "Base Application Charge": "1,650",
        "Subsequent Temporary Application charge": "790",
        "Non - Internet Application charge": "135",
        "Additional Applicant 18 years and Over": "1,240",
        "Additional Applicant under 18 years": "415",
    },
    "-Nx2": {
        "Visa Subclass": "Visitor Visa (Subclass 600)",
        "Base Application Charge": "195",
        "Subsequent Temporary Application charge": "",
        "Non - Internet Application charge": "N/A",
        "Additional Applicant 18 years and Over": "195",
    },
}


def make_client(handler) -> ScheduleClient:
    return ScheduleClient(source_url=SOURCE_URL, timeout=1.0, transport=httpx.MockTransport(handler))


def test_record_from_raw_parses_charges():
    """Test thousands separators and subclass extraction"""
    record, unparsable = record_from_raw(STORE_PAYLOAD["-Nx1"])

    assert record.subclass_code == "500"
    assert record.visa_name == "Student Visa (Subclass 500)"
    assert record.base_fee == 1650
    assert record.subsequent_fee == 790
    assert record.non_internet_fee == 135
    assert record.additional_adult_fee == 1240
    assert record.additional_child_fee == 415
    assert unparsable == []


def test_record_from_raw_defaults_bad_fields_to_zero():
    """Test unparsable and missing charges become 0"""
    record, unparsable = record_from_raw(STORE_PAYLOAD["-Nx2"])

    assert record.subclass_code == "600"
    assert record.subsequent_fee == 0
    assert record.non_internet_fee == 0
    assert record.additional_child_fee == 0
    assert unparsable == ["Non - Internet Application charge"]


def test_records_from_payload_rejects_non_object():
    """Test payloads that are not an object of records"""
    with pytest.raises(InvalidScheduleDataError):
        records_from_payload(None)
    with pytest.raises(InvalidScheduleDataError):
        records_from_payload([{"Visa Subclass": "x"}])
    with pytest.raises(InvalidScheduleDataError):
        records_from_payload({"a": "not a record"})


async def test_get_records_success():
    """Test records mapped in store order"""
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == SOURCE_URL
        return httpx.Response(200, json=STORE_PAYLOAD)

    records = await make_client(handler).get_records()

    assert [r.subclass_code for r in records] == ["500", "600"]
    assert records[0].base_fee == 1650


async def test_get_records_http_error():
    """Test 5xx from the store raises ScheduleSourceError"""
    client = make_client(lambda request: httpx.Response(503))

    with pytest.raises(ScheduleSourceError, match="503"):
        await client.get_records()


async def test_get_records_timeout():
    """Test timeouts raise ScheduleSourceError"""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ScheduleSourceError, match="timeout"):
        await make_client(handler).get_records()


async def test_get_records_invalid_json():
    """Test a non-JSON body raises InvalidScheduleDataError"""
    client = make_client(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    with pytest.raises(InvalidScheduleDataError):
        await client.get_records()


async def test_get_records_null_body():
    """Test an empty store (JSON null) is reported as invalid"""
    client = make_client(lambda request: httpx.Response(200, json=None))

    with pytest.raises(InvalidScheduleDataError):
        await client.get_records()
