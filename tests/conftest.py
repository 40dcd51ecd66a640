"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from visa_fee_gateway.api.main import create_app
from visa_fee_gateway.api.dependencies import get_schedule_store
from visa_fee_gateway.domain.models import FeeScheduleRecord
from visa_fee_gateway.domain.schedule import ScheduleSnapshot
from visa_fee_gateway.infrastructure.schedule_store import ScheduleStore


@pytest.fixture
def student_record() -> FeeScheduleRecord:
    """Charge table row with every fee component populated"""
    return FeeScheduleRecord(
        subclass_code="500",
        visa_name="Student Visa (Subclass 500)",
        base_fee=1650,
        subsequent_fee=790,
        non_internet_fee=135,
        additional_adult_fee=1240,
        additional_child_fee=415,
    )


@pytest.fixture
def sample_records(student_record: FeeScheduleRecord) -> list[FeeScheduleRecord]:
    """Small charge table for testing"""
    return [
        student_record,
        FeeScheduleRecord(
            subclass_code="600",
            visa_name="Visitor Visa (Subclass 600)",
            base_fee=195,
            additional_adult_fee=195,
            additional_child_fee=50,
        ),
        FeeScheduleRecord(
            subclass_code="189",
            visa_name="Skilled Independent Visa (Subclass 189)",
            base_fee=4765,
            additional_adult_fee=2385,
            additional_child_fee=1195,
        ),
    ]


@pytest.fixture
def store(sample_records: list[FeeScheduleRecord]) -> ScheduleStore:
    """Schedule store preloaded with the sample table"""
    return ScheduleStore(ScheduleSnapshot.from_records(sample_records))


@pytest.fixture
def client(store: ScheduleStore) -> TestClient:
    """Create FastAPI test client with the sample schedule"""
    app = create_app()
    app.dependency_overrides[get_schedule_store] = lambda: store
    return TestClient(app)


@pytest.fixture
def empty_client() -> TestClient:
    """Create FastAPI test client with no schedule loaded"""
    app = create_app()
    empty_store = ScheduleStore()
    app.dependency_overrides[get_schedule_store] = lambda: empty_store
    return TestClient(app)
