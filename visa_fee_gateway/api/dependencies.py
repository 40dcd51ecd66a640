"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from visa_fee_gateway.infrastructure.clients.schedule import ScheduleClient
from visa_fee_gateway.infrastructure.schedule_store import ScheduleStore, schedule_store


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_schedule_client() -> ScheduleClient:
    """Provide rate schedule client instance"""
    return ScheduleClient()


def get_schedule_store() -> ScheduleStore:
    """Provide the process-wide schedule snapshot holder"""
    return schedule_store
