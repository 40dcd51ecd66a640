"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ScheduleSourceError(DomainException):
    """Rate schedule store returned an error or is unavailable"""

    pass


class InvalidScheduleDataError(ScheduleSourceError):
    """Rate schedule payload is malformed"""

    pass
