from enum import StrEnum


class SalesStatus(StrEnum):
    PENDING = 'pending'
    ACTIVE = 'active'
    ENDED = 'ended'
