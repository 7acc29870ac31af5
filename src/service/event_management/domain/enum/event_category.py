from enum import StrEnum
from typing import Dict, Optional


class EventCategory(StrEnum):
    CONCERT = 'CONCERT'
    CONFERENCE = 'CONFERENCE'
    SPORT = 'SPORT'
    THEATER = 'THEATER'
    WORKSHOP = 'WORKSHOP'
    FESTIVAL = 'FESTIVAL'
    EXHIBITION = 'EXHIBITION'
    NETWORKING = 'NETWORKING'
    COMEDY = 'COMEDY'
    OTHER = 'OTHER'

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_string(cls, value: str) -> Optional['EventCategory']:
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


_DISPLAY_NAMES: Dict[EventCategory, str] = {
    EventCategory.CONCERT: 'Concert',
    EventCategory.CONFERENCE: 'Conference',
    EventCategory.SPORT: 'Sport',
    EventCategory.THEATER: 'Theater',
    EventCategory.WORKSHOP: 'Workshop',
    EventCategory.FESTIVAL: 'Festival',
    EventCategory.EXHIBITION: 'Exhibition',
    EventCategory.NETWORKING: 'Networking',
    EventCategory.COMEDY: 'Comedy',
    EventCategory.OTHER: 'Other',
}
