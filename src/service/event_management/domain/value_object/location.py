"""
Location - where an event takes place

[Validation]
- city and country required, at most 100 characters each
- address at most 500 characters
- latitude/longitude optional, but provided together and within range
"""

import math
from typing import Any, Dict, Optional

import attrs

from src.service.event_management.domain.event_error import (
    EventError,
    EventErrorCode,
    InvalidValueError,
)
from src.service.event_management.domain.result import Result


MAX_CITY_LENGTH = 100
MAX_COUNTRY_LENGTH = 100
MAX_ADDRESS_LENGTH = 500
EARTH_RADIUS_KM = 6371

TUNISIA_NAMES = frozenset({'tunisia', 'tunisie'})
TUNISIAN_CITIES = frozenset(
    city.lower()
    for city in (
        'Tunis', 'Sfax', 'Sousse', 'Kairouan', 'Bizerte', 'Gabès', 'Ariana', 'Gafsa',
        'Monastir', 'Ben Arous', 'Kasserine', 'Médenine', 'Nabeul', 'Tataouine', 'Béja',
        'Kef', 'Mahdia', 'Sidi Bouzid', 'Jendouba', 'Tozeur', 'Siliana', 'Zaghouan',
        'Kebili', 'Manouba',
    )
)


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _strip_or_none(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip() or None
    return value


def _invalid(message: str) -> InvalidValueError:
    return InvalidValueError(EventError(code=EventErrorCode.INVALID_LOCATION, message=message))


def _is_coordinate(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)


@attrs.define(frozen=True)
class Location:
    city: str = attrs.field(converter=_strip)
    country: str = attrs.field(converter=_strip)
    address: Optional[str] = attrs.field(default=None, converter=_strip_or_none)
    postal_code: Optional[str] = attrs.field(default=None, converter=_strip_or_none)
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def __attrs_post_init__(self) -> None:
        if not isinstance(self.city, str) or not self.city:
            raise _invalid('City is required')
        if len(self.city) > MAX_CITY_LENGTH:
            raise _invalid(f'City name must be at most {MAX_CITY_LENGTH} characters')
        if not isinstance(self.country, str) or not self.country:
            raise _invalid('Country is required')
        if len(self.country) > MAX_COUNTRY_LENGTH:
            raise _invalid(f'Country name must be at most {MAX_COUNTRY_LENGTH} characters')
        if self.address is not None and len(self.address) > MAX_ADDRESS_LENGTH:
            raise _invalid(f'Address must be at most {MAX_ADDRESS_LENGTH} characters')

        if (self.latitude is None) != (self.longitude is None):
            raise _invalid('Both latitude and longitude must be provided together')
        if self.latitude is not None:
            if not _is_coordinate(self.latitude) or not -90 <= self.latitude <= 90:
                raise _invalid('Latitude must be between -90 and 90')
            if not _is_coordinate(self.longitude) or not -180 <= self.longitude <= 180:
                raise _invalid('Longitude must be between -180 and 180')

    @classmethod
    def create(
        cls,
        city: str,
        country: str,
        address: Optional[str] = None,
        postal_code: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> Result['Location']:
        try:
            return Result.ok(
                cls(
                    city=city,
                    country=country,
                    address=address,
                    postal_code=postal_code,
                    latitude=latitude,
                    longitude=longitude,
                )
            )
        except InvalidValueError as e:
            return Result.fail(e.error)

    @classmethod
    def create_tunisian(cls, city: str, **kwargs: Any) -> Result['Location']:
        return cls.create(city=city, country='Tunisia', **kwargs)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def coordinates(self) -> Optional[Dict[str, float]]:
        if not self.has_coordinates:
            return None
        return {'latitude': self.latitude, 'longitude': self.longitude}  # type: ignore[dict-item]

    @property
    def full_address(self) -> str:
        parts = [self.address] if self.address else []
        parts.append(f'{self.postal_code} {self.city}' if self.postal_code else self.city)
        parts.append(self.country)
        return ', '.join(parts)

    @property
    def short_location(self) -> str:
        return f'{self.city}, {self.country}'

    def is_tunisian(self) -> bool:
        return self.country.lower() in TUNISIA_NAMES

    def is_known_tunisian_city(self) -> bool:
        return self.is_tunisian() and self.city.lower() in TUNISIAN_CITIES

    def distance_to(self, other: 'Location') -> Optional[float]:
        """Great-circle distance in km (haversine), None unless both sides have coordinates."""
        if not self.has_coordinates or not other.has_coordinates:
            return None

        lat1, lat2 = math.radians(self.latitude), math.radians(other.latitude)  # type: ignore[arg-type]
        delta_lat = lat2 - lat1
        delta_lon = math.radians(other.longitude - self.longitude)  # type: ignore[operator]

        a = (
            math.sin(delta_lat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return round(EARTH_RADIUS_KM * c, 2)

    def with_coordinates(self, latitude: float, longitude: float) -> Result['Location']:
        return Location.create(
            city=self.city,
            country=self.country,
            address=self.address,
            postal_code=self.postal_code,
            latitude=latitude,
            longitude=longitude,
        )

    def with_address(self, address: Optional[str]) -> Result['Location']:
        return Location.create(
            city=self.city,
            country=self.country,
            address=address,
            postal_code=self.postal_code,
            latitude=self.latitude,
            longitude=self.longitude,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'address': self.address,
            'city': self.city,
            'country': self.country,
            'postal_code': self.postal_code,
            'coordinates': self.coordinates,
        }
