"""Closed enumerations accepted by the API."""

from __future__ import annotations

import re
from enum import Enum

from monvoyagepascher.core.errors import ValidationError


class _ChoiceEnum(str, Enum):
    """String enum that rejects unknown values with a readable message."""

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def label(cls) -> str:
        # ElevationUnit -> "elevation unit"
        return re.sub(r"(?<=[a-z])(?=[A-Z])", " ", cls.__name__).lower()

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValidationError(
            f"Invalid {cls.label()}: '{value}' (expected one of: {', '.join(cls.choices())})"
        )


class Language(_ChoiceEnum):
    EN = "en"
    FR = "fr"
    DE = "de"
    ES = "es"


class ElevationUnit(_ChoiceEnum):
    METERS = "meters"
    FEET = "feet"


class DistanceUnit(_ChoiceEnum):
    KMS = "kms"
    MILES = "miles"


class Status(_ChoiceEnum):
    SUCCESS = "success"
    ERROR = "error"


DEFAULT_LANGUAGE = Language.EN
