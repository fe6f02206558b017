from enum import Enum


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value) -> "Gender":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.OTHER
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.OTHER
