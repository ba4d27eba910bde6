from __future__ import annotations

from enum import Enum


class AnimalStatus(str, Enum):
    ACTIVE = "active"
    SOLD = "sold"
    SICK = "sick"
    QUARANTINE = "quarantine"
    DEAD = "dead"

    def is_disposed(self) -> bool:
        return self in {AnimalStatus.SOLD, AnimalStatus.DEAD}


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
