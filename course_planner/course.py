from typing import Tuple

from pydantic import BaseModel, ConfigDict


class CourseRecord(BaseModel):
    """A single course in the catalog"""
    model_config = ConfigDict(frozen=True)

    identifier: str
    title: str
    prerequisites: Tuple[str, ...] = ()

    @classmethod
    def not_found(cls):
        # Empty identifier marks a failed lookup
        return cls(identifier="", title="")

    @property
    def found(self) -> bool:
        return bool(self.identifier)
