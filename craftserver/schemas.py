from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError

from .errors import SerializationError


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    z: int


class Craft(BaseModel):
    model_config = ConfigDict(frozen=True)

    fuel: int
    vel_x: int
    vel_y: int
    vel_z: int
    location: Point


class Hardware(BaseModel):
    """Core counts of the host.

    ``cpu_count`` carries the physical core count and ``core_count`` the
    logical one. Clients already depend on this mapping.
    """

    model_config = ConfigDict(frozen=True)

    cpu_count: int = Field(ge=0)
    core_count: int = Field(ge=0)


EXAMPLE_CRAFT_JSON = '{"fuel":12,"vel_x":1,"vel_y":2,"vel_z":2,"location":{"x":10,"y":22,"z":9}}'


def example_craft() -> Craft:
    return Craft(fuel=12, vel_x=1, vel_y=2, vel_z=2, location=Point(x=10, y=22, z=9))


def to_json(model: BaseModel) -> str:
    """Serialize ``model`` to compact JSON text.

    Raises ``SerializationError`` when pydantic cannot serialize it.
    """
    try:
        return model.model_dump_json()
    except PydanticSerializationError as exc:
        raise SerializationError(str(exc)) from exc


def craft_from_json(text: str | bytes) -> Craft:
    return Craft.model_validate_json(text)
