import pytest
from pydantic import BaseModel, ValidationError

from wrapang.angle import Angle, QUARTER, THREE_QUARTERS
from wrapang.binary.scale import MASK

class Heading(BaseModel):
    bearing: Angle
    label: str = ""

def test_dump_uses_raw_integer():
    h = Heading(bearing=QUARTER, label="east")
    assert h.model_dump() == {"bearing": 2**30, "label": "east"}
    assert h.model_dump_json() == '{"bearing":1073741824,"label":"east"}'

def test_validate_from_integer():
    h = Heading.model_validate_json('{"bearing":3221225472}')
    assert h.bearing == THREE_QUARTERS
    assert Heading(bearing=0).bearing == Angle(0)

@pytest.mark.parametrize("bad", [2**32, -1, "north", 1.5, True])
def test_invalid_encodings(bad):
    with pytest.raises(ValidationError):
        Heading(bearing=bad)

def test_json_schema_is_bounded_integer():
    prop = Heading.model_json_schema()["properties"]["bearing"]
    assert prop["type"] == "integer"
    assert prop["minimum"] == 0
    assert prop["maximum"] == MASK
    assert "bearing" in Heading.model_json_schema()["required"]

def test_angle_instance_passes_through():
    h = Heading(bearing=THREE_QUARTERS)
    assert h.bearing is THREE_QUARTERS
