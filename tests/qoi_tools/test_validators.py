import pytest
from attrs import define, field

from qoi_tools.exceptions import ValidationError
from qoi_tools.validators import in_, range_


@define
class Dummy:
    channels: int = field(default=3, validator=in_((3, 4)))
    width: int = field(default=0, validator=range_(0, 255))


@pytest.mark.parametrize("channels, width", [(3, 0), (4, 255), (3, 128)])
def test_valid(channels: int, width: int) -> None:
    Dummy(channels=channels, width=width)


@pytest.mark.parametrize(
    "channels, width", [(1, 0), (5, 0), ("3", 0), (3, -1), (3, 256), (3, None)]
)
def test_invalid(channels: object, width: object) -> None:
    with pytest.raises(ValidationError) as excinfo:
        Dummy(channels=channels, width=width)
    assert isinstance(excinfo.value, ValueError)


def test_repr() -> None:
    assert "range_" in repr(range_(0, 1))
    assert "in_" in repr(in_((3, 4)))
