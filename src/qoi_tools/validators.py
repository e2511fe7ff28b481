"""
Validation functions for attrs.
"""

from typing import Any

from attrs import define

from qoi_tools.exceptions import ValidationError

__all__ = ["in_", "range_"]


@define(repr=False, hash=True)
class _InValidator:
    options: Any

    def __call__(self, inst: Any, attr: Any, value: Any) -> None:
        try:
            in_options = value in self.options
        except TypeError:
            in_options = False

        if not in_options:
            raise ValidationError(
                "'{name}' must be in {options!r} (got {value!r})".format(
                    name=attr.name, options=tuple(self.options), value=value
                )
            )

    def __repr__(self) -> str:
        return "<in_ validator with options {options!r}>".format(options=self.options)


@define(repr=False, hash=True)
class _RangeValidator:
    minimum: int
    maximum: int

    def __call__(self, inst: Any, attr: Any, value: Any) -> None:
        try:
            in_range = self.minimum <= value and value <= self.maximum
        except TypeError:
            in_range = False

        if not in_range:
            raise ValidationError(
                "'{name}' must be in range [{minimum!r}, {maximum!r}] "
                "(got {value!r})".format(
                    name=attr.name,
                    minimum=self.minimum,
                    maximum=self.maximum,
                    value=value,
                )
            )

    def __repr__(self) -> str:
        return "<range_ validator with [{minimum!r}, {maximum!r}]>".format(
            minimum=self.minimum, maximum=self.maximum
        )


def in_(options: Any) -> _InValidator:
    """
    A validator that raises a :exc:`~qoi_tools.exceptions.ValidationError` if
    the initializer is called with a value that does not belong in the
    options provided. The check is performed using ``value in options``.
    """
    return _InValidator(options)


def range_(minimum: int, maximum: int) -> _RangeValidator:
    """
    A validator that raises a :exc:`~qoi_tools.exceptions.ValidationError` if
    the initializer is called with a value that does not belong in the
    [minimum, maximum] range. The check is performed using
    ``minimum <= value and value <= maximum``
    """
    return _RangeValidator(minimum, maximum)
