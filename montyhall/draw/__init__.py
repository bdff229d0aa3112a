"""Random draws without replacement."""

from .generator import NoRepeatGenerator, ValueNotAvailableError, DrawExhaustedError

__all__ = ["NoRepeatGenerator", "ValueNotAvailableError", "DrawExhaustedError"]
