"""Primitive type tags."""

from enum import Enum


class TypeTag(Enum):
    """Runtime classification of a value.

    Values are the names used in failure messages.
    UNDEFINED is produced by the classifier only (for None);
    no primitive validator checks against it.
    """

    ANY = "any"
    ARRAY = "array"
    BOOLEAN = "boolean"
    FUNCTION = "function"
    NUMBER = "number"
    OBJECT = "object"
    STRING = "string"
    UNDEFINED = "undefined"

    def __str__(self) -> str:
        """Format as message name, e.g. 'number'."""
        return self.value
