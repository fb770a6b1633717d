"""Runtime identifiers and name mangling for generated C."""

from __future__ import annotations

# The runtime's opaque tagged value type.
VALUE_TYPE = "Value*"

# Value constructors provided by value.c
INT_CTOR = "int_value"
FLOAT_CTOR = "float_value"
STRING_CTOR = "string_value"
ARRAY_CTOR = "array_value"
NONE_CTOR = "none_value"

# Truthiness coercion used by branches
TRUTHY_FUNC = "evaluateToBoolean"

# Terminates the element list handed to array_value
ARRAY_TERMINATOR = "NULL"

SIGIL = "_"


def mangle_name(name: str) -> str:
    """Mangle a source identifier for C with the ``_`` sigil.

    e.g. "add" -> "_add", "x" -> "_x"

    The prefix keeps source names such as ``if``, ``return`` or ``int``
    from colliding with C keywords. Functions and parameters share the
    scheme, so built-ins resolve to the runtime's ``_add``, ``_print`` ...
    """
    return f"{SIGIL}{name}"


def escape_c_string(s: str) -> str:
    """Escape a string for a C string literal."""
    return (
        s.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
