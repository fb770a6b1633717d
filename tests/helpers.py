"""Shared AST builders for the tagc test suite."""

from __future__ import annotations

from tagc.ast_nodes import (
    ArrayLiteral,
    Branch,
    Call,
    FloatLiteral,
    FunctionDef,
    Identifier,
    IntLiteral,
    NameRef,
    StringLiteral,
    ValueNode,
)


def int_(value: str | int) -> IntLiteral:
    return IntLiteral(str(value))


def float_(value: str | float) -> FloatLiteral:
    return FloatLiteral(str(value))


def str_(value: str) -> StringLiteral:
    return StringLiteral(value)


def name(value: str) -> NameRef:
    return NameRef(value)


def array(*values: ValueNode) -> ArrayLiteral:
    return ArrayLiteral(list(values))


def branch(cond: ValueNode, truthy: ValueNode, falsy: ValueNode) -> Branch:
    return Branch(cond, truthy, falsy)


def call(fname: str, *args: ValueNode, line: int = 1) -> Call:
    return Call(Identifier(fname, line), list(args))


def define(fname: str, params: list[str], *body: Call) -> FunctionDef:
    """Build a top-level definition: define("f", ["x"], call("add", ...))."""
    return FunctionDef(
        Identifier(fname),
        [Identifier(p) for p in params],
        list(body),
    )


# Minimal stand-ins for the runtime files: enough structure to check
# ordering and include handling without a real runtime.
RUNTIME_TEXTS: dict[str, str] = {
    "utils.h": (
        "#ifndef UTILS_H\n"
        "#define UTILS_H\n"
        "#include <stdlib.h>\n"
        "char* copy_string(const char* s);\n"
        "#endif\n"
    ),
    "value.h": (
        "#ifndef VALUE_H\n"
        "#define VALUE_H\n"
        '#include "utils.h"\n'
        "typedef struct Value Value;\n"
        "Value* int_value(long v);\n"
        "#endif\n"
    ),
    "utils.c": (
        '#include "utils.h"\n'
        "#include <string.h>\n"
        "char* copy_string(const char* s) { return strdup(s); }\n"
    ),
    "value.c": (
        '#include "value.h"\n'
        "#include <stdlib.h>\n"
        "/* value constructors */\n"
    ),
    "builtins.c": (
        '#include "value.h"\n'
        '#include "utils.h"\n'
        "/* builtin implementations */\n"
    ),
    "entry.c": (
        '#include "value.h"\n'
        "int main(void) { _main(); return 0; }\n"
    ),
}

# greet(who) = join([string "hello", who], string " ")
# main() = print(greet(string "world"))
HELLO_PROGRAM: list[dict] = [
    {
        "type": "def",
        "name": {"value": "greet"},
        "args": [{"value": "who"}],
        "body": [
            {
                "type": "call",
                "name": {"value": "join", "line": 2},
                "args": [
                    {"type": "array", "values": [
                        {"type": "string", "value": "hello"},
                        {"type": "name", "value": "who"},
                    ]},
                    {"type": "string", "value": " "},
                ],
            },
        ],
    },
    {
        "type": "def",
        "name": {"value": "main"},
        "args": [],
        "body": [
            {
                "type": "call",
                "name": {"value": "print", "line": 5},
                "args": [{
                    "type": "call",
                    "name": {"value": "greet", "line": 5},
                    "args": [{"type": "string", "value": "world"}],
                }],
            },
        ],
    },
]
