"""Tests for the function table."""

from tagc.symbols import BUILTINS, FunctionEntry, FunctionTable, user_entries
from tests.helpers import call, define


class TestBuiltins:
    def test_table_contents(self):
        assert [(e.name, e.argc) for e in BUILTINS] == [
            ("null", 0), ("false", 0), ("true", 0),
            ("add", 2), ("sub", 2), ("mul", 2), ("div", 2), ("mod", 2),
            ("pow", 2), ("sqrt", 1), ("string", 1), ("at", 2),
            ("length", 1), ("join", 2), ("split", 2), ("map", 1),
            ("reduce", 3), ("reduceRight", 3), ("repeat", 2),
            ("if", 3), ("return", 1), ("print", 1), ("input", 1),
        ]

    def test_builtins_are_not_userdef(self):
        assert not any(e.userdef for e in BUILTINS)

    def test_builtin_names_unique(self):
        names = [e.name for e in BUILTINS]
        assert len(names) == len(set(names))


class TestBuild:
    def test_user_entries_follow_builtins(self):
        program = [define("foo", ["a"]), define("bar", ["a", "b"])]
        table = FunctionTable.build(BUILTINS, program)
        entries = list(table)
        assert len(table) == len(BUILTINS) + 2
        assert entries[-2:] == [
            FunctionEntry("foo", 1, userdef=True),
            FunctionEntry("bar", 2, userdef=True),
        ]

    def test_user_entries_source_order(self):
        program = [define("z", []), define("a", ["x", "y", "z"])]
        assert user_entries(program) == [
            FunctionEntry("z", 0, True),
            FunctionEntry("a", 3, True),
        ]

    def test_arity_counts_parameters_not_body(self):
        program = [define("f", ["x"], call("print", call("null")), call("null"))]
        assert user_entries(program)[0].argc == 1


class TestLookup:
    def test_lookup_builtin(self):
        table = FunctionTable.build(BUILTINS, [])
        assert table.lookup("reduceRight") == FunctionEntry("reduceRight", 3)

    def test_lookup_missing(self):
        table = FunctionTable.build(BUILTINS, [])
        assert table.lookup("nope") is None

    def test_builtin_shadows_user_definition(self):
        table = FunctionTable.build(BUILTINS, [define("add", ["x"])])
        entry = table.lookup("add")
        assert entry is not None
        assert entry.argc == 2
        assert not entry.userdef

    def test_first_user_definition_wins(self):
        table = FunctionTable.build(BUILTINS, [define("f", ["a"]), define("f", [])])
        entry = table.lookup("f")
        assert entry is not None
        assert entry.argc == 1

    def test_shadowed_entries(self):
        program = [define("add", ["x"]), define("ok", []), define("ok", ["y"])]
        table = FunctionTable.build(BUILTINS, program)
        assert [(e.name, e.argc) for e in table.shadowed()] == [("add", 1), ("ok", 1)]

    def test_shadowed_user_entry_still_listed(self):
        table = FunctionTable.build(BUILTINS, [define("print", ["x"])])
        assert [e.name for e in table.user_defined()] == ["print"]
