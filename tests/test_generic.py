"""Generic tree-sitter backend: Python, C++, C, Java and Go rules."""

from codeatlas.extractors.generic import RULES, NodeKind
from codeatlas.model import CallEdge, SourceLocation

FILE = "/project/{}"


def _names(edges):
    return [edge.name for edge in edges]


class TestRuleTables:
    def test_base_import_kinds_in_every_language(self):
        for rules in RULES.values():
            for node_type in (
                "import_statement",
                "import_declaration",
                "package_declaration",
                "include_directive",
                "using_declaration",
            ):
                assert rules.classify(node_type) is NodeKind.IMPORT

    def test_go_has_no_function_or_call_kinds(self):
        kinds = set(RULES["go"].kinds.values())
        assert kinds == {NodeKind.IMPORT}


class TestPython:
    def test_call_before_callee_definition_has_no_line(self, analyze):
        report = analyze("m.py", "def a(): b()\ndef b(): pass\n")
        assert report.functions == ["a", "b"]
        assert report.function_calls["a"] == [
            CallEdge("b", SourceLocation(FILE.format("m.py")))
        ]
        assert report.function_calls["b"] == []

    def test_call_after_callee_definition_has_lines(self, analyze):
        report = analyze("m.py", "def b(): pass\ndef a(): b()\n")
        assert report.function_calls["a"] == [
            CallEdge("b", SourceLocation(FILE.format("m.py"), 1, 1))
        ]

    def test_attribute_call_uses_member_name(self, analyze):
        report = analyze(
            "m.py",
            """
            def run(service):
                service.client.fetch()
                print(len(service))
            """,
        )
        assert _names(report.function_calls["run"]) == ["fetch", "print", "len"]

    def test_other_callee_shapes_ignored(self, analyze):
        report = analyze(
            "m.py",
            """
            def run(handlers):
                handlers[0]()
                (lambda: 1)()
            """,
        )
        assert report.function_calls["run"] == []

    def test_module_level_calls_not_attributed(self, analyze):
        report = analyze(
            "m.py",
            """
            setup()

            def f():
                pass

            main()
            """,
        )
        assert report.functions == ["f"]
        assert report.function_calls == {"f": []}

    def test_imports_deduplicated(self, analyze):
        report = analyze(
            "m.py",
            """
            import os
            from typing import List
            import os

            def f():
                import json
            """,
        )
        assert report.dependencies == [
            "import os",
            "from typing import List",
            "import json",
        ]

    def test_nested_function_owns_its_calls(self, analyze):
        report = analyze(
            "m.py",
            """
            def outer():
                def inner():
                    helper()
                inner()
            """,
        )
        assert report.functions == ["outer", "inner"]
        assert report.function_calls["inner"] == [
            CallEdge("helper", SourceLocation(FILE.format("m.py")))
        ]
        assert report.function_calls["outer"] == [
            CallEdge("inner", SourceLocation(FILE.format("m.py"), 2, 3))
        ]

    def test_same_callee_on_distinct_lines(self, analyze):
        report = analyze(
            "m.py",
            """
            def main():
                helper()
                def helper():
                    pass
                helper()
                helper()
            """,
        )
        edges = report.function_calls["main"]
        assert _names(edges) == ["helper", "helper"]
        assert [e.location.start_line for e in edges] == [None, 3]

    def test_redefinition_reports_latest_calls(self, analyze):
        report = analyze(
            "m.py",
            """
            class Box:
                @property
                def size(self):
                    return measure(self)

                @size.setter
                def size(self, value):
                    store(value)
            """,
        )
        assert report.functions == ["size", "size"]
        assert _names(report.function_calls["size"]) == ["store"]

    def test_methods(self, analyze):
        report = analyze(
            "m.py",
            """
            class Repo:
                def save(self):
                    self.validate()

                def validate(self):
                    return True
            """,
        )
        assert report.functions == ["save", "validate"]
        assert _names(report.function_calls["save"]) == ["validate"]


class TestCpp:
    def test_qualified_name_stripped(self, analyze):
        report = analyze("foo.cpp", "void Foo::bar() { baz(); }\n")
        assert report.functions == ["bar"]
        assert report.function_calls["bar"] == [
            CallEdge("baz", SourceLocation(FILE.format("foo.cpp")))
        ]

    def test_includes_and_using(self, analyze):
        report = analyze(
            "foo.cpp",
            """
            #include <vector>
            #include "foo.h"
            #include <vector>
            using std::vector;

            int main() { return 0; }
            """,
        )
        assert report.dependencies == [
            "#include <vector>",
            '#include "foo.h"',
            "using std::vector;",
        ]

    def test_member_calls(self, analyze):
        report = analyze(
            "widget.cpp",
            """
            int helper(int x) { return x; }

            class Widget {
            public:
                void draw() {
                    helper(1);
                    this->paint();
                    canvas.flush();
                    std::sort(a, b);
                }
            };
            """,
        )
        assert report.functions == ["helper", "draw"]
        edges = report.function_calls["draw"]
        assert _names(edges) == ["helper", "paint", "flush"]
        assert edges[0].location == SourceLocation(FILE.format("widget.cpp"), 1, 1)

    def test_calls_outside_bodies_ignored(self, analyze):
        report = analyze(
            "g.cpp",
            """
            int total = compute();

            void run() {}
            """,
        )
        assert report.functions == ["run"]
        assert report.function_calls == {"run": []}

    def test_parameter_types_do_not_affect_name(self, analyze):
        report = analyze("s.cpp", "void greet(std::string name) { say(name); }\n")
        assert report.functions == ["greet"]
        assert _names(report.function_calls["greet"]) == ["say"]


class TestC:
    def test_function_and_include(self, analyze):
        report = analyze(
            "main.c",
            """
            #include <stdio.h>

            int main(void) {
                printf("hi");
                return 0;
            }
            """,
        )
        assert report.dependencies == ["#include <stdio.h>"]
        assert report.functions == ["main"]
        assert _names(report.function_calls["main"]) == ["printf"]

    def test_pointer_returning_function(self, analyze):
        report = analyze(
            "names.c",
            """
            char *name_of(int id) {
                return lookup(id);
            }
            """,
        )
        assert report.functions == ["name_of"]
        assert _names(report.function_calls["name_of"]) == ["lookup"]


class TestJava:
    def test_methods_imports_and_calls(self, analyze):
        report = analyze(
            "Greeter.java",
            """
            package com.example;

            import java.util.List;

            public class Greeter {
                public void greet() {
                    helper();
                    System.out.println("hi");
                }

                private void helper() {}
            }
            """,
        )
        assert report.dependencies == ["package com.example;", "import java.util.List;"]
        assert report.functions == ["greet", "helper"]
        # The first identifier of a chained invocation names the edge.
        assert _names(report.function_calls["greet"]) == ["helper", "System"]
        assert report.function_calls["helper"] == []

    def test_annotated_method_name(self, analyze):
        report = analyze(
            "Item.java",
            """
            public class Item {
                @Override
                public String toString() {
                    return format();
                }
            }
            """,
        )
        assert report.functions == ["toString"]
        assert _names(report.function_calls["toString"]) == ["format"]


class TestGo:
    def test_only_dependencies(self, analyze):
        source = 'package main\n\nimport (\n\t"fmt"\n)\n\nfunc main() {\n\tfmt.Println("hi")\n}\n'
        report = analyze("main.go", source)
        assert report.dependencies[0] == "package main"
        assert report.dependencies[1].startswith("import (")
        assert '"fmt"' in report.dependencies[1]
        assert report.functions == []
        assert report.function_calls == {}
