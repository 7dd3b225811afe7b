"""Tests for the reachability walk."""

from heap_fixtures.graph import describe, walk
from heap_fixtures.shapes import arrays, class_reference, cycle, hello, mapping, text_buffer


class TestWalk:
    """Test walk()."""

    def test_cycle_terminates(self) -> None:
        """Each node of the cycle is yielded once."""
        o1 = cycle.build()
        visited = list(walk(o1, "o1"))
        assert [path for path, _ in visited] == ["o1", "o1.o2"]
        assert visited[1][1] is o1.o2

    def test_none_root(self) -> None:
        assert list(walk(None)) == []

    def test_skips_none_fields(self) -> None:
        paths = [path for path, _ in walk(hello.build(), "foo")]
        assert "foo.null_field" not in paths
        assert "foo.baz" in paths
        assert "foo.empty" in paths

    def test_declaration_order(self) -> None:
        """Fields come out in declaration order, inherited fields first."""
        paths = [path for path, _ in walk(hello.build(), "foo")]
        assert paths.index("foo.gokurosan") < paths.index("foo.a")
        assert paths.index("foo.msg") < paths.index("foo.baz")

    def test_distinct_array_elements(self) -> None:
        objects = [obj for _, obj in walk(arrays.build(), "o1")]
        assert sum(isinstance(obj, arrays.Object2) for obj in objects) == 10

    def test_dict_keys_and_values(self) -> None:
        paths = [path for path, _ in walk(mapping.build(), "o1")]
        assert "o1.map[1]" in paths
        assert "o1.map<key 5>" in paths

    def test_type_is_leaf(self) -> None:
        """A type reference is reached but not descended into."""
        visited = list(walk(class_reference.build(), "o1"))
        assert visited[-1] == ("o1.klass", class_reference.Object2)


class TestDescribe:
    """Test describe()."""

    def test_cycle_back_reference(self) -> None:
        assert describe(cycle.build(), "o1") == [
            "o1: Object1",
            "  o2: Object2",
            "    o1 -> o1",
        ]

    def test_mapping(self) -> None:
        assert describe(mapping.build(), "o1") == [
            "o1: Object1",
            "  map: dict[3]",
            "    [1]: 2",
            "    [3]: 4",
            "    [5]: 6",
        ]

    def test_leaves(self) -> None:
        lines = describe(hello.build(), "foo")
        assert "  null_field: None" in lines
        assert "  msg: 'Hello'" in lines
        assert "  empty: Empty" in lines

    def test_type_and_buffer_leaves(self) -> None:
        assert describe(class_reference.build(), "o1")[1] == "  klass: type Object2"
        assert describe(text_buffer.build(), "r1")[1] == "  string_builder: StringIO('HELLO')"

    def test_shared_leaves_repeat(self) -> None:
        """Shared immutable leaves are printed at every position."""
        lines = describe(arrays.build(), "o1")
        assert lines.count("    [9]: 'a'") == 1
        assert sum(line.strip().endswith(": 'a'") for line in lines) == 10
        assert "  o3: list[0]" in lines
