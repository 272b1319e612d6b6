"""Tests for the static tag registry."""

from utilsuite.core.tags import TagRecord, TagRegistry, get_default_tags, important


class TestTagRegistry:
    def test_tag_class(self):
        registry = TagRegistry()

        @registry.tag("Data Model")
        class Person:
            pass

        assert registry.is_tagged(Person)
        assert registry.get(Person) == "Data Model"

    def test_tag_function_returns_same_object(self):
        registry = TagRegistry()

        def describe():
            return "x"

        tagged = registry.tag("Main demo method")(describe)
        assert tagged is describe
        assert registry.get(describe) == "Main demo method"

    def test_default_value_is_empty(self):
        registry = TagRegistry()

        @registry.tag()
        class Plain:
            pass

        assert registry.get(Plain) == ""

    def test_scan_filters_and_keeps_order(self):
        registry = TagRegistry()

        @registry.tag("second")
        class B:
            pass

        @registry.tag("first")
        class A:
            pass

        class Untagged:
            pass

        assert registry.scan(A, Untagged, B) == [("A", "first"), ("B", "second")]

    def test_untagged(self):
        registry = TagRegistry()
        assert registry.get(int) is None
        assert not registry.is_tagged(int)
        assert registry.scan(int, str) == []

    def test_records_and_clear(self):
        registry = TagRegistry()

        @registry.tag("v")
        class T:
            pass

        assert registry.records() == [TagRecord("T", "v")]
        assert len(registry) == 1
        registry.clear()
        assert len(registry) == 0

    def test_registries_are_independent(self):
        one, two = TagRegistry(), TagRegistry()

        @one.tag("only one")
        class X:
            pass

        assert not two.is_tagged(X)


class TestImportantShortcut:
    def test_uses_default_registry(self):
        @important("Key type")
        class KeyType:
            pass

        assert get_default_tags().get(KeyType) == "Key type"
