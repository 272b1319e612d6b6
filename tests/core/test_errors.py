"""Tests for the util-suite error hierarchy."""

from utilsuite.core.errors import (
    CacheError,
    ConfigError,
    DuplicateFactoryError,
    ErrorCategory,
    ErrorContext,
    FactoryNotFoundError,
    FileIOError,
    RecursiveComputationError,
    RegistryError,
    UtilSuiteError,
)


class TestErrorContext:
    def test_empty(self):
        assert ErrorContext().to_dict() == {}

    def test_fields_and_metadata(self):
        ctx = ErrorContext(operation="read_text", path="/tmp/x", metadata={"attempt": 2})
        assert ctx.to_dict() == {"operation": "read_text", "path": "/tmp/x", "attempt": 2}


class TestUtilSuiteError:
    def test_defaults(self):
        err = UtilSuiteError("boom")
        assert err.message == "boom"
        assert str(err) == "boom"
        assert err.category == ErrorCategory.INTERNAL
        assert err.cause is None

    def test_cause_chained(self):
        root = OSError("disk")
        err = UtilSuiteError("wrapped", cause=root)
        assert err.__cause__ is root
        assert err.to_dict()["cause"] == "disk"

    def test_with_context_is_fluent(self):
        err = FileIOError("fail").with_context(path="/a", retries=3)
        assert isinstance(err, FileIOError)
        assert err.context.path == "/a"
        assert err.context.metadata == {"retries": 3}

    def test_to_dict(self):
        d = ConfigError("bad").with_context(operation="load_settings").to_dict()
        assert d == {
            "error_type": "ConfigError",
            "message": "bad",
            "category": "CONFIG",
            "context": {"operation": "load_settings"},
        }

    def test_repr(self):
        assert repr(CacheError("x")) == "CacheError('x', category=CACHE)"


class TestHierarchy:
    def test_categories(self):
        assert RegistryError("x").category == ErrorCategory.REGISTRY
        assert CacheError("x").category == ErrorCategory.CACHE
        assert FileIOError("x").category == ErrorCategory.STORAGE
        assert ConfigError("x").category == ErrorCategory.CONFIG

    def test_subclassing(self):
        assert issubclass(FactoryNotFoundError, RegistryError)
        assert issubclass(DuplicateFactoryError, RegistryError)
        assert issubclass(RecursiveComputationError, CacheError)
        assert issubclass(CacheError, UtilSuiteError)

    def test_factory_not_found_message(self):
        err = FactoryNotFoundError("Robot", ["Person"])
        assert "Robot" in err.message
        assert err.context.key == "Robot"
        assert err.context.metadata["available"] == ["Person"]

    def test_recursive_computation_key(self):
        err = RecursiveComputationError(("a", 1))
        assert err.context.key == "('a', 1)"
