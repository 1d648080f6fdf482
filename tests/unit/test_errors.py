"""
Error Taxonomy Unit Tests
Tests for hashtree/schemas/errors.py
"""
import pytest

from hashtree.schemas.errors import (
    ConfigurationException,
    ErrorCodes,
    HashTreeError,
    HashTreeException,
    InvalidInputException,
    StructuralPreconditionException,
)


class TestExceptions:
    """Exception codes and details."""

    def test_invalid_input_code(self):
        exc = InvalidInputException("bad", details={"type": "int"})

        assert exc.code == ErrorCodes.INVALID_INPUT
        assert exc.details == {"type": "int"}
        assert str(exc) == "bad"

    def test_structural_precondition_details(self):
        exc = StructuralPreconditionException("no root", node_count=0)

        assert exc.code == ErrorCodes.STRUCTURAL_PRECONDITION
        assert exc.details == {"node_count": 0}

    def test_configuration_field_path(self):
        exc = ConfigurationException("bad value", field_path="tree.max_workers")

        assert exc.code == ErrorCodes.CONFIGURATION_ERROR
        assert exc.details["field_path"] == "tree.max_workers"

    @pytest.mark.parametrize(
        "exc_type",
        [InvalidInputException, StructuralPreconditionException, ConfigurationException],
    )
    def test_subclasses_share_base(self, exc_type):
        assert issubclass(exc_type, HashTreeException)

    def test_repr(self):
        exc = InvalidInputException("bad")

        assert repr(exc) == "InvalidInputException(code='INVALID_INPUT', message='bad')"


class TestErrorModel:
    """Conversion between exceptions and HashTreeError."""

    def test_exception_to_model(self):
        exc = StructuralPreconditionException("no root", node_count=0)

        model = exc.to_error_model()

        assert isinstance(model, HashTreeError)
        assert model.code == ErrorCodes.STRUCTURAL_PRECONDITION
        assert model.message == "no root"
        assert model.details == {"node_count": 0}

    def test_model_to_exception(self):
        model = HashTreeError(code=ErrorCodes.INVALID_INPUT, message="empty")

        exc = model.to_exception()

        assert isinstance(exc, HashTreeException)
        assert exc.code == ErrorCodes.INVALID_INPUT
        assert exc.message == "empty"

    def test_model_forbids_extra_fields(self):
        with pytest.raises(Exception):
            HashTreeError(code="X", message="m", unexpected=True)

    def test_model_dump(self):
        model = InvalidInputException("bad").to_error_model()

        assert model.model_dump() == {
            "code": ErrorCodes.INVALID_INPUT,
            "message": "bad",
            "details": {},
        }
