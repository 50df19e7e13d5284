"""Unit tests для domain exception taxonomy."""

import pytest

from pantry.domain.ingredients.exceptions import (
    CategoryNotFoundError,
    DuplicateIngredientError,
    IngredientDeletedError,
    IngredientNotFoundError,
    UnitNotFoundError,
)
from pantry.domain.shared import (
    AggregateNotFound,
    BusinessRuleViolation,
    DomainException,
    ErrorKind,
    ValidationError,
)
from pantry.domain.shopping.exceptions import (
    ActiveSessionExistsError,
    IngredientAccessDeniedError,
    SessionAccessDeniedError,
    SessionAlreadyCompletedError,
    SessionNotActiveError,
    ShoppingSessionNotFoundError,
)


class TestErrorKinds:
    """Tests: кожен exception несе правильний kind."""

    @pytest.mark.parametrize(
        "exc,kind",
        [
            (ValidationError("bad"), ErrorKind.VALIDATION),
            (IngredientNotFoundError(), ErrorKind.NOT_FOUND),
            (CategoryNotFoundError(), ErrorKind.NOT_FOUND),
            (UnitNotFoundError(), ErrorKind.NOT_FOUND),
            (ShoppingSessionNotFoundError(), ErrorKind.NOT_FOUND),
            (DuplicateIngredientError(), ErrorKind.DUPLICATE),
            (IngredientDeletedError("gone"), ErrorKind.BUSINESS_RULE),
            (ActiveSessionExistsError(), ErrorKind.BUSINESS_RULE),
            (SessionNotActiveError("finished"), ErrorKind.BUSINESS_RULE),
            (SessionAlreadyCompletedError(), ErrorKind.BUSINESS_RULE),
            (SessionAccessDeniedError(), ErrorKind.BUSINESS_RULE),
            (IngredientAccessDeniedError(), ErrorKind.BUSINESS_RULE),
        ],
    )
    def test_kind(self, exc, kind):
        assert isinstance(exc, DomainException)
        assert exc.kind is kind

    def test_validation_error_is_value_error(self):
        """Test: ValidationError ловиться як ValueError."""
        with pytest.raises(ValueError):
            raise ValidationError("bad input")

    def test_access_denied_messages_differ(self):
        """Test: Session ownership та ingredient ownership - різні повідомлення."""
        assert SessionAccessDeniedError().message != IngredientAccessDeniedError().message
        assert "session" in SessionAccessDeniedError().message
        assert "ingredient" in IngredientAccessDeniedError().message

    def test_already_completed_is_not_active(self):
        assert issubclass(SessionAlreadyCompletedError, SessionNotActiveError)
        assert issubclass(SessionNotActiveError, BusinessRuleViolation)
        assert issubclass(IngredientNotFoundError, AggregateNotFound)


class TestExceptionPayload:
    def test_to_dict(self):
        exc = IngredientNotFoundError(ingredient_id="ing_abc")

        assert exc.to_dict() == {
            "kind": "not_found",
            "code": "INGREDIENT_NOT_FOUND",
            "message": "Ingredient not found",
            "context": {"ingredient_id": "ing_abc"},
        }

    def test_code_override(self):
        exc = BusinessRuleViolation("nope", code="CUSTOM")
        assert exc.code == "CUSTOM"

    def test_str_includes_context(self):
        exc = ShoppingSessionNotFoundError(session_id="ses_abc")
        assert str(exc) == "Shopping session not found (session_id=ses_abc)"

    def test_match_on_kind(self):
        """Test: Presentation layer може match по kind."""

        def status_for(exc: DomainException) -> int:
            match exc.kind:
                case ErrorKind.VALIDATION:
                    return 400
                case ErrorKind.NOT_FOUND:
                    return 404
                case ErrorKind.DUPLICATE:
                    return 409
                case ErrorKind.BUSINESS_RULE:
                    return 422

        assert status_for(IngredientNotFoundError()) == 404
        assert status_for(DuplicateIngredientError()) == 409
        assert status_for(SessionAccessDeniedError()) == 422
        assert status_for(ValidationError("x")) == 400
