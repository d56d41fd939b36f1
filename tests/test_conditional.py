"""Tests for conditional type resolution."""

import pytest

from xlrtypes import (
    AnyType,
    ArrayType,
    BooleanType,
    ConditionalCheck,
    ConditionalType,
    ConditionalValue,
    GenericToken,
    NullType,
    NumberType,
    ObjectType,
    RefType,
    StringType,
    UndefinedType,
    UnknownType,
    extends,
    resolve_conditional,
)

TRUE = StringType(const="yes")
FALSE = StringType(const="no")


def conditional(left, right, **kwargs) -> ConditionalType:
    return ConditionalType(
        check=ConditionalCheck(left=left, right=right),
        value=ConditionalValue(true_type=TRUE, false_type=FALSE),
        **kwargs,
    )


class TestBranchSelection:
    """Branch selection for primitive operands."""

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (AnyType(), UnknownType()),
            (UnknownType(), AnyType()),
            (AnyType(), AnyType()),
            (NullType(), UndefinedType()),
            (UndefinedType(), NullType()),
            (StringType(), StringType()),
            (StringType(const="a"), StringType(const="a")),
            (StringType(const="a"), StringType()),
            (StringType(), StringType(const="a")),
            (BooleanType(const=False), BooleanType(const=False)),
        ],
    )
    def test_true_branch(self, left, right) -> None:
        """Matching operands select the true branch."""
        assert resolve_conditional(conditional(left, right)) == TRUE

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (StringType(const="a"), StringType(const="b")),
            (StringType(), NumberType()),
            (NumberType(const=1), StringType(const="1")),
            (AnyType(), NullType()),
            (NullType(), StringType()),
            # Falsy literals are still literals and get compared
            (BooleanType(const=True), BooleanType(const=False)),
            (NumberType(const=0), NumberType(const=1)),
            (StringType(const=""), StringType(const="a")),
        ],
    )
    def test_false_branch(self, left, right) -> None:
        """Mismatched operands select the false branch."""
        assert resolve_conditional(conditional(left, right)) == FALSE

    def test_falsy_literals_compared(self) -> None:
        """false, 0 and the empty string are literal values, not missing ones."""
        assert not extends(BooleanType(const=True), BooleanType(const=False))
        assert extends(BooleanType(const=False), BooleanType(const=False))
        assert not extends(NumberType(const=0), NumberType(const=1))
        assert extends(StringType(const=""), StringType(const=""))

    def test_extends_directly(self) -> None:
        """extends() applies the same rules."""
        assert extends(NullType(), UndefinedType())
        assert not extends(NumberType(const=1), NumberType(const=2))


class TestDeferral:
    """Conditionals that can't be decided yet."""

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (ObjectType(), StringType()),
            (StringType(), ObjectType()),
            (RefType("T"), StringType()),
            (ArrayType(element_type=StringType()), ArrayType(element_type=StringType())),
        ],
    )
    def test_non_primitive_returned_unchanged(self, left, right) -> None:
        """A non-primitive operand returns the conditional itself."""
        node = conditional(left, right)
        assert resolve_conditional(node) is node


class TestGenericConditional:
    """Conditionals declaring their own generic tokens."""

    def test_tokens_filled_into_branch(self) -> None:
        """The selected branch gets the conditional's token defaults."""
        node = ConditionalType(
            check=ConditionalCheck(left=StringType(), right=StringType()),
            value=ConditionalValue(
                true_type=ArrayType(element_type=RefType("T")),
                false_type=FALSE,
            ),
            generic_tokens=(GenericToken("T", default=NumberType()),),
        )

        assert resolve_conditional(node) == ArrayType(element_type=NumberType())

    def test_token_fallbacks(self) -> None:
        """Tokens fall back to their constraint, then to any."""
        node = ConditionalType(
            check=ConditionalCheck(left=NumberType(), right=StringType()),
            value=ConditionalValue(
                true_type=TRUE,
                false_type=ArrayType(element_type=RefType("U")),
            ),
            generic_tokens=(
                GenericToken("T", constraints=BooleanType()),
                GenericToken("U"),
            ),
        )

        assert resolve_conditional(node) == ArrayType(element_type=AnyType())

    def test_non_generic_branch_returned_as_is(self) -> None:
        """Without tokens the branch is returned without rewriting."""
        branch = ArrayType(element_type=RefType("T"))
        node = ConditionalType(
            check=ConditionalCheck(left=StringType(), right=StringType()),
            value=ConditionalValue(true_type=branch, false_type=FALSE),
        )

        assert resolve_conditional(node) is branch

    def test_branch_cycle_terminates(self) -> None:
        """A selected branch that leads back to the conditional is not re-expanded."""
        array = ArrayType(element_type=StringType())
        node = ConditionalType(
            check=ConditionalCheck(left=StringType(), right=StringType()),
            value=ConditionalValue(true_type=array, false_type=FALSE),
            generic_tokens=(GenericToken("T"),),
        )
        object.__setattr__(array, "element_type", node)

        result = resolve_conditional(node)

        assert isinstance(result, ArrayType)
        assert result is not array
        assert result.element_type is node
