import dataclasses
from dataclasses import dataclass
from typing import Generic, NamedTuple, Optional, TypeVar

import pytest

from tagcodec import InvalidShapeError, TaggedUnion, u8, u16, u32, variant
from tagcodec.codegen.reflection import shape_from_class
from tagcodec.codegen.shape import UNIT, Field, Fields, FieldsStyle, RecordShape, UnionShape, Variant

T = TypeVar('T')


@dataclass
class Named:
    a: u8
    b: str


class Positional(NamedTuple):
    first: u16
    second: Optional[bytes]


@dataclass
class Unit:
    pass


@dataclass
class Box(Generic[T]):
    value: T
    items: list[T]


class Tree(TaggedUnion):
    @variant
    class Leaf:
        value: u32

    @variant(tag=3)
    class Node(NamedTuple):
        left: 'Tree'
        right: 'Tree'

    @variant
    class Nil:
        pass


class Nothing(TaggedUnion):
    pass


def test_named_record() -> None:
    assert shape_from_class(Named) == RecordShape(
        name='Named',
        qualname='Named',
        fields=Fields(FieldsStyle.NAMED, (Field('a', u8), Field('b', str))),
    )


def test_positional_record() -> None:
    shape = shape_from_class(Positional)
    assert shape.fields == Fields(FieldsStyle.POSITIONAL, (Field(0, u16), Field(1, Optional[bytes])))
    assert [field.slot for field in shape.fields] == ['0', '1']


def test_unit_record() -> None:
    assert shape_from_class(Unit).fields is UNIT


def test_generic_record() -> None:
    shape = shape_from_class(Box)
    assert shape.type_params == (T,)
    assert [field.type_ for field in shape.fields] == [T, list[T]]


def test_union() -> None:
    shape = shape_from_class(Tree)
    assert isinstance(shape, UnionShape)
    assert [variant.name for variant in shape.variants] == ['Leaf', 'Node', 'Nil']
    assert shape.variants[0] == Variant('Leaf', Fields(FieldsStyle.NAMED, (Field('value', u32),)))
    # the forward reference resolves to the union itself
    assert shape.variants[1] == Variant('Node', Fields(FieldsStyle.POSITIONAL, (Field(0, Tree), Field(1, Tree))), 3)
    assert shape.variants[2] == Variant('Nil', UNIT)


def test_empty_union() -> None:
    shape = shape_from_class(Nothing)
    assert isinstance(shape, UnionShape)
    assert shape.is_empty


def test_variants_become_frozen_dataclasses() -> None:
    assert dataclasses.is_dataclass(Tree.Leaf)
    leaf = Tree.Leaf(value=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        leaf.value = 2  # type: ignore[misc]


def test_variant_instances_are_union_instances() -> None:
    assert isinstance(Tree.Leaf(1), Tree)
    assert isinstance(Tree.Nil(), Tree)
    assert not isinstance(Named(1, 'x'), Tree)


def test_union_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        Tree()


def test_plain_class_is_rejected() -> None:
    class Plain:
        a: int

    with pytest.raises(InvalidShapeError):
        shape_from_class(Plain)


def test_non_class_is_rejected() -> None:
    with pytest.raises(InvalidShapeError):
        shape_from_class(Named(1, 'x'))  # type: ignore[arg-type]


def test_tagged_union_base_is_rejected() -> None:
    with pytest.raises(InvalidShapeError):
        shape_from_class(TaggedUnion)


def test_non_init_field_is_rejected() -> None:
    @dataclass
    class WithDefault:
        a: u8
        b: u8 = dataclasses.field(init=False, default=0)

    with pytest.raises(InvalidShapeError):
        shape_from_class(WithDefault)


def test_unresolvable_annotation() -> None:
    @dataclass
    class Broken:
        a: 'DoesNotExist'  # type: ignore[name-defined]  # noqa: F821

    with pytest.raises(InvalidShapeError):
        shape_from_class(Broken)


def test_reserved_type_parameter_name() -> None:
    encoder = TypeVar('encoder')

    @dataclass
    class Clash(Generic[encoder]):  # type: ignore[valid-type]
        a: encoder  # type: ignore[valid-type]

    with pytest.raises(InvalidShapeError):
        shape_from_class(Clash)


@pytest.mark.parametrize('tag', [-1, 2**32, True, '1', 1.0])
def test_invalid_fixed_tag(tag) -> None:
    with pytest.raises(InvalidShapeError):
        variant(tag=tag)


def test_largest_fixed_tag() -> None:
    @variant(tag=2**32 - 1)
    class Last:
        pass

    assert Last.__tagcodec_variant_tag__ == 2**32 - 1  # type: ignore[attr-defined]


def test_variant_cannot_subclass_a_variant() -> None:
    with pytest.raises(InvalidShapeError):
        class Bad(TaggedUnion):
            @variant
            class Base:
                x: u8

            @variant
            class Derived(Base):
                y: u8


def test_variant_with_a_dataclass_base_keeps_its_own_fields() -> None:
    @dataclass(frozen=True)
    class Common:
        x: u8

    class Wrapper(TaggedUnion):
        @variant
        class Extended(Common):
            y: u16

    value = Wrapper.Extended(1, 2)
    assert (value.x, value.y) == (1, 2)
    shape = shape_from_class(Wrapper)
    assert isinstance(shape, UnionShape)
    assert shape.variants[0].fields == Fields(FieldsStyle.NAMED, (Field('x', u8), Field('y', u16)))
