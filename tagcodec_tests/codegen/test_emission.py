import textwrap
import unittest
from dataclasses import dataclass
from typing import Annotated, Generic, NamedTuple, TypeVar

from tagcodec import WITH_PYDANTIC, Capability, TaggedUnion, u8, u32, variant
from tagcodec.codegen import CrateName, generate, generate_all
from tagcodec.codegen.reflection import shape_from_class

T = TypeVar('T')
U = TypeVar('U')


@dataclass
class Point:
    x: u32
    y: u32


class Pair(NamedTuple):
    left: u8
    right: str


@dataclass
class Marker:
    pass


@dataclass
class Entry(Generic[T, U]):
    key: T
    values: list[U]
    count: u32


@dataclass
class Tagged:
    id: u32
    meta: Annotated[dict[str, int], WITH_PYDANTIC]


class Shape(TaggedUnion):
    @variant
    class Circle:
        radius: u32

    @variant(tag=5)
    class Rect(NamedTuple):
        width: u32
        height: u32

    @variant
    class Empty:
        pass


class Auto(TaggedUnion):
    @variant
    class A:
        pass

    @variant
    class B:
        pass

    @variant
    class C:
        pass


class Solo(TaggedUnion):
    @variant(tag=9)
    class Only:
        pass


class Never(TaggedUnion):
    pass


def source(cls: type, capability: Capability, crate: str = 'tagcodec') -> str:
    return generate(shape_from_class(cls), capability, crate=CrateName(crate)).source


def expected(text: str) -> str:
    return textwrap.dedent(text).lstrip('\n')


class RecordEmissionTest(unittest.TestCase):
    def test_named_encode(self) -> None:
        self.assertEqual(source(Point, Capability.ENCODE), expected('''
            def encode(self, encoder):
                tagcodec.encode(encoder, _ty_x, self.x)
                tagcodec.encode(encoder, _ty_y, self.y)
        '''))

    def test_named_decode(self) -> None:
        self.assertEqual(source(Point, Capability.DECODE), expected('''
            @classmethod
            def decode(cls, decoder):
                return Self(
                    x=tagcodec.decode(decoder, _ty_x),
                    y=tagcodec.decode(decoder, _ty_y),
                )
        '''))

    def test_positional(self) -> None:
        self.assertEqual(source(Pair, Capability.ENCODE), expected('''
            def encode(self, encoder):
                tagcodec.encode(encoder, _ty_0, self[0])
                tagcodec.encode(encoder, _ty_1, self[1])
        '''))
        self.assertEqual(source(Pair, Capability.BORROW_DECODE), expected('''
            @classmethod
            def borrow_decode(cls, decoder):
                return Self(
                    tagcodec.borrow_decode(decoder, _ty_0),
                    tagcodec.borrow_decode(decoder, _ty_1),
                )
        '''))

    def test_unit(self) -> None:
        self.assertEqual(source(Marker, Capability.ENCODE), expected('''
            def encode(self, encoder):
                pass
        '''))
        self.assertEqual(source(Marker, Capability.DECODE), expected('''
            @classmethod
            def decode(cls, decoder):
                return Self()
        '''))

    def test_generic(self) -> None:
        self.assertEqual(source(Entry, Capability.ENCODE), expected('''
            def encode(self, encoder, T, U):
                tagcodec.bound(T, tagcodec.Encode)
                tagcodec.bound(U, tagcodec.Encode)
                tagcodec.encode(encoder, T, self.key)
                tagcodec.encode(encoder, _ty_values[U], self.values)
                tagcodec.encode(encoder, _ty_count, self.count)
        '''))
        self.assertEqual(source(Entry, Capability.BORROW_DECODE), expected('''
            @classmethod
            def borrow_decode(cls, decoder, T, U):
                tagcodec.bound(T, tagcodec.BorrowDecode)
                tagcodec.bound(U, tagcodec.BorrowDecode)
                return Self(
                    key=tagcodec.borrow_decode(decoder, T),
                    values=tagcodec.borrow_decode(decoder, _ty_values[U]),
                    count=tagcodec.borrow_decode(decoder, _ty_count),
                )
        '''))

    def test_generic_namespace(self) -> None:
        procedure = generate(shape_from_class(Entry), Capability.ENCODE, crate=CrateName())
        self.assertEqual(procedure.namespace, {'_ty_values': list[U], '_ty_count': u32})

    def test_interop_field(self) -> None:
        self.assertEqual(source(Tagged, Capability.ENCODE), expected('''
            def encode(self, encoder):
                tagcodec.encode(encoder, _ty_id, self.id)
                tagcodec.encode(encoder, tagcodec.Compat[_ty_meta], tagcodec.Compat(self.meta))
        '''))
        self.assertEqual(source(Tagged, Capability.DECODE), expected('''
            @classmethod
            def decode(cls, decoder):
                return Self(
                    id=tagcodec.decode(decoder, _ty_id),
                    meta=tagcodec.decode(decoder, tagcodec.Compat[_ty_meta]).value,
                )
        '''))
        self.assertEqual(source(Tagged, Capability.BORROW_DECODE), expected('''
            @classmethod
            def borrow_decode(cls, decoder):
                return Self(
                    id=tagcodec.borrow_decode(decoder, _ty_id),
                    meta=tagcodec.borrow_decode(decoder, tagcodec.BorrowCompat[_ty_meta]).value,
                )
        '''))


class UnionEmissionTest(unittest.TestCase):
    def test_encode(self) -> None:
        self.assertEqual(source(Shape, Capability.ENCODE), expected('''
            def encode(self, encoder):
                match self:
                    case Self.Circle(radius=field_radius):
                        tagcodec.encode(encoder, tagcodec.u32, 0)
                        tagcodec.encode(encoder, _ty_0_radius, field_radius)
                    case Self.Rect(field_0, field_1):
                        tagcodec.encode(encoder, tagcodec.u32, 5)
                        tagcodec.encode(encoder, _ty_1_0, field_0)
                        tagcodec.encode(encoder, _ty_1_1, field_1)
                    case Self.Empty():
                        tagcodec.encode(encoder, tagcodec.u32, 5 + 1)
                    case _:
                        tagcodec.unreachable(self)
        '''))

    def test_decode(self) -> None:
        self.assertEqual(source(Shape, Capability.DECODE), expected('''
            @classmethod
            def decode(cls, decoder):
                variant_index = tagcodec.decode(decoder, tagcodec.u32)
                match variant_index:
                    case 0:
                        return Self.Circle(
                            radius=tagcodec.decode(decoder, _ty_0_radius),
                        )
                    case 5:
                        return Self.Rect(
                            tagcodec.decode(decoder, _ty_1_0),
                            tagcodec.decode(decoder, _ty_1_1),
                        )
                    case x if x == 5 + 1:
                        return Self.Empty()
                    case variant:
                        raise tagcodec.UnexpectedVariantError(
                            found=variant,
                            type_name='Shape',
                            allowed=tagcodec.AllowedTags((0, 5, 5 + 1)),
                        )
        '''))

    def test_auto_tags_use_a_range(self) -> None:
        decode = source(Auto, Capability.DECODE)
        self.assertIn('allowed=tagcodec.AllowedRange(min=0, max=2),', decode)
        self.assertNotIn('AllowedTags', decode)
        self.assertNotIn(' if x == ', decode)

    def test_single_fixed_tag(self) -> None:
        self.assertIn('allowed=tagcodec.AllowedTags((9,)),', source(Solo, Capability.DECODE))

    def test_empty_union(self) -> None:
        self.assertEqual(source(Never, Capability.ENCODE), expected('''
            def encode(self, encoder):
                match self:
                    case _:
                        tagcodec.unreachable(self)
        '''))
        self.assertEqual(source(Never, Capability.BORROW_DECODE), expected('''
            @classmethod
            def borrow_decode(cls, decoder):
                raise tagcodec.EmptyUnionError(type_name=tagcodec.type_name(Self))
        '''))


class EmissionPropertiesTest(unittest.TestCase):
    classes = [Point, Pair, Marker, Entry, Tagged, Shape, Auto, Solo, Never]

    def test_deterministic(self) -> None:
        for cls in self.classes:
            first = generate_all(cls, crate=CrateName())
            second = generate_all(cls, crate=CrateName())
            self.assertEqual(first, second)
            self.assertEqual([p.source for p in first], [p.source for p in second])

    def test_owned_and_borrowed_decode_are_symmetric(self) -> None:
        for cls in self.classes:
            shape = shape_from_class(cls)
            owned = generate(shape, Capability.DECODE, crate=CrateName())
            borrowed = generate(shape, Capability.BORROW_DECODE, crate=CrateName())
            rewritten = (
                borrowed.source
                .replace('borrow_decode', 'decode')
                .replace('BorrowCompat', 'Compat')
                .replace('BorrowDecode', 'Decode')
            )
            self.assertEqual(rewritten, owned.source)
            self.assertEqual(borrowed.namespace, owned.namespace)

    def test_every_runtime_reference_is_qualified(self) -> None:
        for cls in self.classes:
            for procedure in generate_all(cls, crate=CrateName('my_runtime.codec')):
                self.assertNotIn('tagcodec.', procedure.source)
        self.assertIn('my_runtime.codec.encode(encoder, my_runtime.codec.u32, 0)', source(Shape, Capability.ENCODE,
                                                                                        'my_runtime.codec'))

    def test_capability_selection(self) -> None:
        procedures = generate_all(Point, capabilities=['borrow_decode', Capability.ENCODE], crate=CrateName())
        self.assertEqual([p.name for p in procedures], ['encode', 'borrow_decode'])
        self.assertEqual([p.trait_name for p in procedures], ['Encode', 'BorrowDecode'])

    def test_generated_source_compiles(self) -> None:
        for cls in self.classes:
            for procedure in generate_all(cls, crate=CrateName()):
                compile(procedure.source, procedure.filename, 'exec')
