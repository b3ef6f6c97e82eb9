from dataclasses import dataclass
from typing import Annotated

import pytest

from tagcodec import WITH_PYDANTIC, Attr, UnknownFieldAttribute, derive, u8
from tagcodec.codegen.attributes import parse_field_adapter
from tagcodec.codegen.reflection import shape_from_class
from tagcodec.codegen.shape import FieldAdapter
from tagcodec.exception import CodegenError


def test_no_attribute_is_plain() -> None:
    assert parse_field_adapter([]) is FieldAdapter.PLAIN


def test_with_pydantic_is_interop() -> None:
    assert parse_field_adapter([WITH_PYDANTIC]) is FieldAdapter.INTEROP
    assert parse_field_adapter([Attr('with_pydantic')]) is FieldAdapter.INTEROP


def test_unknown_token() -> None:
    with pytest.raises(UnknownFieldAttribute) as exc_info:
        parse_field_adapter([Attr('with_serde')], field='payload')
    assert exc_info.value.token == 'with_serde'
    assert exc_info.value.field == 'payload'
    assert str(exc_info.value) == 'unknown attribute \'with_serde\' on field \'payload\', expected one of: "with_pydantic"'
    assert isinstance(exc_info.value, CodegenError)


def test_unknown_token_after_known_one() -> None:
    with pytest.raises(UnknownFieldAttribute):
        parse_field_adapter([WITH_PYDANTIC, Attr('bogus')])


def test_other_annotated_metadata_is_ignored() -> None:
    @dataclass
    class Record:
        a: Annotated[u8, 'some documentation']
        b: Annotated[u8, 'more', WITH_PYDANTIC]

    shape = shape_from_class(Record)
    assert [field.adapter for field in shape.fields] == [FieldAdapter.PLAIN, FieldAdapter.INTEROP]
    assert [field.type_ for field in shape.fields] == [u8, u8]


def test_unknown_attribute_aborts_whole_derive() -> None:
    @dataclass
    class Record:
        a: u8
        b: Annotated[u8, Attr('with_serde')]

    with pytest.raises(UnknownFieldAttribute):
        derive(Record)
    assert 'encode' not in Record.__dict__
    assert 'decode' not in Record.__dict__
    assert 'borrow_decode' not in Record.__dict__
