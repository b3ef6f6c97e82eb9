from dataclasses import dataclass
from typing import Generic, TypeVar

import pytest
from pydantic import ValidationError

from tagcodec import CodegenError, CodegenSettings, TaggedUnion, decode_from_bytes, derive, encode_to_bytes, u8, variant
from tagcodec.codegen import CrateName, generate_all

T = TypeVar('T')
tagcodec_tests = TypeVar('tagcodec_tests')


@derive(crate='tagcodec_tests.fixtures.reexport')
@dataclass
class Reexported:
    a: u8
    b: list[str]


@derive(settings=CodegenSettings(CRATE_ROOT='tagcodec_tests.fixtures.reexport'))
class ReexportedUnion(TaggedUnion):
    @variant
    class One:
        pass

    @variant(tag=4)
    class Two:
        value: u8


def test_generated_code_uses_the_given_root() -> None:
    for procedure in generate_all(Reexported, crate=CrateName('tagcodec_tests.fixtures.reexport')):
        assert 'tagcodec.' not in procedure.source.replace('tagcodec_tests.fixtures.reexport.', '')


def test_round_trip_through_reexport() -> None:
    value = Reexported(1, ['x'])
    assert decode_from_bytes(Reexported, encode_to_bytes(Reexported, value)) == value
    value2 = ReexportedUnion.Two(9)
    assert encode_to_bytes(ReexportedUnion, value2) == bytes.fromhex('00000004' '09')
    assert decode_from_bytes(ReexportedUnion, bytes.fromhex('00000004' '09')) == value2


def test_same_wire_format_as_default_root() -> None:
    @derive
    @dataclass
    class Default:
        a: u8
        b: list[str]

    assert encode_to_bytes(Default, Default(1, ['x'])) == encode_to_bytes(Reexported, Reexported(1, ['x']))


def test_missing_root() -> None:
    @dataclass
    class Orphan:
        a: u8

    with pytest.raises(CodegenError):
        derive(crate='no_such_module_for_tagcodec')(Orphan)
    assert 'encode' not in Orphan.__dict__


@pytest.mark.parametrize('name', ['', '1abc', 'a..b', 'a-b', 'a.'])
def test_invalid_root(name: str) -> None:
    with pytest.raises(CodegenError):
        CrateName(name)
    # settings validate the configured root the same way
    with pytest.raises(ValidationError):
        CodegenSettings(CRATE_ROOT=name)


def test_root_clashing_with_type_parameter() -> None:
    @dataclass
    class Clash(Generic[tagcodec_tests]):  # type: ignore[valid-type]
        a: tagcodec_tests  # type: ignore[valid-type]

    with pytest.raises(CodegenError):
        derive(crate='tagcodec_tests.fixtures.reexport')(Clash)


@pytest.mark.parametrize('name', ['encoder', 'Self', 'x', '_ty_foo', 'field_a'])
def test_root_clashing_with_generated_names(name: str) -> None:
    @dataclass
    class Record:
        a: u8

    with pytest.raises(CodegenError):
        generate_all(Record, crate=CrateName(name))


def test_namespace_binds_the_root() -> None:
    namespace = Reexported.encode.__globals__  # type: ignore[attr-defined]
    assert 'tagcodec_tests' in namespace
    assert 'tagcodec' not in namespace
