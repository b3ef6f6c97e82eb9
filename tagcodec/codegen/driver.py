# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Orchestrates generation: which synthesizer runs for which capability, the procedure signature and the bound checks
on type parameters, and finally compiling the source and attaching it to the class.

`generate` is a pure function of the shape, the capability and the root namespace, the same inputs always give the
same source. Everything with side effects (importing the root namespace, the dump, `exec`) happens in `derive`.
"""

from __future__ import annotations

import linecache
from collections.abc import Iterable
from typing import Any, Callable, Final, Optional, TypeVar, overload

from structlog import get_logger

from tagcodec.conf import CodegenSettings, get_global_settings
from tagcodec.codegen import record, union
from tagcodec.codegen.crate import CrateName
from tagcodec.codegen.dump import dump_procedure
from tagcodec.codegen.fields import DecodeMode
from tagcodec.codegen.procedure import GeneratedProcedure
from tagcodec.codegen.reflection import RESERVED_NAMES, RESERVED_PREFIXES, shape_from_class
from tagcodec.codegen.shape import RecordShape, Shape, UnionShape
from tagcodec.codegen.source import SourceBuilder
from tagcodec.exception import CodegenError
from tagcodec.runtime.codec_types.utils import CAPABILITIES_ATTR
from tagcodec.runtime.traits import Capability

logger = get_logger()

C = TypeVar('C', bound=type)

ALL_CAPABILITIES: Final[tuple[Capability, ...]] = (Capability.ENCODE, Capability.DECODE, Capability.BORROW_DECODE)

_DECODE_MODES: Final[dict[Capability, DecodeMode]] = {
    Capability.DECODE: DecodeMode.OWNED,
    Capability.BORROW_DECODE: DecodeMode.BORROWED,
}


def _signature(shape: Shape, capability: Capability) -> list[str]:
    params = ''.join(f', {param.__name__}' for param in shape.type_params)
    if capability is Capability.ENCODE:
        return [f'def encode(self, encoder{params}):']
    return ['@classmethod', f'def {capability.value}(cls, decoder{params}):']


def _check_crate_name(shape: Shape, crate: CrateName) -> None:
    taken = {param.__name__ for param in shape.type_params}
    top_level = crate.top_level
    if top_level in taken or top_level in RESERVED_NAMES or top_level.startswith(RESERVED_PREFIXES):
        raise CodegenError(f'root namespace {crate.name!r} clashes with a name used by the {shape.qualname} procedures')


def generate(shape: Shape, capability: Capability, *, crate: CrateName) -> GeneratedProcedure:
    """ Generate the source of one procedure.

    >>> from tagcodec.codegen.shape import UNIT
    >>> print(generate(RecordShape('Unit', 'Unit', UNIT), Capability.DECODE, crate=CrateName()).source, end='')
    @classmethod
    def decode(cls, decoder):
        return Self()
    """
    _check_crate_name(shape, crate)
    source = SourceBuilder()
    *decorators, header = _signature(shape, capability)
    for decorator in decorators:
        source.line(decorator)

    namespace: dict[str, Any]
    with source.block(header):
        for param in shape.type_params:
            source.line(f'{crate.ty("bound")}({param.__name__}, {crate.ty(capability.trait_name)})')
        match shape, capability:
            case RecordShape(), Capability.ENCODE:
                namespace = record.emit_encode(source, shape, crate)
            case RecordShape(), _:
                namespace = record.emit_decode(source, shape, crate, _DECODE_MODES[capability])
            case UnionShape(), Capability.ENCODE:
                namespace = union.emit_encode(source, shape, crate)
            case UnionShape(), _:
                namespace = union.emit_decode(source, shape, crate, _DECODE_MODES[capability])
            case _:
                raise NotImplementedError(f'unsupported shape {shape!r}')

    return GeneratedProcedure(
        type_name=shape.name,
        qualname=shape.qualname,
        capability=capability,
        source=source.build(),
        namespace=namespace,
    )


def compile_procedure(procedure: GeneratedProcedure, cls: type, *, crate: CrateName) -> Any:
    """Compile a procedure against `cls`, returns the function (a classmethod for the decoders)."""
    namespace = {**procedure.namespace, 'Self': cls, crate.top_level: crate.import_root()}
    filename = procedure.filename
    code = compile(procedure.source, filename, 'exec')
    # makes the generated lines visible in tracebacks and pdb
    linecache.cache[filename] = (len(procedure.source), None, procedure.source.splitlines(True), filename)
    exec(code, namespace)
    compiled = namespace[procedure.name]
    func = compiled.__func__ if isinstance(compiled, classmethod) else compiled
    func.__qualname__ = f'{cls.__qualname__}.{procedure.name}'
    func.__module__ = cls.__module__
    return compiled


def _normalize_capabilities(capabilities: Iterable[Capability | str]) -> tuple[Capability, ...]:
    """ Validate and dedupe the requested capabilities, in their canonical order.

    >>> _normalize_capabilities(['borrow_decode', Capability.ENCODE, 'encode'])
    (<Capability.ENCODE: 'encode'>, <Capability.BORROW_DECODE: 'borrow_decode'>)
    """
    requested = {Capability(capability) for capability in capabilities}
    return tuple(capability for capability in ALL_CAPABILITIES if capability in requested)


def generate_all(
    cls: type,
    *,
    capabilities: Iterable[Capability | str] = ALL_CAPABILITIES,
    crate: CrateName,
) -> list[GeneratedProcedure]:
    """Build the shape of `cls` and generate every requested procedure, nothing is compiled."""
    shape = shape_from_class(cls)
    return [generate(shape, capability, crate=crate) for capability in _normalize_capabilities(capabilities)]


@overload
def derive(cls: C, /) -> C:
    ...


@overload
def derive(
    *,
    capabilities: Iterable[Capability | str] = ...,
    crate: Optional[str] = ...,
    settings: Optional[CodegenSettings] = ...,
) -> Callable[[C], C]:
    ...


def derive(
    cls: Optional[C] = None,
    /,
    *,
    capabilities: Iterable[Capability | str] = ALL_CAPABILITIES,
    crate: Optional[str] = None,
    settings: Optional[CodegenSettings] = None,
) -> C | Callable[[C], C]:
    """ Class decorator that generates and attaches `encode`, `decode` and `borrow_decode`.

        @derive
        @dataclass
        class Point:
            x: i32
            y: i32

    `crate` overrides the root namespace that generated code calls the runtime through, `CRATE_ROOT` from the
    settings is used otherwise. Either every requested procedure is attached or, if anything fails, none is.
    """
    capabilities = _normalize_capabilities(capabilities)

    def wrap(cls: C) -> C:
        settings_ = settings if settings is not None else get_global_settings()
        crate_name = CrateName(crate if crate is not None else settings_.CRATE_ROOT)
        log = logger.new(type_name=cls.__qualname__, crate=crate_name.name)

        procedures = generate_all(cls, capabilities=capabilities, crate=crate_name)
        if settings_.DUMP_DIR is not None:
            for procedure in procedures:
                dump_procedure(procedure, settings_.DUMP_DIR)
        compiled = [(procedure, compile_procedure(procedure, cls, crate=crate_name)) for procedure in procedures]

        for procedure, function in compiled:
            setattr(cls, procedure.name, function)
            log.debug('procedure attached', capability=procedure.name)
        existing = cls.__dict__.get(CAPABILITIES_ATTR, frozenset())
        setattr(cls, CAPABILITIES_ATTR, frozenset(existing) | {procedure.capability for procedure in procedures})
        return cls

    if cls is None:
        return wrap
    return wrap(cls)
