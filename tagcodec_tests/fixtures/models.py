"""Classes referenced by name from the CLI tests."""

from dataclasses import dataclass
from typing import NamedTuple

from tagcodec import TaggedUnion, u8, u32, variant


@dataclass
class Point:
    x: u32
    y: u32


class Message(TaggedUnion):
    @variant
    class Ping:
        pass

    @variant(tag=7)
    class Data(NamedTuple):
        payload: bytes
        ttl: u8
