import os
import shutil
import tempfile
from typing import Any
from unittest import TestCase as _TestCase

from structlog import get_logger

from tagcodec import Deserializer, Serializer, borrow_decode_from_bytes, decode_from_bytes, encode_to_bytes
from tagcodec.serialization.types import Buffer

logger = get_logger()


class TestCase(_TestCase):
    def setUp(self) -> None:
        self.tmpdirs: list[str] = []
        self.log = logger.new()

    def tearDown(self) -> None:
        self.clean_tmpdirs()

    def mkdtemp(self) -> str:
        tmpdir = tempfile.mkdtemp()
        self.tmpdirs.append(tmpdir)
        return tmpdir

    def clean_tmpdirs(self) -> None:
        for tmpdir in self.tmpdirs:
            shutil.rmtree(tmpdir)

    def encode_with(self, cls: Any, value: Any, *type_args: Any) -> bytes:
        """Call the generated `encode` directly, bypassing the type map."""
        serializer = Serializer.build_bytes_serializer()
        cls.encode(value, serializer, *type_args)
        return serializer.finalize()

    def decode_with(self, cls: Any, data: Buffer, *type_args: Any, borrow: bool = False) -> Any:
        """Call the generated `decode` or `borrow_decode` directly and check that the input was consumed."""
        deserializer = Deserializer.build_bytes_deserializer(data)
        method = cls.borrow_decode if borrow else cls.decode
        value = method(deserializer, *type_args)
        deserializer.finalize()
        return value

    def assertRoundTrip(self, type_: Any, value: Any) -> bytes:
        """Encode `value` and check both decodes give it back, returns the encoded bytes."""
        data = encode_to_bytes(type_, value)
        self.assertEqual(decode_from_bytes(type_, data), value)
        self.assertEqual(borrow_decode_from_bytes(type_, data), value)
        return data

    def assertFileContents(self, path: str, expected: str) -> None:
        self.assertTrue(os.path.isfile(path), path)
        with open(path, 'r', encoding='utf-8') as fp:
            self.assertEqual(fp.read(), expected)
