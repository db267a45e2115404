"""
Base64url codec (RFC 4648 section 5, padding omitted).

Translates between the URL-safe unpadded form and the padded standard
form understood by a Base64Engine. Decoding a bytearray works in place:
the window is rewritten with the standard alphabet and the missing
padding is appended after it, so the buffer needs trailing capacity
(see required_decode_buffer_size).
"""
from typing import Optional, Union

from ..config import CodecConfig
from ..engine import Base64Engine, BytesLike, StandardBase64Engine
from ..exceptions import (
    ArgumentBoundsError,
    InvalidLengthError,
    MalformedInputError,
    WebEncodersError,
)
from ..logging import get_logger
from .sizing import (
    count_padding_chars,
    padding_chars_to_add,
    required_decode_buffer_size,
    required_encode_buffer_size,
)
from .validation import ensure_non_negative, ensure_not_none, validate_window

EncodedInput = Union[str, bytes, bytearray, memoryview]

_TO_STANDARD = bytes.maketrans(b'-_', b'+/')
_TO_URL_SAFE = bytes.maketrans(b'+/', b'-_')


def _byte_view(data: BytesLike) -> memoryview:
    """Flat unsigned-byte view, so lengths and offsets count bytes."""
    try:
        return memoryview(data).cast('B')
    except TypeError as e:
        raise TypeError(f"input must be a contiguous bytes-like object: {e}") from e


def _resolve_count(length: int, offset: int, count: Optional[int]) -> int:
    """Defaults count to the rest of the buffer after offset."""
    if count is not None:
        return count
    ensure_non_negative(offset, 'offset')
    return max(length - offset, 0)


class Base64UrlCodec:
    """
    Base64url encoder/decoder over (buffer, offset, count) windows.

    Instances hold only configuration and an engine, so one codec can
    be shared freely between threads.
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        engine: Optional[Base64Engine] = None
    ):
        """
        Initializes the codec.

        Args:
            config: Codec configuration (defaults to CodecConfig.default())
            engine: Standard Base64 engine (defaults to StandardBase64Engine)
        """
        self.config = config or CodecConfig.default()
        self.engine = engine or StandardBase64Engine(
            validate=self.config.validate_alphabet
        )

        # Shared by every codec; levels belong to setup_logging()
        self._logger = get_logger('webencoders.codec')

    def _log(self, message: str) -> None:
        self._logger.log(self.config.log_level, message)

    def required_decode_buffer_size(self, count: int) -> int:
        """Buffer size needed to decode count characters in place."""
        return required_decode_buffer_size(count, self.config.max_buffer_size)

    def required_encode_buffer_size(self, count: int) -> int:
        """Output buffer size needed to encode count bytes."""
        return required_encode_buffer_size(count, self.config.max_buffer_size)

    def decode(
        self,
        data: EncodedInput,
        offset: int = 0,
        count: Optional[int] = None
    ) -> bytes:
        """
        Decodes a base64url window.

        A bytearray is decoded in place and its contents are not preserved;
        it must hold required_decode_buffer_size(count) bytes from offset.
        Any other input (str, bytes, memoryview) is copied first.

        Args:
            data: Base64url text without padding or whitespace
            offset: Position at which decoding begins
            count: Number of characters to decode (defaults to the rest)

        Returns:
            The decoded bytes (b'' for an empty window)

        Raises:
            ArgumentNullError: If data is None
            ArgumentRangeError: If offset or count is negative
            ArgumentBoundsError: If the window or its padding does not fit
            InvalidLengthError: If count % 4 == 1
            MalformedInputError: If the window is not valid base64url
        """
        ensure_not_none(data, 'input')
        if not isinstance(data, (str, bytearray)):
            data = _byte_view(data)
        count = _resolve_count(len(data), offset, count)
        validate_window(len(data), offset, count)

        if count == 0:
            return b''

        if isinstance(data, bytearray):
            return self._decode_in_place(data, offset, count)

        # Read-only input: copy into a buffer with room for the padding
        buffer = bytearray(self._required_for_decode(count))
        buffer[:count] = self._ascii_window(data, offset, count)
        return self._decode_in_place(buffer, 0, count)

    def _ascii_window(self, data: Union[str, memoryview], offset: int, count: int) -> bytes:
        if isinstance(data, str):
            try:
                return data[offset:offset + count].encode('ascii')
            except UnicodeEncodeError as e:
                position = offset + e.start
                self._log(f"Rejected non-ASCII character at position {position}")
                raise MalformedInputError(
                    f"Malformed input: non-ASCII character at position {position}",
                    'input'
                ) from e
        return data[offset:offset + count].tobytes()

    def _required_for_decode(self, count: int) -> int:
        try:
            return self.required_decode_buffer_size(count)
        except InvalidLengthError:
            self._log(f"Rejected base64url length {count}")
            raise

    def _decode_in_place(self, buffer: bytearray, offset: int, count: int) -> bytes:
        required = self._required_for_decode(count)
        padding = padding_chars_to_add(count)
        assert required % 4 == 0, "padded length must be a multiple of 4"

        if len(buffer) - offset < required:
            self._log(
                f"Rejected window: {required} characters needed from offset {offset}, "
                f"buffer holds {len(buffer)}"
            )
            raise ArgumentBoundsError('count', 'offset', 'input')

        end = offset + count
        buffer[offset:end] = buffer[offset:end].translate(_TO_STANDARD)
        buffer[end:end + padding] = b'=' * padding

        self._log(f"Decoding {required}-character padded window")
        try:
            return self.engine.decode(buffer[offset:offset + required])
        except ValueError as e:
            self._log(f"Engine rejected {required}-character window: {e}")
            raise MalformedInputError(f"Malformed input: {e}", 'input') from e

    def encode(
        self,
        data: BytesLike,
        offset: int = 0,
        count: Optional[int] = None
    ) -> str:
        """
        Encodes a binary window using base64url without padding.

        Args:
            data: Bytes to encode
            offset: Position at which encoding begins
            count: Number of bytes to encode (defaults to the rest)

        Returns:
            The base64url text ('' for an empty window)
        """
        ensure_not_none(data, 'input')
        data = _byte_view(data)
        count = _resolve_count(len(data), offset, count)
        validate_window(len(data), offset, count)

        if count == 0:
            return ''

        buffer = bytearray(self.required_encode_buffer_size(count))
        written = self.encode_into(data, offset, count, buffer, 0)
        return buffer[:written].decode('ascii')

    def encode_into(
        self,
        data: BytesLike,
        offset: int,
        count: int,
        output: bytearray,
        output_offset: int
    ) -> int:
        """
        Encodes a binary window into a caller-supplied buffer.

        output must hold required_encode_buffer_size(count) bytes from
        output_offset. Bytes past the returned length inside that range
        may hold padding and are undefined.

        Args:
            data: Bytes to encode
            offset: Position in data at which encoding begins
            count: Number of bytes to encode
            output: Buffer receiving the ASCII base64url characters
            output_offset: Position in output at which writing begins

        Returns:
            Number of characters written, excluding padding
        """
        ensure_not_none(data, 'input')
        ensure_not_none(output, 'output')
        data = _byte_view(data)
        validate_window(len(data), offset, count)
        ensure_non_negative(output_offset, 'output_offset')
        if not isinstance(output, bytearray):
            raise TypeError(
                f"output must be a bytearray, not {type(output).__name__}"
            )

        required = self.required_encode_buffer_size(count)
        if len(output) - output_offset < required:
            self._log(
                f"Rejected output: {required} characters needed from offset "
                f"{output_offset}, buffer holds {len(output)}"
            )
            raise ArgumentBoundsError('count', 'output_offset', 'output')

        if count == 0:
            return 0

        self._log(f"Encoding {count}-byte window")
        encoded = self.engine.encode(data[offset:offset + count])
        if len(encoded) != required:
            raise WebEncodersError(
                f"Base64 engine produced {len(encoded)} characters, expected {required}"
            )

        output[output_offset:output_offset + required] = encoded.translate(_TO_URL_SAFE)
        return required - count_padding_chars(encoded)


_default_codec = Base64UrlCodec()


def base64url_decode(
    data: EncodedInput,
    offset: int = 0,
    count: Optional[int] = None
) -> bytes:
    """Decodes base64url text (a bytearray is decoded in place)."""
    return _default_codec.decode(data, offset, count)


def base64url_encode(
    data: BytesLike,
    offset: int = 0,
    count: Optional[int] = None
) -> str:
    """Encodes bytes to base64url without padding."""
    return _default_codec.encode(data, offset, count)


def base64url_encode_into(
    data: BytesLike,
    offset: int,
    count: int,
    output: bytearray,
    output_offset: int
) -> int:
    """Encodes bytes into output, returning the characters written."""
    return _default_codec.encode_into(data, offset, count, output, output_offset)


class Base64:
    """Static convenience facade over the default codec."""

    @staticmethod
    def encode(data: bytes) -> str:
        return _default_codec.encode(data)

    @staticmethod
    def decode(data: str) -> bytes:
        return _default_codec.decode(data)
