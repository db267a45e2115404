"""Tests for base64url decoding."""
import binascii
from array import array

import pytest

from webencoders import (
    Base64UrlCodec,
    base64url_decode,
    required_decode_buffer_size,
    ArgumentNullError,
    ArgumentRangeError,
    ArgumentBoundsError,
    MalformedInputError,
    InvalidLengthError,
)


class TestBase64UrlDecode:
    """Test suite for decoding strings and read-only buffers."""
    
    def test_decode_single_zero_byte(self):
        """Test decoding 'AA'."""
        assert base64url_decode("AA") == bytes([0x00])
    
    def test_decode_url_safe_characters(self):
        """Test decoding '__8'."""
        assert base64url_decode("__8") == bytes([0xFF, 0xFF])
    
    def test_decode_dash(self):
        """Test '-' decodes like '+'."""
        assert base64url_decode("-__-") == b"\xfb\xff\xfe"
    
    def test_decode_every_tail_length(self):
        """Test tails of 0, 2 and 3 characters."""
        assert base64url_decode("SGVs") == b"Hel"
        assert base64url_decode("SGVsbG8") == b"Hello"
        assert base64url_decode("SGVsbA") == b"Hell"
    
    def test_decode_empty_string(self):
        """Test decoding empty string."""
        result = base64url_decode("")
        
        assert result == b""
        assert result is not None
    
    def test_decode_empty_window(self):
        """Test decoding a zero-length window."""
        assert base64url_decode("AAAA", 2, 0) == b""
    
    def test_decode_window(self):
        """Test decoding a substring."""
        assert base64url_decode("xx__8yy", 2, 3) == b"\xff\xff"
    
    def test_decode_offset_only(self):
        """Test count defaults to the rest of the string."""
        assert base64url_decode("..AA", 2) == b"\x00"
    
    def test_decode_bytes_input(self):
        """Test read-only bytes are copied, not mutated."""
        data = b"__8"
        
        assert base64url_decode(data) == b"\xff\xff"
        assert data == b"__8"
    
    def test_decode_memoryview_input(self):
        """Test memoryview input is decoded from a copy."""
        source = bytearray(b"__8")
        
        assert base64url_decode(memoryview(source)) == b"\xff\xff"
        assert source == bytearray(b"__8")
    
    def test_decode_wide_item_memoryview(self):
        """Test views with multi-byte items are measured in bytes."""
        view = memoryview(array('H', [0x4141, 0x4141]))
        
        assert base64url_decode(view) == b"\x00\x00\x00"
        assert base64url_decode(view, 1, 3) == b"\x00\x00"
    
    def test_decode_wide_item_window_past_end_raises(self):
        """Test bounds use the byte length of a wide-item view."""
        view = memoryview(array('H', [0x4141, 0x4141]))
        
        with pytest.raises(ArgumentBoundsError):
            base64url_decode(view, 2, 3)
    
    def test_decode_non_contiguous_view_raises(self):
        """Test strided views are rejected."""
        with pytest.raises(TypeError):
            base64url_decode(memoryview(b"A.A.A.A.")[::2])
    
    @pytest.mark.parametrize("length", [1, 5, 9, 13])
    def test_length_one_mod_four_raises(self, length):
        """Test lengths congruent to 1 mod 4 are malformed."""
        with pytest.raises(InvalidLengthError) as exc_info:
            base64url_decode("A" * length)
        
        assert exc_info.value.length == length
        assert isinstance(exc_info.value, MalformedInputError)
    
    def test_invalid_character_raises(self):
        """Test characters outside the alphabet are malformed."""
        with pytest.raises(MalformedInputError) as exc_info:
            base64url_decode("AA*A")
        
        assert isinstance(exc_info.value.__cause__, binascii.Error)
    
    def test_embedded_padding_raises(self):
        """Test padding inside the input is malformed."""
        with pytest.raises(MalformedInputError):
            base64url_decode("AA=A")
    
    def test_whitespace_raises(self):
        """Test whitespace is malformed."""
        with pytest.raises(MalformedInputError):
            base64url_decode("AA A")
    
    def test_non_ascii_raises(self):
        """Test non-ASCII text is malformed."""
        with pytest.raises(MalformedInputError):
            base64url_decode("AAéA")
    
    def test_decode_none_raises(self):
        """Test None input is rejected."""
        with pytest.raises(ArgumentNullError) as exc_info:
            base64url_decode(None)
        
        assert isinstance(exc_info.value, TypeError)
    
    def test_window_past_end_raises(self):
        """Test offset + count beyond the input is rejected."""
        with pytest.raises(ArgumentBoundsError):
            base64url_decode("AAAA", 1, 4)
    
    def test_negative_offset_raises(self):
        """Test negative offset is rejected."""
        with pytest.raises(ArgumentRangeError):
            base64url_decode("AAAA", -1, 2)
    
    def test_negative_count_raises(self):
        """Test negative count is rejected."""
        with pytest.raises(ArgumentRangeError):
            base64url_decode("AAAA", 0, -2)


class TestBase64UrlDecodeInPlace:
    """Test suite for decoding a mutable bytearray in place."""
    
    def test_in_place_rewrites_buffer(self):
        """Test the window is converted to padded standard Base64."""
        buffer = bytearray(b"__8?")
        
        assert base64url_decode(buffer, 0, 3) == b"\xff\xff"
        assert buffer == bytearray(b"//8=")
    
    def test_in_place_with_offset(self):
        """Test only the window and its padding are touched."""
        buffer = bytearray(b"..-_8?..")
        
        assert base64url_decode(buffer, 2, 3) == b"\xfb\xff"
        assert buffer == bytearray(b"..+/8=..")
    
    def test_in_place_two_padding_chars(self):
        """Test two padding characters are appended."""
        buffer = bytearray(b"AA__")
        
        assert base64url_decode(buffer, 0, 2) == b"\x00"
        assert buffer == bytearray(b"AA==")
    
    def test_in_place_no_padding(self):
        """Test a full block needs no trailing capacity."""
        buffer = bytearray(b"SGVs")
        
        assert base64url_decode(buffer, 0, 4) == b"Hel"
        assert len(buffer) == 4
    
    def test_sized_with_required_decode_buffer_size(self):
        """Test a buffer sized by the helper is always large enough."""
        encoded = b"SGVsbG8"
        buffer = bytearray(required_decode_buffer_size(len(encoded)))
        buffer[:len(encoded)] = encoded
        
        assert base64url_decode(buffer, 0, len(encoded)) == b"Hello"
    
    def test_missing_padding_capacity_raises(self):
        """Test a buffer without room for padding is rejected unchanged."""
        buffer = bytearray(b"__8")
        
        with pytest.raises(ArgumentBoundsError):
            base64url_decode(buffer, 0, 3)
        
        assert buffer == bytearray(b"__8")
        assert len(buffer) == 3
    
    def test_invalid_length_leaves_buffer_unchanged(self):
        """Test length errors happen before any mutation."""
        buffer = bytearray(b"-____???")
        
        with pytest.raises(InvalidLengthError):
            base64url_decode(buffer, 0, 5)
        
        assert buffer == bytearray(b"-____???")
    
    def test_window_past_end_raises(self):
        """Test the logical window is bounds-checked."""
        with pytest.raises(ArgumentBoundsError):
            base64url_decode(bytearray(b"AAAA"), 2, 3)


class TestBase64UrlDecodeEngine:
    """Tests for decoding through an injected engine."""
    
    def test_engine_receives_padded_standard_text(self, recording_engine):
        """Test the engine sees '+', '/' and restored padding."""
        codec = Base64UrlCodec(engine=recording_engine)
        
        assert codec.decode("-_8") == b"\xfb\xff"
        assert recording_engine.decoded == [b"+/8="]
    
    def test_engine_not_called_for_empty_input(self, recording_engine):
        """Test empty input short-circuits."""
        codec = Base64UrlCodec(engine=recording_engine)
        
        assert codec.decode("") == b""
        assert recording_engine.decoded == []
    
    def test_engine_value_error_is_wrapped(self):
        """Test engine failures surface as MalformedInputError."""
        class FailingEngine:
            def encode(self, data):
                return b""
            
            def decode(self, data):
                raise ValueError("bad input")
        
        codec = Base64UrlCodec(engine=FailingEngine())
        
        with pytest.raises(MalformedInputError) as exc_info:
            codec.decode("AAAA")
        
        assert "bad input" in str(exc_info.value)
