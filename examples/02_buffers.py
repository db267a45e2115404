"""
Buffers - Encode into a preallocated buffer and decode it in place
"""
from webencoders import (
    base64url_decode,
    base64url_encode_into,
    required_encode_buffer_size,
)


def main():
    payload = b"hello, buffers"
    
    # Room for a 7-byte prefix plus the padded encoding
    prefix = b"cursor="
    buffer = bytearray(len(prefix) + required_encode_buffer_size(len(payload)))
    buffer[:len(prefix)] = prefix
    
    written = base64url_encode_into(payload, 0, len(payload), buffer, len(prefix))
    print(f"Buffer:  {buffer[:len(prefix) + written].decode('ascii')}")
    
    # The padded footprint is still available, so decode in place
    decoded = base64url_decode(buffer, len(prefix), written)
    print(f"Decoded: {decoded}")
    print(f"Buffer after decode: {bytes(buffer)}")


if __name__ == "__main__":
    main()
