"""
Basic usage - Encode and decode base64url strings
"""
from webencoders import base64url_decode, base64url_encode


def main():
    token = bytes.fromhex("fbfffe00ff")
    
    encoded = base64url_encode(token)
    print(f"Encoded: {encoded}")
    
    decoded = base64url_decode(encoded)
    print(f"Decoded: {decoded.hex()}")
    
    # Windows: encode bytes 1..3 only, decode a substring
    print(f"Window:  {base64url_encode(token, 1, 3)}")
    print(f"Substr:  {base64url_decode('id=' + encoded, 3, len(encoded)).hex()}")


if __name__ == "__main__":
    main()
