"""Shared sample values for the test-suite."""

ALICE = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
BOB = "0x1234567890123456789012345678901234567890"

TRANSFER_SELECTOR = bytes.fromhex("a9059cbb")
TRANSFER_TOPIC = bytes.fromhex("ddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef")


def address_topic(address: str) -> bytes:
    """Left-pad a 20-byte address into a 32-byte topic word."""
    return b"\x00" * 12 + bytes.fromhex(address[2:])
