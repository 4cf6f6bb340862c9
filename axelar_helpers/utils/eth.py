from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount
from eth_typing import ChecksumAddress, HexStr
from eth_utils import to_checksum_address


def sign_message(message: str, account: LocalAccount) -> HexStr:
    message = encode_defunct(text=message)
    signed_message = account.sign_message(message)
    return HexStr(signed_message.signature.hex())


def to_checksum(address: ChecksumAddress | str) -> ChecksumAddress:
    return to_checksum_address(address)
