"""Chain value types interpolated into provider error messages."""
from enum import Enum, IntEnum
from typing import Optional, Union

from eth_utils import decode_hex, encode_hex
from pydantic import BaseModel, ConfigDict, model_validator


class SpecId(IntEnum):
    """Hardforks in activation order."""

    FRONTIER = 0
    FRONTIER_THAWING = 1
    HOMESTEAD = 2
    DAO_FORK = 3
    TANGERINE = 4
    SPURIOUS_DRAGON = 5
    BYZANTIUM = 6
    CONSTANTINOPLE = 7
    PETERSBURG = 8
    ISTANBUL = 9
    MUIR_GLACIER = 10
    BERLIN = 11
    LONDON = 12
    ARROW_GLACIER = 13
    GRAY_GLACIER = 14
    MERGE = 15
    SHANGHAI = 16
    CANCUN = 17
    LATEST = 255


class SubscriptionType(Enum):
    """Kind of filter created through eth_newFilter and friends."""

    LOGS = "Logs"
    NEW_HEADS = "NewHeads"
    NEW_PENDING_TRANSACTIONS = "NewPendingTransactions"


class BlockTag(str, Enum):
    EARLIEST = "earliest"
    LATEST = "latest"
    PENDING = "pending"
    SAFE = "safe"
    FINALIZED = "finalized"


class BlockSpec(BaseModel):
    """Block reference given by number, tag or hash."""

    model_config = ConfigDict(frozen=True)

    number: Optional[int] = None
    tag: Optional[BlockTag] = None
    block_hash: Optional[bytes] = None

    @model_validator(mode="after")
    def _check_one_set(self) -> "BlockSpec":
        given = [value for value in (self.number, self.tag, self.block_hash) if value is not None]
        if len(given) != 1:
            raise ValueError("exactly one of number, tag or block_hash must be set")
        return self

    @classmethod
    def parse(cls, value: Union[int, str, bytes]) -> "BlockSpec":
        """Parse a block parameter as it appears in a request."""
        if isinstance(value, bytes):
            return cls(block_hash=value)
        if isinstance(value, int):
            return cls(number=value)
        if value in {tag.value for tag in BlockTag}:
            return cls(tag=BlockTag(value))
        # 0x-prefixed 32-byte hashes, anything shorter is a quantity
        if len(value) == 66:
            return cls(block_hash=decode_hex(value))
        return cls(number=int(value, 16))

    def __str__(self) -> str:
        if self.number is not None:
            return str(self.number)
        if self.tag is not None:
            return self.tag.value
        return encode_hex(self.block_hash)
