from enum import Enum
from typing import TypeVar

EnumType = TypeVar('EnumType', bound=Enum)

def NextCase(member : EnumType) -> EnumType:
    """
    The member after this one in definition order, wrapping back to the first
    """
    members = list(type(member))
    index = members.index(member)
    return members[(index + 1) % len(members)]
