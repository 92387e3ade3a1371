import re
from typing import List

DELIMS = r'[\s,:;()@]'

def removeDelims(input: str, delims: str = DELIMS) -> List[str]:
    """Split an instrument response on delimiters, dropping empty tokens

    :param str input: raw response text
    :param str delims: regex character class of delimiters
    :return List[str]: the remaining tokens
    """
    return [token for token in re.split(delims, input) if token]

def parseChannelList(raw: str) -> List[int]:
    """Parse a SCPI channel list such as '(@1,3,7)' or '(@)'

    :param str raw: response to CLOSE? or similar
    :raises ValueError: if raw is not a channel list
    :return List[int]: channel numbers in the order reported
    """
    text = raw.strip()
    if not re.fullmatch(r"\(@[\d,\s]*\)", text):
        raise ValueError(f"parseChannelList: not a channel list: '{raw}'")
    return [int(token) for token in removeDelims(text)]
