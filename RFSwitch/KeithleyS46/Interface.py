'''
Channel layout and interface for the Keithley S46 RF switch

Four multi-pole unterminated coaxial relays and eight SPDT relays:
  Relay A, multi-pole = channels  1..6
  Relay B, multi-pole = channels  7..12
  Relay C, multi-pole = channels 13..18
  Relay D, multi-pole = channels 19..24
  Relay 1..8, 2-pole  = channels 25..32
Do not close more than one RF path per multi-pole relay.
'''
from abc import ABC, abstractmethod
from typing import List, Tuple
from pyvisa.constants import StatusCode
from .schemas import DeviceInfo

MIN_CHANNEL = 1
MAX_CHANNEL = 32
MULTIPOLE_MAX = 24
POLES_PER_RELAY = 6
MULTIPOLE_NAMES = "ABCD"

class RFSwitchError(Exception):
    pass

class NotConnectedError(RFSwitchError):
    pass

def checkChannel(channel: int) -> None:
    if not MIN_CHANNEL <= channel <= MAX_CHANNEL:
        raise ValueError(f"channel {channel} out of range ({MIN_CHANNEL}..{MAX_CHANNEL})")

def relayGroup(channel: int) -> List[int]:
    """The channels of the multi-pole relay holding channel

    :param int channel: 1..32
    :return List[int]: six channels, or [] for the 2-pole relays 25..32
    """
    checkChannel(channel)
    if channel > MULTIPOLE_MAX:
        return []
    base = ((channel - 1) // POLES_PER_RELAY) * POLES_PER_RELAY
    return [base + i for i in range(1, POLES_PER_RELAY + 1)]

def relayName(channel: int) -> str:
    checkChannel(channel)
    if channel > MULTIPOLE_MAX:
        return str(channel - MULTIPOLE_MAX)
    return MULTIPOLE_NAMES[(channel - 1) // POLES_PER_RELAY]

def isSuccess(status: StatusCode) -> bool:
    return status >= StatusCode.success

class RFSwitchInterface(ABC):

    @abstractmethod
    def isConnected(self) -> bool:
        pass

    @abstractmethod
    def getDeviceInfo(self) -> DeviceInfo:
        pass

    @abstractmethod
    def reset(self) -> StatusCode:
        pass

    @abstractmethod
    def openChannel(self, channel: int) -> StatusCode:
        '''
        An open channel does not pass a signal.
        '''
        pass

    @abstractmethod
    def openAllChannels(self) -> StatusCode:
        pass

    @abstractmethod
    def closeChannel(self, channel: int) -> StatusCode:
        '''
        Opens the other channels on a multi-pole relay before closing channel.
        '''
        pass

    @abstractmethod
    def closedChannelList(self) -> Tuple[str, StatusCode]:
        '''
        Raw response: '(@1,2,3)' or '(@)' if none closed.
        '''
        pass

    @abstractmethod
    def closedChannels(self) -> Tuple[List[int], StatusCode]:
        pass
