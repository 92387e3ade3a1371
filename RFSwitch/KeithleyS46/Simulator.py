from .Interface import RFSwitchInterface, checkChannel, relayGroup
from .schemas import DeviceInfo
from pyvisa.constants import StatusCode
from typing import List, Tuple
import logging

class S46Simulator(RFSwitchInterface):

    def __init__(self, *args, **kwargs):
        self.logger = logging.getLogger("S46-Instr")
        self.closed = set()

    def isConnected(self) -> bool:
        return True

    def getDeviceInfo(self) -> DeviceInfo:
        return DeviceInfo(
            name = "Keithley S46 RF switch",
            resource = "simulated",
            connected = True
        )

    def reset(self) -> StatusCode:
        self.logger.debug("S46Simulator reset")
        self.closed.clear()
        return StatusCode.success

    def openChannel(self, channel: int) -> StatusCode:
        checkChannel(channel)
        self.closed.discard(channel)
        return StatusCode.success

    def openAllChannels(self) -> StatusCode:
        self.closed.clear()
        return StatusCode.success

    def closeChannel(self, channel: int) -> StatusCode:
        checkChannel(channel)
        for sibling in relayGroup(channel):
            self.openChannel(sibling)
        self.closed.add(channel)
        return StatusCode.success

    def closedChannelList(self) -> Tuple[str, StatusCode]:
        return "(@" + ",".join(str(ch) for ch in sorted(self.closed)) + ")", StatusCode.success

    def closedChannels(self) -> Tuple[List[int], StatusCode]:
        return sorted(self.closed), StatusCode.success
