from .Interface import RFSwitchInterface, NotConnectedError, checkChannel, relayGroup, isSuccess
from .schemas import DeviceInfo, S46Settings, Interface
from ..Common.RemoveDelims import removeDelims, parseChannelList
from pyvisa.constants import StatusCode, AccessModes
from typing import List, Optional, Tuple
import threading
import logging
import pyvisa
import re

class SwitchController(RFSwitchInterface):
    """The Keithley S46 RF switch, over GPIB or TCP/IP"""

    DEFAULT_TIMEOUT = 10000     # I/O timeout, milliseconds
    DEFAULT_OPEN_TIMEOUT = 5000 # milliseconds
    READ_SIZE = 100             # bytes

    def __init__(self, resourceManager: Optional[pyvisa.ResourceManager] = None, abortOnGroupError: bool = False):
        """Constructor.  Does not connect; call openGpib(), openTcp() or connect() next.

        :param ResourceManager resourceManager: VISA resource manager, defaults to pyvisa.ResourceManager()
        :param bool abortOnGroupError: If true, closeChannel() gives up when opening a sibling channel fails, defaults to False
        """
        self.logger = logging.getLogger("S46-Instr")
        self.inst = None
        self.lock = threading.RLock()
        self.abortOnGroupError = abortOnGroupError
        self.rm = resourceManager if resourceManager is not None else pyvisa.ResourceManager()

    def __del__(self):
        """Destructor
        """
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def connect(self, settings: S46Settings) -> StatusCode:
        """Open a session as described by settings

        :param S46Settings settings
        :return StatusCode: from the resource manager
        """
        self.abortOnGroupError = settings.abortOnGroupError
        if settings.interface == Interface.TCPIP:
            return self.openTcp(settings.ipAddress, timeout = settings.timeout)
        else:
            return self.openGpib(settings.gpibController, settings.gpibAddress, timeout = settings.timeout)

    def openGpib(self, ctrl: int = 0, addr: int = 7, mode: AccessModes = AccessModes.no_lock, timeout: int = DEFAULT_OPEN_TIMEOUT) -> StatusCode:
        """Open a session to the switch on a GPIB bus

        :param int ctrl: GPIB board index, defaults to 0
        :param int addr: primary address, defaults to 7
        :param AccessModes mode: defaults to AccessModes.no_lock
        :param int timeout: open timeout in ms
        :return StatusCode
        """
        return self.__open(f"GPIB{ctrl}::{addr}", mode, timeout)

    def openTcp(self, ip: str, mode: AccessModes = AccessModes.no_lock, timeout: int = DEFAULT_OPEN_TIMEOUT) -> StatusCode:
        """Open a session to the switch over TCP/IP

        :param str ip: address of the switch
        :param AccessModes mode: defaults to AccessModes.no_lock
        :param int timeout: open timeout in ms
        :return StatusCode
        """
        return self.__open(f"TCPIP::{ip}::INSTR", mode, timeout)

    def close(self) -> None:
        """Close the session, if any
        """
        with self.lock:
            if self.inst:
                try:
                    self.inst.close()
                except pyvisa.VisaIOError as err:
                    self.logger.error(err)
                self.inst = None

    def isConnected(self) -> bool:
        return self.inst is not None

    def getDeviceInfo(self) -> DeviceInfo:
        inst = self.inst
        if not inst:
            return DeviceInfo(name = "Keithley S46 RF switch", connected = False, reason = "Not connected")
        return DeviceInfo(
            name = "Keithley S46 RF switch",
            resource = inst.resource_name,
            connected = True
        )

    def idQuery(self) -> bool:
        """Perform an ID query and check compatibility

        :return bool: True if the instrument is an S46
        """
        if not self.inst:
            return False
        response = self.inst.query("*IDN?")
        if re.match(r"\s*KEITHLEY", response, flags = re.IGNORECASE) and re.search(r"S46", response):
            self.logger.debug(response.strip())
            return True
        return False

    def errorQuery(self) -> Tuple[Optional[int], str]:
        """Send an error query and return the results

        :return (int, str): Error code and string, code None if no connection or no reply
        """
        if not self.inst:
            return (None, "No connection")
        try:
            err = self.inst.query("SYST:ERR?")
            err = removeDelims(err, r'[\s,"]')
            if not err:
                return (None, "No reply")
            return (int(err[0]), " ".join(err[1:]))
        except pyvisa.VisaIOError as err:
            self.logger.error(err)
            return (None, err.abbreviation)

    def reset(self) -> StatusCode:
        return self.__write("*RST")

    def openChannel(self, channel: int) -> StatusCode:
        checkChannel(channel)
        return self.__write(f"OPEN (@{channel})")

    def openAllChannels(self) -> StatusCode:
        return self.__write("OPEN:ALL")

    def closeChannel(self, channel: int) -> StatusCode:
        """Close channel.  All other channels on a multi-pole relay are opened first
        so that no two RF paths on the same relay are closed together.

        :param int channel: 1..32
        :return StatusCode: of the CLOSE command, or of the failing sibling open if abortOnGroupError
        """
        checkChannel(channel)
        with self.lock:
            self.__checkConnected()
            for sibling in relayGroup(channel):
                status = self.openChannel(sibling)
                if not isSuccess(status):
                    self.logger.warning(f"S46 closeChannel({channel}): opening channel {sibling} failed: {status!r}")
                    if self.abortOnGroupError:
                        return status
            return self.__write(f"CLOSE (@{channel})")

    def closedChannelList(self) -> Tuple[str, StatusCode]:
        """Query the closed channels

        :return (str, StatusCode): the response as sent by the switch: '(@1,2,3)' or '(@)'
        """
        with self.lock:
            status = self.__write("CLOSE?")
            if not isSuccess(status):
                return "", status
            try:
                data, status = self.inst.visalib.read(self.inst.session, self.READ_SIZE)
            except pyvisa.VisaIOError as err:
                self.logger.error(err)
                return "", err.error_code
            if not isSuccess(status):
                return "", status
            return data.decode("latin-1"), status

    def closedChannels(self) -> Tuple[List[int], StatusCode]:
        """Query and parse the closed channels

        :raises ValueError: if the switch replied with something other than a channel list
        :return (List[int], StatusCode): channels, or [] if the query failed
        """
        raw, status = self.closedChannelList()
        if not isSuccess(status):
            return [], status
        return parseChannelList(raw), status

    def __open(self, resource: str, mode: AccessModes, timeout: int) -> StatusCode:
        with self.lock:
            if self.inst:
                self.logger.info(f"S46: closing {self.inst.resource_name} before opening {resource}")
                self.close()
            try:
                self.inst = self.rm.open_resource(resource, access_mode = mode, open_timeout = timeout)
            except pyvisa.VisaIOError as err:
                self.logger.error(err)
                return err.error_code
            self.inst.timeout = self.DEFAULT_TIMEOUT
            self.logger.info(f"S46: opened {resource}")
            return self.rm.last_status

    def __checkConnected(self) -> None:
        if not self.inst:
            raise NotConnectedError("S46: not connected; call openGpib() or openTcp() first")

    def __write(self, cmd: str) -> StatusCode:
        with self.lock:
            self.__checkConnected()
            self.logger.debug(f"S46: {cmd}")
            try:
                self.inst.write_raw(cmd.encode("ascii"))
            except pyvisa.VisaIOError as err:
                self.logger.error(err)
                return err.error_code
            return self.inst.last_status
