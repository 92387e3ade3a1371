from pydantic import BaseModel
from typing import List, Optional
from enum import Enum

class Interface(Enum):
    GPIB = "GPIB"
    TCPIP = "TCPIP"

class S46Settings(BaseModel):
    '''
    How to reach the switch, loaded from RFSwitch.ini
    '''
    interface: Interface = Interface.GPIB
    gpibController: int = 0
    gpibAddress: int = 7
    ipAddress: str = "192.168.1.5"
    timeout: int = 5000         # open timeout in milliseconds
    abortOnGroupError: bool = False
    simulate: bool = False

class DeviceInfo(BaseModel):
    '''
    Get the overall status and resource for a device
    '''
    name: str
    resource: str = "none"
    connected: bool = False
    reason: Optional[str] = None

class ClosedChannels(BaseModel):
    channels: List[int] = []
    raw: str = ""
    success: bool = False
