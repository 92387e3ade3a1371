import logging
from fastapi import APIRouter
from RFSwitch.KeithleyS46.Interface import RFSwitchError, isSuccess, relayName
from RFSwitch.KeithleyS46.schemas import DeviceInfo, ClosedChannels
from RFSwitch.Common.RemoveDelims import parseChannelList
from app.schemas.Response import MessageResponse

import app.hardware.RFSwitch
rfSwitch = app.hardware.RFSwitch.rfSwitch

logger = logging.getLogger("S46-Switch-Control")
router = APIRouter(prefix="/rfswitch")

def _statusResponse(description: str, func, *args) -> MessageResponse:
    try:
        status = func(*args)
    except (ValueError, RFSwitchError) as e:
        logger.error(f"{description}: {e}")
        return MessageResponse(message = f"{description}: {e}", success = False)
    if isSuccess(status):
        return MessageResponse(message = description, success = True)
    logger.error(f"{description}: {status!r}")
    return MessageResponse(message = f"{description}: failed with status {int(status)}", success = False)

@router.get("/device_info", response_model = DeviceInfo)
async def get_device_info():
    return rfSwitch.getDeviceInfo()

@router.post("/reset", response_model = MessageResponse)
async def reset():
    return _statusResponse("Reset RF switch", rfSwitch.reset)

@router.post("/open", response_model = MessageResponse)
async def open_channel(channel: int):
    return _statusResponse(f"Open channel {channel}", rfSwitch.openChannel, channel)

@router.post("/open_all", response_model = MessageResponse)
async def open_all_channels():
    return _statusResponse("Open all channels", rfSwitch.openAllChannels)

@router.post("/close", response_model = MessageResponse)
async def close_channel(channel: int):
    try:
        description = f"Close channel {channel} on relay {relayName(channel)}"
    except ValueError:
        description = f"Close channel {channel}"
    return _statusResponse(description, rfSwitch.closeChannel, channel)

@router.get("/closed", response_model = ClosedChannels)
async def get_closed_channels():
    try:
        raw, status = rfSwitch.closedChannelList()
    except (ValueError, RFSwitchError) as e:
        logger.error(f"get_closed_channels: {e}")
        return ClosedChannels(success = False)
    if not isSuccess(status):
        return ClosedChannels(raw = raw, success = False)
    try:
        channels = parseChannelList(raw)
    except ValueError as e:
        logger.error(f"get_closed_channels: {e}")
        return ClosedChannels(raw = raw, success = False)
    return ClosedChannels(channels = channels, raw = raw, success = True)
