import configparser
import logging
from RFSwitch.KeithleyS46.S46 import SwitchController
from RFSwitch.KeithleyS46.Simulator import S46Simulator
from RFSwitch.KeithleyS46.Interface import isSuccess
from RFSwitch.KeithleyS46.schemas import S46Settings

RFSWITCH_INI = 'RFSwitch.ini'

logger = logging.getLogger("S46-Switch-Control")

def loadSettings(iniFile: str = RFSWITCH_INI) -> S46Settings:
    '''
    Read the [RFSwitch] section.  No file or no section means simulate.
    '''
    config = configparser.ConfigParser()
    config.read(iniFile)
    if not config.has_section('RFSwitch'):
        logger.info(f"{iniFile}: no [RFSwitch] section, simulating the switch")
        return S46Settings(simulate = True)
    section = config['RFSwitch']
    return S46Settings(
        interface = section.get('interface', 'GPIB').upper(),
        gpibController = section.getint('gpibController', 0),
        gpibAddress = section.getint('gpibAddress', 7),
        ipAddress = section.get('ipAddress', S46Settings().ipAddress),
        timeout = section.getint('timeout', 5000),
        abortOnGroupError = section.getboolean('abortOnGroupError', False),
        simulate = section.getboolean('simulate', False)
    )

def makeSwitch(settings: S46Settings):
    if settings.simulate:
        return S46Simulator()
    switch = SwitchController(abortOnGroupError = settings.abortOnGroupError)
    status = switch.connect(settings)
    if not isSuccess(status):
        logger.error(f"RF switch connect failed: {status!r}")
    return switch

settings = loadSettings()
rfSwitch = makeSwitch(settings)
