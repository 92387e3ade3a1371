import unittest
import os
import tempfile
from unittest.mock import patch
from pyvisa.constants import StatusCode
from RFSwitch.KeithleyS46.schemas import Interface
from RFSwitch.KeithleyS46.Simulator import S46Simulator
from app.hardware.RFSwitch import loadSettings, makeSwitch

class test_RFSwitchHardware(unittest.TestCase):

    def setUp(self):
        self.tempDir = tempfile.TemporaryDirectory()
        self.iniFile = os.path.join(self.tempDir.name, 'RFSwitch.ini')

    def tearDown(self):
        self.tempDir.cleanup()

    def test_missingIniSimulates(self):
        settings = loadSettings(self.iniFile)
        self.assertTrue(settings.simulate)
        self.assertIsInstance(makeSwitch(settings), S46Simulator)

    def test_loadSettings(self):
        with open(self.iniFile, "w") as f:
            f.write("[RFSwitch]\n"
                    "interface = tcpip\n"
                    "ipAddress = 10.1.1.20\n"
                    "timeout = 2500\n"
                    "abortOnGroupError = yes\n")
        settings = loadSettings(self.iniFile)
        self.assertEqual(settings.interface, Interface.TCPIP)
        self.assertEqual(settings.ipAddress, "10.1.1.20")
        self.assertEqual(settings.timeout, 2500)
        self.assertTrue(settings.abortOnGroupError)
        self.assertFalse(settings.simulate)
        self.assertEqual(settings.gpibAddress, 7)

    def test_makeSwitchConnects(self):
        with open(self.iniFile, "w") as f:
            f.write("[RFSwitch]\ngpibAddress = 14\n")
        with patch('app.hardware.RFSwitch.SwitchController') as controller:
            controller.return_value.connect.return_value = StatusCode.success
            switch = makeSwitch(loadSettings(self.iniFile))
            controller.assert_called_once_with(abortOnGroupError = False)
            switch.connect.assert_called_once()
            self.assertEqual(switch.connect.call_args[0][0].gpibAddress, 14)
