import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from psit.config import PSITConfig


@pytest.fixture
def config() -> PSITConfig:
    return PSITConfig(version="9.9.9", base_title="Test Toolkit")


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON config file and return its path."""
    def _write(**overrides) -> str:
        data = {
            "DebugEnabled": False,
            "DebugLevel": 1,
            "Version": "2.0.0",
            "ShowMDHelp": False,
            "ModulePath": "",
            "Help": "",
            "EnableCustomTitle": False,
            "BaseTitle": "Test Toolkit",
        }
        data.update(overrides)
        path = tmp_path / "psit_config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def wmi_connection() -> MagicMock:
    """A WMI connection answering the four system info queries."""
    c = MagicMock()
    c.Win32_ComputerSystem.return_value = [SimpleNamespace(
        Name="WS01",
        Domain="corp.example.com",
        Manufacturer="Dell Inc.",
        Model="OptiPlex 7090",
        TotalPhysicalMemory="17179869184",
        NumberOfProcessors=1,
        NumberOfLogicalProcessors=8,
    )]
    c.Win32_OperatingSystem.return_value = [SimpleNamespace(
        Caption="Microsoft Windows 11 Enterprise",
        Version="10.0.22631",
        InstallDate="20230115093000.000000+060",
        LastBootUpTime="20240601080000.000000+000",
        OSArchitecture="64-bit",
        SystemDrive="C:",
    )]
    c.Win32_BIOS.return_value = [SimpleNamespace(
        SMBIOSBIOSVersion="1.21.0",
        SerialNumber="ABC1234",
    )]
    c.Win32_LogicalDisk.return_value = [SimpleNamespace(
        DeviceID="C:",
        Size="512105932800",
        FreeSpace="256052966400",
    )]
    return c
