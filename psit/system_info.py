import csv
import logging
import os
import re
import socket
import tempfile
import time
from datetime import datetime, timedelta, timezone

import psutil

from .errors import SystemInfoError

logger = logging.getLogger(__name__)

# --- Attempt Imports ---
# WMI
try:
    import wmi
    _wmi_available = True
except ImportError:
    wmi = None
    _wmi_available = False

__all__ = ("get_system_info", "export_report_csv")

# Unit name -> divisor for byte counts
UNITS = {
    "GB": 1024 ** 3,
    "MB": 1024 ** 2,
    "KB": 1024,
    "DEFAULT": 1,
}

_CIM_DATETIME = re.compile(r"^(\d{14})(?:\.(\d{1,6}))?([+-]\d{3})?")


# --- Data Classes ---
class Credential:
    """ User name / password pair for a remote WMI connection. """
    def __init__(self, user, password):
        self.user = user
        self.password = password

    def __repr__(self):
        return f"Credential(user={self.user!r})"


class SystemInfoReport:
    """ Flat system report merged from the four WMI queries. """

    # Output name -> attribute, in report order
    FIELDS = {
        "ComputerName": "computer_name",
        "FQDN": "fqdn",
        "Manufacturer": "manufacturer",
        "Model": "model",
        "RAM": "ram",
        "SystemDiskLetter": "system_disk_letter",
        "SystemDiskSize": "system_disk_size",
        "SystemDiskFreeSpace": "system_disk_free_space",
        "ProcessorCount": "processor_count",
        "CoreCount": "core_count",
        "Uptime": "uptime",
        "LastBootTime": "last_boot_time",
        "OSName": "os_name",
        "OSVersion": "os_version",
        "OSInstallDate": "os_install_date",
        "OSArchitecture": "os_architecture",
        "BiosVersion": "bios_version",
        "BiosSerialNumber": "bios_serial_number",
    }

    # Field defaults, used for anything not passed to __init__
    DEFAULTS = {
        # Basic Info
        "computer_name": "Undetermined",
        "fqdn": "Undetermined",
        "manufacturer": "Undetermined",
        "model": "Undetermined",
        # Memory / Disk (in the requested unit)
        "ram": 0,
        "system_disk_letter": "Undetermined",
        "system_disk_size": 0,
        "system_disk_free_space": 0,
        # CPU Info
        "processor_count": 0,
        "core_count": 0,
        # Timestamps
        "uptime": None,
        "last_boot_time": None,
        # OS / Firmware
        "os_name": "Undetermined",
        "os_version": "Undetermined",
        "os_install_date": None,
        "os_architecture": "Undetermined",
        "bios_version": "Undetermined",
        "bios_serial_number": "Undetermined",
    }

    __slots__ = tuple(DEFAULTS)

    def __init__(self, **values):
        unknown = set(values) - set(self.DEFAULTS)
        if unknown:
            raise TypeError(f"Unknown report field: {', '.join(sorted(unknown))}")
        for attr, default in self.DEFAULTS.items():
            object.__setattr__(self, attr, values.get(attr, default))

    def __setattr__(self, name, value):
        raise AttributeError("SystemInfoReport is immutable")

    def __delattr__(self, name):
        raise AttributeError("SystemInfoReport is immutable")

    def to_dict(self):
        """ Report as an ordered dict keyed by the documented field names. """
        return {name: getattr(self, attr) for name, attr in self.FIELDS.items()}

    def __repr__(self):
        return f"SystemInfoReport(computer_name={self.computer_name!r}, fqdn={self.fqdn!r})"


# --- Helper Functions ---
def convert_size(value, unit="GB"):
    """ Converts a raw byte count to the given unit, truncating to an int. 'default' returns bytes unchanged. """
    divisor = UNITS[unit.upper()]
    value = int(value or 0)
    if divisor == 1:
        return value
    return value // divisor


def parse_cim_datetime(value):
    """ Parses a CIM datetime string (yyyymmddHHMMSS.ffffff+UUU) into a datetime.

    The trailing offset is in minutes. Returns None for empty values;
    values that are already datetimes pass through.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    match = _CIM_DATETIME.match(str(value))
    if not match:
        raise ValueError(f"Not a CIM datetime: {value!r}")
    stamp, fraction, offset = match.groups()
    parsed = datetime.strptime(stamp, "%Y%m%d%H%M%S")
    if fraction:
        parsed = parsed.replace(microsecond=int(fraction.ljust(6, "0")))
    if offset:
        parsed = parsed.replace(tzinfo=timezone(timedelta(minutes=int(offset))))
    return parsed


def _is_local(computer_name):
    if not computer_name:
        return True
    name = computer_name.lower()
    return name in (".", "localhost", "127.0.0.1", socket.gethostname().lower())


def check_wmi_service():
    """ Checks if the WMI service ('Winmgmt') is running. Returns (ok, status). """
    if not hasattr(psutil, "win_service_get"):
        return False, "Service check is only available on Windows"
    try:
        service = psutil.win_service_get('Winmgmt')
        status = service.status()
        if status == 'running':
            return True, "Running"
        return False, f"Service status: {status}"
    except psutil.NoSuchProcess:
        return False, "Service not found (NoSuchProcess)"
    except Exception as e:
        return False, f"Error checking service: {e}"


def connect(computer_name=None, credential=None):
    """ Opens a WMI connection to the target host (root/cimv2). """
    if not _wmi_available:
        raise SystemInfoError("WMI module not available")

    kwargs = {}
    if _is_local(computer_name):
        wmi_service_ok, wmi_service_status = check_wmi_service()
        if not wmi_service_ok:
            raise SystemInfoError(f"WMI Service ('Winmgmt') not running or inaccessible. Status: {wmi_service_status}")
    else:
        kwargs["computer"] = computer_name
        if credential is not None:
            kwargs["user"] = credential.user
            kwargs["password"] = credential.password

    try:
        return wmi.WMI(**kwargs)
    except Exception as e:
        logger.error(f"WMI connection to {computer_name or 'localhost'} failed: {type(e).__name__}: {e}")
        raise SystemInfoError(str(e)) from e


def _first(rows, wmi_class):
    rows = list(rows)
    if not rows:
        raise SystemInfoError(f"{wmi_class} returned no instances")
    return rows[0]


# --- Data Collection ---
def get_system_info(computer_name=None, credential=None, unit="GB", connection=None):
    """ Collects machine, OS, firmware and system-drive info into one report.

    Args:
        computer_name: target host; None or '.' means the local machine.
        credential: optional Credential, only used for remote hosts.
        unit: 'GB', 'MB', 'KB' or 'default' (raw bytes) for RAM and disk sizes.
        connection: an already-open WMI connection, skipping connect().

    Any query failure aborts the collection with a SystemInfoError carrying
    the underlying message. There is no partial report and no retry.
    """
    if unit.upper() not in UNITS:
        raise ValueError(f"Unsupported unit '{unit}'. Expected one of GB, MB, KB, default.")

    c = connection if connection is not None else connect(computer_name, credential)
    target = computer_name or "localhost"

    try:
        logger.info(f"Querying Win32_ComputerSystem on {target}...")
        cs = _first(c.Win32_ComputerSystem(), "Win32_ComputerSystem")

        logger.info(f"Querying Win32_OperatingSystem on {target}...")
        os_info = _first(c.Win32_OperatingSystem(), "Win32_OperatingSystem")

        logger.info(f"Querying Win32_BIOS on {target}...")
        bios = _first(c.Win32_BIOS(), "Win32_BIOS")

        system_drive = os_info.SystemDrive or "C:"
        logger.info(f"Querying Win32_LogicalDisk {system_drive} on {target}...")
        disk = _first(c.Win32_LogicalDisk(DeviceID=system_drive), "Win32_LogicalDisk")

        # malformed datetimes and sizes fail here too
        last_boot = parse_cim_datetime(os_info.LastBootUpTime)
        now = datetime.now(last_boot.tzinfo) if last_boot is not None else None

        return SystemInfoReport(
            computer_name=cs.Name,
            fqdn=f"{cs.Name}.{cs.Domain}",
            manufacturer=cs.Manufacturer,
            model=cs.Model,
            ram=convert_size(cs.TotalPhysicalMemory, unit),
            system_disk_letter=system_drive,
            system_disk_size=convert_size(disk.Size, unit),
            system_disk_free_space=convert_size(disk.FreeSpace, unit),
            processor_count=int(cs.NumberOfProcessors or 0),
            core_count=int(cs.NumberOfLogicalProcessors or 0),
            uptime=(now - last_boot) if last_boot is not None else None,
            last_boot_time=last_boot,
            os_name=os_info.Caption,
            os_version=os_info.Version,
            os_install_date=parse_cim_datetime(os_info.InstallDate),
            os_architecture=os_info.OSArchitecture,
            bios_version=bios.SMBIOSBIOSVersion,
            bios_serial_number=bios.SerialNumber,
        )
    except SystemInfoError:
        raise
    except Exception as e:
        logger.error(f"System info query failed on {target}: {type(e).__name__}: {e}")
        raise SystemInfoError(str(e)) from e


# --- Data Handling ---
def export_report_csv(report, directory=None):
    """ Saves the report as a one-row CSV file and returns its path. """
    data_dict = report.to_dict()
    directory = directory or tempfile.gettempdir()
    hostname = report.computer_name if report.computer_name != "Undetermined" else "unknown"
    hostname = hostname.replace(" ", "_").replace("/", "-").replace("\\", "-")
    filename = os.path.join(directory, f"system_info_{hostname}_{time.strftime('%Y%m%d_%H%M%S')}.csv")
    with open(filename, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=list(data_dict.keys()))
        writer.writeheader()
        writer.writerow(data_dict)
    logger.info(f"System info saved to {filename}")
    return filename
