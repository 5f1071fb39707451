import contextlib
import logging
import shutil
import subprocess
from concurrent.futures import ThreadPoolExecutor, as_completed

from .errors import ScriptFragmentError

logger = logging.getLogger(__name__)

# --- Attempt Imports ---
# COM utilities, needed so WMI can be used from worker threads
try:
    import pythoncom
    _com_available = True
except ImportError:
    pythoncom = None
    _com_available = False

__all__ = ("invoke_parallel", "run_parallel")

DEFAULT_TIMEOUT = 300


class JobResult:
    """ Output of one fragment, optionally against one host. """

    __slots__ = ("fragment", "computer_name", "value")

    def __init__(self, fragment, computer_name, value):
        self.fragment = fragment
        self.computer_name = computer_name
        self.value = value

    def __repr__(self):
        return f"JobResult(computer_name={self.computer_name!r}, value={self.value!r})"


def powershell_executable():
    """ Windows PowerShell if present, otherwise PowerShell 7 (pwsh). """
    return shutil.which("powershell") or shutil.which("pwsh") or "powershell"


def build_command(script, computer_name=None):
    """ Argument list running the script locally or through Invoke-Command on a remote host. """
    if computer_name:
        # single-quoted PowerShell literal: embedded quotes are doubled
        quoted = computer_name.replace("'", "''")
        script = f"Invoke-Command -ComputerName '{quoted}' -ScriptBlock {{ {script} }}"
    return [powershell_executable(), "-NoProfile", "-NonInteractive", "-Command", script]


def run_script(script, computer_name=None, timeout=DEFAULT_TIMEOUT):
    """ Runs a PowerShell script fragment and returns its stripped stdout. """
    command = build_command(script, computer_name)
    try:
        result = subprocess.run(command, capture_output=True, text=True, timeout=timeout, check=False)
    except FileNotFoundError as e:
        raise ScriptFragmentError(f"Command not found: {command[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise ScriptFragmentError(f"Script timed out after {timeout} seconds") from e
    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise ScriptFragmentError(f"Script failed with exit code {result.returncode}: {stderr or 'No stderr'}",
                                  returncode=result.returncode, stderr=stderr)
    return (result.stdout or "").strip()


@contextlib.contextmanager
def com_initialized():
    """ Initializes COM for the current thread when pywin32 is installed. """
    coinitialized = False
    if _com_available:
        try:
            pythoncom.CoInitialize()
            coinitialized = True
        except pythoncom.com_error as com_init_e:
            logger.error(f"Failed to CoInitialize COM for thread: {com_init_e}")
    try:
        yield
    finally:
        if coinitialized:
            pythoncom.CoUninitialize()


def _run_job(fragment, computer_name, timeout):
    with com_initialized():
        if isinstance(fragment, str):
            value = run_script(fragment, computer_name, timeout=timeout)
        elif computer_name is None:
            value = fragment()
        else:
            value = fragment(computer_name)
    return JobResult(fragment, computer_name, value)


def invoke_parallel(fragments, computer_names=None, max_workers=None, timeout=DEFAULT_TIMEOUT):
    """ Runs every fragment concurrently and yields a JobResult as each one completes.

    A fragment is either a callable or a PowerShell script string. With
    ``computer_names`` each fragment runs once per host: callables get the
    host as their only argument, scripts are wrapped in Invoke-Command.
    Results come in completion order. A failing job's exception is raised
    when its result is reached; the pool still waits for the other jobs
    before the exception leaves this generator.
    """
    fragments = list(fragments)
    for fragment in fragments:
        if not (callable(fragment) or isinstance(fragment, str)):
            raise TypeError(f"Fragment must be a callable or a script string, not {type(fragment).__name__}")
    if not fragments:
        return

    hosts = list(computer_names) if computer_names else [None]
    jobs = [(fragment, host) for fragment in fragments for host in hosts]
    logger.info(f"Starting {len(jobs)} parallel job(s)")

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_run_job, fragment, host, timeout) for fragment, host in jobs]
        for future in as_completed(futures):
            yield future.result()


def run_parallel(fragments, computer_names=None, max_workers=None, timeout=DEFAULT_TIMEOUT):
    """ Like invoke_parallel, but waits for everything and returns the values in completion order. """
    return [job.value for job in invoke_parallel(fragments, computer_names, max_workers, timeout)]
