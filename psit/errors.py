class PSITError(Exception):
    """ Base class for every error raised by the toolkit. """


class BootstrapError(PSITError):
    """ The toolkit could not read its own configuration. """


class SystemInfoError(PSITError):
    """ A WMI query failed; the message is the underlying error text. """


class UnsupportedContentError(PSITError, TypeError):
    """ Popup content is an array or an object shape we can't render. """


class DialogValidationError(PSITError, ValueError):
    """ A popup option is outside its allowed set of values. """


class ScriptFragmentError(PSITError):
    """ A PowerShell script fragment exited with a non-zero code. """

    def __init__(self, message, returncode=None, stderr=None):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
