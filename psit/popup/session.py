import logging

logger = logging.getLogger(__name__)

# The timeout clock is polled once a second, so a timeout of 2.3 closes
# the window on the third tick.
TIMER_INTERVAL_MS = 1000


class DialogSession:
    """ Run-time state of one open message box.

    The renderer forwards events here (load, button click, timer tick,
    close) and supplies a ``close_window`` callable; nothing in this
    class touches a widget toolkit.
    """

    def __init__(self, spec, close_window=None):
        self.spec = spec
        self.close_window = close_window
        self.result = None
        self.elapsed = 0
        self.timed_out = False
        self.closed = False

    def loaded(self, window=None):
        logger.debug("Message box loaded")
        if self.spec.on_loaded is not None:
            self.spec.on_loaded(window)

    def click(self, label):
        """ Records the pressed button and closes the dialog. """
        if self.closed:
            return
        if label not in self.spec.buttons:
            raise ValueError(f"'{label}' is not a button of this dialog")
        self.result = label
        logger.debug(f"Message box button pressed: {label}")
        self.close()

    def tick(self):
        """ One timer interval elapsed. Returns True while the timer should keep running. """
        if self.closed or self.spec.timeout is None:
            return False
        self.elapsed += 1
        if self.elapsed >= self.spec.timeout:
            self.timed_out = True
            logger.debug(f"Message box timed out after {self.elapsed}s")
            self.close()
            return False
        return True

    def close(self):
        if self.closed:
            return
        self.closed = True
        if self.close_window is not None:
            self.close_window()
        if self.spec.on_closed is not None:
            self.spec.on_closed(self.result)
