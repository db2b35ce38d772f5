# greenmo/notifier/pushover.py
import logging
from greenmo.utils import upstream
from greenmo.utils.env import REQUEST_TIMEOUT
from greenmo.utils.errors import NetworkingError

logger = logging.getLogger(__name__)

PUSHOVER_URL = "https://api.pushover.net/1/messages.json"


class PushoverClient:
    name = "Pushover"

    def __init__(self, token, user, timeout=REQUEST_TIMEOUT):
        self.token = token
        self.user = user
        self.timeout = timeout

    def send(self, message, image=None):
        """
        Push `message` to the user, with `image` (PNG bytes) attached if given.
        Raises NetworkingError when Pushover does not accept the message.
        """
        data = {"token": self.token, "user": self.user, "message": message}
        files = None
        if image is not None:
            files = {"attachment": ("image.png", image, "image/png")}
        upstream.post(self.name, PUSHOVER_URL, data=data, files=files, timeout=self.timeout)
        logger.info("Pushover notification sent: %s", message)

    def send_alert(self, message):
        try:
            self.send(message)
        except NetworkingError as e:
            logger.error("Could not deliver alert %r: %s", message, e)
