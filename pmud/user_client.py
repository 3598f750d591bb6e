"""Base class for the actors that talk to a connected user."""

from enum import Enum, auto

DEFAULT_PROMPT = "pmud"
"""Prompt shown when no other prompt is given."""

BANNER = "-=-=-=-=-=-=--=--==-==-=---=--=-==-==-=-=-=-===--="
"""Decorative line framing help output."""


class Message(Enum):
    """Messages passed between connections, command actors and controllers."""

    PERFORM_WELCOME = auto()
    ON_USER_INPUT = auto()
    TO_USER_PROMPT = auto()
    TO_USER_EMIT = auto()
    LOGIN_CONTROLLER_START = auto()
    LOGIN_CONTROLLER_END = auto()


class UserClient:
    """Sends prompts and output towards the user through ``connection``.

    ``connection`` is any object with a ``receive(message, *args)`` method.
    """

    def __init__(self, connection, name):
        self.connection = connection
        self.name = name

    def _send(self, message, *args):
        self.connection.receive(message, *args)

    def prompt_user(self, prompt=DEFAULT_PROMPT):
        """Ask the user for input with ``prompt``."""
        self._send(Message.TO_USER_PROMPT, prompt)

    def emit_user(self, emission=""):
        """Show one line of output to the user."""
        self._send(Message.TO_USER_EMIT, emission)

    def end_controller(self):
        """Tell the connection that this controller has finished."""
        self._send(Message.LOGIN_CONTROLLER_END)

    def funky_banner(self):
        """Show the decorative banner line."""
        self.emit_user(BANNER)