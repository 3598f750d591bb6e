"""Controller that handles commands once a user has logged in."""

from pmud.user_client import Message, UserClient


class DefaultController(UserClient):
    """Answers ``help`` and reports unknown commands."""

    def __init__(self, connection):
        super().__init__(connection, "DefaultController")

    def receive(self, message, *args):
        """Handle one message with its arguments."""
        try:
            message = Message(message)
        except ValueError:
            raise ValueError(f"unexpected message: {message!r}") from None
        if message is not Message.ON_USER_INPUT:
            raise ValueError(f"unexpected message: {message!r}")

        (user_input,) = args
        if user_input == "help":
            self._emit_help()
        elif user_input:
            self.emit_user(f"Unknown command: {user_input}")
        self.prompt_user()

    def _emit_help(self):
        self.funky_banner()
        self.emit_user("Primordia MUD Help\n")
        self.emit_user("exit or quit             quits the MUD")
        self.emit_user("help                     this message")
        self.funky_banner()
        self.emit_user("\n")