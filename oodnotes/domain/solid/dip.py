"""Dependency Inversion Principle.

HardwiredNotifier constructs its EmailSender and can never send anything
else. Notifier depends on the MessageSender abstraction and receives the
concrete sender from its caller.
"""
from abc import abstractmethod

from oodnotes.domain.base.capability import Capability, CollaboratorSlot, Subject


class MessageSender(Capability):
    @abstractmethod
    def send(self, recipient: str, message: str) -> str:
        """Deliver a message and return a delivery receipt."""


class EmailSender(MessageSender):
    def send(self, recipient: str, message: str) -> str:
        return f"Email to {recipient}: {message}"


class SmsSender(MessageSender):
    def send(self, recipient: str, message: str) -> str:
        return f"SMS to {recipient}: {message}"


# Violating

class HardwiredNotifier:
    def __init__(self):
        self.sender = EmailSender()

    def notify(self, recipient: str, message: str) -> str:
        return self.sender.send(recipient, message)


# Compliant

class Notifier(Subject):
    sender = CollaboratorSlot(MessageSender)

    def __init__(self, sender: MessageSender):
        super().__init__(sender=sender)

    def notify(self, recipient: str, message: str) -> str:
        return self.sender.send(recipient, message)
