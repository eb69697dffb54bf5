"""Delivery of one-time codes and generated passwords."""

import secrets
import string
from abc import ABC, abstractmethod

import logfire

from .base import Service

PASSWORD_LENGTH = 12


def generate_password(length: int = PASSWORD_LENGTH) -> str:
    """Generate a random letters-only password.

    The result contains at least one upper-case and one lower-case letter
    and no digits or symbols.

    Args:
        length: Password length, at least 2

    Returns:
        The generated password
    """
    if length < 2:
        raise ValueError("Password length must be at least 2")

    alphabet = string.ascii_letters
    while True:
        password = "".join(secrets.choice(alphabet) for _ in range(length))
        if any(c.isupper() for c in password) and any(c.islower() for c in password):
            return password


class SecretDeliveryChannel(ABC):
    """Opaque out-of-band channel (email, SMS) to a user's address."""

    @abstractmethod
    async def deliver(self, address: str, subject: str, secret: str) -> None:
        """Deliver a secret.

        Args:
            address: Recipient address
            subject: Message subject
            secret: The code or password

        Raises:
            Exception: Any delivery failure
        """
        pass


class CredentialService(Service):
    """Sends verification codes and replacement passwords.

    Unlike notifications, a failed delivery is surfaced to the caller: the
    user is waiting on the secret.
    """

    def __init__(self, channel: SecretDeliveryChannel) -> None:
        """Initialize credential service.

        Args:
            channel: Secret delivery channel
        """
        self.channel = channel

    async def send_verification_code(self, address: str, code: str) -> None:
        """Deliver a one-time verification code.

        Args:
            address: Recipient address
            code: The code issued by a verification gate
        """
        with logfire.span("credential_service.send_verification_code"):
            await self.channel.deliver(address, "Your verification code", code)
            logfire.info("Verification code delivered")

    async def send_new_password(self, address: str) -> str:
        """Generate a password and deliver it.

        Args:
            address: Recipient address

        Returns:
            The generated password
        """
        with logfire.span("credential_service.send_new_password"):
            password = generate_password()
            await self.channel.deliver(address, "Your new password", password)
            logfire.info("Generated password delivered")
            return password
