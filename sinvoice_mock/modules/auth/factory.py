"""
Authentication Factory following Black Box Design principles.

This factory:
- Constructs the authentication stack based on configuration
- Seeds the fixed credential store
- Returns only the service facade (hiding implementation)
"""

import logging

from ...config.provider import ConfigProvider
from .auth import CredentialStore
from .service import AuthenticationService, BasicAuthenticationService

logger = logging.getLogger(__name__)


class AuthFactory:
    """
    Factory for building the authentication stack.

    This is the composition root that:
    - Creates the credential store once
    - Wires it into the service facade
    - Returns only the public interface
    """

    @staticmethod
    def build(config_provider: ConfigProvider) -> AuthenticationService:
        """
        Build the complete authentication stack.

        Args:
            config_provider: Configuration provider

        Returns:
            AuthenticationService facade (hides all implementation details)
        """
        auth_config = config_provider.get_auth_config()

        store = CredentialStore.seeded(auth_config.hash_iterations)
        logger.info(
            f"Building Basic authentication stack with {len(store)} accounts "
            f"(pbkdf2 iterations={auth_config.hash_iterations})"
        )

        return BasicAuthenticationService(store)
