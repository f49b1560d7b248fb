from abc import ABC, abstractmethod

from src.service.restaurant.app.dto.oauth2_dto import OAuth2UserInfo


class IOAuth2Provider(ABC):
    """External identity provider reached through the authorization-code flow."""

    name: str

    @abstractmethod
    def authorization_url(self, *, state: str) -> str:
        pass

    @abstractmethod
    async def fetch_user_info(self, *, code: str) -> OAuth2UserInfo:
        """Exchange the authorization code and return the provider's profile.

        Raises AuthenticationError when the provider refuses the code.
        """
        pass
