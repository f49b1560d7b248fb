"""OAuth2 DTOs"""

from typing import Optional

import attrs


@attrs.define(frozen=True)
class OAuth2UserInfo:
    """Profile returned by the identity provider after a successful code exchange."""

    email: str
    name: str
    provider: str
    subject: Optional[str] = None


@attrs.define(frozen=True)
class OAuth2LoginResult:
    """Where the browser is sent after the callback, and the issued token if any."""

    redirect_url: str
    token: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.token is not None


@attrs.define(frozen=True)
class OAuth2AuthorizationRequest:
    """Provider consent URL plus the state value the callback has to echo back."""

    url: str
    state: str
