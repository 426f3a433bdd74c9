"""Domain models for the signed-in identity."""

from pydantic import BaseModel, ConfigDict, Field

from blog_client.domain.media import Media


class SocialLinks(BaseModel):
    """Links to the user's external profiles."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    github: str | None = None
    instagram: str | None = None


class Profile(BaseModel):
    """Public profile attached to a user."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    full_name: str | None = None
    bio: str | None = None
    avatar: Media | None = None
    cover_image: Media | None = None
    location: str | None = None
    website: str | None = None
    social_links: SocialLinks = Field(default_factory=SocialLinks)


class Identity(BaseModel):
    """Identity projection of the authenticated session.

    The bearer credential is deliberately absent; it lives in the credential
    store only.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    username: str
    email: str | None = None
    role: str | None = None
    profile: Profile = Field(default_factory=Profile)


class LoginRequest(BaseModel):
    """Credentials submitted to the login endpoint."""

    email: str
    password: str


class RegistrationRequest(BaseModel):
    """Fields submitted to the registration endpoint."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    email: str
    full_name: str
    bio: str | None = None
    location: str | None = None
    website: str | None = None


class ProfileUpdate(BaseModel):
    """Profile fields submitted on update; unset fields are left unchanged."""

    full_name: str | None = None
    bio: str | None = None
    avatar: Media | None = None
    cover_image: Media | None = None
    location: str | None = None
    website: str | None = None
    social_links: SocialLinks | None = None

    def to_payload(self) -> dict[str, object]:
        """Serialize only the fields that were provided."""
        return self.model_dump(mode="json", exclude_none=True)
