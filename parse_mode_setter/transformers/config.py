"""Configuration for the parse mode setter using pydantic-settings."""

from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from parse_mode_setter.enums import APIMethod, ParseMode
from parse_mode_setter.paths import ENV_FILE

DEFAULT_ALLOWED_METHODS: frozenset[APIMethod] = frozenset(
    {
        APIMethod.SEND_MESSAGE,
        APIMethod.COPY_MESSAGE,
        APIMethod.SEND_PHOTO,
        APIMethod.SEND_AUDIO,
        APIMethod.SEND_DOCUMENT,
        APIMethod.SEND_VIDEO,
        APIMethod.SEND_ANIMATION,
        APIMethod.SEND_VOICE,
        APIMethod.SEND_POLL,
        APIMethod.EDIT_MESSAGE_TEXT,
        APIMethod.EDIT_MESSAGE_CAPTION,
        APIMethod.EDIT_MESSAGE_MEDIA,
        APIMethod.ANSWER_INLINE_QUERY,
        APIMethod.SEND_MEDIA_GROUP,
    }
)


class ParseModeSetterConfig(BaseSettings):
    """Configuration for the parse mode setter transformer.

    All settings are loaded from environment variables with the
    PARSE_MODE_SETTER_ prefix. The instance is frozen once built.

    :param parse_mode: Parse mode stamped into eligible payloads.
    :param allowed_methods: Methods that may have their parse mode set.
    :param disallowed_methods: Methods that never have their parse mode set.
        Takes precedence over allowed_methods.
    :param set_question_parse_mode: Whether sendPoll gets question_parse_mode.
    :param set_explanation_parse_mode: Whether sendPoll gets explanation_parse_mode.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARSE_MODE_SETTER_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    parse_mode: ParseMode = Field(..., description="Parse mode to set")
    allowed_methods: Annotated[frozenset[APIMethod], NoDecode] = Field(
        default=DEFAULT_ALLOWED_METHODS,
        description="Comma-separated API methods eligible for a parse mode",
    )
    disallowed_methods: Annotated[frozenset[APIMethod], NoDecode] = Field(
        default=frozenset(),
        description="Comma-separated API methods never given a parse mode",
    )
    set_question_parse_mode: bool = Field(
        default=True,
        description="Set question_parse_mode on sendPoll",
    )
    set_explanation_parse_mode: bool = Field(
        default=True,
        description="Set explanation_parse_mode on sendPoll",
    )

    @field_validator("allowed_methods", "disallowed_methods", mode="before")
    @classmethod
    def split_method_names(cls, v: Any) -> Any:
        """Accept a comma-separated string of method names.

        :param v: Raw value from the environment or the constructor.
        :returns: An iterable of method names for pydantic to validate.
        """
        if isinstance(v, str):
            return [name.strip() for name in v.split(",") if name.strip()]
        return v

    def is_eligible(self, method: APIMethod) -> bool:
        """Check whether a method should have its parse mode set.

        :param method: The API method being invoked.
        :returns: True when allowed and not disallowed.
        """
        if method not in self.allowed_methods:
            return False
        return method not in self.disallowed_methods


@lru_cache
def get_parse_mode_settings() -> ParseModeSetterConfig:
    """Get cached parse mode setter settings.

    :returns: Configured ParseModeSetterConfig instance.
    """
    return ParseModeSetterConfig()  # type: ignore[call-arg]
