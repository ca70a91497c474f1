import codecs

from pydantic import field_validator
from pydantic_settings import BaseSettings

from keyderive import constants
from keyderive.crypto.digests import DigestAlgorithm


class Settings(BaseSettings):
    # Used by keyderive.crypto.pbkdf2.derive when the caller passes no digest
    DEFAULT_DIGEST: DigestAlgorithm = DigestAlgorithm(constants.DEFAULT_DIGEST_NAME)

    # Used by derive when the caller passes no iteration count
    DEFAULT_ITERATIONS: int = constants.DEFAULT_ITERATIONS

    # Encoding for str passwords and salts
    TEXT_ENCODING: str = constants.DEFAULT_TEXT_ENCODING

    @field_validator("DEFAULT_DIGEST", mode="before")
    @classmethod
    def normalize_default_digest(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("DEFAULT_ITERATIONS")
    @classmethod
    def validate_default_iterations(cls, v: int) -> int:
        if v < 1:
            raise ValueError("DEFAULT_ITERATIONS must be at least 1")
        return v

    @field_validator("TEXT_ENCODING")
    @classmethod
    def validate_text_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown TEXT_ENCODING: {v}") from None
        return v

    class Config:
        # Only KEYDERIVE_* variables apply; a host app's own DEFAULT_ITERATIONS
        # or .env file must not change derivation defaults
        env_prefix = "KEYDERIVE_"
        extra = "ignore"


settings = Settings()
