"""Service configuration read from the environment."""
import os
from dataclasses import dataclass

DEFAULT_ADDRESS = "ADDRESS_NOT_SET"
DEFAULT_PAYMENT_OPTION = "PAYMENT_OPTION_DEFAULT"


@dataclass(frozen=True)
class Settings:
    """Immutable settings handed to Database.create() and the app factory."""
    supabase_url: str = ""
    supabase_key: str = ""
    default_address: str = DEFAULT_ADDRESS
    default_payment_option: str = DEFAULT_PAYMENT_OPTION

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            supabase_url=os.environ.get("SUPABASE_URL", ""),
            supabase_key=os.environ.get("SUPABASE_SERVICE_ROLE_KEY", ""),
            default_address=os.environ.get("QKART_DEFAULT_ADDRESS", DEFAULT_ADDRESS),
            default_payment_option=os.environ.get(
                "QKART_DEFAULT_PAYMENT_OPTION", DEFAULT_PAYMENT_OPTION
            ),
        )

    def require_supabase(self) -> tuple[str, str]:
        """Return (url, key) or raise if either is missing."""
        if not self.supabase_url or not self.supabase_key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        return self.supabase_url, self.supabase_key
