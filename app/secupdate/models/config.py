"""Run configuration built from command-line flags."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class RunConfig(BaseModel):
    """Which update categories to install during this run.

    Immutable once built. When neither category is requested, both are
    enabled: running with no flags means "install everything".

    Attributes:
        install_xprotect: Install XProtect and MRTConfigData updates.
        install_safari: Install Safari updates.
        force_safari: Install Safari updates even while Safari is running.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    install_xprotect: bool = False
    install_safari: bool = False
    force_safari: bool = False

    @model_validator(mode="before")
    @classmethod
    def default_to_all_categories(cls, data: Any) -> Any:
        """Enable both categories when neither was requested."""
        if isinstance(data, dict) and not (
            data.get("install_xprotect") or data.get("install_safari")
        ):
            return {**data, "install_xprotect": True, "install_safari": True}
        return data

    @classmethod
    def from_flags(
        cls,
        *,
        install_xprotect: bool = False,
        install_safari: bool = False,
        force_safari: bool = False,
    ) -> "RunConfig":
        """Build a RunConfig from raw command-line flags."""
        return cls(
            install_xprotect=install_xprotect,
            install_safari=install_safari,
            force_safari=force_safari,
        )
