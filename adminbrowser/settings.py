"""Settings for the browser automation session."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import os
import tempfile
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BrowserSettings(BaseSettings):
    """Session configuration of a browser automation.

    The object is mutable (e.g. by Browser.set_base_url() or Browser.set_implicit_wait())
    and every assignment is validated.
    """

    base_url: str | None = Field(
        default=None,
        description="Base URL of the administration console. Required before relative navigation with goto_page().",
    )
    implicit_wait_ms: int = Field(
        default=0,
        ge=0,
        description="Time budget in milliseconds the element finder polls for an element. 0 = no retry.",
    )
    poll_interval_ms: int = Field(
        default=250,
        gt=0,
        description="Delay in milliseconds between two attempts of the element finder.",
    )

    # OAuth2 login:
    login_path: str = Field(default="/login", description="Path of the login-triggering page of the console.")
    auth_server_marker: str = Field(
        default="osiam-auth-server",
        description="Substring of the URL that identifies the external authorization server.",
    )
    credential_page_marker: str = Field(
        default="login",
        description="Substring of the authorization server URL that identifies the credential entry page.",
    )

    # Web driver:
    remote_url: str | None = Field(
        default=None,
        description="URL of a remote Selenium server / grid. If None a local browser is started.",
    )
    browser: Literal["chrome", "firefox"] = Field(default="chrome", description="Browser to automate.")
    headless: bool = Field(default=True, description="Start the browser in headless mode.")
    window_width: int = Field(default=1920, gt=0)
    window_height: int = Field(default=1080, gt=0)
    download_directory: str = Field(
        default=os.path.join(tempfile.gettempdir(), "browser_automations", "downloads"),
        description="Download directory used for download links.",
    )

    loglevel: Literal["INFO", "DEBUG", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(env_prefix="ADMIN_BROWSER_", validate_assignment=True)
