"""Login configuration loader"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .client.curl import DEFAULT_IMPERSONATE, DEFAULT_TIMEOUT, CurlTransport
from .core.types import ClientUserAgent, CredentialData
from .providers.vrchat.auth_user import VRCHAT_API_URL

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("username", "password", "user_agent")


@dataclass
class LoginConfig:
    """Settings for one VRChat login"""

    username: str
    password: str
    user_agent_name: str
    user_agent_version: str
    user_agent_contact: str | None = None
    totp_secret: str | None = None
    api_base_url: str = VRCHAT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    impersonate: str | None = DEFAULT_IMPERSONATE

    def credential_data(self) -> CredentialData:
        return CredentialData(self.username, self.password)

    def client_user_agent(self) -> ClientUserAgent:
        return ClientUserAgent(
            self.user_agent_name, self.user_agent_version, self.user_agent_contact
        )

    def transport(self) -> CurlTransport:
        return CurlTransport(timeout=self.timeout, impersonate=self.impersonate)


def load_config(config_path: str | Path = "config.json") -> LoginConfig:
    """
    Load the "vrchat" section of a config file.

    Example config.json:
        {
          "vrchat": {
            "username": "alice",
            "password": "...",
            "totp_secret": "JBSWY3DPEHPK3PXP",
            "user_agent": {"name": "MyTool", "version": "1.0.0", "contact": "alice@example.com"}
          }
        }
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, "r", encoding="utf-8") as f:
        config = json.load(f)

    vrchat_config = config.get("vrchat", {})
    if not vrchat_config:
        raise ValueError("VRChat config not found in config file")

    missing = [key for key in REQUIRED_KEYS if not vrchat_config.get(key)]
    if missing:
        raise ValueError(f"VRChat config missing required keys: {', '.join(missing)}")

    user_agent = vrchat_config["user_agent"]
    if not isinstance(user_agent, dict):
        raise ValueError("VRChat config user_agent must be an object with name and version")
    if not user_agent.get("name") or not user_agent.get("version"):
        raise ValueError("VRChat config user_agent requires name and version")

    login_config = LoginConfig(
        username=vrchat_config["username"],
        password=vrchat_config["password"],
        user_agent_name=user_agent["name"],
        user_agent_version=user_agent["version"],
        user_agent_contact=user_agent.get("contact"),
        totp_secret=vrchat_config.get("totp_secret"),
        api_base_url=vrchat_config.get("api_base_url", VRCHAT_API_URL),
        timeout=vrchat_config.get("timeout", DEFAULT_TIMEOUT),
        impersonate=vrchat_config.get("impersonate", DEFAULT_IMPERSONATE),
    )
    logger.info(f"Loaded VRChat config for {login_config.username} from {config_path}")
    return login_config
