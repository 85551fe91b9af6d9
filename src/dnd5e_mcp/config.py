# src/dnd5e_mcp/config.py
from dataclasses import dataclass
from typing import Optional
import os

API_BASE_URL = "https://www.dnd5eapi.co/api"
REQUEST_TIMEOUT_SECONDS = 10

TRANSPORTS = ("stdio", "sse", "streamable-http")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CATEGORY_DESCRIPTIONS = {
    "ability-scores": "The six abilities that describe a character's physical and mental characteristics",
    "alignments": "The moral and ethical attitudes and behaviors of creatures",
    "backgrounds": "Character backgrounds and their features",
    "classes": "Character classes with features, proficiencies, and subclasses",
    "conditions": "Status conditions that affect creatures",
    "damage-types": "Types of damage that can be dealt",
    "equipment": "Items, weapons, armor, and gear for adventuring",
    "equipment-categories": "Categories of equipment",
    "feats": "Special abilities and features",
    "features": "Class and racial features",
    "languages": "Languages spoken throughout the multiverse",
    "magic-items": "Magical equipment with special properties",
    "magic-schools": "Schools of magic specialization",
    "monsters": "Creatures and foes",
    "proficiencies": "Skills and tools characters can be proficient with",
    "races": "Character races and their traits",
    "rule-sections": "Sections of the game rules",
    "rules": "Game rules",
    "skills": "Character skills tied to ability scores",
    "spells": "Magic spells with effects, components, and descriptions",
    "subclasses": "Specializations within character classes",
    "subraces": "Variants of character races",
    "traits": "Racial traits",
    "weapon-properties": "Special properties of weapons",
}


@dataclass
class ServerConfig:
    """Server configuration"""
    # Upstream API settings
    api_base_url: str = API_BASE_URL
    request_timeout: float = REQUEST_TIMEOUT_SECONDS

    # Logging
    log_level: str = "INFO"

    # MCP transport settings
    transport: str = "stdio"
    host: Optional[str] = None
    port: Optional[int] = None
    path: str = "/mcp/"

    def __post_init__(self):
        self.api_base_url = self.api_base_url.rstrip("/")
        self.log_level = self.log_level.upper()
        self.transport = self.transport.lower()

        if self.transport not in TRANSPORTS:
            raise ValueError(f"Unsupported MCP transport: {self.transport} (expected one of {', '.join(TRANSPORTS)})")
        if self.request_timeout <= 0:
            raise ValueError("Request timeout must be positive")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {self.log_level}")
        if self.transport != "stdio" and self.port is None:
            raise ValueError(f"MCP_PORT is required for the {self.transport} transport")

    @classmethod
    def from_environment(cls, api_base_url: Optional[str] = None) -> "ServerConfig":
        """
        Build the configuration from environment variables.

        DND5E_API_BASE_URL wins over the api_base_url argument, which in turn
        wins over the public API default.
        """
        port = os.getenv("MCP_PORT")
        return cls(
            api_base_url=os.getenv("DND5E_API_BASE_URL", api_base_url or API_BASE_URL),
            request_timeout=float(os.getenv("DND5E_REQUEST_TIMEOUT", str(REQUEST_TIMEOUT_SECONDS))),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            transport=os.getenv("MCP_TRANSPORT", "stdio"),
            host=os.getenv("MCP_HOST"),
            port=int(port) if port else None,
            path=os.getenv("MCP_PATH", "/mcp/"),
        )
