"""Configuration management for staticroute.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from staticroute.core.types import Mode

CONFIG_FILENAME = "staticroute.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class SiteConfig:
    """Served site configuration."""

    root_dir: Path = field(default_factory=lambda: Path("public"))
    mode: Mode = Mode.NORMAL
    follow_symlinks: bool = False
    not_found_page: Path | None = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    site: SiteConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for staticroute.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(server=ServerConfig(), site=SiteConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        server = cls._parse_server(data.get("server"))
        site = cls._parse_site(data.get("site"), config_dir)

        return cls(server=server, site=site, config_path=path)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_site(cls, data: object, config_dir: Path) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig(root_dir=config_dir / "public")

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        root_dir = data.get("root_dir", "public")
        if not isinstance(root_dir, str):
            raise ValueError("site.root_dir must be a string")
        root_path = config_dir / root_dir

        mode_raw = data.get("mode", Mode.NORMAL.value)
        if not isinstance(mode_raw, str):
            raise ValueError("site.mode must be a string")
        try:
            mode = Mode.parse(mode_raw)
        except ValueError as e:
            raise ValueError(f"site.mode: {e}") from e

        follow_symlinks = data.get("follow_symlinks", False)
        if not isinstance(follow_symlinks, bool):
            raise ValueError("site.follow_symlinks must be a boolean")

        not_found_page = data.get("not_found_page")
        if not_found_page is not None and not isinstance(not_found_page, str):
            raise ValueError("site.not_found_page must be a string")

        headers_raw = data.get("headers", {})
        if not isinstance(headers_raw, dict):
            raise ValueError("site.headers must be a table")
        headers: dict[str, str] = {}
        for name, value in headers_raw.items():
            if not isinstance(value, str):
                raise ValueError(f"site.headers.{name} must be a string")
            headers[name] = value

        return SiteConfig(
            root_dir=root_path,
            mode=mode,
            follow_symlinks=follow_symlinks,
            not_found_page=Path(not_found_page) if not_found_page is not None else None,
            headers=headers,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        root_dir: Path | None = None,
        mode: Mode | None = None,
        follow_symlinks: bool | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            root_dir: Override site.root_dir
            mode: Override site.mode
            follow_symlinks: Override site.follow_symlinks

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        site = self.site
        if root_dir is not None:
            site = replace(site, root_dir=root_dir)
        if mode is not None:
            site = replace(site, mode=mode)
        if follow_symlinks is not None:
            site = replace(site, follow_symlinks=follow_symlinks)

        return replace(self, server=server, site=site)
