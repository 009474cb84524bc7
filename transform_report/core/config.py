"""
Application configuration for the page transformation report engine.

Provides environment-aware settings with conservative defaults. Report
verbosity and output location are configurable so that callers never
hard-code them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObserverConfig(BaseModel):
	"""
	Settings consumed by the report observer.

	Notes:
	- include_debug_entries: keep Debug entries at ingestion and in the detail table.
	- include_verbose: render per-page detail sections after the summary.
	- output_directory: folder the report file is written to.
	- report_name_discriminator: optional suffix for the report file name.
	"""

	include_debug_entries: bool = False
	include_verbose: bool = False
	output_directory: Path = Field(default_factory=Path.cwd)
	report_name_discriminator: str = Field(
		"",
		description="Suffix appended to the report file name; any extension is dropped",
	)


class Config(BaseSettings):
	"""
	Global configuration with environment overrides.

	Nested values use a double underscore, e.g.
	TRANSFORM_REPORT_OBSERVER__INCLUDE_VERBOSE=true.
	"""

	model_config = SettingsConfigDict(
		env_prefix="TRANSFORM_REPORT_",
		env_file=".env",
		env_nested_delimiter="__",
		extra="ignore",
	)

	log_level: str = Field("INFO", description="Default logging level")
	log_file: Optional[Path] = Field(None, description="Optional rotating log file")
	observer: ObserverConfig = ObserverConfig()


config = Config()
