"""Errors surfaced at the pipeline boundary.

Only two kinds ever reach a caller:

- ``ConfigurationError``: a required credential is missing. Raised before any
  network call and never retried.
- ``UpstreamError``: web search or LLM extraction failed (transport, non-2xx,
  timeout, unparsable JSON). Carries the tool name.

Image enrichment and page fetch failures are absorbed where they happen.
"""


class CityBitesError(Exception):
    """Base class for errors returned to API callers."""

    code = "CITYBITES_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(CityBitesError):
    code = "CONFIGURATION_ERROR"

    @classmethod
    def missing(cls, name: str) -> "ConfigurationError":
        return cls(f"{name} not configured.")


class UpstreamError(CityBitesError):
    code = "UPSTREAM_ERROR"

    def __init__(self, tool: str, message: str):
        super().__init__(message)
        self.tool = tool
