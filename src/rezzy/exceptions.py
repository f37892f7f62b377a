"""Exceptions raised outside the rendering core."""

from __future__ import annotations


class RezzyError(Exception):
    """Base class for rezzy errors."""


class ConfigError(RezzyError, ValueError):
    """Provider configuration is missing or invalid."""


class ResumeFetchError(RezzyError):
    """A resume could not be fetched from its source."""


class ProviderError(RezzyError):
    """An LLM provider call failed or returned an unusable response."""


class UnsupportedDocumentError(RezzyError, ValueError):
    """The provider cannot process this kind of document."""
