"""
components — komponenty strony portfolio.

Moduły:
  base         — Component, Container, Heading, render_html
  resource     — ResourceComponent (kontrakt z LoadingTrackerem)
  xml_file     — XMLFileRenderer
  text_file    — TextFileRenderer
  image        — WebPageImage, Screenshot
  links        — WebLink, NavBar, is_external_link
  spinner      — DefaultLoadingSpinner
  page_loader  — PageLoader (bramka strony)
  fetch        — HttpFetcher, LocalFetcher
  types        — FetchError, ConfigurationError, ResourceState
"""

from .types import ConfigurationError, FetchError, ResourceState
from .fetch import Fetcher, HttpFetcher, LocalFetcher
from .base import Component, Container, Heading, render_html
from .resource import ResourceComponent
from .xml_file import XMLFileRenderer
from .text_file import TextFileRenderer
from .image import Screenshot, WebPageImage
from .links import NavBar, WebLink, is_external_link
from .spinner import DefaultLoadingSpinner
from .page_loader import DEFAULT_MIN_LOADING_TIME, PageLoader

__all__ = [
    "ConfigurationError",
    "FetchError",
    "ResourceState",
    "Fetcher",
    "HttpFetcher",
    "LocalFetcher",
    "Component",
    "Container",
    "Heading",
    "render_html",
    "ResourceComponent",
    "XMLFileRenderer",
    "TextFileRenderer",
    "Screenshot",
    "WebPageImage",
    "NavBar",
    "WebLink",
    "is_external_link",
    "DefaultLoadingSpinner",
    "DEFAULT_MIN_LOADING_TIME",
    "PageLoader",
]
