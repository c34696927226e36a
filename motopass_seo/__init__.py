"""
Motopass SEO tool server
SEO analysis, content optimization and meta tag generation for the Motopass websites.
"""

from .models import (
    SiteProfile, ToolDescriptor,
    AnalyzeRequest, AnalyzeResponse,
    OptimizeRequest, OptimizeResponse,
    MetaRequest, MetaResponse, ServerInfo
)
from .sites import SITES, UnsupportedSiteError, lookup, site_keys
from .tools import TOOLS, list_tools
from .advisor import SEOAdvisor, describe_server

__version__ = "1.0.0"
