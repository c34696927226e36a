"""
Pydantic models for the Motopass SEO tool server.
Defines the site profiles, tool descriptors and the API request/response bodies.
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any

# --- Static configuration models ---

class SiteProfile(BaseModel):
    """
    Static description of one supported Motopass website.

    Profiles are built once at import time and never mutated.
    """
    key: str
    display_name: str
    base_url: str
    content_api_url: str = Field(..., description="WordPress REST API root of the site.")
    language_code: str
    market_name: str
    currency_code: str
    homepage_id: int

    class Config:
        frozen = True

class ToolDescriptor(BaseModel):
    """An operation advertised by the server."""
    name: str
    description: str
    input_schema: Optional[Dict[str, Any]] = Field(None, alias="inputSchema")

    class Config:
        populate_by_name = True
        frozen = True

class ToolsResponse(BaseModel):
    tools: List[ToolDescriptor]

class EndpointMap(BaseModel):
    tools: str
    analyze: str
    optimize: str
    meta: str

class ServerInfo(BaseModel):
    """Static metadata returned by the root endpoint."""
    name: str
    version: str
    description: str
    endpoints: EndpointMap
    sites: List[str]

class HealthResponse(BaseModel):
    status: str
    version: str
    sites: int

# --- API Request Models ---
# `site` is left untyped so any value reaches the registry check; numeric text
# fields are accepted as strings. Every other field is optional
# and echoed back or replaced by boilerplate text.

class AnalyzeRequest(BaseModel):
    """Request model for SEO analysis."""
    site: Optional[Any] = Field(None, description="Motopass site key to analyze")
    focus_keyword: Optional[str] = Field(None, description="Main keyword to optimize for")

    class Config:
        coerce_numbers_to_str = True
        json_schema_extra = {
            "example": {
                "site": "motopass-fr",
                "focus_keyword": "assurance moto"
            }
        }

class OptimizeRequest(BaseModel):
    """Request model for content optimization."""
    site: Optional[Any] = None
    content_type: Optional[str] = Field(None, description="homepage, category, product or blog")
    target_keyword: Optional[str] = None
    current_content: Optional[str] = Field(None, description="Optional: current page content to optimize")

    class Config:
        coerce_numbers_to_str = True
        json_schema_extra = {
            "example": {
                "site": "motopass-be",
                "content_type": "category",
                "target_keyword": "porte carte grise",
                "current_content": "Nos étuis protègent vos documents."
            }
        }

class MetaRequest(BaseModel):
    """Request model for meta tag generation."""
    site: Optional[Any] = None
    page_type: Optional[str] = Field(None, description="homepage, category, product or article")
    keyword: Optional[str] = None
    context: Optional[str] = Field(None, description="Optional: short description of the page")

    class Config:
        coerce_numbers_to_str = True
        json_schema_extra = {
            "example": {
                "site": "motopass-es",
                "page_type": "homepage",
                "keyword": "casco"
            }
        }

# --- API Response Models ---

class TechnicalAudit(BaseModel):
    page_speed: str
    mobile_friendly: str
    ssl: str
    sitemap: str

class SEOAnalysis(BaseModel):
    current_seo_score: int = Field(..., ge=60, le=100)
    recommendations: List[str]
    technical_audit: TechnicalAudit

class AnalyzeResponse(BaseModel):
    """Response model for SEO analysis."""
    site: str
    url: str
    market: str
    language: str
    focus_keyword: Optional[str] = None
    analysis: SEOAnalysis

class OptimizedContent(BaseModel):
    title: str
    h1: str
    content: str
    keyword_density: str
    related_keywords: List[str]

class OptimizeResponse(BaseModel):
    """Response model for content optimization."""
    site: str
    content_type: Optional[str] = None
    target_keyword: Optional[str] = None
    optimized_content: OptimizedContent

class MetaResponse(BaseModel):
    """Response model for meta tag generation."""
    site: str
    page_type: Optional[str] = None
    keyword: Optional[str] = None
    meta_title: str
    meta_description: str
    meta_keywords: List[Optional[str]]
    og_title: str
    og_description: str

class ErrorResponse(BaseModel):
    error: str
