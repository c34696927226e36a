"""
FastAPI application for the Motopass SEO tool server.
Provides endpoints for SEO analysis, content optimization and meta tag generation
on the supported Motopass websites.
"""
import uuid
import logging
from typing import Optional
from fastapi import FastAPI, Header, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .config import get_settings
from .advisor import SEOAdvisor, describe_server, SERVER_NAME, SERVER_VERSION
from .models import (
    AnalyzeRequest, AnalyzeResponse, OptimizeRequest, OptimizeResponse,
    MetaRequest, MetaResponse, ServerInfo, ToolsResponse, HealthResponse, ErrorResponse
)
from .sites import SITES, UnsupportedSiteError, lookup
from .tools import list_tools

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=SERVER_NAME,
    description="""
    Tool server dedicated to SEO work on the Motopass websites.

    ## Tools
    * SEO analysis of a site for a focus keyword
    * Content optimization for a target keyword
    * Meta title/description and Open Graph generation

    ## Sites
    * motopass-fr, motopass-es, motopass-be
    """,
    version=SERVER_VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600
)

CLIENT_ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": "Unsupported site or malformed body"}}

@app.exception_handler(UnsupportedSiteError)
async def unsupported_site_handler(request: Request, exc: UnsupportedSiteError):
    # Caller input error, not a server fault
    logger.warning(f"Rejected {request.method} {request.url.path}: unsupported site {exc.site!r}")
    return JSONResponse(status_code=400, content={"error": str(exc)})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    logger.warning(f"Rejected {request.method} {request.url.path}: invalid body ({details})")
    return JSONResponse(status_code=400, content={"error": f"Requête invalide: {details}"})

@app.get("/", response_model=ServerInfo)
async def server_info():
    """Describe the server, its endpoints and the supported sites."""
    return describe_server()

@app.get("/tools", response_model=ToolsResponse, response_model_exclude_none=True)
async def tools(include_schema: bool = Query(False, description="Set to true to include each tool's input schema")):
    """List the available tools in their fixed order."""
    return ToolsResponse(tools=list_tools(include_schema=include_schema))

@app.post("/analyze", response_model=AnalyzeResponse, responses=CLIENT_ERROR_RESPONSES)
async def analyze(request: Optional[AnalyzeRequest] = None, request_id: Optional[str] = Header(None)):
    """
    Analyze the SEO of a Motopass site for a focus keyword.

    Args:
        request: AnalyzeRequest containing the site key and focus keyword
        request_id: Optional request ID from header

    Returns:
        AnalyzeResponse with the score, recommendations and technical audit

    Raises:
        UnsupportedSiteError: If the site key is not registered (mapped to HTTP 400)
    """
    request_id = request_id or str(uuid.uuid4())
    # A POST without a body still goes through the site check
    request = request or AnalyzeRequest()
    logger.info(f"[{request_id}] Received analysis request for site: {request.site}, Focus keyword: {request.focus_keyword}")

    site = lookup(request.site)
    result = SEOAdvisor.analyze(site, request.focus_keyword)

    logger.info(f"[{request_id}] Analysis for {site.key} scored {result.analysis.current_seo_score}")
    return result

@app.post("/optimize", response_model=OptimizeResponse, responses=CLIENT_ERROR_RESPONSES)
async def optimize(request: Optional[OptimizeRequest] = None, request_id: Optional[str] = Header(None)):
    """Optimize page content of a Motopass site for a target keyword."""
    request_id = request_id or str(uuid.uuid4())
    request = request or OptimizeRequest()
    logger.info(
        f"[{request_id}] Received optimization request for site: {request.site}, "
        f"Content type: {request.content_type}, Target keyword: {request.target_keyword}"
    )

    site = lookup(request.site)
    return SEOAdvisor.optimize_content(
        site,
        content_type=request.content_type,
        target_keyword=request.target_keyword,
        current_content=request.current_content
    )

@app.post("/meta", response_model=MetaResponse, responses=CLIENT_ERROR_RESPONSES)
async def meta(request: Optional[MetaRequest] = None, request_id: Optional[str] = Header(None)):
    """Generate meta and Open Graph tags for a page of a Motopass site."""
    request_id = request_id or str(uuid.uuid4())
    request = request or MetaRequest()
    logger.info(
        f"[{request_id}] Received meta request for site: {request.site}, "
        f"Page type: {request.page_type}, Keyword: {request.keyword}"
    )

    site = lookup(request.site)
    return SEOAdvisor.generate_meta(
        site,
        page_type=request.page_type,
        keyword=request.keyword,
        context=request.context
    )

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns:
        Dict containing status of the API and the number of registered sites
    """
    return {
        "status": "healthy",
        "version": SERVER_VERSION,
        "sites": len(SITES)
    }

def run():
    """Serve the app locally unless an external runtime is expected to serve it."""
    if settings.is_production:
        logger.info("Production environment: local listener disabled, serve `motopass_seo.main:app` from the runtime")
        return

    import uvicorn

    base_url = f"http://localhost:{settings.port}"
    logger.info(f"Motopass SEO server starting on {base_url}")
    logger.info(f"Dashboard: {base_url}/")
    logger.info(f"Tools: {base_url}/tools")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    run()
