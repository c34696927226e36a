import random
from typing import List, Optional
from .models import (
    SiteProfile, AnalyzeResponse, SEOAnalysis, TechnicalAudit,
    OptimizeResponse, OptimizedContent, MetaResponse, ServerInfo, EndpointMap
)
from .sites import site_keys

SERVER_NAME = "Motopass MCP Server"
SERVER_VERSION = "1.0.0"
SERVER_DESCRIPTION = "Serveur MCP dédié pour l'optimisation SEO Motopass"

SCORE_MIN = 60
SCORE_MAX = 100

DEFAULT_CONTENT = "Contenu optimisé pour une meilleure visibilité SEO."
DEFAULT_CONTEXT = "Expertise et qualité garanties."
KEYWORD_DENSITY = "2.5%"

def describe_server() -> ServerInfo:
    """Static metadata for the root endpoint."""
    return ServerInfo(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        description=SERVER_DESCRIPTION,
        endpoints=EndpointMap(
            tools="/tools",
            analyze="/analyze",
            optimize="/optimize",
            meta="/meta"
        ),
        sites=site_keys()
    )

def _text(value: Optional[str]) -> str:
    return value if value is not None else ""

class SEOAdvisor:
    @staticmethod
    def draw_seo_score() -> int:
        """Draw the current SEO score, uniformly within [SCORE_MIN, SCORE_MAX] inclusive."""
        return random.randint(SCORE_MIN, SCORE_MAX)

    @staticmethod
    def build_recommendations(focus_keyword: Optional[str]) -> List[str]:
        keyword = _text(focus_keyword)
        return [
            f'Optimiser le titre H1 pour "{keyword}"',
            "Améliorer la densité du mot-clé (actuellement trop faible)",
            "Ajouter des balises alt aux images",
            "Optimiser la meta description",
            f'Créer du contenu connexe autour de "{keyword}"'
        ]

    @staticmethod
    def analyze(site: SiteProfile, focus_keyword: Optional[str]) -> AnalyzeResponse:
        """
        Produce the SEO analysis of a site for a focus keyword.

        Args:
            site: Validated site profile
            focus_keyword: Keyword to analyze, echoed back unchanged

        Returns:
            AnalyzeResponse with a random score, five recommendations and a static technical audit
        """
        return AnalyzeResponse(
            site=site.display_name,
            url=site.base_url,
            market=site.market_name,
            language=site.language_code,
            focus_keyword=focus_keyword,
            analysis=SEOAnalysis(
                current_seo_score=SEOAdvisor.draw_seo_score(),
                recommendations=SEOAdvisor.build_recommendations(focus_keyword),
                technical_audit=TechnicalAudit(
                    page_speed="Bon (85/100)",
                    mobile_friendly="Excellent",
                    ssl="Activé",
                    sitemap="Présent"
                )
            )
        )

    @staticmethod
    def optimize_content(
        site: SiteProfile,
        content_type: Optional[str],
        target_keyword: Optional[str],
        current_content: Optional[str] = None
    ) -> OptimizeResponse:
        """Build optimized title, H1, body text and related keywords for a target keyword."""
        keyword = _text(target_keyword)
        # An empty string falls back to the boilerplate too
        body = current_content or DEFAULT_CONTENT

        return OptimizeResponse(
            site=site.display_name,
            content_type=content_type,
            target_keyword=target_keyword,
            optimized_content=OptimizedContent(
                title=f"{keyword} - {site.display_name}",
                h1=f"{keyword} : Solutions professionnelles",
                content=f"Découvrez nos solutions {keyword} adaptées au marché {site.market_name}. {body}",
                keyword_density=KEYWORD_DENSITY,
                related_keywords=[
                    f"{keyword} professionnel",
                    f"{keyword} {site.market_name}",
                    f"{keyword} qualité"
                ]
            )
        )

    @staticmethod
    def generate_meta(
        site: SiteProfile,
        page_type: Optional[str],
        keyword: Optional[str],
        context: Optional[str] = None
    ) -> MetaResponse:
        """Generate meta title/description, keywords and Open Graph tags."""
        text = _text(keyword)
        context = context or DEFAULT_CONTEXT

        return MetaResponse(
            site=site.display_name,
            page_type=page_type,
            keyword=keyword,
            meta_title=f"{text} - {site.display_name} | Solutions Professionnelles",
            meta_description=(
                f"Découvrez {text} sur {site.display_name}. "
                f"Solutions professionnelles adaptées au marché {site.market_name}. {context}"
            ),
            meta_keywords=[keyword, site.market_name, "professionnel", "qualité"],
            og_title=f"{text} - {site.display_name}",
            og_description=f"Les meilleures solutions {text} pour le marché {site.market_name}"
        )
