"""
Tool descriptors advertised by the Motopass SEO server.
"""
from typing import List
from .models import ToolDescriptor
from .sites import site_keys

CONTENT_TYPES = ["homepage", "category", "product", "blog"]
PAGE_TYPES = ["homepage", "category", "product", "article"]

TOOLS = (
    ToolDescriptor(
        name="analyze_motopass_seo",
        description="Analyse complète SEO d'un site Motopass",
        input_schema={
            "type": "object",
            "properties": {
                "site": {
                    "type": "string",
                    "enum": site_keys(),
                    "description": "Site Motopass à analyser"
                },
                "focus_keyword": {
                    "type": "string",
                    "description": "Mot-clé principal à optimiser"
                }
            },
            "required": ["site"]
        }
    ),
    ToolDescriptor(
        name="optimize_motopass_content",
        description="Optimise le contenu pour un mot-clé spécifique",
        input_schema={
            "type": "object",
            "properties": {
                "site": {"type": "string", "enum": site_keys()},
                "content_type": {"type": "string", "enum": CONTENT_TYPES},
                "target_keyword": {
                    "type": "string",
                    "description": "Mot-clé cible"
                },
                "current_content": {
                    "type": "string",
                    "description": "Contenu actuel à optimiser"
                }
            },
            "required": ["site", "content_type", "target_keyword"]
        }
    ),
    ToolDescriptor(
        name="generate_motopass_meta",
        description="Génère meta titre/description optimisés",
        input_schema={
            "type": "object",
            "properties": {
                "site": {"type": "string", "enum": site_keys()},
                "page_type": {"type": "string", "enum": PAGE_TYPES},
                "keyword": {
                    "type": "string",
                    "description": "Mot-clé principal"
                },
                "context": {
                    "type": "string",
                    "description": "Contexte de la page"
                }
            },
            "required": ["site", "page_type", "keyword"]
        }
    ),
)

def list_tools(include_schema: bool = False) -> List[ToolDescriptor]:
    """Return the tool descriptors in their fixed order, by default without input schemas."""
    if include_schema:
        return list(TOOLS)
    return [ToolDescriptor(name=tool.name, description=tool.description) for tool in TOOLS]
