from flask import Flask, request, jsonify
from flask_cors import CORS
import logging
from motopass_seo.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

TOOL_NAME = "analyze_seo_motopass"
TOOL_DESCRIPTION = "Analyse SEO complète d'un site Motopass"

# Fixed figures, independent of the randomized /analyze route of the main server
SUMMARY_SCORE = "85/100"
SUMMARY_KEYWORDS = 12
SUMMARY_BACKLINKS = 234

def summarize_site(site: str) -> str:
    return f"Analyse SEO {site}: Score {SUMMARY_SCORE}, {SUMMARY_KEYWORDS} mots-clés, {SUMMARY_BACKLINKS} backlinks"

@app.route('/tools', methods=['GET'])
def tools():
    return jsonify({"tools": [{"name": TOOL_NAME, "description": TOOL_DESCRIPTION}]})

@app.route(f'/{TOOL_NAME}', methods=['GET', 'POST'])
def analyze_seo_motopass():
    if request.method == 'POST':
        data = request.get_json(silent=True) or {}
    else:
        data = request.args

    site = data.get('site')
    if not isinstance(site, str) or not site:
        logger.warning(f"{TOOL_NAME} called without a valid 'site' parameter: {site!r}")
        return jsonify({"error": "Paramètre 'site' requis"}), 400

    logger.info(f"{TOOL_NAME} called for site: {site}")
    return jsonify({
        "content": [{
            "type": "text",
            "text": summarize_site(site)
        }]
    })

def run():
    if settings.is_production:
        logger.info("Production environment: local listener disabled, serve `backend.app:app` from the runtime")
        return
    app.run(host=settings.host, port=settings.facade_port)

if __name__ == '__main__':
    run()
