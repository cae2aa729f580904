import logging

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from config.settings import Config
from routes.generation_routes import generation_bp
from services.content_store import build_store
from services.generation_service import GenerationService
from services.llm_gateway import build_gateway

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def create_app(config_object=Config, content_store=None, llm_gateway=None):
    """
    Build the Flask application.

    The content store and LLM gateway are created from configuration unless
    they are passed in, which is how tests swap in fakes.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    CORS(
        app,
        origins=app.config["CORS_ORIGINS"],
        methods=app.config["CORS_METHODS"],
        allow_headers=["Content-Type", "X-Requested-With"],
    )

    if content_store is None:
        content_store = build_store(app.config)
    if llm_gateway is None:
        llm_gateway = build_gateway(app.config)

    app.extensions["content_store"] = content_store
    app.extensions["llm_gateway"] = llm_gateway
    app.extensions["generation_service"] = GenerationService.from_config(llm_gateway, app.config)

    @app.route('/')
    def home():
        return jsonify({"message": "Idea Lab backend is running!"})

    # Register Blueprints
    app.register_blueprint(generation_bp, url_prefix='/api')

    logger.info(
        "Idea Lab app created (store: %s, country-aware prompting: %s)",
        type(content_store).__name__,
        app.config.get("COUNTRY_AWARE_PROMPTING"),
    )
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=8000, debug=Config.FLASK_DEBUG)
