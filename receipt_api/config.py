import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    JSON_SORT_KEYS = False
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(1024 * 1024)))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    @staticmethod
    def init_app(app):
        app.json.sort_keys = app.config["JSON_SORT_KEYS"]
        app.logger.setLevel(app.config["LOG_LEVEL"])


class TestConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
