import os


class Config():
    #Basic app settings
    APP_NAME = 'session_auth'
    UVICORN_PORT = int(os.getenv("UVICORN_PORT", "8000"))
    UVICORN_HOST = os.getenv("UVICORN_HOST", '0.0.0.0')
    GIT_COMMIT = os.getenv("GIT_COMMIT", "[commit hash unknown]")
    MODE = os.getenv("MODE", "Local build")
    JSON_LOGS = int(os.getenv("JSON_LOGS", "0"))

    #Sessions
    TOKEN_EXPIRATION_MINUTES = int(os.getenv("TOKEN_EXPIRATION_MINUTES", "30"))
    SESSION_TOKEN_BYTES = int(os.getenv("SESSION_TOKEN_BYTES", "16"))
    SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "session")
    SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "0") == "1" #Set to 1 behind TLS

    #Security settings
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))
    DEFAULT_ADMIN_EMAIL = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@localhost")
    DEFAULT_ADMIN_PASSWORD = os.getenv("DEFAULT_ADMIN_PASSWORD")

    #Redis
    REDIS_HOST = os.getenv("REDIS_HOST", "redis")
    REDIS_PORT = int(os.getenv("REDIS_PORT", "6379"))
    REDIS_PASS = os.getenv("REDIS_PASS")
    REDIS_DB = int(os.getenv("REDIS_DB", "0"))
    REDIS_SOCKET_TIMEOUT_SECONDS = float(os.getenv("REDIS_SOCKET_TIMEOUT_SECONDS", "2")) #Fail fast, never hang a request
    REDIS_WAIT_INTERVAL_SECONDS = 5
    REDIS_WAIT_MAX_RETRIES = 10
