import os

# ✅ Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./emplyo.db")
RUN_MIGRATIONS = os.getenv("RUN_MIGRATIONS", "0") == "1"
AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "0") == "1"

# ✅ Security
SECRET_KEY = os.getenv("SECRET_KEY")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# ✅ LLM gateway (OpenAI-compatible chat completions)
LLM_GATEWAY_API_KEY = os.getenv("LLM_GATEWAY_API_KEY")
LLM_GATEWAY_BASE_URL = os.getenv("LLM_GATEWAY_BASE_URL", "https://ai.gateway.lovable.dev/v1")
LLM_MODEL = os.getenv("LLM_MODEL", "google/gemini-2.5-flash")

# ✅ Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# ✅ CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]
