import os


# ====== Configuração via variáveis de ambiente ======
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

AUTH_LEVEL_FUNCTION = "function"
AUTH_LEVEL_ANONYMOUS = "anonymous"
DEFAULT_FUNCTION_KEYS_FILE = "backend/credentials/function_keys.txt"


# Lidas a cada requisição
def get_auth_level() -> str:
	return os.getenv("AUTH_LEVEL", AUTH_LEVEL_FUNCTION).strip().lower()

def get_function_keys_file() -> str:
	return os.getenv("FUNCTION_KEYS_FILE", DEFAULT_FUNCTION_KEYS_FILE)
