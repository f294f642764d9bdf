from typing import Dict, Optional
from fastapi import Header, HTTPException, Query, status
import secrets

from backend.config import AUTH_LEVEL_ANONYMOUS, get_auth_level, get_function_keys_file

_keys_cache: Dict[str, str] = {}
_cache_file_path: str = ""


def _load_function_keys(file_path: str) -> None:
	global _keys_cache, _cache_file_path
	if file_path == _cache_file_path and _keys_cache:
		return
	_keys_cache = {}
	_cache_file_path = file_path
	try:
		with open(file_path, "r", encoding="utf-8") as f:
			for line in f:
				line = line.strip()
				if not line or line.startswith("#"):
					continue
				if ":" not in line:
					continue
				name, key = line.split(":", 1)
				_keys_cache[name.strip()] = key.strip()
	except FileNotFoundError:
		_keys_cache = {}


def _match_key(supplied: str) -> Optional[str]:
	for name, key in _keys_cache.items():
		if secrets.compare_digest(key.encode("utf-8"), supplied.encode("utf-8")):
			return name
	return None


async def function_key_auth(
	x_functions_key: Optional[str] = Header(default=None),
	code: Optional[str] = Query(default=None),
) -> str:
	"""
	Autorização em nível de função: exige chave no header x-functions-key ou na query ?code=.
	Parâmetros:
		x_functions_key (str, opcional): chave enviada no header
		code (str, opcional): chave enviada na query string
	Retorno:
		str: nome da chave aceita, ou "anonymous" quando AUTH_LEVEL=anonymous
	"""
	if get_auth_level() == AUTH_LEVEL_ANONYMOUS:
		return AUTH_LEVEL_ANONYMOUS
	_load_function_keys(get_function_keys_file())
	supplied = x_functions_key or code
	name = _match_key(supplied) if supplied else None
	if name is None:
		raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Chave de função inválida ou ausente.")
	return name
