"""
Fixed rules of the palindrome service.

Messages are part of the public contract and must not change wording.
"""

APP_NAME = "palindromo"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
LOG_FILENAME = "consultas.txt"

METHOD_NOT_ALLOWED = "Method Not Allowed"
INTERNAL_ERROR = "Error interno del servidor"
MISSING_WORD = 'Falta el parámetro "palabra". Ejemplo: /comprobar?palabra=radar'
