"""Constantes HTTP pour éviter les valeurs magiques dans le code.

Codes de statut utilisés par l'API et ses tests.
"""

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_UNPROCESSABLE_ENTITY = 422
