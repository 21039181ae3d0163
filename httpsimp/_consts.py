"""Content types and header names shared by builders and parsers."""

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_TEXT_PLAIN = "text/plain"
CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded"

AUTHORIZATION_HEADER = "Authorization"
